"""Converter configuration.

Settings are in-memory only; nothing is read from the environment or persisted.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Final

MAX_CACHE_SIZE: Final[int] = 500


@dataclass
class ConverterConfig:
    """Tunable settings for `IdentifierConverter`.

    Notes:
    - `max_cache_size` bounds the number of cached inputs; the oldest-inserted
      entry is evicted once it is reached.
    - `cache_enabled=False` makes every call recompute.
    """

    max_cache_size: int = MAX_CACHE_SIZE
    cache_enabled: bool = True

    def __post_init__(self) -> None:
        if int(self.max_cache_size) < 1:
            raise ValueError("max_cache_size must be >= 1")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ConverterConfig":
        cfg = cls()
        for k, v in raw.items():
            if hasattr(cfg, k):
                setattr(cfg, k, v)
        # setattr skips __post_init__, so re-check the bound.
        cfg.__post_init__()
        return cfg
