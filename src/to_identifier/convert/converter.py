"""Cached string → identifier conversion.

`IdentifierConverter` owns its cache, so independent instances never share entries.
`to_identifier()` routes through one process-wide instance created at import.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock

from to_identifier.config import MAX_CACHE_SIZE, ConverterConfig
from to_identifier.convert.cache import FifoCache
from to_identifier.convert.identifier import is_valid_identifier, transform

__all__ = ["MAX_CACHE_SIZE", "IdentifierConverter", "to_identifier"]


class IdentifierConverter:
    """Thread-safe converter with a bounded FIFO result cache."""

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._log = logging.getLogger("to_identifier.converter")
        self._cfg = replace(config) if config is not None else ConverterConfig()
        self._lock = Lock()
        self._cache: FifoCache[str, str] | None = None
        if self._cfg.cache_enabled:
            self._cache = FifoCache(int(self._cfg.max_cache_size))

    @property
    def config(self) -> ConverterConfig:
        return replace(self._cfg)

    @property
    def cache_size(self) -> int:
        return len(self._cache) if self._cache is not None else 0

    def convert(self, text: str) -> str:
        """Convert `text` into an identifier made of `[A-Za-z0-9_]` characters.

        Inputs that are already identifiers come back unchanged. Everything else is
        title-cased per space-separated token and stripped of other characters.
        Never raises; the result may be empty.
        """
        with self._lock:
            cache = self._cache
            if cache is not None:
                hit = cache.get(text)
                if hit is not None:
                    return hit

            if is_valid_identifier(text):
                result = text
            else:
                result = transform(text)
                self._log.debug("converted input=%r result=%r", text, result)

            if cache is not None:
                cache.put(text, result)
            return result


_default_converter = IdentifierConverter()


def to_identifier(text: str) -> str:
    """Convert `text` using the shared process-wide cache."""
    return _default_converter.convert(text)
