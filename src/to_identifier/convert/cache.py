"""Small in-memory FIFO cache for conversion outputs."""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import Lock
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class FifoCache(Generic[K, V]):
    """Thread-safe insertion-ordered cache with a fixed capacity.

    Eviction is first-in-first-out: a hit never refreshes an entry's position, so
    the oldest-inserted key is always the next one to go.
    """

    def __init__(self, max_items: int) -> None:
        if max_items < 1:
            raise ValueError("max_items must be >= 1")
        self._log = logging.getLogger("to_identifier.cache")
        self._max_items = int(max_items)
        self._lock = Lock()
        self._data: OrderedDict[K, V] = OrderedDict()

    @property
    def max_items(self) -> int:
        return self._max_items

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            if key not in self._data and len(self._data) >= self._max_items:
                evicted, _ = self._data.popitem(last=False)
                self._log.debug("evicted key=%r size=%d", evicted, len(self._data))
            self._data[key] = value

    def keys(self) -> list[K]:
        """Cached keys, oldest first."""
        with self._lock:
            return list(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
