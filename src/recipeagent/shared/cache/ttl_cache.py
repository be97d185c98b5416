"""
In-memory TTL cache keyed by string.

Expiry is lazy: an expired entry is dropped when it is read, or when
``sweep()`` is called (see ``CacheSweeper``). There is no size bound.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

log = logging.getLogger("cache")


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """
    A single lock guards the whole map; get/put/sweep/status all serialize on it.
    """

    def __init__(self, name: str = "cache", *, clock: Callable[[], float] = time.monotonic) -> None:
        self.name = name
        self._clock = clock
        self._data: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._data[key]
                return None
            return entry.value

    def put(self, key: str, value: Any, ttl_seconds: float) -> None:
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._data[key] = CacheEntry(value=value, expires_at=expires_at)

    def sweep(self) -> int:
        """
        Remove every expired entry and return how many were removed.
        """
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._data.items() if e.expires_at <= now]
            for k in expired:
                del self._data[k]
        if expired:
            log.debug("%s: swept %d expired entries", self.name, len(expired))
        return len(expired)

    def status(self) -> Dict[str, int]:
        with self._lock:
            now = self._clock()
            active = sum(1 for e in self._data.values() if now < e.expires_at)
            total = len(self._data)
        return {
            "total_entries": total,
            "active_entries": active,
            "expired_entries": total - active,
        }

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
