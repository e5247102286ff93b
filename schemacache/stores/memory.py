"""
Bounded in-process store.

Thread-safe LRU with per-key TTL, implementing StoreProtocol.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import fnmatch
import math
import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger


class MemoryStore:
    """Thread-safe in-memory LRU store with TTL"""

    def __init__(
        self,
        max_size: int = 500,
        default_ttl: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize memory store.

        Args:
            max_size: Maximum number of entries before LRU eviction
            default_ttl: TTL in seconds used when none is given (0 = no expiry)
            clock: Time source, seconds since epoch
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self.cache: "OrderedDict[str, Tuple[str, Optional[float]]]" = OrderedDict()
        self.max_size = max_size
        self.default_ttl = default_ttl
        self.clock = clock
        self.lock = Lock()
        self.hits = 0
        self.misses = 0

    def _expiry(self, ttl: Optional[int]) -> Optional[float]:
        if ttl is None:
            ttl = self.default_ttl
        if not ttl or ttl <= 0:
            return None
        return self.clock() + ttl

    def _live(self, key: str) -> Optional[Tuple[str, Optional[float]]]:
        """Return the entry for key, dropping it if expired. Caller holds the lock."""
        entry = self.cache.get(key)
        if entry is None:
            return None

        _, expiry = entry
        if expiry is not None and self.clock() >= expiry:
            del self.cache[key]
            return None
        return entry

    def _put(self, key: str, value: str, expiry: Optional[float]) -> None:
        """Insert or replace key. Caller holds the lock."""
        if key in self.cache:
            self.cache.move_to_end(key)
        else:
            # Remove oldest items if at capacity
            while len(self.cache) >= self.max_size:
                evicted, _ = self.cache.popitem(last=False)
                logger.trace(f"Evicted {evicted} from memory store")
        self.cache[key] = (value, expiry)

    async def get(self, key: str) -> Optional[str]:
        """Get item from store"""
        with self.lock:
            entry = self._live(key)
            if entry is None:
                self.misses += 1
                return None

            # Move to end (most recently used)
            self.cache.move_to_end(key)
            self.hits += 1
            return entry[0]

    async def set(
        self,
        key: str,
        value: str,
        ttl: Optional[int] = None,
        nx: bool = False,
    ) -> None:
        """Set item in store"""
        with self.lock:
            if nx and self._live(key) is not None:
                return
            self._put(key, value, self._expiry(ttl))

    async def delete(self, key: str) -> None:
        """Delete item from store"""
        with self.lock:
            self.cache.pop(key, None)

    async def mset(self, pairs: List[Tuple[str, str]], ttl: Optional[int] = None) -> None:
        """Set several items sharing one TTL"""
        with self.lock:
            expiry = self._expiry(ttl)
            for key, value in pairs:
                self._put(key, value, expiry)

    async def mget(self, *keys: str) -> List[Optional[str]]:
        """Get several items, preserving order"""
        results: List[Optional[str]] = []
        with self.lock:
            for key in keys:
                entry = self._live(key)
                if entry is None:
                    self.misses += 1
                    results.append(None)
                else:
                    self.cache.move_to_end(key)
                    self.hits += 1
                    results.append(entry[0])
        return results

    async def mdel(self, *keys: str) -> None:
        """Delete several items"""
        with self.lock:
            for key in keys:
                self.cache.pop(key, None)

    async def ttl(self, key: str) -> int:
        """Remaining TTL in seconds, -1 without expiry, -2 if missing"""
        with self.lock:
            entry = self._live(key)
            if entry is None:
                return -2
            expiry = entry[1]
            if expiry is None:
                return -1
            return max(0, math.ceil(expiry - self.clock()))

    async def exists(self, key: str) -> int:
        """1 if key is present and not expired"""
        with self.lock:
            return 1 if self._live(key) is not None else 0

    async def keys(self, pattern: str = "*") -> List[str]:
        """Keys matching a glob pattern"""
        with self.lock:
            live = [key for key in list(self.cache) if self._live(key) is not None]
        return [key for key in live if fnmatch.fnmatchcase(key, pattern)]

    async def reset(self) -> None:
        """Clear the store"""
        with self.lock:
            self.cache.clear()
            self.hits = 0
            self.misses = 0

    def dump(self) -> List[Tuple[str, str, Optional[float]]]:
        """
        Snapshot live entries as ``(key, value, expires_at)`` tuples.

        Entries are ordered from least to most recently used;
        ``expires_at`` is an absolute clock time, or None without expiry.
        """
        with self.lock:
            live = [key for key in list(self.cache) if self._live(key) is not None]
            return [(key, *self.cache[key]) for key in live]

    def load(self, entries: List[Tuple[str, str, Optional[float]]]) -> None:
        """
        Restore entries produced by :meth:`dump`.

        Loaded entries are added on top of the current contents; entries
        already expired are skipped and the LRU bound still applies.
        """
        now = self.clock()
        with self.lock:
            for key, value, expiry in entries:
                if expiry is not None and now >= expiry:
                    continue
                self._put(key, value, expiry)
        logger.debug(f"Loaded {len(entries)} entries into memory store")

    @property
    def size(self) -> int:
        """Number of entries currently held, expired ones included."""
        return len(self.cache)

    def __len__(self) -> int:
        return len(self.cache)

    def stats(self) -> Dict[str, Any]:
        """Get store statistics"""
        with self.lock:
            total = self.hits + self.misses
            hit_rate = (self.hits / total * 100) if total > 0 else 0

            return {
                "size": len(self.cache),
                "max_size": self.max_size,
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": f"{hit_rate:.1f}%",
                "total_requests": total,
            }
