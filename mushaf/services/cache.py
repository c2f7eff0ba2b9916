"""
Identifier-keyed cache for entry details.

Provides a TTL cache with LRU eviction and a provider wrapper that
serves repeated selections of the same entry from memory.
"""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Sequence, TypeVar

from mushaf.config.constants import DETAIL_CACHE_TTL_SECONDS
from mushaf.models.entries import EntryDetail, EntrySummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A single cache entry with expiration tracking."""

    value: T
    expires_at: float

    def is_expired(self) -> bool:
        return time.monotonic() > self.expires_at


class TTLCache(Generic[T]):
    """
    TTL cache with LRU eviction.

    Usage:
        cache = TTLCache[EntryDetail](maxsize=20, ttl=3600)
        cache.set(2, detail)
        cache.get(2)  # detail, or None if missing/expired
    """

    def __init__(self, maxsize: int = 100, ttl: float = DETAIL_CACHE_TTL_SECONDS):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self.ttl = ttl
        self._cache: OrderedDict[Hashable, CacheEntry[T]] = OrderedDict()

    def get(self, key: Hashable) -> T | None:
        entry = self._cache.get(key)
        if entry is None:
            return None

        if entry.is_expired():
            del self._cache[key]
            return None

        # Move to end (most recently used)
        self._cache.move_to_end(key)
        return entry.value

    def set(self, key: Hashable, value: T) -> None:
        if key in self._cache:
            del self._cache[key]

        while len(self._cache) >= self.maxsize:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("Evicted %r from detail cache", evicted)

        self._cache[key] = CacheEntry(value=value, expires_at=time.monotonic() + self.ttl)


class CachingProvider:
    """DataProvider wrapper that caches entry details by identifier.

    The entry list is never cached: a refresh always reaches the provider.
    """

    def __init__(self, provider: Any, maxsize: int = 20, ttl: float = DETAIL_CACHE_TTL_SECONDS):
        self._provider = provider
        self.cache: TTLCache[EntryDetail] = TTLCache(maxsize=maxsize, ttl=ttl)

    async def list_entries(self) -> Sequence[EntrySummary]:
        return await self._provider.list_entries()

    async def get_entry(self, entry_id: int) -> EntryDetail:
        cached = self.cache.get(entry_id)
        if cached is not None:
            logger.debug("Detail cache hit for entry %d", entry_id)
            return cached
        detail = await self._provider.get_entry(entry_id)
        self.cache.set(entry_id, detail)
        return detail

    async def aclose(self) -> None:
        aclose = getattr(self._provider, "aclose", None)
        if aclose is not None:
            await aclose()
