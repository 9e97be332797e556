"""Time-based cache strategy.

ONLY TTL storage with insertion-order eviction - entries expire after their
TTL and, at capacity, the oldest inserted entry is evicted.
"""

import logging
from typing import Dict, Optional, TypeVar

from ...core.entities.cache_entry import CacheControl, CacheEntry
from ...core.value_objects.invalidation_pattern import InvalidationPattern, PatternLike
from .base_strategy import BaseCacheStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeBasedCacheStrategy(BaseCacheStrategy):
    """Time-based cache strategy with a maximum size limit.
    
    Backed by an insertion-ordered dict. Capacity eviction is FIFO by
    insertion: reads do not refresh an entry's position, and overwriting an
    existing key keeps its original position.
    """
    
    strategy_name = "time-based"
    
    def __init__(self, max_size: int = 1000, **kwargs):
        self._cache: Dict[str, CacheEntry] = {}
        super().__init__(max_size, **kwargs)
        logger.debug(f"Initialized TimeBasedCacheStrategy with max size {max_size}")
    
    def get(self, key: str) -> Optional[CacheEntry]:
        entry = self._cache.get(key)
        if entry is None:
            return None
        
        if entry.is_expired(self.now()):
            del self._cache[key]
            logger.debug(f"Cache miss (expired): {key}")
            return None
        
        logger.debug(f"Cache hit: {key}")
        return entry
    
    def set(
        self,
        key: str,
        value: T,
        ttl_seconds: float,
        cache_control: Optional[CacheControl] = None
    ) -> CacheEntry[T]:
        self._ensure_sweeping()
        
        if key not in self._cache and len(self._cache) >= self._max_size:
            self._evict_oldest()
        
        entry = CacheEntry.create(key, value, ttl_seconds, self.now(), cache_control)
        self._cache[key] = entry
        logger.debug(f"Cache set: {key}, TTL: {ttl_seconds}s")
        return entry
    
    def delete(self, key: str) -> bool:
        if self._cache.pop(key, None) is None:
            return False
        logger.debug(f"Cache delete: {key}")
        return True
    
    def clear(self) -> None:
        size = len(self._cache)
        self._cache.clear()
        logger.debug(f"Cache cleared, {size} entries removed")
    
    def size(self) -> int:
        return len(self._cache)
    
    def keys(self) -> list:
        """Stored keys in insertion order."""
        return list(self._cache)
    
    def invalidate(self, pattern: PatternLike) -> int:
        matcher = InvalidationPattern.coerce(pattern)
        keys_to_delete = [key for key in self._cache if matcher.matches(key)]
        
        for key in keys_to_delete:
            del self._cache[key]
        
        if keys_to_delete:
            logger.debug(
                f"Invalidated {len(keys_to_delete)} cache entries matching pattern: {matcher}"
            )
        return len(keys_to_delete)
    
    def remove_expired_entries(self) -> int:
        now = self.now()
        expired = [key for key, entry in self._cache.items() if entry.is_expired(now)]
        
        for key in expired:
            del self._cache[key]
        
        if expired:
            logger.debug(f"Removed {len(expired)} expired entries from cache")
        return len(expired)
    
    def _evict_oldest(self) -> None:
        if not self._cache:
            return
        oldest_key = next(iter(self._cache))
        del self._cache[oldest_key]
        logger.debug(f"Evicted oldest cache entry: {oldest_key}")
