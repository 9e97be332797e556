"""LRU cache strategy.

ONLY least-recently-used storage - a key to node map plus a doubly linked
list ordered by recency, with TTL expiry on read and by sweep.
"""

import logging
from typing import Dict, Iterator, Optional, TypeVar

from ...core.entities.cache_entry import CacheControl, CacheEntry
from ...core.value_objects.invalidation_pattern import InvalidationPattern, PatternLike
from .base_strategy import BaseCacheStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _LRUNode:
    """Doubly linked list node holding a key and its entry."""
    
    __slots__ = ("key", "entry", "prev", "next")
    
    def __init__(self, key: str, entry: CacheEntry):
        self.key = key
        self.entry = entry
        self.prev: Optional["_LRUNode"] = None
        self.next: Optional["_LRUNode"] = None


class LRUCacheStrategy(BaseCacheStrategy):
    """Least Recently Used cache strategy.
    
    ``head`` is the most recently used node and ``tail`` the least recently
    used one. Reads promote a node to the head; at capacity the tail is
    evicted. The map and the list always hold the same set of keys.
    
    The sweep scans the whole list rather than walking back from the tail
    only, so an expired entry that was recently promoted is still reclaimed.
    """
    
    strategy_name = "lru"
    
    def __init__(self, max_size: int = 1000, **kwargs):
        self._cache: Dict[str, _LRUNode] = {}
        self._head: Optional[_LRUNode] = None
        self._tail: Optional[_LRUNode] = None
        super().__init__(max_size, **kwargs)
        logger.debug(f"Initialized LRUCacheStrategy with max size {max_size}")
    
    # Linked list primitives
    
    def _add_to_front(self, node: _LRUNode) -> None:
        node.prev = None
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            self._tail = node
    
    def _unlink(self, node: _LRUNode) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        
        node.prev = None
        node.next = None
    
    def _move_to_front(self, node: _LRUNode) -> None:
        if node is self._head:
            return
        self._unlink(node)
        self._add_to_front(node)
    
    def _remove(self, node: _LRUNode) -> None:
        """Unlink a node and drop it from the map."""
        self._unlink(node)
        del self._cache[node.key]
    
    def _evict_lru(self) -> None:
        if self._tail is None:
            return
        lru_node = self._tail
        self._remove(lru_node)
        logger.debug(f"Removed least recently used item from cache: {lru_node.key}")
    
    def _iter_nodes(self) -> Iterator[_LRUNode]:
        node = self._head
        while node is not None:
            # Capture the successor first so the current node may be removed
            following = node.next
            yield node
            node = following
    
    # Strategy contract
    
    def get(self, key: str) -> Optional[CacheEntry]:
        node = self._cache.get(key)
        if node is None:
            return None
        
        if node.entry.is_expired(self.now()):
            self._remove(node)
            logger.debug(f"LRU cache miss (expired): {key}")
            return None
        
        self._move_to_front(node)
        logger.debug(f"LRU cache hit: {key}")
        return node.entry
    
    def set(
        self,
        key: str,
        value: T,
        ttl_seconds: float,
        cache_control: Optional[CacheControl] = None
    ) -> CacheEntry[T]:
        self._ensure_sweeping()
        
        existing = self._cache.get(key)
        if existing is not None:
            self._remove(existing)
        elif len(self._cache) >= self._max_size:
            self._evict_lru()
        
        entry = CacheEntry.create(key, value, ttl_seconds, self.now(), cache_control)
        node = _LRUNode(key, entry)
        self._add_to_front(node)
        self._cache[key] = node
        
        logger.debug(f"LRU cache set: {key}, TTL: {ttl_seconds}s")
        return entry
    
    def delete(self, key: str) -> bool:
        node = self._cache.get(key)
        if node is None:
            return False
        self._remove(node)
        logger.debug(f"LRU cache delete: {key}")
        return True
    
    def clear(self) -> None:
        size = len(self._cache)
        self._cache.clear()
        self._head = None
        self._tail = None
        logger.debug(f"LRU cache cleared, {size} entries removed")
    
    def size(self) -> int:
        return len(self._cache)
    
    def keys(self) -> list:
        """Stored keys from most to least recently used."""
        return [node.key for node in self._iter_nodes()]
    
    def invalidate(self, pattern: PatternLike) -> int:
        matcher = InvalidationPattern.coerce(pattern)
        keys_to_delete = [key for key in self._cache if matcher.matches(key)]
        
        for key in keys_to_delete:
            self._remove(self._cache[key])
        
        if keys_to_delete:
            logger.debug(
                f"Invalidated {len(keys_to_delete)} LRU cache entries matching pattern: {matcher}"
            )
        return len(keys_to_delete)
    
    def remove_expired_entries(self) -> int:
        now = self.now()
        removed_count = 0
        
        for node in self._iter_nodes():
            if node.entry.is_expired(now):
                self._remove(node)
                removed_count += 1
        
        if removed_count:
            logger.debug(f"Removed {removed_count} expired entries from LRU cache")
        return removed_count
