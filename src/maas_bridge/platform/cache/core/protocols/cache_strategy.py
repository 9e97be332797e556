"""Cache strategy protocol.

ONLY cache storage contract - defines the interface every eviction and
expiry policy implements.
"""

from typing import Optional, TypeVar
from typing_extensions import Protocol, runtime_checkable

from ..entities.cache_entry import CacheControl, CacheEntry
from ..value_objects.invalidation_pattern import PatternLike

T = TypeVar("T")


@runtime_checkable
class CacheStrategy(Protocol):
    """Cache strategy protocol.
    
    All operations are synchronous and never block: the cache performs no
    I/O. Absence is reported as ``None``, never as an exception.
    """
    
    def get(self, key: str) -> Optional[CacheEntry]:
        """Get cache entry by key.
        
        Returns None if key doesn't exist or has expired. Expired entries
        are removed as a side effect.
        """
        ...
    
    def set(
        self,
        key: str,
        value: T,
        ttl_seconds: float,
        cache_control: Optional[CacheControl] = None
    ) -> CacheEntry[T]:
        """Store a value, overwriting any existing entry for ``key``."""
        ...
    
    def delete(self, key: str) -> bool:
        """Delete cache entry by key.
        
        Returns True if key existed and was deleted, False otherwise.
        """
        ...
    
    def clear(self) -> None:
        """Remove every entry."""
        ...
    
    def size(self) -> int:
        """Number of stored entries, including expired ones not yet reclaimed."""
        ...
    
    def invalidate(self, pattern: PatternLike) -> int:
        """Remove every entry whose key matches ``pattern``.
        
        Returns the number of entries removed.
        """
        ...
    
    def dispose(self) -> None:
        """Stop any background task. Safe to call more than once."""
        ...
