"""Cache entry domain entity.

ONLY cache entry entity - represents a cached value together with its
creation and expiry timestamps and passthrough cache-control metadata.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheControl:
    """Cache-control directives attached to an entry.
    
    Not interpreted by the cache itself; resource handlers render them
    into response headers.
    """
    
    max_age: Optional[int] = None
    private: bool = False
    must_revalidate: bool = False
    immutable: bool = False
    
    def directives(self) -> list:
        """Render the boolean directives as header tokens."""
        tokens = []
        if self.private:
            tokens.append("private")
        if self.must_revalidate:
            tokens.append("must-revalidate")
        if self.immutable:
            tokens.append("immutable")
        return tokens


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cache entry domain entity.
    
    Immutable once created. Timestamps are POSIX seconds taken from the
    owning strategy's clock; ``expires_at = created_at + ttl``.
    """
    
    key: str
    value: T
    created_at: float
    expires_at: float
    cache_control: Optional[CacheControl] = None
    
    @classmethod
    def create(
        cls,
        key: str,
        value: T,
        ttl_seconds: float,
        now: float,
        cache_control: Optional[CacheControl] = None
    ) -> "CacheEntry[T]":
        """Create an entry expiring ``ttl_seconds`` after ``now``."""
        return cls(
            key=key,
            value=value,
            created_at=now,
            expires_at=now + ttl_seconds,
            cache_control=cache_control,
        )
    
    def is_expired(self, now: float) -> bool:
        """An entry is logically absent once ``expires_at <= now``."""
        return self.expires_at <= now
    
    def age(self, now: float) -> float:
        """Seconds elapsed since the entry was created."""
        return max(0.0, now - self.created_at)
