"""Cache domain entities."""

from .cache_entry import CacheEntry, CacheControl

__all__ = [
    "CacheEntry",
    "CacheControl",
]
