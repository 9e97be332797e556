"""Cache strategy type value object.

ONLY strategy selection - the closed set of eviction/expiry policies a
cache manager can be built with.
"""

from enum import Enum


class CacheStrategyType(str, Enum):
    """Supported cache strategies."""
    
    LRU = "lru"
    TIME_BASED = "time-based"
