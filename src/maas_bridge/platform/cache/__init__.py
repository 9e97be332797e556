"""Platform cache module.

In-process response cache sitting between resource handlers and the
upstream MAAS API, with LRU and time-based strategies.

``module`` (settings-driven composition) and ``api`` are imported
explicitly by callers; they depend on the config package.
"""

from .core import (
    CacheEntry,
    CacheControl,
    CacheStrategyType,
    CacheOptions,
    InvalidationPattern,
    PatternType,
    CacheStrategy,
    InvalidPatternError,
)
from .infrastructure.strategies import (
    BaseCacheStrategy,
    TimeBasedCacheStrategy,
    LRUCacheStrategy,
    create_cache_strategy,
)
from .application.services import CacheManager

__all__ = [
    # Core Domain
    "CacheEntry",
    "CacheControl",
    
    # Value Objects
    "CacheStrategyType",
    "CacheOptions",
    "InvalidationPattern",
    "PatternType",
    
    # Protocols
    "CacheStrategy",
    
    # Exceptions
    "InvalidPatternError",
    
    # Strategies
    "BaseCacheStrategy",
    "TimeBasedCacheStrategy",
    "LRUCacheStrategy",
    "create_cache_strategy",
    
    # Services
    "CacheManager",
]
