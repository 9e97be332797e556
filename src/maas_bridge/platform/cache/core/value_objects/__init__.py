"""Cache value objects.

Immutable values following maximum separation - one value object per file.
"""

from .strategy_type import CacheStrategyType
from .cache_options import CacheOptions, KeyGenerator
from .invalidation_pattern import InvalidationPattern, PatternType, PatternLike

__all__ = [
    "CacheStrategyType",
    "CacheOptions",
    "KeyGenerator",
    "InvalidationPattern",
    "PatternType",
    "PatternLike",
]
