"""Cache core domain: entities, value objects, protocols and exceptions."""

from .entities import CacheEntry, CacheControl
from .value_objects import CacheStrategyType, CacheOptions, InvalidationPattern, PatternType
from .protocols import CacheStrategy
from .exceptions import InvalidPatternError

__all__ = [
    "CacheEntry",
    "CacheControl",
    "CacheStrategyType",
    "CacheOptions",
    "InvalidationPattern",
    "PatternType",
    "CacheStrategy",
    "InvalidPatternError",
]
