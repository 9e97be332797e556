"""Cache strategy implementations."""

from .base_strategy import BaseCacheStrategy
from .time_based_strategy import TimeBasedCacheStrategy
from .lru_strategy import LRUCacheStrategy
from .strategy_factory import create_cache_strategy

__all__ = [
    "BaseCacheStrategy",
    "TimeBasedCacheStrategy",
    "LRUCacheStrategy",
    "create_cache_strategy",
]
