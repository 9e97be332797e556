"""Cache strategy factory.

ONLY strategy construction - resolves a CacheStrategyType once into a
concrete strategy instance.
"""

from typing import Union

from ...core.value_objects.strategy_type import CacheStrategyType
from .base_strategy import BaseCacheStrategy
from .lru_strategy import LRUCacheStrategy
from .time_based_strategy import TimeBasedCacheStrategy

_STRATEGIES = {
    CacheStrategyType.LRU: LRUCacheStrategy,
    CacheStrategyType.TIME_BASED: TimeBasedCacheStrategy,
}


def create_cache_strategy(
    strategy_type: Union[CacheStrategyType, str],
    max_size: int = 1000,
    **kwargs
) -> BaseCacheStrategy:
    """Create a cache strategy.
    
    Args:
        strategy_type: Strategy to build ("lru" or "time-based")
        max_size: Maximum number of entries before eviction
        **kwargs: clock, sweep_interval and autostart for the strategy
        
    Returns:
        Configured strategy instance
        
    Raises:
        ValueError: If the strategy type is unknown
    """
    strategy_cls = _STRATEGIES[CacheStrategyType(strategy_type)]
    return strategy_cls(max_size, **kwargs)
