"""Cache module composition.

Builds cache managers from settings. ``create_cache_manager`` always returns
a fresh, independent instance; ``get_cache_manager`` is a per-process
convenience accessor with ``reset_cache_manager`` as its reset hook.
"""

import logging
from typing import Optional

from .application.services.cache_manager import CacheManager
from .infrastructure.strategies.base_strategy import Clock
from .infrastructure.strategies.strategy_factory import create_cache_strategy

logger = logging.getLogger(__name__)

_cache_manager: Optional[CacheManager] = None


def create_cache_manager(
    settings=None,
    *,
    clock: Optional[Clock] = None,
    sweep_interval: Optional[float] = None,
    autostart: bool = True
) -> CacheManager:
    """Create cache manager with configuration.
    
    Args:
        settings: BridgeSettings instance (defaults to get_settings())
        clock: Time source for the strategy
        sweep_interval: Overrides settings.cache_sweep_interval
        autostart: Start the sweep immediately when a loop is running
        
    Returns:
        Configured cache manager
    """
    if settings is None:
        from ...config.settings import get_settings
        settings = get_settings()
    
    strategy = create_cache_strategy(
        settings.cache_strategy,
        settings.cache_max_size,
        clock=clock,
        sweep_interval=sweep_interval or settings.cache_sweep_interval,
        autostart=autostart,
    )
    
    return CacheManager(
        strategy,
        enabled=settings.cache_enabled,
        default_ttl=settings.cache_max_age,
        resource_specific_ttl=settings.cache_resource_specific_ttl,
    )


def get_cache_manager() -> CacheManager:
    """Get the process-wide cache manager, creating it on first use."""
    global _cache_manager
    if _cache_manager is None:
        _cache_manager = create_cache_manager()
    return _cache_manager


def reset_cache_manager() -> None:
    """Dispose and forget the process-wide cache manager."""
    global _cache_manager
    if _cache_manager is not None:
        _cache_manager.dispose()
        _cache_manager = None
        logger.debug("Process-wide cache manager reset")
