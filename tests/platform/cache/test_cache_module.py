"""Tests for settings-driven cache composition."""

import pytest

from maas_bridge.config.settings import get_settings
from maas_bridge.platform.cache import module
from maas_bridge.platform.cache.infrastructure.strategies.lru_strategy import LRUCacheStrategy
from maas_bridge.platform.cache.infrastructure.strategies.time_based_strategy import (
    TimeBasedCacheStrategy,
)


@pytest.fixture(autouse=True)
def reset_singletons():
    get_settings.cache_clear()
    module.reset_cache_manager()
    yield
    module.reset_cache_manager()
    get_settings.cache_clear()


class TestCreateCacheManager:
    """Test manager construction from settings."""
    
    def test_from_settings(self, settings, clock):
        settings.cache_strategy = "lru"
        settings.cache_max_size = 7
        settings.cache_max_age = 120
        settings.cache_resource_specific_ttl = {"Machine": 60}
        
        manager = module.create_cache_manager(settings, clock=clock, autostart=False)
        
        assert isinstance(manager.strategy, LRUCacheStrategy)
        assert manager.strategy.max_size == 7
        assert manager.get_default_ttl() == 120
        assert manager.get_resource_ttl("Machine") == 60
        assert manager.strategy.now() == clock.now
    
    def test_instances_are_independent(self, settings):
        first = module.create_cache_manager(settings, autostart=False)
        second = module.create_cache_manager(settings, autostart=False)
        
        first.set("k", 1)
        
        assert second.get("k") is None
    
    def test_sweep_interval_override(self, settings):
        manager = module.create_cache_manager(settings, sweep_interval=5, autostart=False)
        
        assert manager.strategy.sweep_interval == 5
    
    def test_disabled_from_settings(self, settings):
        settings.cache_enabled = False
        
        manager = module.create_cache_manager(settings, autostart=False)
        
        assert manager.is_enabled() is False


class TestProcessCacheManager:
    """Test the per-process accessor."""
    
    def test_get_cache_manager_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CACHE_STRATEGY", "time-based")
        monkeypatch.setenv("CACHE_MAX_SIZE", "11")
        
        manager = module.get_cache_manager()
        
        assert isinstance(manager.strategy, TimeBasedCacheStrategy)
        assert manager.strategy.max_size == 11
        assert module.get_cache_manager() is manager
    
    def test_reset_disposes(self):
        manager = module.get_cache_manager()
        
        module.reset_cache_manager()
        
        assert manager.strategy.is_disposed is True
        assert module.get_cache_manager() is not manager
