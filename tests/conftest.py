"""Pytest configuration and fixtures for maas-bridge tests."""

import logging

import pytest
from unittest.mock import AsyncMock

from maas_bridge.config.settings import BridgeSettings
from maas_bridge.platform.cache.application.services.cache_manager import CacheManager
from maas_bridge.platform.cache.infrastructure.strategies.lru_strategy import LRUCacheStrategy
from maas_bridge.platform.cache.infrastructure.strategies.time_based_strategy import (
    TimeBasedCacheStrategy,
)


class FakeClock:
    """Manually advanced time source."""
    
    def __init__(self, start: float = 1_000.0):
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def time_based_strategy(clock):
    """Time-based strategy with capacity 3 and no running sweep."""
    strategy = TimeBasedCacheStrategy(3, clock=clock, autostart=False)
    yield strategy
    strategy.dispose()


@pytest.fixture
def lru_strategy(clock):
    """LRU strategy with capacity 3 and no running sweep."""
    strategy = LRUCacheStrategy(3, clock=clock, autostart=False)
    yield strategy
    strategy.dispose()


@pytest.fixture
def cache_manager(clock):
    """Enabled manager over a time-based strategy, default TTL 300s."""
    strategy = TimeBasedCacheStrategy(100, clock=clock, autostart=False)
    manager = CacheManager(strategy, default_ttl=300)
    yield manager
    manager.dispose()


@pytest.fixture
def settings():
    """Settings independent of the process environment."""
    return BridgeSettings(
        _env_file=None,
        cache_enabled=True,
        cache_strategy="time-based",
        cache_max_size=100,
        cache_max_age=300,
        cache_resource_specific_ttl={},
        cache_sweep_interval=60,
    )


@pytest.fixture
def mock_maas_client():
    """Mock upstream MAAS client."""
    client = AsyncMock()
    client.get = AsyncMock()
    return client


@pytest.fixture
def sample_machine():
    """Sample upstream machine payload."""
    return {
        "system_id": "abc123",
        "hostname": "node-01",
        "fqdn": "node-01.maas",
        "status_name": "Ready",
        "architecture": "amd64/generic",
        "cpu_count": 8,
        "memory": 16384,
        "power_state": "off",
        "tag_names": ["virtual"],
        "zone": {"name": "default"},
    }


@pytest.fixture
def restore_root_logger():
    """Put the root logger's level and handlers back after the test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
