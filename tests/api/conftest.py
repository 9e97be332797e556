"""Fixtures for HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from maas_bridge.app import create_app
from maas_bridge.platform.cache.module import create_cache_manager


@pytest.fixture
def app_cache_manager(settings, clock):
    manager = create_cache_manager(settings, clock=clock, autostart=False)
    yield manager
    manager.dispose()


@pytest.fixture
def app(mock_maas_client, settings, app_cache_manager, restore_root_logger):
    return create_app(mock_maas_client, settings=settings, cache_manager=app_cache_manager)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
