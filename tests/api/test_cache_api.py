"""Tests for the cache administration API."""

import pytest


@pytest.fixture
def populated(app_cache_manager):
    for key in (
        "Machine://machine/id7/details:id7",
        "Machine://machine/id78/details:id78",
        "Machines://machines/list",
        "Subnet://subnet/1/details:1",
    ):
        app_cache_manager.set(key, {})
    return app_cache_manager


class TestCacheStats:
    
    def test_stats(self, client, populated):
        response = client.get("/cache/stats")
        
        assert response.status_code == 200
        data = response.json()
        assert data["size"] == 4
        assert data["strategy"] == "time-based"
        assert data["enabled"] is True
        assert data["default_ttl"] == 300
        assert data["sweeping"] is True


class TestCacheInvalidation:
    """Test invalidation endpoints."""
    
    def test_invalidate_literal(self, client, populated):
        response = client.post("/cache/invalidate", json={"pattern": "id7"})
        
        assert response.status_code == 200
        assert response.json()["data"]["count"] == 2
    
    def test_invalidate_prefix(self, client, populated):
        response = client.post(
            "/cache/invalidate", json={"pattern": "Machine:", "pattern_type": "prefix"}
        )
        
        assert response.json()["data"]["count"] == 2
        assert populated.size() == 2
    
    def test_invalidate_regex(self, client, populated):
        response = client.post(
            "/cache/invalidate", json={"pattern": r":\d+$", "pattern_type": "regex"}
        )
        
        assert response.json()["data"]["count"] == 1
    
    def test_malformed_regex(self, client, populated):
        response = client.post(
            "/cache/invalidate", json={"pattern": "Machine:(", "pattern_type": "regex"}
        )
        
        assert response.status_code == 400
        assert response.json()["detail"]["error"]["code"] == "INVALID_PATTERN"
        assert populated.size() == 4
    
    def test_empty_pattern_rejected(self, client):
        response = client.post("/cache/invalidate", json={"pattern": ""})
        
        assert response.status_code == 422
    
    def test_invalidate_resource(self, client, populated):
        response = client.delete("/cache/resources/Machine")
        
        assert response.json()["data"]["count"] == 2
        assert populated.get("Machines://machines/list") is not None
    
    def test_invalidate_resource_by_id(self, client, populated):
        response = client.delete("/cache/resources/Machine/id7")
        
        assert response.json()["data"]["count"] == 1
        assert populated.get("Machine://machine/id78/details:id78") is not None
    
    def test_clear(self, client, populated):
        response = client.post("/cache/clear")
        
        assert response.json()["data"]["count"] == 4
        assert populated.size() == 0


class TestCacheSettings:
    """Test runtime reconfiguration endpoints."""
    
    def test_disable_and_enable(self, client, populated):
        response = client.put("/cache/enabled", json={"enabled": False})
        
        assert response.status_code == 200
        assert populated.is_enabled() is False
        assert client.post("/cache/clear").json()["data"]["count"] == 0
        
        client.put("/cache/enabled", json={"enabled": True})
        assert populated.is_enabled() is True
        assert populated.size() == 4
    
    def test_set_default_ttl(self, client, app_cache_manager):
        response = client.put("/cache/ttl/default", json={"ttl": 120})
        
        assert response.status_code == 200
        assert app_cache_manager.get_default_ttl() == 120
    
    def test_set_resource_ttl(self, client, app_cache_manager):
        response = client.put("/cache/ttl/Subnets", json={"ttl": 600})
        
        assert response.json()["data"] == {"resource_name": "Subnets", "ttl": 600}
        assert app_cache_manager.get_resource_ttl("Subnets") == 600
        assert app_cache_manager.get_resource_ttl("default") == 300
    
    def test_negative_ttl_rejected(self, client):
        response = client.put("/cache/ttl/default", json={"ttl": -1})
        
        assert response.status_code == 422
