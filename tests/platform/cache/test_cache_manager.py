"""Tests for the cache manager service."""

import asyncio
import re

import pytest

from maas_bridge.platform.cache.application.services.cache_manager import CacheManager
from maas_bridge.platform.cache.core.entities.cache_entry import CacheControl
from maas_bridge.platform.cache.core.exceptions.invalid_pattern import InvalidPatternError
from maas_bridge.platform.cache.core.value_objects.cache_options import CacheOptions
from maas_bridge.platform.cache.core.value_objects.strategy_type import CacheStrategyType
from maas_bridge.platform.cache.infrastructure.strategies.lru_strategy import LRUCacheStrategy


class TestGenerateKey:
    """Test cache key generation."""
    
    def test_path_only(self, cache_manager):
        key = cache_manager.generate_key("Machines", "maas://machines/list")
        
        assert key == "Machines://machines/list"
    
    def test_resource_id_from_params(self, cache_manager):
        key = cache_manager.generate_key(
            "Machine",
            "maas://machine/abc123/details",
            {"system_id": "abc123"},
        )
        
        assert key == "Machine://machine/abc123/details:abc123"
    
    def test_resource_id_precedence(self, cache_manager):
        """Test system_id wins over id, which wins over name."""
        uri = "maas://x/list"
        
        assert cache_manager.generate_key("R", uri, {"name": "n", "id": "i", "system_id": "s"}).endswith(":s")
        assert cache_manager.generate_key("R", uri, {"name": "n", "id": "i"}).endswith(":i")
        assert cache_manager.generate_key("R", uri, {"name": "n"}).endswith(":n")
        assert cache_manager.generate_key("R", uri, {"system_id": "", "id": "i"}).endswith(":i")
    
    def test_query_ignored_by_default(self, cache_manager):
        key = cache_manager.generate_key("Machines", "maas://machines/list?hostname=a")
        
        assert key == "Machines://machines/list"
    
    def test_query_included(self, cache_manager):
        options = CacheOptions(include_query_params=True)
        
        key = cache_manager.generate_key(
            "Machines", "maas://machines/list?zone=z1&hostname=a", options=options
        )
        
        assert key == "Machines://machines/list:zone=z1&hostname=a"
    
    def test_query_param_list_filters_and_orders(self, cache_manager):
        """Test only listed params, first value each, in list order."""
        options = CacheOptions(
            include_query_params=True,
            include_query_params_list=["hostname", "zone", "limit"],
        )
        
        key = cache_manager.generate_key(
            "Machines",
            "maas://machines/list?zone=z1&other=x&hostname=a&zone=z2",
            options=options,
        )
        
        assert key == "Machines://machines/list:hostname=a&zone=z1"
    
    def test_query_included_without_query_string(self, cache_manager):
        options = CacheOptions(include_query_params=True)
        
        key = cache_manager.generate_key("Machines", "maas://machines/list", options=options)
        
        assert key == "Machines://machines/list"
    
    def test_malformed_authority_still_produces_key(self, cache_manager):
        """Test an unbalanced bracket in the host does not raise."""
        options = CacheOptions(include_query_params=True)
        
        key = cache_manager.generate_key(
            "R", "maas://[x/list?zone=z1#frag", {"id": "7"}, options
        )
        
        assert key == "R://[x/list:7:zone=z1"
        assert cache_manager.generate_key("R", "maas://[x/list") == "R://[x/list"
    
    def test_custom_key_generator(self, cache_manager):
        options = CacheOptions(key_generator=lambda uri, params: f"custom:{params['id']}")
        
        key = cache_manager.generate_key("R", "maas://r/1", {"id": "1"}, options)
        
        assert key == "custom:1"


class TestTTLPrecedence:
    """Test TTL resolution order."""
    
    def test_default_ttl(self, cache_manager, clock):
        entry = cache_manager.set("k", 1)
        
        assert entry.expires_at == clock.now + 300
    
    def test_resource_ttl_over_default(self, cache_manager, clock):
        cache_manager.set_resource_ttl("Machine", 60)
        
        entry = cache_manager.set("k", 1, "Machine")
        
        assert entry.expires_at == clock.now + 60
    
    def test_option_ttl_over_resource(self, cache_manager, clock):
        cache_manager.set_resource_ttl("Machine", 60)
        
        entry = cache_manager.set("k", 1, "Machine", CacheOptions(ttl=5))
        
        assert entry.expires_at == clock.now + 5
    
    def test_get_resource_ttl(self, cache_manager):
        cache_manager.set_resource_ttl("Zone", 0)
        
        assert cache_manager.get_resource_ttl("Machine") == 300
        assert cache_manager.get_resource_ttl("Zone") == 0
    
    def test_set_default_ttl(self, cache_manager, clock):
        cache_manager.set_default_ttl(42)
        
        assert cache_manager.get_default_ttl() == 42
        assert cache_manager.set("k", 1).expires_at == clock.now + 42
    
    def test_cache_control_stored(self, cache_manager):
        control = CacheControl(max_age=60, private=True)
        
        cache_manager.set("k", 1, options=CacheOptions(cache_control=control))
        
        assert cache_manager.get_entry("k").cache_control == control


class TestStorage:
    """Test get, set and expiry through the manager."""
    
    def test_round_trip_and_expiry(self, cache_manager, clock):
        cache_manager.set("k", {"a": 1}, options=CacheOptions(ttl=10))
        
        assert cache_manager.get("k") == {"a": 1}
        clock.advance(10)
        assert cache_manager.get("k") is None
    
    def test_falsy_values_are_cached(self, cache_manager):
        cache_manager.set("empty", [])
        
        assert cache_manager.get_entry("empty") is not None
        assert cache_manager.get("empty") == []
    
    def test_set_skipped_when_options_disabled(self, cache_manager):
        assert cache_manager.set("k", 1, options=CacheOptions(enabled=False)) is None
        assert cache_manager.size() == 0
    
    def test_delete_and_clear(self, cache_manager):
        cache_manager.set("a", 1)
        cache_manager.set("b", 2)
        
        assert cache_manager.delete("a") is True
        cache_manager.clear()
        assert cache_manager.size() == 0


class TestEnabledSwitch:
    """Test the global enable switch."""
    
    def test_disabled_gates_operations(self, cache_manager):
        cache_manager.set("Machine:a", 1)
        cache_manager.set_enabled(False)
        
        assert cache_manager.is_enabled() is False
        assert cache_manager.get("Machine:a") is None
        assert cache_manager.set("Machine:b", 2) is None
        assert cache_manager.invalidate("Machine") == 0
        assert cache_manager.delete("Machine:a") is False
        cache_manager.clear()
        assert cache_manager.size() == 1
    
    def test_reenable_keeps_entries(self, cache_manager):
        cache_manager.set("k", 1)
        cache_manager.set_enabled(False)
        cache_manager.set_enabled(True)
        
        assert cache_manager.get("k") == 1
    
    def test_unsupported_pattern_raises_even_when_disabled(self, cache_manager):
        cache_manager.set_enabled(False)
        
        with pytest.raises(InvalidPatternError):
            cache_manager.invalidate(42)
    
    def test_compiled_regex_when_disabled_returns_zero(self, cache_manager):
        cache_manager.set("k", 1)
        cache_manager.set_enabled(False)
        
        assert cache_manager.invalidate(re.compile("k")) == 0


class TestResourceInvalidation:
    """Test resource-scoped invalidation."""
    
    @pytest.fixture
    def populated(self, cache_manager):
        keys = [
            "Machine://machine/id7/details:id7",
            "Machine://machine/id78/details:id78",
            "Machine:id7",
            "Machines://machines/list",
            "Subnet://subnet/id7/details:id7",
        ]
        for key in keys:
            cache_manager.set(key, key)
        return cache_manager
    
    def test_invalidate_resource(self, populated):
        """Test only keys of the exact resource name are removed."""
        assert populated.invalidate_resource("Machine") == 3
        assert populated.get("Machines://machines/list") is not None
        assert populated.get("Subnet://subnet/id7/details:id7") is not None
    
    def test_invalidate_resource_by_id(self, populated):
        """Test id7 never matches id78 or other resources."""
        assert populated.invalidate_resource_by_id("Machine", "id7") == 2
        
        assert populated.get("Machine://machine/id78/details:id78") is not None
        assert populated.get("Subnet://subnet/id7/details:id7") is not None
        assert populated.get("Machine:id7") is None
    
    def test_invalidate_resource_by_id_escapes_metacharacters(self, cache_manager):
        cache_manager.set("R.x:1", 1)
        cache_manager.set("Rax:1", 2)
        
        assert cache_manager.invalidate_resource_by_id("R.x", "1") == 1
        assert cache_manager.get("Rax:1") == 2
    
    def test_invalidate_literal(self, populated):
        assert populated.invalidate("id78") == 1


class TestStatsAndLifecycle:
    """Test statistics and lifecycle."""
    
    def test_stats(self, cache_manager):
        cache_manager.set("k", 1)
        cache_manager.get("k")
        cache_manager.get("missing")
        
        stats = cache_manager.get_stats()
        
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["hit_rate_percent"] == 50.0
        assert stats["size"] == 1
        assert stats["max_size"] == 100
        assert stats["strategy"] == "time-based"
        assert stats["enabled"] is True
        assert stats["sweeping"] is False
    
    def test_strategy_type(self, clock):
        manager = CacheManager(LRUCacheStrategy(5, clock=clock, autostart=False))
        
        assert manager.strategy_type == CacheStrategyType.LRU
        assert manager.get_default_ttl() == 300
    
    @pytest.mark.asyncio
    async def test_start_and_dispose(self, cache_manager):
        assert cache_manager.start() is True
        assert cache_manager.get_stats()["sweeping"] is True
        
        cache_manager.dispose()
        
        assert cache_manager.strategy.is_sweeping is False
        assert cache_manager.start() is False
        await asyncio.sleep(0)
