"""Tests for the LRU cache strategy."""

import pytest

from maas_bridge.platform.cache.core.protocols.cache_strategy import CacheStrategy


def _assert_list_consistent(strategy):
    """Forward walk, backward walk and map agree on the key set."""
    forward = strategy.keys()
    backward = []
    node = strategy._tail
    while node is not None:
        backward.append(node.key)
        node = node.prev
    
    assert forward == list(reversed(backward))
    assert sorted(forward) == sorted(strategy._cache)
    assert len(forward) == strategy.size()


class TestLRUStorage:
    """Test basic storage operations."""
    
    def test_satisfies_strategy_protocol(self, lru_strategy):
        assert isinstance(lru_strategy, CacheStrategy)
        assert lru_strategy.strategy_name == "lru"
    
    def test_set_and_get(self, lru_strategy, clock):
        lru_strategy.set("k", [1, 2], 30)
        
        entry = lru_strategy.get("k")
        assert entry.value == [1, 2]
        assert entry.expires_at == clock.now + 30
    
    def test_delete_and_clear(self, lru_strategy):
        for key in ("a", "b", "c"):
            lru_strategy.set(key, key, 60)
        
        assert lru_strategy.delete("b") is True
        assert lru_strategy.delete("b") is False
        _assert_list_consistent(lru_strategy)
        
        lru_strategy.clear()
        assert lru_strategy.size() == 0
        assert lru_strategy.keys() == []
        
        lru_strategy.set("x", 1, 60)
        _assert_list_consistent(lru_strategy)


class TestLRURecency:
    """Test recency ordering and eviction."""
    
    def test_keys_most_recent_first(self, lru_strategy):
        for key in ("a", "b", "c"):
            lru_strategy.set(key, key, 60)
        
        assert lru_strategy.keys() == ["c", "b", "a"]
    
    def test_get_promotes(self, lru_strategy):
        for key in ("a", "b", "c"):
            lru_strategy.set(key, key, 60)
        
        lru_strategy.get("a")
        
        assert lru_strategy.keys() == ["a", "c", "b"]
        _assert_list_consistent(lru_strategy)
    
    def test_evicts_least_recently_used(self, lru_strategy):
        """Test the tail is evicted when inserting a new key at capacity."""
        for key in ("a", "b", "c"):
            lru_strategy.set(key, key, 60)
        lru_strategy.get("a")
        
        lru_strategy.set("d", "d", 60)
        
        assert lru_strategy.get("b") is None
        assert lru_strategy.size() == 3
        assert set(lru_strategy.keys()) == {"a", "c", "d"}
    
    def test_overwrite_promotes_without_eviction(self, lru_strategy):
        for key in ("a", "b", "c"):
            lru_strategy.set(key, key, 60)
        
        lru_strategy.set("a", "a2", 60)
        
        assert lru_strategy.keys() == ["a", "c", "b"]
        assert lru_strategy.get("a").value == "a2"
        _assert_list_consistent(lru_strategy)
    
    def test_capacity_one(self, clock):
        from maas_bridge.platform.cache.infrastructure.strategies.lru_strategy import (
            LRUCacheStrategy,
        )
        strategy = LRUCacheStrategy(1, clock=clock, autostart=False)
        strategy.set("a", 1, 60)
        strategy.set("b", 2, 60)
        
        assert strategy.keys() == ["b"]
        _assert_list_consistent(strategy)


class TestLRUExpiry:
    """Test TTL expiry."""
    
    def test_expired_entry_removed_on_read(self, lru_strategy, clock):
        lru_strategy.set("k", 1, 10)
        clock.advance(10)
        
        assert lru_strategy.get("k") is None
        assert lru_strategy.size() == 0
        _assert_list_consistent(lru_strategy)
    
    def test_sweep_reclaims_recently_used_expired_entries(self, lru_strategy, clock):
        """Test the sweep scans the whole list, not only the tail."""
        lru_strategy.set("long", 1, 100)
        lru_strategy.set("short", 2, 10)
        lru_strategy.get("long")
        lru_strategy.set("mid", 3, 10)
        lru_strategy.get("mid")
        clock.advance(10)
        
        assert lru_strategy.remove_expired_entries() == 2
        assert lru_strategy.keys() == ["long"]
        _assert_list_consistent(lru_strategy)


class TestLRUInvalidation:
    """Test pattern invalidation."""
    
    def test_invalidate_keeps_list_consistent(self, lru_strategy):
        lru_strategy.set("Machine:a", 1, 60)
        lru_strategy.set("Subnet:a", 2, 60)
        lru_strategy.set("Machine:b", 3, 60)
        
        assert lru_strategy.invalidate("Machine:") == 2
        assert lru_strategy.keys() == ["Subnet:a"]
        _assert_list_consistent(lru_strategy)
    
    @pytest.mark.parametrize("pattern", ["Zone", "machine"])
    def test_no_match(self, lru_strategy, pattern):
        lru_strategy.set("Machine:a", 1, 60)
        
        assert lru_strategy.invalidate(pattern) == 0
        assert lru_strategy.size() == 1
