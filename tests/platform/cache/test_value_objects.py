"""Tests for cache entities and value objects."""

import re

import pytest

from maas_bridge.core.exceptions.base import MaasBridgeError, create_error_response
from maas_bridge.platform.cache.core.entities.cache_entry import CacheControl, CacheEntry
from maas_bridge.platform.cache.core.exceptions.invalid_pattern import InvalidPatternError
from maas_bridge.platform.cache.core.value_objects.cache_options import CacheOptions
from maas_bridge.platform.cache.core.value_objects.invalidation_pattern import (
    InvalidationPattern,
    PatternType,
)


class TestCacheEntry:
    """Test cache entry timing."""
    
    def test_create(self):
        entry = CacheEntry.create("k", "v", 30, now=100.0)
        
        assert entry.created_at == 100.0
        assert entry.expires_at == 130.0
        assert entry.cache_control is None
    
    def test_expiry_boundary(self):
        entry = CacheEntry.create("k", "v", 30, now=100.0)
        
        assert entry.is_expired(129.9) is False
        assert entry.is_expired(130.0) is True
    
    def test_age(self):
        entry = CacheEntry.create("k", "v", 30, now=100.0)
        
        assert entry.age(112.0) == 12.0
        assert entry.age(90.0) == 0.0
    
    def test_cache_control_directives(self):
        control = CacheControl(max_age=10, private=True, must_revalidate=True, immutable=True)
        
        assert control.directives() == ["private", "must-revalidate", "immutable"]
        assert CacheControl().directives() == []


class TestCacheOptions:
    
    def test_merge_returns_copy(self):
        options = CacheOptions(ttl=10)
        
        merged = options.merge(ttl=20, include_query_params=True)
        
        assert options.ttl == 10
        assert merged.ttl == 20
        assert merged.include_query_params is True
        assert merged.enabled is True


class TestInvalidationPattern:
    """Test pattern construction and matching."""
    
    def test_literal(self):
        pattern = InvalidationPattern.literal("a.b")
        
        assert pattern.matches("xa.by")
        assert not pattern.matches("xaxby")
    
    def test_prefix(self):
        pattern = InvalidationPattern.prefix("Machine:")
        
        assert pattern.matches("Machine:1")
        assert not pattern.matches("Machines:1")
    
    def test_regex_search_semantics(self):
        pattern = InvalidationPattern.regex(r"\d+$")
        
        assert pattern.pattern_type == PatternType.REGEX
        assert pattern("key:42")
        assert not pattern("key:x")
    
    def test_malformed_regex(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            InvalidationPattern.regex("(unclosed")
        
        error = exc_info.value
        assert isinstance(error, ValueError)
        assert isinstance(error, MaasBridgeError)
        assert error.pattern == "(unclosed"
        assert create_error_response(error)["error"]["code"] == "INVALID_PATTERN"
    
    @pytest.mark.parametrize(
        "value,expected_type",
        [
            ("abc", PatternType.LITERAL),
            (re.compile("abc"), PatternType.REGEX),
            (lambda key: True, PatternType.PREDICATE),
        ],
    )
    def test_coerce(self, value, expected_type):
        assert InvalidationPattern.coerce(value).pattern_type == expected_type
    
    def test_coerce_passthrough(self):
        pattern = InvalidationPattern.prefix("x")
        
        assert InvalidationPattern.coerce(pattern) is pattern
    
    def test_equality_ignores_compiled_state(self):
        assert InvalidationPattern.regex("a+") == InvalidationPattern.regex("a+")
        assert str(InvalidationPattern.prefix("M:")) == "prefix:'M:'"
