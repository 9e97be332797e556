"""Cache manager orchestration service.

ONLY cache orchestration - the facade resource handlers use: key
generation, TTL precedence, resource-scoped invalidation and the global
enable switch, delegating storage mechanics to one strategy.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple, TypeVar
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ...core.entities.cache_entry import CacheEntry
from ...core.value_objects.cache_options import CacheOptions
from ...core.value_objects.invalidation_pattern import InvalidationPattern, PatternLike
from ...core.value_objects.strategy_type import CacheStrategyType
from ...infrastructure.strategies.base_strategy import BaseCacheStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Checked in order when deriving the resource identifier for a key
RESOURCE_ID_PARAMS = ("system_id", "id", "name")

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class CacheManager:
    """Cache manager orchestration service.
    
    Owns one strategy for its whole lifetime. TTL precedence, highest
    first: ``options.ttl``, the resource-specific TTL, the default TTL.
    Toggling ``enabled`` never clears entries; it only gates operations.
    """
    
    def __init__(
        self,
        strategy: BaseCacheStrategy,
        *,
        enabled: bool = True,
        default_ttl: int = 300,
        resource_specific_ttl: Optional[Mapping[str, int]] = None
    ):
        """Initialize cache manager.
        
        Args:
            strategy: Strategy instance; the manager disposes it
            enabled: Global cache switch
            default_ttl: TTL in seconds when nothing more specific applies
            resource_specific_ttl: Per-resource TTL overrides in seconds
        """
        self._strategy = strategy
        self._enabled = enabled
        self._default_ttl = default_ttl
        self._resource_specific_ttl: Dict[str, int] = dict(resource_specific_ttl or {})
        self._stats = {"hits": 0, "misses": 0, "sets": 0}
        
        logger.info(
            f"Initialized {strategy.strategy_name} cache strategy "
            f"(max_size={strategy.max_size}, default_ttl={default_ttl}s, enabled={enabled})"
        )
    
    @property
    def strategy(self) -> BaseCacheStrategy:
        return self._strategy
    
    @property
    def strategy_type(self) -> CacheStrategyType:
        return CacheStrategyType(self._strategy.strategy_name)
    
    # Key generation
    
    def generate_key(
        self,
        resource_name: str,
        uri: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[CacheOptions] = None
    ) -> str:
        """Generate a cache key for a resource request.
        
        The key is ``resource_name:path``, then ``:id`` when an identifier is
        found in ``params`` (system_id, id, name), then ``:query`` when
        ``options.include_query_params`` is set and the URI has a query.
        ``options.key_generator`` replaces all of this when given.
        
        ``path`` keeps the URI authority but drops the scheme, so
        ``maas://machine/abc123/details`` contributes
        ``//machine/abc123/details`` and no key segment contains ``:``.
        A URI that ``urlsplit`` rejects is split on ``?`` and ``#`` instead.
        
        Args:
            resource_name: Logical resource name, e.g. "Machine"
            uri: Full request URI
            params: Validated request parameters
            options: Key shaping options
            
        Returns:
            The cache key
        """
        params = params or {}
        if options is not None and options.key_generator is not None:
            return options.key_generator(uri, params)
        
        path, query = self._split_uri(uri)
        key = f"{resource_name}:{path}"
        
        resource_id = self._extract_resource_id(params)
        if resource_id:
            key += f":{resource_id}"
        
        if options is not None and options.include_query_params and query:
            query_pairs = parse_qsl(query, keep_blank_values=True)
            if options.include_query_params_list:
                first_values: Dict[str, str] = {}
                for name, value in query_pairs:
                    first_values.setdefault(name, value)
                query_pairs = [
                    (name, first_values[name])
                    for name in options.include_query_params_list
                    if name in first_values
                ]
            key += f":{urlencode(query_pairs)}"
        
        return key
    
    @staticmethod
    def _split_uri(uri: str) -> Tuple[str, str]:
        """Split a URI into its scheme-less ``//authority/path`` and query."""
        try:
            parts = urlsplit(uri)
        except ValueError:
            # Malformed authority, e.g. an unbalanced "[" in the host
            base, _, query = uri.split("#", 1)[0].partition("?")
            return _SCHEME.sub("", base), query
        return urlunsplit(("", parts.netloc, parts.path, "", "")), parts.query
    
    @staticmethod
    def _extract_resource_id(params: Mapping[str, Any]) -> Optional[str]:
        for name in RESOURCE_ID_PARAMS:
            value = params.get(name)
            if value:
                return str(value)
        return None
    
    # Storage operations
    
    def get(self, key: str) -> Optional[Any]:
        """Get a cached value, None when disabled, missing or expired."""
        entry = self.get_entry(key)
        return entry.value if entry is not None else None
    
    def get_entry(self, key: str) -> Optional[CacheEntry]:
        """Get the full cache entry, None when disabled, missing or expired."""
        if not self._enabled:
            return None
        
        entry = self._strategy.get(key)
        if entry is None:
            self._stats["misses"] += 1
        else:
            self._stats["hits"] += 1
        return entry
    
    def set(
        self,
        key: str,
        value: T,
        resource_name: Optional[str] = None,
        options: Optional[CacheOptions] = None
    ) -> Optional[CacheEntry[T]]:
        """Store a value.
        
        Skipped (returns None) when the manager is disabled or
        ``options.enabled`` is False.
        
        Returns:
            The stored entry, or None if caching was skipped
        """
        if not self._enabled or (options is not None and not options.enabled):
            return None
        
        ttl = self.resolve_ttl(resource_name, options)
        cache_control = options.cache_control if options is not None else None
        entry = self._strategy.set(key, value, ttl, cache_control)
        self._stats["sets"] += 1
        return entry
    
    def resolve_ttl(
        self,
        resource_name: Optional[str] = None,
        options: Optional[CacheOptions] = None
    ) -> int:
        """Resolve the TTL for a store: options, then resource, then default."""
        if options is not None and options.ttl is not None:
            return options.ttl
        if resource_name and resource_name in self._resource_specific_ttl:
            return self._resource_specific_ttl[resource_name]
        return self._default_ttl
    
    def delete(self, key: str) -> bool:
        if not self._enabled:
            return False
        return self._strategy.delete(key)
    
    def clear(self) -> None:
        if not self._enabled:
            return
        self._strategy.clear()
    
    def size(self) -> int:
        return self._strategy.size()
    
    # Invalidation
    
    def invalidate(self, pattern: PatternLike) -> int:
        """Invalidate entries whose key matches ``pattern``.
        
        Raises:
            InvalidPatternError: If the pattern cannot be compiled
        """
        matcher = InvalidationPattern.coerce(pattern)
        if not self._enabled:
            return 0
        return self._strategy.invalidate(matcher)
    
    def invalidate_resource(self, resource_name: str) -> int:
        """Invalidate every key of a resource type (``resource_name:`` prefix)."""
        return self.invalidate(InvalidationPattern.prefix(f"{resource_name}:"))
    
    def invalidate_resource_by_id(self, resource_name: str, resource_id: str) -> int:
        """Invalidate keys of one resource instance.
        
        Matches ``resource_name:[segment:]resource_id`` followed by ``:`` or
        the end of the key, so ``id7`` never matches ``id78``.
        """
        expression = (
            f"^{re.escape(resource_name)}:(?:[^:]*:)?{re.escape(str(resource_id))}(?::|$)"
        )
        return self.invalidate(InvalidationPattern.regex(expression))
    
    # Runtime configuration
    
    def is_enabled(self) -> bool:
        return self._enabled
    
    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        logger.info(f"Cache {'enabled' if enabled else 'disabled'}")
    
    def get_default_ttl(self) -> int:
        return self._default_ttl
    
    def set_default_ttl(self, ttl: int) -> None:
        self._default_ttl = ttl
        logger.info(f"Default cache TTL set to {ttl} seconds")
    
    def get_resource_ttl(self, resource_name: str) -> int:
        """Resource-specific TTL, falling back to the default TTL."""
        return self._resource_specific_ttl.get(resource_name, self._default_ttl)
    
    def set_resource_ttl(self, resource_name: str, ttl: int) -> None:
        self._resource_specific_ttl[resource_name] = ttl
        logger.info(f"Cache TTL for {resource_name} set to {ttl} seconds")
    
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total_requests = self._stats["hits"] + self._stats["misses"]
        hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0
        
        return {
            **self._stats,
            "hit_rate_percent": hit_rate,
            "size": self._strategy.size(),
            "max_size": self._strategy.max_size,
            "strategy": self._strategy.strategy_name,
            "enabled": self._enabled,
            "default_ttl": self._default_ttl,
            "resource_specific_ttl": dict(self._resource_specific_ttl),
            "sweeping": self._strategy.is_sweeping,
        }
    
    # Lifecycle
    
    def start(self) -> bool:
        """Start the strategy's background sweep on the running loop."""
        return self._strategy.start()
    
    def dispose(self) -> None:
        """Stop the strategy's background sweep."""
        self._strategy.dispose()
