"""Cache options value object.

ONLY per-call cache options - TTL override, enable switch, cache-control
metadata and cache key shaping used by resource handlers.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional, Sequence

from ..entities.cache_entry import CacheControl

KeyGenerator = Callable[[str, Mapping[str, Any]], str]


@dataclass(frozen=True)
class CacheOptions:
    """Options controlling how a single resource is cached.
    
    Attributes:
        ttl: Explicit TTL in seconds; wins over resource and default TTLs
        enabled: Per-resource switch, independent of the global one
        cache_control: Passthrough directives stored with the entry
        include_query_params: Append the query string to the cache key
        include_query_params_list: Only these query parameters, in this order
        key_generator: Replaces key generation entirely; called with (uri, params)
    """
    
    ttl: Optional[int] = None
    enabled: bool = True
    cache_control: Optional[CacheControl] = None
    include_query_params: bool = False
    include_query_params_list: Optional[Sequence[str]] = None
    key_generator: Optional[KeyGenerator] = None
    
    def merge(self, **changes: Any) -> "CacheOptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
