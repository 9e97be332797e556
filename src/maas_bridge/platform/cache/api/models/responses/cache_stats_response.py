"""Cache statistics response model.

ONLY cache statistics - structures cache metrics and configuration.
"""

from typing import Dict

from pydantic import BaseModel, Field


class CacheStatsResponse(BaseModel):
    """Cache statistics and current configuration."""
    
    hits: int = Field(default=0, ge=0, description="Total cache hits")
    misses: int = Field(default=0, ge=0, description="Total cache misses")
    sets: int = Field(default=0, ge=0, description="Total stored entries")
    hit_rate_percent: float = Field(default=0.0, ge=0, le=100, description="Hit rate percentage")
    size: int = Field(default=0, ge=0, description="Entries currently stored")
    max_size: int = Field(..., description="Capacity before eviction")
    strategy: str = Field(..., description="Active strategy name")
    enabled: bool = Field(..., description="Global cache switch")
    default_ttl: int = Field(..., description="Default TTL in seconds")
    resource_specific_ttl: Dict[str, int] = Field(
        default_factory=dict,
        description="Per-resource TTL overrides in seconds"
    )
    sweeping: bool = Field(default=False, description="Whether the background sweep is running")
