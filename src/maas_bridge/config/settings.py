"""
Bridge settings.

Pydantic settings read from environment variables (and an optional ``.env``
file). The cache section mirrors the options the resource handlers and the
cache manager are built from.
"""
from functools import lru_cache
from typing import Dict

from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__
from ..platform.cache.core.value_objects.strategy_type import CacheStrategyType


class BridgeSettings(BaseSettings):
    """Application settings for the MAAS bridge."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )
    
    # Application metadata
    app_name: str = Field(default="MAAS Bridge")
    app_version: str = Field(default=__version__)
    
    # Cache configuration
    cache_enabled: bool = Field(default=True, description="Global cache switch")
    cache_strategy: CacheStrategyType = Field(
        default=CacheStrategyType.TIME_BASED,
        description="Eviction strategy: 'lru' or 'time-based'"
    )
    cache_max_size: PositiveInt = Field(
        default=1000,
        description="Maximum number of items in the cache"
    )
    cache_max_age: PositiveInt = Field(
        default=300,
        description="Default TTL in seconds (5 minutes)"
    )
    cache_resource_specific_ttl: Dict[str, PositiveInt] = Field(
        default_factory=dict,
        description="Per-resource TTL overrides in seconds (JSON object)"
    )
    cache_sweep_interval: PositiveFloat = Field(
        default=60.0,
        description="Seconds between background sweeps of expired entries"
    )


@lru_cache()
def get_settings() -> BridgeSettings:
    """Get cached settings instance.

    Call ``get_settings.cache_clear()`` to force a reload.
    """
    return BridgeSettings()
