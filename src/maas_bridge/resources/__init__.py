"""MAAS resource handlers.

Read-only MAAS resources addressed by ``maas://`` URIs, fetched through an
upstream client and served through the response cache.
"""

from .protocols import MaasClient
from .handlers import (
    BaseResourceHandler,
    DetailResourceHandler,
    ListResourceHandler,
    ResourceContent,
    ResourceResponse,
)
from .registry import ResourceRegistry, create_resource_registry

__all__ = [
    "MaasClient",
    "BaseResourceHandler",
    "DetailResourceHandler",
    "ListResourceHandler",
    "ResourceContent",
    "ResourceResponse",
    "ResourceRegistry",
    "create_resource_registry",
]
