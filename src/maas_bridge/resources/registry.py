"""Resource registry.

ONLY URI dispatch - maps a resource URI to the first handler whose
template matches it.
"""

import logging
from typing import Dict, List, Optional

from ..core.exceptions.resource import ResourceNotFound
from ..platform.cache.application.services.cache_manager import CacheManager
from .handlers import (
    BaseResourceHandler,
    DeviceDetailsResourceHandler,
    DevicesListResourceHandler,
    DomainDetailsResourceHandler,
    DomainsListResourceHandler,
    MachineDetailsResourceHandler,
    MachinesListResourceHandler,
    ResourceResponse,
    SubnetDetailsResourceHandler,
    SubnetsListResourceHandler,
    TagDetailsResourceHandler,
    TagMachinesResourceHandler,
    TagsListResourceHandler,
    ZoneDetailsResourceHandler,
    ZonesListResourceHandler,
)
from .protocols import MaasClient

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Registered resource handlers keyed by resource id."""
    
    def __init__(self):
        self._handlers: Dict[str, BaseResourceHandler] = {}
    
    def register(self, resource_id: str, handler: BaseResourceHandler) -> None:
        if resource_id in self._handlers:
            raise ValueError(f"Resource '{resource_id}' is already registered")
        self._handlers[resource_id] = handler
        logger.debug(f"Registered resource {resource_id} for {handler.uri_pattern}")
    
    def get(self, resource_id: str) -> Optional[BaseResourceHandler]:
        return self._handlers.get(resource_id)
    
    def resolve(self, uri: str) -> Optional[BaseResourceHandler]:
        """First registered handler whose template matches ``uri``."""
        for handler in self._handlers.values():
            if handler.matches(uri):
                return handler
        return None
    
    async def read(self, uri: str) -> ResourceResponse:
        """Read a resource URI.
        
        Raises:
            ResourceNotFound: If no handler matches the URI
            ResourceError: Raised by the handler
        """
        handler = self.resolve(uri)
        if handler is None:
            raise ResourceNotFound(
                f"No resource matches URI '{uri}'",
                error_code="unknown_resource",
                details={"uri": uri}
            )
        return await handler.handle_request(uri)
    
    def templates(self) -> List[Dict[str, str]]:
        return [
            {
                "id": resource_id,
                "uri_template": handler.uri_pattern,
                "resource_name": handler.resource_name,
            }
            for resource_id, handler in self._handlers.items()
        ]
    
    def handlers(self) -> List[BaseResourceHandler]:
        return list(self._handlers.values())
    
    def __len__(self) -> int:
        return len(self._handlers)


def create_resource_registry(client: MaasClient, cache_manager: CacheManager) -> ResourceRegistry:
    """Create a registry holding every MAAS resource handler."""
    registry = ResourceRegistry()
    
    registry.register("maas_machine_details", MachineDetailsResourceHandler(client, cache_manager))
    registry.register("maas_machines_list", MachinesListResourceHandler(client, cache_manager))
    registry.register("maas_subnet_details", SubnetDetailsResourceHandler(client, cache_manager))
    registry.register("maas_subnets_list", SubnetsListResourceHandler(client, cache_manager))
    registry.register("maas_zone_details", ZoneDetailsResourceHandler(client, cache_manager))
    registry.register("maas_zones_list", ZonesListResourceHandler(client, cache_manager))
    registry.register("maas_tag_details", TagDetailsResourceHandler(client, cache_manager))
    registry.register("maas_tags_list", TagsListResourceHandler(client, cache_manager))
    registry.register("maas_tag_machines", TagMachinesResourceHandler(client, cache_manager))
    registry.register("maas_device_details", DeviceDetailsResourceHandler(client, cache_manager))
    registry.register("maas_devices_list", DevicesListResourceHandler(client, cache_manager))
    registry.register("maas_domain_details", DomainDetailsResourceHandler(client, cache_manager))
    registry.register("maas_domains_list", DomainsListResourceHandler(client, cache_manager))
    
    logger.info(f"Registered {len(registry)} MAAS resources")
    return registry
