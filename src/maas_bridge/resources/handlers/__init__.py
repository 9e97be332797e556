"""Resource handlers."""

from .base_handler import (
    BaseResourceHandler,
    DetailResourceHandler,
    ListResourceHandler,
    ResourceContent,
    ResourceResponse,
)
from .machine_handler import MachineDetailsResourceHandler, MachinesListResourceHandler
from .subnet_handler import SubnetDetailsResourceHandler, SubnetsListResourceHandler
from .zone_handler import ZoneDetailsResourceHandler, ZonesListResourceHandler
from .tag_handler import (
    TagDetailsResourceHandler,
    TagsListResourceHandler,
    TagMachinesResourceHandler,
)
from .device_handler import DeviceDetailsResourceHandler, DevicesListResourceHandler
from .domain_handler import DomainDetailsResourceHandler, DomainsListResourceHandler

__all__ = [
    "BaseResourceHandler",
    "DetailResourceHandler",
    "ListResourceHandler",
    "ResourceContent",
    "ResourceResponse",
    "MachineDetailsResourceHandler",
    "MachinesListResourceHandler",
    "SubnetDetailsResourceHandler",
    "SubnetsListResourceHandler",
    "ZoneDetailsResourceHandler",
    "ZonesListResourceHandler",
    "TagDetailsResourceHandler",
    "TagsListResourceHandler",
    "TagMachinesResourceHandler",
    "DeviceDetailsResourceHandler",
    "DevicesListResourceHandler",
    "DomainDetailsResourceHandler",
    "DomainsListResourceHandler",
]
