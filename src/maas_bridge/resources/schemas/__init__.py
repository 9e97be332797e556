"""Resource data, parameter and URI template definitions."""

from .collection_query_params import (
    BaseCollectionQueryParams,
    MachineCollectionQueryParams,
    SubnetCollectionQueryParams,
    ZoneCollectionQueryParams,
    TagCollectionQueryParams,
    DeviceCollectionQueryParams,
    DomainCollectionQueryParams,
)
from .machine import (
    MaasMachine,
    GetMachineParams,
    MACHINE_DETAILS_URI_PATTERN,
    MACHINES_LIST_URI_PATTERN,
)
from .subnet import (
    MaasSubnet,
    GetSubnetParams,
    SUBNET_DETAILS_URI_PATTERN,
    SUBNETS_LIST_URI_PATTERN,
)
from .zone import (
    MaasZone,
    GetZoneParams,
    ZONE_DETAILS_URI_PATTERN,
    ZONES_LIST_URI_PATTERN,
)
from .tag import (
    MaasTag,
    GetTagParams,
    TAG_DETAILS_URI_PATTERN,
    TAGS_LIST_URI_PATTERN,
    TAG_MACHINES_URI_PATTERN,
)
from .device import (
    MaasDevice,
    GetDeviceParams,
    DEVICE_DETAILS_URI_PATTERN,
    DEVICES_LIST_URI_PATTERN,
)
from .domain import (
    MaasDomain,
    GetDomainParams,
    DOMAIN_DETAILS_URI_PATTERN,
    DOMAINS_LIST_URI_PATTERN,
)

__all__ = [
    "BaseCollectionQueryParams",
    "MachineCollectionQueryParams",
    "SubnetCollectionQueryParams",
    "ZoneCollectionQueryParams",
    "TagCollectionQueryParams",
    "DeviceCollectionQueryParams",
    "DomainCollectionQueryParams",
    "MaasMachine",
    "GetMachineParams",
    "MACHINE_DETAILS_URI_PATTERN",
    "MACHINES_LIST_URI_PATTERN",
    "MaasSubnet",
    "GetSubnetParams",
    "SUBNET_DETAILS_URI_PATTERN",
    "SUBNETS_LIST_URI_PATTERN",
    "MaasZone",
    "GetZoneParams",
    "ZONE_DETAILS_URI_PATTERN",
    "ZONES_LIST_URI_PATTERN",
    "MaasTag",
    "GetTagParams",
    "TAG_DETAILS_URI_PATTERN",
    "TAGS_LIST_URI_PATTERN",
    "TAG_MACHINES_URI_PATTERN",
    "MaasDevice",
    "GetDeviceParams",
    "DEVICE_DETAILS_URI_PATTERN",
    "DEVICES_LIST_URI_PATTERN",
    "MaasDomain",
    "GetDomainParams",
    "DOMAIN_DETAILS_URI_PATTERN",
    "DOMAINS_LIST_URI_PATTERN",
]
