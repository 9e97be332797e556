"""Collection query parameter models.

Strict models for list resources: unknown query parameters are rejected.
Numeric values arrive as strings from the URI and are coerced.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseCollectionQueryParams(BaseModel):
    """Pagination and sorting shared by every list resource."""
    
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)
    
    # Pagination
    limit: Optional[int] = Field(None, gt=0, description="Number of items to return")
    offset: Optional[int] = Field(None, ge=0, description="Offset from the beginning of the collection")
    page: Optional[int] = Field(None, gt=0, description="Page number (1-indexed)")
    per_page: Optional[int] = Field(None, gt=0, description="Items per page (alternative to limit)")
    
    # Sorting
    sort: Optional[str] = Field(None, description="Field name to sort by")
    order: Optional[Literal["asc", "desc"]] = Field(None, description="Sort order")
    
    def to_query(self) -> dict:
        """Set parameters as upstream query strings."""
        return {
            name: str(value)
            for name, value in self.model_dump(exclude_none=True).items()
        }


class MachineCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing machines."""
    
    hostname: Optional[str] = Field(None, description="Filter by hostname")
    status: Optional[str] = Field(None, description="Comma-separated machine statuses")
    zone: Optional[str] = Field(None, description="Filter by zone name or ID")
    pool: Optional[str] = Field(None, description="Filter by resource pool name or ID")
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    not_tags: Optional[str] = Field(None, description="Comma-separated tags to exclude")
    owner: Optional[str] = Field(None, description="Filter by owner")
    architecture: Optional[str] = Field(None, description="Filter by architecture, e.g. amd64")
    domain: Optional[str] = Field(None, description="Filter by domain name")
    power_state: Optional[str] = Field(None, description="Filter by power state, e.g. on")
    cpu_count: Optional[int] = Field(None, gt=0, description="Filter by exact CPU count")
    memory: Optional[int] = Field(None, gt=0, description="Filter by exact memory in MB")


class SubnetCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing subnets."""
    
    cidr: Optional[str] = Field(None, description="Filter by CIDR, e.g. 192.168.1.0/24")
    name: Optional[str] = Field(None, description="Filter by name")
    vlan: Optional[str] = Field(None, description="Filter by VLAN")
    space: Optional[str] = Field(None, description="Filter by space name or ID")
    vlan_vid: Optional[int] = Field(None, ge=0, le=4095, description="Filter by VLAN ID")


class ZoneCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing zones."""
    
    name: Optional[str] = Field(None, description="Filter by name")


class TagCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing tags."""
    
    name: Optional[str] = Field(None, description="Filter by name")
    definition: Optional[str] = Field(None, description="Filter by XPath definition")


class DeviceCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing devices."""
    
    hostname: Optional[str] = Field(None, description="Filter by hostname")
    mac_address: Optional[str] = Field(None, description="Filter by MAC address")
    zone: Optional[str] = Field(None, description="Filter by zone")
    owner: Optional[str] = Field(None, description="Filter by owner")


class DomainCollectionQueryParams(BaseCollectionQueryParams):
    """Query parameters for listing domains."""
    
    name: Optional[str] = Field(None, description="Filter by name")
    authoritative: Optional[Literal["true", "false"]] = Field(
        None,
        description="Filter by authoritative status"
    )
