"""Subnet resource schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

SUBNET_DETAILS_URI_PATTERN = "maas://subnet/{subnet_id}/details"
SUBNETS_LIST_URI_PATTERN = "maas://subnets/list"


class MaasSubnet(BaseModel):
    """A MAAS subnet."""
    
    model_config = ConfigDict(extra="allow")
    
    id: int
    name: str
    cidr: str
    vlan: Optional[Any] = None
    space: Optional[str] = None
    gateway_ip: Optional[str] = None
    managed: Optional[bool] = None


class GetSubnetParams(BaseModel):
    subnet_id: str = Field(..., description="Subnet ID")
