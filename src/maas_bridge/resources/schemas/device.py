"""Device resource schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEVICE_DETAILS_URI_PATTERN = "maas://device/{system_id}/details"
DEVICES_LIST_URI_PATTERN = "maas://devices/list"


class MaasDevice(BaseModel):
    """A MAAS device (non-deployable node)."""
    
    model_config = ConfigDict(extra="allow")
    
    system_id: str
    hostname: str
    fqdn: Optional[str] = None
    owner: Optional[str] = None
    ip_addresses: List[str] = Field(default_factory=list)


class GetDeviceParams(BaseModel):
    system_id: str = Field(..., description="Device system ID")
