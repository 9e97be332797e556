"""Zone resource schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ZONE_DETAILS_URI_PATTERN = "maas://zone/{zone_id}/details"
ZONES_LIST_URI_PATTERN = "maas://zones/list"


class MaasZone(BaseModel):
    """A MAAS availability zone."""
    
    model_config = ConfigDict(extra="allow")
    
    id: int
    name: str
    description: Optional[str] = None


class GetZoneParams(BaseModel):
    zone_id: str = Field(..., description="Zone ID")
