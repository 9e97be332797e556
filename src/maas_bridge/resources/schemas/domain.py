"""Domain resource schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DOMAIN_DETAILS_URI_PATTERN = "maas://domain/{domain_id}/details"
DOMAINS_LIST_URI_PATTERN = "maas://domains/list"


class MaasDomain(BaseModel):
    """A MAAS DNS domain."""
    
    model_config = ConfigDict(extra="allow")
    
    id: int
    name: str
    authoritative: Optional[bool] = None
    ttl: Optional[int] = None
    resource_record_count: Optional[int] = None


class GetDomainParams(BaseModel):
    domain_id: str = Field(..., description="Domain ID")
