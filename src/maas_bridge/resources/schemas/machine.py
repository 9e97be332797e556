"""Machine resource schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MACHINE_DETAILS_URI_PATTERN = "maas://machine/{system_id}/details"
MACHINES_LIST_URI_PATTERN = "maas://machines/list"


class MaasMachine(BaseModel):
    """A MAAS machine; fields beyond these are kept as returned."""
    
    model_config = ConfigDict(extra="allow")
    
    system_id: str = Field(..., description="Machine system ID")
    hostname: str = Field(..., description="Machine hostname")
    fqdn: Optional[str] = None
    status_name: Optional[str] = None
    architecture: Optional[str] = None
    cpu_count: Optional[int] = None
    memory: Optional[int] = Field(None, description="Memory in MB")
    power_state: Optional[str] = None
    owner: Optional[str] = None
    tag_names: List[str] = Field(default_factory=list)


class GetMachineParams(BaseModel):
    """URI parameters of a machine detail request."""
    
    system_id: str = Field(..., description="Machine system ID")
