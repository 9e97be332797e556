"""Tag resource schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

TAG_DETAILS_URI_PATTERN = "maas://tag/{tag_name}/details"
TAGS_LIST_URI_PATTERN = "maas://tags/list"
TAG_MACHINES_URI_PATTERN = "maas://tag/{tag_name}/machines"

# Alphanumerics, underscores and hyphens only
TAG_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


class MaasTag(BaseModel):
    """A MAAS tag."""
    
    model_config = ConfigDict(extra="allow")
    
    name: str
    definition: Optional[str] = None
    comment: Optional[str] = None
    kernel_opts: Optional[str] = None


class GetTagParams(BaseModel):
    """URI parameters of tag detail and tag machines requests."""
    
    tag_name: str = Field(..., pattern=TAG_NAME_PATTERN, description="Tag name")
