"""Cache settings request models.

ONLY runtime reconfiguration requests - enable switch and TTL updates.
"""

from pydantic import BaseModel, Field


class SetEnabledRequest(BaseModel):
    """Request model for toggling the cache."""
    
    enabled: bool = Field(..., description="Whether caching should be enabled")


class SetTTLRequest(BaseModel):
    """Request model for updating a TTL."""
    
    ttl: int = Field(..., ge=0, description="TTL in seconds")
