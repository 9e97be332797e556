"""Resource request exceptions.

Raised by resource handlers while validating parameters, talking to the
upstream MAAS API and validating its responses. Each carries the HTTP
status code the bridge answers with.
"""

from typing import Any, Dict, Optional

from .base import MaasBridgeError


class ResourceError(MaasBridgeError):
    """Base exception for resource request failures."""
    
    status_code: int = 500
    default_error_code: str = "unexpected_error"
    
    def __init__(
        self,
        message: str,
        resource_name: Optional[str] = None,
        resource_id: Optional[str] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code or self.default_error_code, details)
        if status_code is not None:
            self.status_code = status_code
        self.resource_name = resource_name
        self.resource_id = resource_id
        if resource_name:
            self.details["resource"] = resource_name
        if resource_id:
            self.details["resource_id"] = resource_id


class InvalidResourceParams(ResourceError):
    """Raised when URI parameters fail validation."""
    
    status_code = 400
    default_error_code = "invalid_parameters"


class ResourceNotFound(ResourceError):
    """Raised when the upstream API has no such resource."""
    
    status_code = 404
    default_error_code = "resource_not_found"


class InvalidResourceData(ResourceError):
    """Raised when upstream data does not match the expected schema."""
    
    status_code = 500
    default_error_code = "invalid_response_format"


class UpstreamRequestError(ResourceError):
    """Raised when the upstream API call fails."""
    
    status_code = 502
    default_error_code = "upstream_error"
