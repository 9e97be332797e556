"""Bridge exception hierarchy."""

from .base import MaasBridgeError, create_error_response
from .resource import (
    ResourceError,
    InvalidResourceParams,
    ResourceNotFound,
    InvalidResourceData,
    UpstreamRequestError,
)

__all__ = [
    "MaasBridgeError",
    "create_error_response",
    "ResourceError",
    "InvalidResourceParams",
    "ResourceNotFound",
    "InvalidResourceData",
    "UpstreamRequestError",
]
