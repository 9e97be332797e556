"""Resource handler utilities."""

from .uri_template import UriTemplate
from .resource_utils import (
    extract_and_validate_params,
    validate_resource_data,
    handle_resource_fetch_error,
)

__all__ = [
    "UriTemplate",
    "extract_and_validate_params",
    "validate_resource_data",
    "handle_resource_fetch_error",
]
