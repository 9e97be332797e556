"""Parameter and payload validation helpers for resource handlers."""

import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...core.exceptions.resource import (
    InvalidResourceData,
    InvalidResourceParams,
    ResourceError,
    ResourceNotFound,
    UpstreamRequestError,
)
from .uri_template import UriTemplate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def extract_and_validate_params(
    uri: str,
    template: UriTemplate,
    params_model: Type[M],
    resource_name: str
) -> M:
    """Extract URI variables and validate them against a params model.
    
    Raises:
        InvalidResourceParams: If the URI does not match or validation fails
    """
    variables = template.match(uri)
    if variables is None:
        raise InvalidResourceParams(
            f"URI '{uri}' does not match {template.template}",
            resource_name=resource_name,
            details={"uri": uri, "template": template.template}
        )
    
    try:
        return params_model.model_validate(variables)
    except ValidationError as e:
        logger.error(f"Invalid parameters for {resource_name} request: {e.error_count()} error(s)")
        raise InvalidResourceParams(
            f"Invalid parameters for {resource_name} request",
            resource_name=resource_name,
            details={"errors": e.errors(include_url=False, include_context=False)}
        ) from e


def validate_resource_data(
    data: Any,
    data_model: Type[M],
    resource_name: str,
    resource_id: Optional[str] = None
) -> M:
    """Validate an upstream payload against a data model.
    
    Raises:
        InvalidResourceData: With status 422 when the payload does not fit
    """
    try:
        return data_model.model_validate(data)
    except ValidationError as e:
        id_message = f" for '{resource_id}'" if resource_id else ""
        logger.error(f"{resource_name} data validation failed{id_message}")
        raise InvalidResourceData(
            f"{resource_name} data validation failed{id_message}: "
            "the MAAS API returned data in an unexpected format",
            resource_name=resource_name,
            resource_id=resource_id,
            status_code=422,
            error_code="validation_error",
            details={"errors": e.errors(include_url=False, include_context=False)}
        ) from e


def handle_resource_fetch_error(
    error: Exception,
    resource_name: str,
    resource_id: Optional[str] = None
) -> ResourceError:
    """Translate an upstream failure into a resource error.
    
    Returns the exception to raise; callers chain it with ``from``.
    """
    id_message = f" for {resource_id}" if resource_id else ""
    
    if isinstance(error, ResourceError):
        logger.error(f"MAAS API error fetching {resource_name}{id_message}: {error.message}")
        return error
    
    if getattr(error, "status_code", None) == 404:
        logger.warning(f"{resource_name}{id_message} not found upstream")
        target = f"'{resource_id}'" if resource_id else "resource"
        return ResourceNotFound(
            f"{resource_name} {target} not found",
            resource_name=resource_name,
            resource_id=resource_id
        )
    
    logger.error(f"Error fetching {resource_name}{id_message}: {error}")
    return UpstreamRequestError(
        f"Could not fetch {resource_name}{id_message}: {error}",
        resource_name=resource_name,
        resource_id=resource_id,
        details={"cause": type(error).__name__}
    )
