"""Resource read router.

ONLY resource reads - lists resource templates and reads a resource URI
through the cache.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query

from ....core.exceptions.base import create_error_response
from ....core.exceptions.resource import ResourceError
from ...registry import ResourceRegistry
from ..dependencies import get_resource_registry

logger = logging.getLogger(__name__)

resource_router = APIRouter(
    prefix="/resources",
    tags=["Resources"],
)


@resource_router.get(
    "",
    summary="List resource templates",
)
async def list_resources(
    registry: ResourceRegistry = Depends(get_resource_registry)
) -> List[Dict[str, str]]:
    """List registered resource URI templates."""
    return registry.templates()


@resource_router.get(
    "/read",
    summary="Read a resource",
)
async def read_resource(
    uri: str = Query(..., min_length=1, description="Resource URI, e.g. maas://machines/list"),
    registry: ResourceRegistry = Depends(get_resource_registry)
) -> Dict[str, Any]:
    """Read a resource URI, served from cache when possible."""
    try:
        response = await registry.read(uri)
    except ResourceError as e:
        logger.warning(f"Resource read failed for {uri}: {e.error_code}")
        raise HTTPException(
            status_code=e.status_code,
            detail=create_error_response(e)
        )
    
    return {**response.to_dict(), "from_cache": response.from_cache}
