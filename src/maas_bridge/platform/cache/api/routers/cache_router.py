"""Cache admin router.

ONLY cache administration - statistics, invalidation and runtime
reconfiguration of the process cache.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from .....core.exceptions.base import create_error_response
from ...application.services.cache_manager import CacheManager
from ...core.exceptions.invalid_pattern import InvalidPatternError
from ..dependencies.cache_dependencies import get_cache_manager
from ..models.requests.cache_settings_request import SetEnabledRequest, SetTTLRequest
from ..models.requests.invalidate_request import InvalidateRequest
from ..models.responses.cache_stats_response import CacheStatsResponse
from ..models.responses.operation_response import OperationResponse

logger = logging.getLogger(__name__)

cache_router = APIRouter(
    prefix="/cache",
    tags=["Cache"],
)


@cache_router.get(
    "/stats",
    response_model=CacheStatsResponse,
    summary="Get cache statistics",
)
async def get_cache_stats(
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> CacheStatsResponse:
    """Get cache statistics and configuration."""
    return CacheStatsResponse(**cache_manager.get_stats())


@cache_router.post(
    "/invalidate",
    response_model=OperationResponse,
    summary="Invalidate by pattern",
)
async def invalidate_pattern(
    request: InvalidateRequest,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Invalidate every entry whose key matches the pattern."""
    try:
        count = cache_manager.invalidate(request.to_pattern())
    except InvalidPatternError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=create_error_response(e)
        )
    
    logger.info(f"Invalidated {count} cache entries matching {request.pattern_type}:'{request.pattern}'")
    return OperationResponse(
        success=True,
        message=f"Invalidated {count} cache entries",
        data={"count": count, "pattern": request.pattern, "pattern_type": request.pattern_type}
    )


@cache_router.delete(
    "/resources/{resource_name}",
    response_model=OperationResponse,
    summary="Invalidate a resource type",
)
async def invalidate_resource(
    resource_name: str,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Invalidate all cache entries of one resource type."""
    count = cache_manager.invalidate_resource(resource_name)
    return OperationResponse(
        success=True,
        message=f"Invalidated {count} cache entries for {resource_name}",
        data={"count": count, "resource_name": resource_name}
    )


@cache_router.delete(
    "/resources/{resource_name}/{resource_id}",
    response_model=OperationResponse,
    summary="Invalidate a resource instance",
)
async def invalidate_resource_by_id(
    resource_name: str,
    resource_id: str,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Invalidate cache entries of one resource instance."""
    count = cache_manager.invalidate_resource_by_id(resource_name, resource_id)
    return OperationResponse(
        success=True,
        message=f"Invalidated {count} cache entries for {resource_name} {resource_id}",
        data={"count": count, "resource_name": resource_name, "resource_id": resource_id}
    )


@cache_router.post(
    "/clear",
    response_model=OperationResponse,
    summary="Clear the cache",
)
async def clear_cache(
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Remove every cache entry (no-op while the cache is disabled)."""
    size_before = cache_manager.size()
    cache_manager.clear()
    removed = size_before - cache_manager.size()
    return OperationResponse(
        success=True,
        message=f"Removed {removed} cache entries",
        data={"count": removed}
    )


@cache_router.put(
    "/enabled",
    response_model=OperationResponse,
    summary="Enable or disable the cache",
)
async def set_cache_enabled(
    request: SetEnabledRequest,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Toggle caching; existing entries are kept."""
    cache_manager.set_enabled(request.enabled)
    return OperationResponse(
        success=True,
        message=f"Cache {'enabled' if request.enabled else 'disabled'}",
        data={"enabled": request.enabled}
    )


@cache_router.put(
    "/ttl/default",
    response_model=OperationResponse,
    summary="Set the default TTL",
)
async def set_default_ttl(
    request: SetTTLRequest,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Set the default TTL used when no resource TTL applies."""
    cache_manager.set_default_ttl(request.ttl)
    return OperationResponse(
        success=True,
        message=f"Default cache TTL set to {request.ttl} seconds",
        data={"ttl": request.ttl}
    )


@cache_router.put(
    "/ttl/{resource_name}",
    response_model=OperationResponse,
    summary="Set a resource TTL",
)
async def set_resource_ttl(
    resource_name: str,
    request: SetTTLRequest,
    cache_manager: CacheManager = Depends(get_cache_manager)
) -> OperationResponse:
    """Set the TTL for one resource type."""
    cache_manager.set_resource_ttl(resource_name, request.ttl)
    return OperationResponse(
        success=True,
        message=f"Cache TTL for {resource_name} set to {request.ttl} seconds",
        data={"resource_name": resource_name, "ttl": request.ttl}
    )
