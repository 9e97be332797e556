"""Cache service dependencies.

ONLY cache service dependencies - provides FastAPI dependency injection
for the cache manager owned by the application.
"""

from fastapi import Request

from ...application.services.cache_manager import CacheManager


def get_cache_manager(request: Request) -> CacheManager:
    """Get cache manager dependency.
    
    The manager is created once per application in ``create_app`` and stored
    on ``app.state``, so tests can inject an independent instance.
    """
    return request.app.state.cache_manager
