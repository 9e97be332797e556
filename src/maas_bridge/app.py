"""MAAS bridge application.

FastAPI application exposing MAAS resources through the response cache,
plus the cache administration API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config.logging_config import setup_logging
from .config.settings import BridgeSettings, get_settings
from .platform.cache.api.routers import cache_router
from .platform.cache.application.services.cache_manager import CacheManager
from .platform.cache.module import create_cache_manager
from .resources.api.routers import resource_router
from .resources.protocols import MaasClient
from .resources.registry import create_resource_registry

logger = logging.getLogger(__name__)


def create_app(
    client: MaasClient,
    settings: Optional[BridgeSettings] = None,
    cache_manager: Optional[CacheManager] = None
) -> FastAPI:
    """Create the bridge application.
    
    Configures logging from the environment (see ``setup_logging``).
    
    Args:
        client: Upstream MAAS client
        settings: Settings (defaults to get_settings())
        cache_manager: Cache manager (built from settings when omitted);
            the application disposes it on shutdown
        
    Returns:
        Configured FastAPI application
    """
    setup_logging()
    settings = settings or get_settings()
    cache_manager = cache_manager or create_cache_manager(settings, autostart=False)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"Starting {settings.app_name} {settings.app_version}")
        if cache_manager.start():
            logger.info("Cache sweep started")
        
        yield
        
        # Shutdown
        logger.info(f"Shutting down {settings.app_name}")
        cache_manager.dispose()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Read-only MAAS resources served through a response cache",
        lifespan=lifespan,
    )
    
    app.state.settings = settings
    app.state.cache_manager = cache_manager
    app.state.resource_registry = create_resource_registry(client, cache_manager)
    
    app.include_router(resource_router)
    app.include_router(cache_router)
    
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Basic health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "cache_enabled": cache_manager.is_enabled(),
        }
    
    return app
