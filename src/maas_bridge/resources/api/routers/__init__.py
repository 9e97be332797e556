"""Resource API routers."""

from .resource_router import resource_router

__all__ = ["resource_router"]
