"""Resource API dependencies."""

from fastapi import Request

from ..registry import ResourceRegistry


def get_resource_registry(request: Request) -> ResourceRegistry:
    """Get the resource registry stored on the application."""
    return request.app.state.resource_registry
