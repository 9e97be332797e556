"""Cache API dependencies."""

from .cache_dependencies import get_cache_manager

__all__ = ["get_cache_manager"]
