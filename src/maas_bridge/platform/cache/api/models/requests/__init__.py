"""Cache API request models."""

from .invalidate_request import InvalidateRequest
from .cache_settings_request import SetEnabledRequest, SetTTLRequest

__all__ = [
    "InvalidateRequest",
    "SetEnabledRequest",
    "SetTTLRequest",
]
