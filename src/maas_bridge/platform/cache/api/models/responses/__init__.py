"""Cache API response models."""

from .operation_response import OperationResponse
from .cache_stats_response import CacheStatsResponse

__all__ = [
    "OperationResponse",
    "CacheStatsResponse",
]
