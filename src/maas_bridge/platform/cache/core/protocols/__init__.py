"""Cache protocol interfaces.

Core contracts following maximum separation - one protocol per file.
"""

from .cache_strategy import CacheStrategy

__all__ = [
    "CacheStrategy",
]
