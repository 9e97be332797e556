"""Cache domain exceptions."""

from .invalid_pattern import InvalidPatternError

__all__ = [
    "InvalidPatternError",
]
