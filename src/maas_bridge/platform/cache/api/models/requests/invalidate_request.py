"""Invalidate cache request model.

ONLY invalidation requests - validates pattern-based cache invalidation.
"""

from typing import Literal

from pydantic import BaseModel, Field

from ....core.value_objects.invalidation_pattern import InvalidationPattern


class InvalidateRequest(BaseModel):
    """Request model for invalidating cache entries by pattern."""
    
    pattern: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Invalidation pattern (literal substring, prefix, or regex)"
    )
    
    pattern_type: Literal["literal", "prefix", "regex"] = Field(
        default="literal",
        description="Type of pattern matching"
    )
    
    def to_pattern(self) -> InvalidationPattern:
        """Build the invalidation pattern; regex errors raise InvalidPatternError."""
        if self.pattern_type == "regex":
            return InvalidationPattern.regex(self.pattern)
        if self.pattern_type == "prefix":
            return InvalidationPattern.prefix(self.pattern)
        return InvalidationPattern.literal(self.pattern)
