"""Invalid invalidation pattern exception.

ONLY pattern errors - raised when an invalidation pattern cannot be
compiled. This is a programming error at the call site, so it is raised
synchronously instead of silently matching nothing.
"""

from typing import Optional

from .....core.exceptions.base import MaasBridgeError


class InvalidPatternError(MaasBridgeError, ValueError):
    """Invalidation pattern compilation error."""
    
    def __init__(self, pattern: str, reason: str, error_code: Optional[str] = None):
        """Initialize pattern error.
        
        Args:
            pattern: The offending pattern text
            reason: Compiler message describing the failure
            error_code: Optional machine-readable error code
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid invalidation pattern '{pattern}': {reason}",
            error_code or "INVALID_PATTERN",
            {"pattern": pattern, "reason": reason},
        )
