"""Base exceptions for maas-bridge.

This module defines the base exception hierarchy for the bridge.
All exceptions inherit from MaasBridgeError and include error codes and
details for API responses.
"""

from typing import Any, Dict, Optional


class MaasBridgeError(Exception):
    """Base exception for all maas-bridge errors.
    
    Carries structured error information for better debugging and API responses.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: MaasBridgeError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The bridge exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
