"""Base exceptions for ownership-guard.

All library exceptions inherit from OwnershipGuardError and carry an error
code and structured details so API layers can render them consistently.
"""

from typing import Any, Dict, Optional


class OwnershipGuardError(Exception):
    """Base exception for all ownership-guard errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
    ):
        super().__init__(message, *args)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: OwnershipGuardError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The ownership-guard exception

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
