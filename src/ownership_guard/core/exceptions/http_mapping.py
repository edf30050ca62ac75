"""HTTP status code mapping for exceptions.

Every ownership-guard exception signals a server-side setup or usage fault,
so they all map to 5xx codes.
"""

from typing import Dict, Type

from .base import OwnershipGuardError
from .domain import (
    ConfigurationError,
    DescriptorNotRegisteredError,
    DuplicateRegistrationError,
    RegistrationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 500 Internal Server Error
    DescriptorNotRegisteredError: 500,
    ConfigurationError: 500,
    DuplicateRegistrationError: 500,
    RegistrationError: 500,

    # Default for OwnershipGuardError
    OwnershipGuardError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception, walking its class hierarchy."""
    for exception_class in type(exception).__mro__:
        if exception_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_class]
    return 500
