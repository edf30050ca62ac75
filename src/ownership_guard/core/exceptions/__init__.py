"""Exception hierarchy for ownership-guard."""

from .base import OwnershipGuardError, create_error_response
from .domain import (
    ConfigurationError,
    DescriptorNotRegisteredError,
    DuplicateRegistrationError,
    RegistrationError,
)
from .http_mapping import (
    HTTP_STATUS_MAP,
    get_http_status_code,
)

__all__ = [
    "OwnershipGuardError",
    "create_error_response",
    "ConfigurationError",
    "DescriptorNotRegisteredError",
    "DuplicateRegistrationError",
    "RegistrationError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
