"""Ownership-Guard - ownership and tenant access checks for web request handlers.

Answers one question before a handler runs: does the authenticated identity
own (and share a tenant with) the resource named by the route? It closes the
insecure-direct-object-reference gap left by handlers that forget to check.

Logging is not configured on import; call ``setup_logging()`` at startup.
"""

from .__version__ import __version__

from .config import (
    OwnershipGuardSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    OwnershipGuardError,
    ConfigurationError,
    DescriptorNotRegisteredError,
    RegistrationError,
    DuplicateRegistrationError,
    create_error_response,
    get_http_status_code,
)

from .features.ownership import (
    # Entities
    Disposition,
    OwnershipDescriptor,
    OwnershipLookup,
    OwnershipQuery,
    DISPOSITION_STATUS_MAP,
    get_disposition_status_code,

    # Registry and data sources
    DescriptorRegistry,
    InMemoryOwnershipQuery,
    AsyncPGOwnershipQuery,

    # Guard
    AccessGuard,

    # FastAPI integration
    RequireOwnership,
    OwnershipHTTPException,
    get_access_guard,
    setup_ownership_guard,
)

__all__ = [
    "__version__",
    "OwnershipGuardSettings",
    "get_settings",
    "setup_logging",
    "OwnershipGuardError",
    "ConfigurationError",
    "DescriptorNotRegisteredError",
    "RegistrationError",
    "DuplicateRegistrationError",
    "create_error_response",
    "get_http_status_code",
    "Disposition",
    "OwnershipDescriptor",
    "OwnershipLookup",
    "OwnershipQuery",
    "DISPOSITION_STATUS_MAP",
    "get_disposition_status_code",
    "DescriptorRegistry",
    "InMemoryOwnershipQuery",
    "AsyncPGOwnershipQuery",
    "AccessGuard",
    "RequireOwnership",
    "OwnershipHTTPException",
    "get_access_guard",
    "setup_ownership_guard",
]
