"""Domain-specific exceptions for ownership-guard.

These are programming or setup mistakes, never access decisions: access
decisions are returned as ``Disposition`` values.
"""

from typing import Hashable

from ..naming import describe_resource_type
from .base import OwnershipGuardError


# Configuration Errors
class ConfigurationError(OwnershipGuardError):
    """Raised when the guard is used with incomplete setup."""
    pass


class DescriptorNotRegisteredError(ConfigurationError):
    """Raised when no ownership descriptor is registered for a resource type."""

    def __init__(self, resource_type: Hashable, tenant_aware: bool):
        type_name = describe_resource_type(resource_type)
        if tenant_aware:
            message = f"Tenant ownership descriptor not registered for resource type: {type_name}."
        else:
            message = f"Ownership descriptor not registered for resource type: {type_name}."
        super().__init__(
            message,
            details={"resource_type": type_name, "tenant_aware": tenant_aware},
        )
        self.resource_type = resource_type
        self.tenant_aware = tenant_aware


# Registration Errors
class RegistrationError(OwnershipGuardError):
    """Raised when a descriptor cannot be registered."""
    pass


class DuplicateRegistrationError(RegistrationError):
    """Raised when a resource type is registered more than once."""

    def __init__(self, resource_type: Hashable):
        type_name = describe_resource_type(resource_type)
        super().__init__(
            f"Ownership descriptor already registered for resource type: {type_name}.",
            details={"resource_type": type_name},
        )
        self.resource_type = resource_type
