"""Constants for ownership-guard configuration."""

from enum import Enum


# Claim keys read from the authenticated principal
DEFAULT_USER_ID_CLAIM_KEY = "sub"
DEFAULT_TENANT_ID_CLAIM_KEY = "tenant_id"

# Environment variable prefix for OwnershipGuardSettings
SETTINGS_ENV_PREFIX = "OWNERSHIP_GUARD_"

# Default route parameter holding the resource id
DEFAULT_ROUTE_PARAM = "id"

# Keys used on FastAPI ``app.state`` / ``request.state``
APP_STATE_SETTINGS = "ownership_guard_settings"
APP_STATE_REGISTRY = "ownership_guard_registry"
APP_STATE_GUARD = "ownership_guard"
REQUEST_STATE_CLAIMS = "claims"

PROBLEM_CONTENT_TYPE = "application/problem+json"


class ResponseTitle(str, Enum):
    """Titles used for error responses produced by the FastAPI integration."""
    MISSING_ROUTE_ID = "Missing resource id in route."
    BLANK_ROUTE_ID = "Invalid resource id in route."
    UNAUTHENTICATED = "User not authenticated."
    TENANT_MISSING = "Tenant not specified."
    DESCRIPTOR_MISSING = "Ownership descriptor not registered for this resource type."
    INVALID_ID = "Invalid resource id."
    NOT_FOUND = "Not found."
    FORBIDDEN = "Forbidden."
