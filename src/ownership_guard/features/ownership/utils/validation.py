"""Argument validation shared by the guard, registry and data sources."""

import re
from typing import Any

# Safe SQL identifier: schema, table or column name
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_required_str(value: Any, name: str) -> str:
    """Ensure a required string argument is present and non-empty.

    Raises:
        ValueError: If the value is missing or empty
    """
    if value is None:
        raise ValueError(f"{name} is required")
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    if not value:
        raise ValueError(f"{name} cannot be empty")
    return value


def validate_resource_id(value: Any, name: str = "resource_id") -> Any:
    """Ensure a resource id is present.

    String ids must be non-empty; typed keys (UUID, int, ...) must be non-None.
    """
    if isinstance(value, str):
        return validate_required_str(value, name)
    if value is None:
        raise ValueError(f"{name} is required")
    return value


def validate_resource_type(value: Any, name: str = "resource_type") -> Any:
    """Ensure a resource-type token is present; string tokens must be non-empty."""
    if isinstance(value, str):
        return validate_required_str(value, name)
    return validate_required(value, name)


def validate_required(value: Any, name: str) -> Any:
    """Ensure a required non-string argument is present."""
    if value is None:
        raise ValueError(f"{name} is required")
    return value


def validate_identifier(identifier: str, kind: str = "identifier") -> str:
    """Validate a SQL identifier to prevent injection.

    Raises:
        ValueError: If the identifier is not a plain SQL name
    """
    if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.match(identifier):
        raise ValueError(f"Invalid {kind}: {identifier!r}")
    return identifier
