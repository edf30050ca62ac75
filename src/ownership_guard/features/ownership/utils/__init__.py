"""Ownership utilities: validation, key parsing and SQL templates."""

from .keys import (
    BUILTIN_KEY_PARSERS,
    KEY_PARSE_ERRORS,
    parse_int_key,
    parse_uuid_key,
    resolve_key_parser,
)
from .validation import (
    validate_identifier,
    validate_required,
    validate_required_str,
    validate_resource_id,
    validate_resource_type,
)

__all__ = [
    "BUILTIN_KEY_PARSERS",
    "KEY_PARSE_ERRORS",
    "parse_int_key",
    "parse_uuid_key",
    "resolve_key_parser",
    "validate_identifier",
    "validate_required",
    "validate_required_str",
    "validate_resource_id",
    "validate_resource_type",
]
