"""Parsing of raw route strings into typed resource keys."""

import re
from typing import Any, Callable, Dict, Union
from uuid import UUID

from ..entities.protocols import KeyParser

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# Any ordinary parser failure marks the id unparseable; cancellation still propagates
KEY_PARSE_ERRORS = (Exception,)


def parse_uuid_key(raw: str) -> UUID:
    """Parse a UUID key in any form ``uuid.UUID`` accepts."""
    return UUID(raw.strip())


def parse_int_key(raw: str) -> int:
    """Parse an optionally signed decimal integer key."""
    if not _INTEGER_PATTERN.match(raw):
        raise ValueError(f"invalid integer key: {raw!r}")
    return int(raw)


BUILTIN_KEY_PARSERS: Dict[type, KeyParser] = {
    UUID: parse_uuid_key,
    int: parse_int_key,
}


def resolve_key_parser(key_type: Union[type, Callable[[str], Any]]) -> KeyParser:
    """Resolve a key type or parser callable to a parser.

    ``UUID`` and ``int`` use strict built-in parsers; any other class or
    callable is called with the raw string.
    """
    if key_type is None:
        raise ValueError("key_type is required")
    if key_type in BUILTIN_KEY_PARSERS:
        return BUILTIN_KEY_PARSERS[key_type]
    if not callable(key_type):
        raise ValueError(f"key_type must be a type or callable, got {key_type!r}")
    return key_type
