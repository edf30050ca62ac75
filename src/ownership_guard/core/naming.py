"""Helpers for rendering resource-type tokens in messages and logs."""

from typing import Hashable


def describe_resource_type(resource_type: Hashable) -> str:
    """Render a resource-type token for humans.

    Classes render as ``module.QualName``; any other token renders with ``str()``.
    """
    if resource_type is None:
        return "<unknown>"
    if isinstance(resource_type, type):
        return f"{resource_type.__module__}.{resource_type.__qualname__}"
    return str(resource_type)
