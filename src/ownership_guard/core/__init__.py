"""Core building blocks shared by ownership-guard features."""

from .naming import describe_resource_type

__all__ = ["describe_resource_type"]
