"""Ownership repositories: descriptor registry and data source adapters."""

from .asyncpg_query import AsyncPGOwnershipQuery
from .descriptor_registry import DescriptorRegistry
from .memory_query import InMemoryOwnershipQuery, read_field

__all__ = [
    "AsyncPGOwnershipQuery",
    "DescriptorRegistry",
    "InMemoryOwnershipQuery",
    "read_field",
]
