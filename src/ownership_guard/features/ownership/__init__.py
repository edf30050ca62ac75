"""Ownership feature: descriptor registry, access guard and FastAPI integration."""

from .entities import (
    DISPOSITION_STATUS_MAP,
    Disposition,
    OwnershipDescriptor,
    OwnershipLookup,
    OwnershipQuery,
    get_disposition_status_code,
)
from .repositories import AsyncPGOwnershipQuery, DescriptorRegistry, InMemoryOwnershipQuery
from .routers import (
    OwnershipHTTPException,
    RequireOwnership,
    get_access_guard,
    setup_ownership_guard,
)
from .services import AccessGuard

__all__ = [
    "DISPOSITION_STATUS_MAP",
    "Disposition",
    "OwnershipDescriptor",
    "OwnershipLookup",
    "OwnershipQuery",
    "get_disposition_status_code",
    "AsyncPGOwnershipQuery",
    "DescriptorRegistry",
    "InMemoryOwnershipQuery",
    "OwnershipHTTPException",
    "RequireOwnership",
    "get_access_guard",
    "setup_ownership_guard",
    "AccessGuard",
]
