"""Ownership entities: dispositions, lookups, descriptors and protocols."""

from .descriptor import OwnershipDescriptor
from .disposition import DISPOSITION_STATUS_MAP, Disposition, get_disposition_status_code
from .lookup import OwnershipLookup
from .protocols import (
    KeyParser,
    OwnershipCheckExecutor,
    OwnershipQuery,
    OwnershipTenantCheckExecutor,
    QueryFactory,
)

__all__ = [
    "OwnershipDescriptor",
    "DISPOSITION_STATUS_MAP",
    "Disposition",
    "get_disposition_status_code",
    "OwnershipLookup",
    "KeyParser",
    "OwnershipCheckExecutor",
    "OwnershipQuery",
    "OwnershipTenantCheckExecutor",
    "QueryFactory",
]
