"""Ownership descriptor registered once per resource type."""

from dataclasses import dataclass
from typing import Hashable, Optional

from .protocols import KeyParser, QueryFactory


@dataclass(frozen=True)
class OwnershipDescriptor:
    """Data source factory plus field accessors for one resource type.

    Created at startup and immutable afterwards.
    """

    resource_type: Hashable
    query_factory: QueryFactory
    id_field: str
    owner_field: str
    tenant_field: Optional[str] = None
    key_parser: Optional[KeyParser] = None

    @property
    def tenant_aware(self) -> bool:
        return self.tenant_field is not None

    @property
    def typed_key(self) -> bool:
        return self.key_parser is not None
