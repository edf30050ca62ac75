"""In-memory ownership data source.

Evaluates ownership lookups against a re-iterable collection of objects or
mappings. Rows are read live, so later changes to the backing list are
visible to subsequent lookups.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from ..entities.lookup import OwnershipLookup
from ..entities.protocols import OwnershipQuery
from ..utils.validation import validate_required, validate_required_str

logger = logging.getLogger(__name__)

_MISSING = object()


def read_field(row: Any, field_name: str) -> Any:
    """Read a field from a mapping key or an attribute."""
    if isinstance(row, Mapping):
        return row.get(field_name, _MISSING)
    return getattr(row, field_name, _MISSING)


def _field_equals(row: Any, field_name: str, expected: Any) -> bool:
    value = read_field(row, field_name)
    return value is not _MISSING and value is not None and value == expected


class InMemoryOwnershipQuery(OwnershipQuery):
    """Ownership data source over an in-process collection."""

    def __init__(self, rows: Iterable[Any], filters: Tuple[Tuple[str, Any], ...] = ()):
        validate_required(rows, "rows")
        if iter(rows) is rows:
            raise ValueError("rows must be a re-iterable collection, not a one-shot iterator")
        self._rows = rows
        self._filters = filters
        self.lookups_executed = 0

    @property
    def filters(self) -> Tuple[Tuple[str, Any], ...]:
        return self._filters

    def where_equals(self, field_name: str, value: Any) -> "InMemoryOwnershipQuery":
        """Return a new source restricted to rows where ``field_name == value``."""
        validate_required_str(field_name, "field_name")
        return InMemoryOwnershipQuery(self._rows, self._filters + ((field_name, value),))

    def where_owned_by(self, user_id: str, owner_field: str) -> "InMemoryOwnershipQuery":
        """Return a new source restricted to rows owned by ``user_id``."""
        return self.where_equals(owner_field, user_id)

    def where_tenant(self, tenant_id: str, tenant_field: str) -> "InMemoryOwnershipQuery":
        """Return a new source restricted to rows of ``tenant_id``."""
        return self.where_equals(tenant_field, tenant_id)

    def _scoped_rows(self):
        for row in self._rows:
            if all(_field_equals(row, name, expected) for name, expected in self._filters):
                yield row

    async def fetch_all(self) -> List[Any]:
        """Materialise the rows visible through the current scope."""
        return list(self._scoped_rows())

    async def first_match(self, lookup: OwnershipLookup) -> Optional[bool]:
        self.lookups_executed += 1
        for row in self._scoped_rows():
            if _field_equals(row, lookup.id_field, lookup.id_value):
                return all(
                    _field_equals(row, field_name, expected)
                    for field_name, expected in lookup.conditions
                )
        return None
