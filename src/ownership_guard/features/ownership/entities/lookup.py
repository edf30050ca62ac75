"""Value objects describing the single query an ownership check issues."""

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class OwnershipLookup:
    """Point lookup by id with an equals-AND projection.

    A data source answering this lookup selects the first row whose ``id_field``
    equals ``id_value`` and projects whether every ``(field, expected)`` pair in
    ``conditions`` holds for that row.
    """

    id_field: str
    id_value: Any
    conditions: Tuple[Tuple[str, Any], ...]

    def __post_init__(self):
        if not self.id_field:
            raise ValueError("id_field cannot be empty")
        if not self.conditions:
            raise ValueError("conditions cannot be empty")
        for field_name, _ in self.conditions:
            if not field_name:
                raise ValueError("condition field cannot be empty")

    @classmethod
    def owner(cls, id_field: str, id_value: Any, owner_field: str, user_id: str) -> "OwnershipLookup":
        """Lookup projecting ``owner_field == user_id``."""
        return cls(id_field, id_value, ((owner_field, user_id),))

    @classmethod
    def owner_and_tenant(
        cls,
        id_field: str,
        id_value: Any,
        owner_field: str,
        user_id: str,
        tenant_field: str,
        tenant_id: str,
    ) -> "OwnershipLookup":
        """Lookup projecting ``owner_field == user_id AND tenant_field == tenant_id``."""
        return cls(id_field, id_value, ((owner_field, user_id), (tenant_field, tenant_id)))

    @property
    def fields(self) -> Tuple[str, ...]:
        """Names of the projected fields, in order."""
        return tuple(field_name for field_name, _ in self.conditions)

    @property
    def expected_values(self) -> Tuple[Any, ...]:
        """Expected values of the projected fields, in order."""
        return tuple(expected for _, expected in self.conditions)
