"""Outcome of a single ownership decision."""

from enum import Enum
from typing import Dict


class Disposition(str, Enum):
    """Result of an ownership (and optional tenant) check.

    Dispositions are access decisions, not errors: the guard returns them and
    never raises them.
    """

    # Identity owns (and, when checked, shares tenant with) the resource
    SUCCESS = "success"

    # Resource exists but identity fails the owner/tenant constraint (hiding disabled)
    FORBIDDEN = "forbidden"

    # Resource does not exist, or exists but is hidden from the caller
    NOT_FOUND = "not_found"

    # Route identifier could not be parsed into the resource's key type
    INVALID_ID = "invalid_id"

    @property
    def is_allowed(self) -> bool:
        """Whether the caller may proceed."""
        return self is Disposition.SUCCESS

    @property
    def http_status(self) -> int:
        """Conventional HTTP status code for this disposition."""
        return DISPOSITION_STATUS_MAP[self]


# Recommended mapping for HTTP integrations; not enforced by the guard
DISPOSITION_STATUS_MAP: Dict[Disposition, int] = {
    Disposition.SUCCESS: 200,
    Disposition.INVALID_ID: 400,
    Disposition.FORBIDDEN: 403,
    Disposition.NOT_FOUND: 404,
}


def get_disposition_status_code(disposition: Disposition) -> int:
    """Get the conventional HTTP status code for an access disposition."""
    return DISPOSITION_STATUS_MAP[disposition]
