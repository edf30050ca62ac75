"""Protocol interfaces for ownership checks.

Defines the contract the guard needs from a backing data source and the
type-erased signatures of the executors stored in the descriptor registry.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from .disposition import Disposition
from .lookup import OwnershipLookup

if TYPE_CHECKING:
    from ..services.access_guard import AccessGuard


@runtime_checkable
class OwnershipQuery(Protocol):
    """Protocol for a filterable, projectable data source.

    Implementations run the lookup as a single read and return:
    ``None`` when no row matches the id, ``True`` when every condition holds,
    ``False`` otherwise. Cancellation of the awaiting task must propagate.
    """

    @abstractmethod
    async def first_match(self, lookup: OwnershipLookup) -> Optional[bool]:
        """Fetch the tri-state ownership projection for the first matching row."""
        ...


# Produces a request-scoped data source from the per-request context
QueryFactory = Callable[[Any], OwnershipQuery]

# Parses a raw route string into a resource's native key type
KeyParser = Callable[[str], Any]

# (guard, context, raw_resource_id, user_id) -> Disposition
OwnershipCheckExecutor = Callable[["AccessGuard", Any, str, str], Awaitable[Disposition]]

# (guard, context, raw_resource_id, user_id, tenant_id) -> Disposition
OwnershipTenantCheckExecutor = Callable[["AccessGuard", Any, str, str, str], Awaitable[Disposition]]
