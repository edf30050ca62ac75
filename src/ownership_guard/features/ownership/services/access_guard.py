"""Access guard: ownership and tenant checks against a backing data source.

Every decision issues at most one read: a point lookup by id projecting a
tri-state (absent / owned / not owned), which is then reduced to a
``Disposition``. The guard keeps no per-request state and never writes.
"""

import logging
from typing import Any, Hashable, Optional

from ....config.settings import OwnershipGuardSettings, get_settings
from ..entities.disposition import Disposition
from ..entities.lookup import OwnershipLookup
from ..entities.protocols import OwnershipQuery
from ..repositories.descriptor_registry import DescriptorRegistry
from ..utils.validation import (
    validate_required,
    validate_required_str,
    validate_resource_id,
    validate_resource_type,
)

logger = logging.getLogger(__name__)


class AccessGuard:
    """Performs ownership checks to prevent insecure direct object references."""

    def __init__(
        self,
        settings: Optional[OwnershipGuardSettings] = None,
        registry: Optional[DescriptorRegistry] = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else DescriptorRegistry()

    @property
    def hide_existence(self) -> bool:
        return self.settings.hide_existence_on_forbidden

    async def is_owner(
        self,
        query: OwnershipQuery,
        resource_id: Any,
        user_id: str,
        id_field: str,
        owner_field: str,
    ) -> bool:
        """Check whether ``user_id`` owns the resource identified by ``resource_id``."""
        disposition = await self.evaluate_owner(query, resource_id, user_id, id_field, owner_field)
        return disposition is Disposition.SUCCESS

    async def evaluate_owner(
        self,
        query: OwnershipQuery,
        resource_id: Any,
        user_id: str,
        id_field: str,
        owner_field: str,
    ) -> Disposition:
        """Require that ``user_id`` owns the resource.

        ``resource_id`` is compared to ``id_field`` as given: a string for
        string-keyed resources, or an already parsed typed key.

        Returns:
            SUCCESS, FORBIDDEN, or NOT_FOUND (also for FORBIDDEN in hide mode)

        Raises:
            ValueError: If a required argument is missing or empty
        """
        validate_required(query, "query")
        validate_required_str(id_field, "id_field")
        validate_required_str(owner_field, "owner_field")
        validate_resource_id(resource_id)
        validate_required_str(user_id, "user_id")

        lookup = OwnershipLookup.owner(id_field, resource_id, owner_field, user_id)
        return self._reduce(await query.first_match(lookup), lookup)

    async def evaluate_owner_and_tenant(
        self,
        query: OwnershipQuery,
        resource_id: Any,
        user_id: str,
        tenant_id: str,
        id_field: str,
        owner_field: str,
        tenant_field: str,
    ) -> Disposition:
        """Require that ``user_id`` owns the resource and it belongs to ``tenant_id``.

        Owner and tenant mismatches are reported identically.

        Raises:
            ValueError: If a required argument is missing or empty
        """
        validate_required(query, "query")
        validate_required_str(id_field, "id_field")
        validate_required_str(owner_field, "owner_field")
        validate_required_str(tenant_field, "tenant_field")
        validate_resource_id(resource_id)
        validate_required_str(user_id, "user_id")
        validate_required_str(tenant_id, "tenant_id")

        lookup = OwnershipLookup.owner_and_tenant(
            id_field, resource_id, owner_field, user_id, tenant_field, tenant_id
        )
        return self._reduce(await query.first_match(lookup), lookup)

    async def require_owner(
        self,
        resource_type: Hashable,
        resource_id: str,
        user_id: str,
        context: Any,
    ) -> Disposition:
        """Require ownership for a registered resource type.

        ``context`` is the per-request context handed to the descriptor's
        query factory (a Starlette ``Request`` in the FastAPI integration).

        Raises:
            ValueError: If a required argument is missing or empty
            DescriptorNotRegisteredError: If the resource type is not registered
        """
        validate_resource_type(resource_type)
        validate_required(context, "context")
        validate_required_str(resource_id, "resource_id")
        validate_required_str(user_id, "user_id")

        executor = self.registry.get_executor(resource_type)
        return await executor(self, context, resource_id, user_id)

    async def require_owner_and_tenant(
        self,
        resource_type: Hashable,
        resource_id: str,
        user_id: str,
        tenant_id: str,
        context: Any,
    ) -> Disposition:
        """Require ownership and tenant membership for a registered resource type.

        Raises:
            ValueError: If a required argument is missing or empty
            DescriptorNotRegisteredError: If no tenant-aware descriptor is registered
        """
        validate_resource_type(resource_type)
        validate_required(context, "context")
        validate_required_str(resource_id, "resource_id")
        validate_required_str(user_id, "user_id")
        validate_required_str(tenant_id, "tenant_id")

        executor = self.registry.get_tenant_executor(resource_type)
        return await executor(self, context, resource_id, user_id, tenant_id)

    async def check(
        self,
        resource_type: Hashable,
        resource_id: str,
        user_id: str,
        context: Any,
        tenant_id: Optional[str] = None,
    ) -> Disposition:
        """Run the tenant check when one is registered, the owner check otherwise."""
        if self.registry.requires_tenant(resource_type):
            return await self.require_owner_and_tenant(resource_type, resource_id, user_id, tenant_id, context)
        return await self.require_owner(resource_type, resource_id, user_id, context)

    def _reduce(self, allowed: Optional[bool], lookup: OwnershipLookup) -> Disposition:
        if allowed is None:
            disposition = Disposition.NOT_FOUND
        elif allowed:
            disposition = Disposition.SUCCESS
        elif self.hide_existence:
            disposition = Disposition.NOT_FOUND
        else:
            disposition = Disposition.FORBIDDEN

        logger.debug(
            f"Ownership check on {lookup.id_field}={lookup.id_value!r} "
            f"over {', '.join(lookup.fields)}: {disposition.value}"
        )
        return disposition
