"""Registry of ownership descriptors keyed by resource type.

Each registration closes over its own query factory and field names and is
stored under a type-erased executor signature, so one mapping can hold
heterogeneous resource types. Registration happens once at startup; lookups
are lock-free reads for any number of concurrent requests.
"""

import logging
import threading
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, Union

from ....core.exceptions.domain import DescriptorNotRegisteredError, DuplicateRegistrationError
from ....core.naming import describe_resource_type
from ..entities.descriptor import OwnershipDescriptor
from ..entities.disposition import Disposition
from ..entities.protocols import (
    KeyParser,
    OwnershipCheckExecutor,
    OwnershipTenantCheckExecutor,
    QueryFactory,
)
from ..utils.keys import KEY_PARSE_ERRORS, resolve_key_parser
from ..utils.validation import validate_required_str, validate_resource_type

logger = logging.getLogger(__name__)

_UNPARSEABLE = object()


def _try_parse(parser: KeyParser, raw_id: str) -> Any:
    try:
        key = parser(raw_id)
    except KEY_PARSE_ERRORS:
        return _UNPARSEABLE
    return _UNPARSEABLE if key is None else key


class DescriptorRegistry:
    """Process-lifetime mapping from resource type to ownership executors."""

    def __init__(self):
        self._executors: Dict[Hashable, OwnershipCheckExecutor] = {}
        self._tenant_executors: Dict[Hashable, OwnershipTenantCheckExecutor] = {}
        self._descriptors: Dict[Hashable, OwnershipDescriptor] = {}
        self._write_lock = threading.Lock()

    def register(
        self,
        resource_type: Hashable,
        query_factory: QueryFactory,
        id_field: str,
        owner_field: str,
        tenant_field: Optional[str] = None,
    ) -> OwnershipDescriptor:
        """Register a descriptor for a resource type with string ids.

        With ``tenant_field`` an owner+tenant executor is registered as well.

        Raises:
            DuplicateRegistrationError: If ``resource_type`` is already registered
        """
        descriptor = self._build_descriptor(resource_type, query_factory, id_field, owner_field, tenant_field)

        async def executor(guard, context, resource_id: str, user_id: str) -> Disposition:
            return await guard.evaluate_owner(
                query_factory(context), resource_id, user_id, id_field, owner_field
            )

        tenant_executor = None
        if tenant_field is not None:
            async def tenant_executor(guard, context, resource_id: str, user_id: str, tenant_id: str) -> Disposition:
                return await guard.evaluate_owner_and_tenant(
                    query_factory(context), resource_id, user_id, tenant_id,
                    id_field, owner_field, tenant_field,
                )

        self._publish(descriptor, executor, tenant_executor)
        return descriptor

    def register_typed(
        self,
        resource_type: Hashable,
        query_factory: QueryFactory,
        id_field: str,
        owner_field: str,
        key_type: Union[type, Callable[[str], Any]],
        tenant_field: Optional[str] = None,
    ) -> OwnershipDescriptor:
        """Register a descriptor for a resource type with a typed key.

        The raw route id is parsed with ``key_type`` before any query runs; an
        unparseable id yields ``Disposition.INVALID_ID`` without touching the
        data source.

        Raises:
            DuplicateRegistrationError: If ``resource_type`` is already registered
        """
        parser = resolve_key_parser(key_type)
        descriptor = self._build_descriptor(
            resource_type, query_factory, id_field, owner_field, tenant_field, parser
        )

        async def executor(guard, context, raw_id: str, user_id: str) -> Disposition:
            key = _try_parse(parser, raw_id)
            if key is _UNPARSEABLE:
                return Disposition.INVALID_ID
            return await guard.evaluate_owner(
                query_factory(context), key, user_id, id_field, owner_field
            )

        tenant_executor = None
        if tenant_field is not None:
            async def tenant_executor(guard, context, raw_id: str, user_id: str, tenant_id: str) -> Disposition:
                key = _try_parse(parser, raw_id)
                if key is _UNPARSEABLE:
                    return Disposition.INVALID_ID
                return await guard.evaluate_owner_and_tenant(
                    query_factory(context), key, user_id, tenant_id,
                    id_field, owner_field, tenant_field,
                )

        self._publish(descriptor, executor, tenant_executor)
        return descriptor

    def try_get_executor(self, resource_type: Hashable) -> Optional[OwnershipCheckExecutor]:
        """Get the owner-only executor, or None when not registered."""
        return self._executors.get(resource_type)

    def try_get_tenant_executor(self, resource_type: Hashable) -> Optional[OwnershipTenantCheckExecutor]:
        """Get the owner+tenant executor, or None when no tenant field was registered."""
        return self._tenant_executors.get(resource_type)

    def get_executor(self, resource_type: Hashable) -> OwnershipCheckExecutor:
        """Get the owner-only executor.

        Raises:
            DescriptorNotRegisteredError: If the resource type is not registered
        """
        validate_resource_type(resource_type)
        executor = self._executors.get(resource_type)
        if executor is None:
            raise DescriptorNotRegisteredError(resource_type, tenant_aware=False)
        return executor

    def get_tenant_executor(self, resource_type: Hashable) -> OwnershipTenantCheckExecutor:
        """Get the owner+tenant executor.

        Raises:
            DescriptorNotRegisteredError: If no tenant-aware descriptor is registered
        """
        validate_resource_type(resource_type)
        executor = self._tenant_executors.get(resource_type)
        if executor is None:
            raise DescriptorNotRegisteredError(resource_type, tenant_aware=True)
        return executor

    def requires_tenant(self, resource_type: Hashable) -> bool:
        """Whether checks for this resource type must include the tenant."""
        return resource_type in self._tenant_executors

    def descriptors(self) -> Tuple[OwnershipDescriptor, ...]:
        """Snapshot of registered descriptors, in registration order."""
        return tuple(self._descriptors.values())

    def __contains__(self, resource_type: Hashable) -> bool:
        return resource_type in self._executors

    def __len__(self) -> int:
        return len(self._executors)

    def _build_descriptor(
        self,
        resource_type: Hashable,
        query_factory: QueryFactory,
        id_field: str,
        owner_field: str,
        tenant_field: Optional[str],
        key_parser: Optional[KeyParser] = None,
    ) -> OwnershipDescriptor:
        validate_resource_type(resource_type)
        if not callable(query_factory):
            raise ValueError("query_factory must be callable")
        validate_required_str(id_field, "id_field")
        validate_required_str(owner_field, "owner_field")
        if tenant_field is not None:
            validate_required_str(tenant_field, "tenant_field")
        return OwnershipDescriptor(
            resource_type=resource_type,
            query_factory=query_factory,
            id_field=id_field,
            owner_field=owner_field,
            tenant_field=tenant_field,
            key_parser=key_parser,
        )

    def _publish(
        self,
        descriptor: OwnershipDescriptor,
        executor: OwnershipCheckExecutor,
        tenant_executor: Optional[OwnershipTenantCheckExecutor],
    ) -> None:
        resource_type = descriptor.resource_type
        with self._write_lock:
            if resource_type in self._executors:
                raise DuplicateRegistrationError(resource_type)
            self._executors[resource_type] = executor
            if tenant_executor is not None:
                self._tenant_executors[resource_type] = tenant_executor
            self._descriptors[resource_type] = descriptor

        logger.info(
            f"Registered ownership descriptor for {describe_resource_type(resource_type)} "
            f"(tenant_aware={descriptor.tenant_aware}, typed_key={descriptor.typed_key})"
        )
