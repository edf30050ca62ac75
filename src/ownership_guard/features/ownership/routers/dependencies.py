"""FastAPI dependencies enforcing resource ownership.

``RequireOwnership`` runs before the route handler, resolves the resource id
from the path, reads identity claims placed on ``request.state.claims`` by the
authentication layer, and rejects the request unless the guard allows it.
"""

import logging
from collections.abc import Mapping
from typing import Hashable, Optional

from fastapi import Request, status

from ....config.constants import (
    APP_STATE_GUARD,
    DEFAULT_ROUTE_PARAM,
    REQUEST_STATE_CLAIMS,
    ResponseTitle,
)
from ....core.exceptions.domain import ConfigurationError, DescriptorNotRegisteredError
from ....core.naming import describe_resource_type
from ..entities.disposition import Disposition
from ..services.access_guard import AccessGuard
from ..utils.validation import validate_required_str, validate_resource_type
from .exception_handlers import OwnershipHTTPException

logger = logging.getLogger(__name__)

_REJECTION_TITLES = {
    Disposition.INVALID_ID: ResponseTitle.INVALID_ID,
    Disposition.NOT_FOUND: ResponseTitle.NOT_FOUND,
    Disposition.FORBIDDEN: ResponseTitle.FORBIDDEN,
}


def get_access_guard(request: Request) -> AccessGuard:
    """Get the application's access guard (usable as a dependency)."""
    guard = getattr(request.app.state, APP_STATE_GUARD, None)
    if guard is None:
        raise ConfigurationError(
            "Ownership guard is not configured; call setup_ownership_guard(app) at startup"
        )
    return guard


def get_claim(request: Request, claim_key: str) -> Optional[str]:
    """Read a claim from ``request.state.claims``; empty values count as missing."""
    claims = getattr(request.state, REQUEST_STATE_CLAIMS, None)
    if not isinstance(claims, Mapping):
        return None
    value = claims.get(claim_key)
    if value is None:
        return None
    value = str(value)
    return value or None


class RequireOwnership:
    """Dependency requiring the caller to own the resource named in the route.

    Tenant membership is enforced as well when the resource type was
    registered with a tenant field.

    Usage:
        @app.get("/documents/{id}", dependencies=[Depends(RequireOwnership(Document))])
    """

    def __init__(self, resource_type: Hashable, route_param: str = DEFAULT_ROUTE_PARAM):
        self.resource_type = validate_resource_type(resource_type)
        self.route_param = validate_required_str(route_param, "route_param")

    async def __call__(self, request: Request) -> Disposition:
        guard = get_access_guard(request)
        settings = guard.settings

        def reject(status_code: int, title: ResponseTitle) -> OwnershipHTTPException:
            return OwnershipHTTPException(
                status_code,
                title.value,
                structured=settings.use_structured_error_responses,
            )

        if self.route_param not in request.path_params:
            raise reject(status.HTTP_400_BAD_REQUEST, ResponseTitle.MISSING_ROUTE_ID)
        raw_id = request.path_params[self.route_param]
        raw_id = "" if raw_id is None else str(raw_id)
        if not raw_id.strip():
            raise reject(status.HTTP_400_BAD_REQUEST, ResponseTitle.BLANK_ROUTE_ID)

        user_id = get_claim(request, settings.user_id_claim_key)
        if user_id is None:
            raise reject(status.HTTP_401_UNAUTHORIZED, ResponseTitle.UNAUTHENTICATED)

        requires_tenant = guard.registry.requires_tenant(self.resource_type)
        tenant_id = None
        if requires_tenant:
            tenant_id = get_claim(request, settings.tenant_id_claim_key)
            if tenant_id is None:
                raise reject(status.HTTP_401_UNAUTHORIZED, ResponseTitle.TENANT_MISSING)

        try:
            if requires_tenant:
                disposition = await guard.require_owner_and_tenant(
                    self.resource_type, raw_id, user_id, tenant_id, request
                )
            else:
                disposition = await guard.require_owner(self.resource_type, raw_id, user_id, request)
        except DescriptorNotRegisteredError as e:
            logger.error(
                f"Ownership descriptor not registered for resource type "
                f"{describe_resource_type(e.resource_type)}: {e}"
            )
            raise reject(status.HTTP_500_INTERNAL_SERVER_ERROR, ResponseTitle.DESCRIPTOR_MISSING)

        if disposition.is_allowed:
            return disposition

        logger.info(
            f"Ownership check rejected {request.method} {request.url.path} "
            f"for user {user_id}: {disposition.value}"
        )
        raise reject(disposition.http_status, _REJECTION_TITLES[disposition])
