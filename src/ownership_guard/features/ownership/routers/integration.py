"""Application wiring for the ownership guard."""

import logging
from typing import Optional

from fastapi import FastAPI

from ....config.constants import APP_STATE_GUARD, APP_STATE_REGISTRY, APP_STATE_SETTINGS
from ....config.settings import OwnershipGuardSettings, get_settings
from ..repositories.descriptor_registry import DescriptorRegistry
from ..services.access_guard import AccessGuard
from .exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def setup_ownership_guard(
    app: FastAPI,
    settings: Optional[OwnershipGuardSettings] = None,
    registry: Optional[DescriptorRegistry] = None,
) -> DescriptorRegistry:
    """Attach settings, registry and guard to ``app.state`` and register handlers.

    Returns the registry so descriptors can be registered before serving traffic.
    """
    settings = settings or get_settings()
    registry = registry if registry is not None else DescriptorRegistry()

    setattr(app.state, APP_STATE_SETTINGS, settings)
    setattr(app.state, APP_STATE_REGISTRY, registry)
    setattr(app.state, APP_STATE_GUARD, AccessGuard(settings, registry))
    register_exception_handlers(app)

    logger.debug(
        f"Ownership guard configured (hide_existence={settings.hide_existence_on_forbidden}, "
        f"structured_errors={settings.use_structured_error_responses})"
    )
    return registry
