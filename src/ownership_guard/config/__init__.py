"""Configuration module for ownership-guard."""

from .constants import (
    DEFAULT_ROUTE_PARAM,
    DEFAULT_TENANT_ID_CLAIM_KEY,
    DEFAULT_USER_ID_CLAIM_KEY,
    ResponseTitle,
)
from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogVerbosity,
    setup_logging,
)
from .settings import OwnershipGuardSettings, get_settings

__all__ = [
    "DEFAULT_ROUTE_PARAM",
    "DEFAULT_TENANT_ID_CLAIM_KEY",
    "DEFAULT_USER_ID_CLAIM_KEY",
    "ResponseTitle",
    "LogFormat",
    "LoggingConfig",
    "LogVerbosity",
    "setup_logging",
    "OwnershipGuardSettings",
    "get_settings",
]
