"""FastAPI integration for ownership checks."""

from .dependencies import RequireOwnership, get_access_guard, get_claim
from .exception_handlers import (
    OwnershipHTTPException,
    ownership_exception_handler,
    register_exception_handlers,
)
from .integration import setup_ownership_guard

__all__ = [
    "RequireOwnership",
    "get_access_guard",
    "get_claim",
    "OwnershipHTTPException",
    "ownership_exception_handler",
    "register_exception_handlers",
    "setup_ownership_guard",
]
