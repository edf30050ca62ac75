"""Ownership services."""

from .access_guard import AccessGuard

__all__ = ["AccessGuard"]
