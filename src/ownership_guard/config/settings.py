"""
Settings for the ownership guard.

Values are read from the environment (prefix ``OWNERSHIP_GUARD_``) or a local
``.env`` file, so services can flip existence-hiding or claim keys without
code changes.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_TENANT_ID_CLAIM_KEY,
    DEFAULT_USER_ID_CLAIM_KEY,
    SETTINGS_ENV_PREFIX,
)


class OwnershipGuardSettings(BaseSettings):
    """Configuration options for ownership and tenant checks."""

    model_config = SettingsConfigDict(
        env_prefix=SETTINGS_ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_id_claim_key: str = Field(
        default=DEFAULT_USER_ID_CLAIM_KEY,
        description="Claim holding the current user id",
    )
    tenant_id_claim_key: str = Field(
        default=DEFAULT_TENANT_ID_CLAIM_KEY,
        description="Claim holding the current tenant id when tenant checks are registered",
    )
    hide_existence_on_forbidden: bool = Field(
        default=False,
        description="Report 'not found' instead of 'forbidden' for resources the caller may not access",
    )
    use_structured_error_responses: bool = Field(
        default=True,
        description="Render error responses as RFC 7807 problem documents instead of bare status codes",
    )


@lru_cache()
def get_settings() -> OwnershipGuardSettings:
    """Get cached settings instance."""
    return OwnershipGuardSettings()
