"""
Configuration management for the Canary Storage API.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from canary_storage.security.credentials import AccountCredentials, AccountType


def _default_accounts() -> list[AccountCredentials]:
    return [
        AccountCredentials(
            name="local-object-store",
            supported_types=frozenset({AccountType.OBJECT_STORE}),
            backend="local",
            root_folder="./storage",
        )
    ]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Canary Storage API"
    DEBUG: bool = False

    # Accounts, given as a JSON list in the ACCOUNTS environment variable, e.g.
    # [{"name": "s3-main", "supported_types": ["OBJECT_STORE"], "backend": "s3", "bucket": "canary"}]
    ACCOUNTS: list[AccountCredentials] = Field(default_factory=_default_accounts)

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
