"""Pydantic settings for the config registry."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    These control how the registry is built, never the constant values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry construction
    registry_validate_on_load: bool = Field(
        default=True,
        description="Check constant table invariants when the registry is built",
    )
    registry_cache_master_address: bool = Field(
        default=True,
        description="Derive the master address once instead of on every call",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
