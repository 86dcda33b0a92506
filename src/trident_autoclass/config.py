"""Settings for trident-autoclass."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """Runtime settings, read from ``TRIDENT_AUTOCLASS_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="TRIDENT_AUTOCLASS_")

    auto_storage_class_prefix: str = Field(
        "trident-auto-",
        description="Prefix of generated storage class names; persisted names depend on it",
    )
    default_volume_size: str = Field(
        "1g", description="Volume size used when a request has no size option"
    )
    log_level: str = Field("INFO", description="Application log level")

    @field_validator("log_level")
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
