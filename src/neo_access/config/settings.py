"""
Permission engine settings for the NeoMultiTenant platform.

Loaded from environment variables (``PERMISSIONS_*``) with ``.env`` file support.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PermissionSettings(BaseSettings):
    """Settings controlling access-control decisions."""
    
    model_config = SettingsConfigDict(
        env_prefix="PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Answer returned when no global or role rule matches at all
    open_by_default: bool = Field(default=True)
    
    # Literal character separating resource identifier segments
    resource_separator: str = Field(default=".")
    
    @field_validator("resource_separator")
    @classmethod
    def validate_resource_separator(cls, value: str) -> str:
        """Separator is split on literally, so it must be a single character."""
        if len(value) != 1:
            raise ValueError(f"resource_separator must be a single character, got: {value!r}")
        return value


@lru_cache
def get_permission_settings() -> PermissionSettings:
    """Get cached permission settings instance."""
    return PermissionSettings()
