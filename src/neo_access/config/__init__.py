"""Configuration module for neo-access."""

from .settings import PermissionSettings, get_permission_settings

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "PermissionSettings",
    "get_permission_settings",
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
