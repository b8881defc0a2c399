"""Exceptions module for neo-access.

This module provides the complete exception hierarchy for neo-access.
"""

from .base import (
    NeoAccessError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    
    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,
    InvalidIdentityError,
    
    # Permission Source Errors
    PermissionSourceError,
    DuplicatePermissionError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "NeoAccessError",
    "get_http_status_code",
    "create_error_response",
    "ConfigurationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "InvalidIdentityError",
    "PermissionSourceError",
    "DuplicatePermissionError",
    "HTTP_STATUS_MAP",
]
