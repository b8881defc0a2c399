"""Neo-Access - access-control decisions for the NeoMultiTenant platform.

This library resolves allow/deny answers over hierarchical resource names,
caches them until the permission records change, and applies role-gated
row-level filters to queries and collections.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import PermissionSettings, get_permission_settings

from .core.exceptions import (
    NeoAccessError,
    ConfigurationError,
    AuthorizationError,
    PermissionDeniedError,
    InvalidIdentityError,
    PermissionSourceError,
    DuplicatePermissionError,
    get_http_status_code,
    create_error_response,
)

from .core.identity import Principal

from .features.events import SignalFeed, ChangeFeed, Subscription

from .features.permissions import (
    GlobalPermission,
    RolePermission,
    Identity,
    PermissionManager,
    InMemoryGlobalPermissionRepository,
    InMemoryRolePermissionRepository,
    create_permission_manager,
)

from .features.filters import FilterRegistry, FilterRegistration, FilterableQuery

__all__ = [
    "__version__",
    
    # Configuration
    "PermissionSettings",
    "get_permission_settings",
    
    # Exceptions
    "NeoAccessError",
    "ConfigurationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "InvalidIdentityError",
    "PermissionSourceError",
    "DuplicatePermissionError",
    "get_http_status_code",
    "create_error_response",
    
    # Permissions
    "Principal",
    "GlobalPermission",
    "RolePermission",
    "Identity",
    "PermissionManager",
    "InMemoryGlobalPermissionRepository",
    "InMemoryRolePermissionRepository",
    "create_permission_manager",
    
    # Change feeds
    "SignalFeed",
    "ChangeFeed",
    "Subscription",
    
    # Filters
    "FilterRegistry",
    "FilterRegistration",
    "FilterableQuery",
]
