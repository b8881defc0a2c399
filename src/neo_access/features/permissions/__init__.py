"""Permissions feature for neo-access.

Feature-First architecture for access-control decisions:
- entities/: Permission records, resource names and protocols
- services/: Store, change tracking, resolvers, decision cache and manager
- repositories/: In-memory permission sources
"""

from typing import Optional

# Core permission entities and protocols
from .entities import (
    GlobalPermission,
    RolePermission,
    RoleRule,
    Identity,
    ResourceName,
    Principal,
    GlobalPermissionRepository,
    RolePermissionRepository,
)

# Decision engine
from .services import (
    ChangeTracker,
    PermissionStore,
    PermissionSnapshot,
    DecisionCache,
    PermissionManager,
    resolve_global,
    resolve_role,
)

# Concrete repository implementations
from .repositories import (
    InMemoryGlobalPermissionRepository,
    InMemoryRolePermissionRepository,
)

from ..events import ChangeFeed
from ..filters import FilterRegistry
from ...config.settings import PermissionSettings


def create_permission_manager(
    global_repository: Optional[GlobalPermissionRepository] = None,
    role_repository: Optional[RolePermissionRepository] = None,
    global_changes: Optional[ChangeFeed] = None,
    role_changes: Optional[ChangeFeed] = None,
    settings: Optional[PermissionSettings] = None,
    filter_registry: Optional[FilterRegistry] = None
) -> PermissionManager:
    """
    Create a permission manager.
    
    When an in-memory repository is given without a change feed, the
    repository's own feed is used so that saves invalidate cached decisions.
    
    Args:
        global_repository: Optional global permission source
        role_repository: Optional role permission source
        global_changes: Optional global change feed
        role_changes: Optional role change feed
        settings: Optional settings
        filter_registry: Optional shared filter registry
        
    Returns:
        Configured PermissionManager instance
    """
    if global_changes is None:
        global_changes = getattr(global_repository, "changes", None)
    if role_changes is None:
        role_changes = getattr(role_repository, "changes", None)
    
    return PermissionManager(
        global_repository=global_repository,
        role_repository=role_repository,
        global_changes=global_changes,
        role_changes=role_changes,
        settings=settings,
        filter_registry=filter_registry
    )


__all__ = [
    # Entities
    "GlobalPermission",
    "RolePermission",
    "RoleRule",
    "Identity",
    "ResourceName",
    
    # Protocols
    "Principal",
    "GlobalPermissionRepository",
    "RolePermissionRepository",
    
    # Services
    "ChangeTracker",
    "PermissionStore",
    "PermissionSnapshot",
    "DecisionCache",
    "PermissionManager",
    "resolve_global",
    "resolve_role",
    
    # Repository Implementations
    "InMemoryGlobalPermissionRepository",
    "InMemoryRolePermissionRepository",
    
    # Factory functions
    "create_permission_manager",
]
