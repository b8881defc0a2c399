"""Permission services."""

from .change_tracker import ChangeTracker
from .permission_store import (
    PermissionStore,
    PermissionSnapshot,
    build_global_index,
    build_role_index,
)
from .resolvers import resolve_global, resolve_role, resolve_access
from .decision_cache import DecisionCache, decision_key
from .permission_manager import PermissionManager

__all__ = [
    "ChangeTracker",
    "PermissionStore",
    "PermissionSnapshot",
    "build_global_index",
    "build_role_index",
    "resolve_global",
    "resolve_role",
    "resolve_access",
    "DecisionCache",
    "decision_key",
    "PermissionManager",
]
