"""Permission entities and protocols."""

from .permission import (
    GlobalPermission,
    RolePermission,
    RoleRule,
    Identity,
    ResourceName,
    join_segments,
    candidate_names,
)
from .protocols import (
    Principal,
    GlobalPermissionRepository,
    RolePermissionRepository,
)

__all__ = [
    "GlobalPermission",
    "RolePermission",
    "RoleRule",
    "Identity",
    "ResourceName",
    "join_segments",
    "candidate_names",
    "Principal",
    "GlobalPermissionRepository",
    "RolePermissionRepository",
]
