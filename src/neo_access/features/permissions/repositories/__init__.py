"""Concrete permission repository implementations."""

from .memory_repository import (
    InMemoryGlobalPermissionRepository,
    InMemoryRolePermissionRepository,
)

__all__ = [
    "InMemoryGlobalPermissionRepository",
    "InMemoryRolePermissionRepository",
]
