"""Permission store holding the current snapshot of permission records.

A reload reads both categories and publishes them together as one immutable
PermissionSnapshot, so readers never see global rules from one pass and role
rules from another.
"""

import itertools
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ....core.exceptions import DuplicatePermissionError
from ..entities.permission import GlobalPermission, RolePermission, RoleRule
from ..entities.protocols import GlobalPermissionRepository, RolePermissionRepository

logger = logging.getLogger(__name__)


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class PermissionSnapshot:
    """Global and role indexes from a single reload pass."""
    
    generation: int = 0
    global_index: Mapping[str, bool] = field(default_factory=_empty_mapping)
    role_index: Mapping[str, Tuple[RoleRule, ...]] = field(default_factory=_empty_mapping)
    
    @property
    def rule_count(self) -> int:
        return len(self.global_index) + sum(len(rules) for rules in self.role_index.values())


def build_global_index(permissions: Sequence[GlobalPermission]) -> Mapping[str, bool]:
    """Index global permissions by name; names must be unique."""
    index: Dict[str, bool] = {}
    for permission in permissions:
        if permission.name in index:
            raise DuplicatePermissionError(
                f"Duplicate global permission: {permission.name}",
                details={"name": permission.name}
            )
        index[permission.name] = permission.is_allowed
    return MappingProxyType(index)


def build_role_index(permissions: Sequence[RolePermission]) -> Mapping[str, Tuple[RoleRule, ...]]:
    """Group role permissions by name, keeping source order within each group."""
    grouped: Dict[str, List[RoleRule]] = {}
    for permission in permissions:
        grouped.setdefault(permission.name, []).append(permission.to_rule())
    return MappingProxyType({name: tuple(rules) for name, rules in grouped.items()})


class PermissionStore:
    """Loads permission records from the optional source repositories."""
    
    def __init__(
        self,
        global_repository: Optional[GlobalPermissionRepository] = None,
        role_repository: Optional[RolePermissionRepository] = None
    ):
        self.global_repository = global_repository
        self.role_repository = role_repository
        self._generations = itertools.count(1)
        self._snapshot = PermissionSnapshot()
    
    @property
    def snapshot(self) -> PermissionSnapshot:
        return self._snapshot
    
    async def reload(self) -> PermissionSnapshot:
        """Reload both categories and publish a new snapshot.
        
        A missing repository yields an empty category. Repository errors
        propagate and leave the previous snapshot published.
        
        A reload that finishes after a later-started one does not replace
        the newer snapshot; it returns the current one instead.
        
        Returns:
            The current snapshot after this reload
        """
        generation = next(self._generations)
        global_permissions: Sequence[GlobalPermission] = ()
        role_permissions: Sequence[RolePermission] = ()
        
        try:
            if self.global_repository is not None:
                global_permissions = await self.global_repository.search()
            if self.role_repository is not None:
                role_permissions = await self.role_repository.search()
            
            snapshot = PermissionSnapshot(
                generation=generation,
                global_index=build_global_index(global_permissions),
                role_index=build_role_index(role_permissions),
            )
        except Exception as e:
            logger.error(f"Failed to reload permissions: {e}")
            raise
        
        if snapshot.generation <= self._snapshot.generation:
            logger.debug(f"Discarded reload generation {snapshot.generation}; {self._snapshot.generation} is newer")
            return self._snapshot
        
        self._snapshot = snapshot
        logger.info(
            f"Reloaded permissions (generation {snapshot.generation}): "
            f"{len(snapshot.global_index)} global, {len(snapshot.role_index)} role groups"
        )
        return snapshot
