"""In-memory permission repositories.

Hold permission records in process memory and announce every change on an
optional SignalFeed, so the permission engine can run without a database.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from ...events.services.signal_feed import SignalFeed
from ..entities.permission import GlobalPermission, RolePermission

logger = logging.getLogger(__name__)


class InMemoryGlobalPermissionRepository:
    """Global permission records keyed by resource name."""
    
    def __init__(
        self,
        permissions: Optional[Iterable[GlobalPermission]] = None,
        changes: Optional[SignalFeed] = None
    ):
        self._permissions: Dict[str, GlobalPermission] = {}
        self._lock = threading.Lock()
        self.changes = changes
        for permission in permissions or ():
            self._permissions[permission.name] = permission
    
    async def search(self) -> List[GlobalPermission]:
        with self._lock:
            return list(self._permissions.values())
    
    def save(self, permission: GlobalPermission) -> None:
        """Insert or replace the permission for ``permission.name``."""
        with self._lock:
            self._permissions[permission.name] = permission
        logger.debug(f"Saved global permission {permission}")
        self._notify()
    
    def delete(self, name: str) -> bool:
        """Delete the permission for a resource name."""
        with self._lock:
            removed = self._permissions.pop(name, None)
        if removed is None:
            return False
        logger.debug(f"Deleted global permission {name}")
        self._notify()
        return True
    
    def _notify(self) -> None:
        if self.changes is not None:
            self.changes.publish()


class InMemoryRolePermissionRepository:
    """Role permission records kept in insertion order.
    
    One record per (name, role_id); saving an existing pair replaces it in place
    so its precedence within the name's group is unchanged.
    """
    
    def __init__(
        self,
        permissions: Optional[Iterable[RolePermission]] = None,
        changes: Optional[SignalFeed] = None
    ):
        self._permissions: Dict[Tuple[str, str], RolePermission] = {}
        self._lock = threading.Lock()
        self.changes = changes
        for permission in permissions or ():
            self._permissions[(permission.name, permission.role_id)] = permission
    
    async def search(self) -> List[RolePermission]:
        with self._lock:
            return list(self._permissions.values())
    
    def save(self, permission: RolePermission) -> None:
        with self._lock:
            self._permissions[(permission.name, permission.role_id)] = permission
        logger.debug(f"Saved role permission {permission}")
        self._notify()
    
    def delete(self, name: str, role_id: str) -> bool:
        with self._lock:
            removed = self._permissions.pop((name, role_id), None)
        if removed is None:
            return False
        logger.debug(f"Deleted role permission {name}[{role_id}]")
        self._notify()
        return True
    
    def _notify(self) -> None:
        if self.changes is not None:
            self.changes.publish()
