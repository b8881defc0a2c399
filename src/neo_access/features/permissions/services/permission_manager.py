"""
Permission Manager for neo-access

Answers "may this identity access this resource?" by combining global
namespace defaults with role overrides, memoizing answers until a change feed
reports that the underlying records changed. Also fronts the row-level
filter registry.
"""

import logging
from typing import Any, Hashable, Optional

from ....config.settings import PermissionSettings, get_permission_settings
from ....core.exceptions import PermissionDeniedError
from ....core.identity import Principal, identity_name
from ...events.entities.protocols import ChangeFeed
from ...filters.services.filter_registry import FilterRegistration, FilterRegistry
from ...filters.entities.protocols import Specification
from ..entities.permission import ResourceName
from ..entities.protocols import GlobalPermissionRepository, RolePermissionRepository
from .change_tracker import ChangeTracker
from .decision_cache import DecisionCache, decision_key
from .permission_store import PermissionSnapshot, PermissionStore
from .resolvers import resolve_access

logger = logging.getLogger(__name__)


class PermissionManager:
    """
    Access-control decision engine with a change-aware cache.
    
    Decision flow:
    1. If a change signal arrived since the last reload, reload both permission
       categories and reset the decision cache
    2. Serve the decision from the cache when present
    3. Otherwise resolve the nearest global rule, let a role rule naming the
       identity override it, and cache the result
    
    Concurrent requests may reload or compute redundantly; every reload
    publishes a complete snapshot and every decision is a pure function of
    one snapshot, so duplicated work never produces a mixed answer.
    """
    
    def __init__(
        self,
        global_repository: Optional[GlobalPermissionRepository] = None,
        role_repository: Optional[RolePermissionRepository] = None,
        global_changes: Optional[ChangeFeed] = None,
        role_changes: Optional[ChangeFeed] = None,
        settings: Optional[PermissionSettings] = None,
        filter_registry: Optional[FilterRegistry] = None
    ):
        """
        Initialize permission manager.
        
        Args:
            global_repository: Optional source of global permissions
            role_repository: Optional source of role permissions
            global_changes: Optional feed signalling global permission changes
            role_changes: Optional feed signalling role permission changes
            settings: Optional settings (defaults to environment settings)
            filter_registry: Optional shared filter registry
        """
        self.settings = settings or get_permission_settings()
        self.open_by_default = self.settings.open_by_default
        self.separator = self.settings.resource_separator
        
        self.store = PermissionStore(global_repository, role_repository)
        self.tracker = ChangeTracker(global_changes, role_changes)
        self.cache = DecisionCache()
        self.filters = filter_registry or FilterRegistry()
        
        logger.info(f"Initialized PermissionManager (open_by_default={self.open_by_default})")
    
    async def can_access(self, resource_identifier: Optional[str], identity: Principal) -> bool:
        """
        Check if an identity may access a resource.
        
        Args:
            resource_identifier: Hierarchical resource name; None is treated as ""
            identity: Principal whose name is matched against role rules
            
        Returns:
            True if access is allowed
            
        Raises:
            InvalidIdentityError: If the identity has no name
            Exception: Whatever a source repository raised during a forced reload
        """
        name = identity_name(identity)
        snapshot = await self._current_snapshot()
        
        key = decision_key(name, resource_identifier)
        cached = self.cache.get(key, snapshot.generation)
        if cached is not None:
            return cached
        
        is_allowed = self._resolve(ResourceName.parse(resource_identifier, self.separator), name, snapshot)
        self.cache.put(key, is_allowed, snapshot.generation)
        
        logger.debug(f"Resolved {key} -> {'allow' if is_allowed else 'deny'}")
        return is_allowed
    
    async def check_access(self, resource_identifier: Optional[str], identity: Principal) -> None:
        """
        Require access to a resource.
        
        Raises:
            PermissionDeniedError: If the identity may not access the resource
        """
        if not await self.can_access(resource_identifier, identity):
            target = resource_identifier or ""
            raise PermissionDeniedError(
                f"You don't have permission to access: {target}",
                details={"resource": target, "identity": identity_name(identity)}
            )
    
    def register_filter(
        self,
        type_token: Hashable,
        predicate: Specification,
        role: str,
        inverse: bool = False
    ) -> FilterRegistration:
        """Register a row-level filter; see FilterRegistry.register_filter."""
        return self.filters.register_filter(type_token, predicate, role, inverse)
    
    def apply_filters(self, type_token: Hashable, identity: Principal, data: Any) -> Any:
        """Apply row-level filters; see FilterRegistry.apply_filters."""
        return self.filters.apply_filters(type_token, identity, data)
    
    def invalidate(self) -> None:
        """Force a reload on the next decision request."""
        self.tracker.mark_stale()
    
    def close(self) -> None:
        """Release both change feed subscriptions."""
        self.tracker.close()
    
    def __enter__(self) -> "PermissionManager":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
    
    async def _current_snapshot(self) -> PermissionSnapshot:
        if not self.tracker.is_stale:
            return self.store.snapshot
        
        token = self.tracker.begin_reload()
        snapshot = await self.store.reload()
        self.cache.reset(snapshot.generation)
        self.tracker.mark_fresh(token)
        return snapshot
    
    def _resolve(self, resource: ResourceName, name: str, snapshot: PermissionSnapshot) -> bool:
        return resolve_access(
            resource.segments,
            snapshot.global_index,
            snapshot.role_index,
            name,
            self.open_by_default,
            self.separator
        )
