"""
FastAPI dependencies for access control.

Guard endpoints with the permission engine: resolve the caller's identity
through an application-supplied dependency, then require access to a
resource before the endpoint body runs.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, Union

from fastapi import Depends, Request

from ..core.identity import Principal
from ..features.permissions.services.permission_manager import PermissionManager

logger = logging.getLogger(__name__)

ResourceResolver = Callable[[Request], str]


def require_access(
    manager: PermissionManager,
    resource_identifier: Union[str, ResourceResolver],
    identity_dependency: Callable[..., Union[Principal, Awaitable[Principal]]]
) -> Callable[..., Awaitable[Principal]]:
    """
    Build a dependency that requires access to a resource.
    
    Args:
        manager: Permission manager answering access decisions
        resource_identifier: Resource name, or a callable deriving it from the request
        identity_dependency: FastAPI dependency returning the caller's identity
        
    Returns:
        Dependency returning the identity once access is granted; raises
        PermissionDeniedError otherwise
    """
    async def dependency(
        request: Request,
        identity: Principal = Depends(identity_dependency)
    ) -> Principal:
        if callable(resource_identifier):
            target = resource_identifier(request)
        else:
            target = resource_identifier
        
        await manager.check_access(target, identity)
        return identity
    
    return dependency


class AccessGuard:
    """
    Reusable guard bound to one manager and one identity dependency.
    
    ``guard("reports.sales")`` returns a dependency for that resource; the
    manager can also be queried directly for non-raising checks.
    """
    
    def __init__(
        self,
        manager: PermissionManager,
        identity_dependency: Callable[..., Any]
    ):
        self.manager = manager
        self.identity_dependency = identity_dependency
    
    def __call__(self, resource_identifier: Union[str, ResourceResolver]) -> Callable[..., Awaitable[Principal]]:
        return require_access(self.manager, resource_identifier, self.identity_dependency)
    
    def path_resource(self, prefix: Optional[str] = None, param: str = "resource") -> Callable[..., Awaitable[Principal]]:
        """Guard whose resource name comes from a path parameter.
        
        Args:
            prefix: Optional namespace prepended with the manager's separator
            param: Name of the path parameter holding the resource name
        """
        separator = self.manager.separator
        
        def resolve(request: Request) -> str:
            value = request.path_params.get(param, "")
            return f"{prefix}{separator}{value}" if prefix else value
        
        return require_access(self.manager, resolve, self.identity_dependency)
