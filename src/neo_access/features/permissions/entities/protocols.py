"""Protocol interfaces for permission feature dependency injection.

Defines contracts for the permission source repositories and the principals
handed to the decision engine.
"""

from abc import abstractmethod
from typing import Protocol, Sequence, runtime_checkable

from ....core.identity import Principal
from .permission import GlobalPermission, RolePermission


@runtime_checkable
class GlobalPermissionRepository(Protocol):
    """Protocol for the source of global permission records."""
    
    @abstractmethod
    async def search(self) -> Sequence[GlobalPermission]:
        """Return every global permission record."""
        ...


@runtime_checkable
class RolePermissionRepository(Protocol):
    """Protocol for the source of role permission records."""
    
    @abstractmethod
    async def search(self) -> Sequence[RolePermission]:
        """Return every role permission record, in a stable order."""
        ...
