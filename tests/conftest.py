"""Pytest configuration and fixtures for neo-access tests."""

import asyncio

import pytest
from unittest.mock import AsyncMock

from neo_access.config.settings import PermissionSettings
from neo_access.features.events.services.signal_feed import SignalFeed
from neo_access.features.filters.services.filter_registry import FilterRegistry
from neo_access.features.permissions.entities.permission import (
    GlobalPermission,
    RolePermission,
    Identity,
)
from neo_access.features.permissions.repositories.memory_repository import (
    InMemoryGlobalPermissionRepository,
    InMemoryRolePermissionRepository,
)
from neo_access.features.permissions.services.permission_manager import PermissionManager


@pytest.fixture
def open_settings():
    """Settings allowing access when no rule matches."""
    return PermissionSettings(open_by_default=True)


@pytest.fixture
def closed_settings():
    """Settings denying access when no rule matches."""
    return PermissionSettings(open_by_default=False)


@pytest.fixture
def global_feed():
    """Feed signalling global permission changes."""
    return SignalFeed("global-permissions")


@pytest.fixture
def role_feed():
    """Feed signalling role permission changes."""
    return SignalFeed("role-permissions")


@pytest.fixture
def global_repository(global_feed):
    """In-memory global permissions with a namespace default and an override."""
    return InMemoryGlobalPermissionRepository(
        permissions=[
            GlobalPermission("A", True),
            GlobalPermission("A.B", False),
        ],
        changes=global_feed
    )


@pytest.fixture
def role_repository(role_feed):
    """In-memory role permissions overriding A.B for r1."""
    return InMemoryRolePermissionRepository(
        permissions=[
            RolePermission("A.B", "r1", True),
        ],
        changes=role_feed
    )


@pytest.fixture
def manager(global_repository, role_repository, global_feed, role_feed, open_settings):
    """Permission manager wired to the in-memory repositories and feeds."""
    permission_manager = PermissionManager(
        global_repository=global_repository,
        role_repository=role_repository,
        global_changes=global_feed,
        role_changes=role_feed,
        settings=open_settings
    )
    yield permission_manager
    permission_manager.close()


@pytest.fixture
def mock_global_repository():
    """Mock global permission source."""
    repository = AsyncMock()
    repository.search = AsyncMock(return_value=[])
    return repository


@pytest.fixture
def mock_role_repository():
    """Mock role permission source."""
    repository = AsyncMock()
    repository.search = AsyncMock(return_value=[])
    return repository


class GatedGlobalRepository:
    """Global permission source whose next search can be held open.
    
    A search copies the current records first, then waits on ``gate`` when
    one is set, so a test can park a reload that has already read its data.
    """
    
    def __init__(self, permissions):
        self.permissions = list(permissions)
        self.gate = None
        self.parked = asyncio.Event()
    
    async def search(self):
        result = list(self.permissions)
        gate, self.gate = self.gate, None
        if gate is not None:
            self.parked.set()
            await gate.wait()
        return result


@pytest.fixture
def gated_global_repository():
    """Global source denying "A" whose searches can be paused."""
    return GatedGlobalRepository([GlobalPermission("A", False)])


@pytest.fixture
def filter_registry():
    """Empty filter registry."""
    return FilterRegistry()


@pytest.fixture
def r1():
    return Identity("r1")


@pytest.fixture
def other():
    return Identity("other")
