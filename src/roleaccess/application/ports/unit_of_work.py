"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from roleaccess.application.ports.role_registry import RoleRegistry
from roleaccess.application.ports.settings_store import SettingsStore


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and registry/store access."""

    @property
    def roles(self) -> RoleRegistry: ...

    @property
    def settings(self) -> SettingsStore: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
