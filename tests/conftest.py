"""Pytest fixtures for roleaccess tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from roleaccess.domain.entities import Role, UIHideSetting
from roleaccess.domain.exceptions import NotFound
from roleaccess.domain.value_objects import UserContext


# --- Fake registry and store ---


class FakeRoleRegistry:
    """In-memory role registry that records every mutation."""

    def __init__(self) -> None:
        self._by_id: dict[str, Role] = {}
        self.mutations: list[tuple[str, str, str]] = []  # (op, role_id, capability)
        self.fail_on: tuple[str, str] | None = None  # (role_id, capability) that errors

    async def list_roles(self) -> list[Role]:
        return [replace(r, capabilities=dict(r.capabilities)) for r in self._by_id.values()]

    async def role_has_capability(self, role_id: str, capability: str) -> bool:
        role = self._by_id.get(role_id)
        return bool(role and role.has_capability(capability))

    async def grant_capability(self, role_id: str, capability: str) -> None:
        role = self._require(role_id)
        if self.fail_on == (role_id, capability):
            raise RuntimeError("registry unavailable")
        role.capabilities[capability] = True
        self.mutations.append(("grant", role_id, capability))

    async def revoke_capability(self, role_id: str, capability: str) -> None:
        role = self._require(role_id)
        role.capabilities.pop(capability, None)
        self.mutations.append(("revoke", role_id, capability))

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role

    def granted(self, role_id: str) -> set[str]:
        """Helper returning current true grants of a role."""
        return set(self._by_id[role_id].granted)

    def _require(self, role_id: str) -> Role:
        role = self._by_id.get(role_id)
        if not role:
            raise NotFound("Role", role_id)
        return role


class FakeSettingsStore:
    """In-memory settings store."""

    def __init__(self, setting: UIHideSetting | None = None) -> None:
        self._setting = setting or UIHideSetting()
        self.writes = 0

    async def get_ui_hide_settings(self) -> UIHideSetting:
        return self._setting.copy()

    async def set_ui_hide_settings(self, setting: UIHideSetting) -> None:
        self._setting = setting.copy()
        self.writes += 1

    @property
    def current(self) -> UIHideSetting:
        return self._setting


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake registry and store."""

    def __init__(self) -> None:
        self.roles = FakeRoleRegistry()
        self.settings = FakeSettingsStore()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


def make_factory(uow: FakeUnitOfWork):
    """Factory yielding ``uow``; commits on success, rolls back on error."""

    @asynccontextmanager
    async def _factory():
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


def seed_roles(uow: FakeUnitOfWork) -> None:
    """Add administrator, editor and author roles."""
    uow.roles.add_role(
        Role(
            id="administrator",
            name="Administrator",
            capabilities={"read": True, "edit_posts": True, "manage_options": True},
        )
    )
    uow.roles.add_role(
        Role(
            id="editor",
            name="Editor",
            capabilities={"read": True, "edit_posts": True, "delete_posts": True},
        )
    )
    uow.roles.add_role(
        Role(
            id="author",
            name="Author",
            capabilities={"read": True, "upload_files": False},
        )
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """UoW seeded with administrator, editor and author."""
    uow = FakeUnitOfWork()
    seed_roles(uow)
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the same seeded UoW for every call in a test."""
    return make_factory(fake_uow)


@pytest.fixture
def mock_access_checker():
    """AsyncMock for AccessChecker - allows by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.can_manage.return_value = True
    return mock


@pytest.fixture
def admin() -> UserContext:
    """Actor holding the administrator role."""
    return UserContext(roles=frozenset({"administrator"}))
