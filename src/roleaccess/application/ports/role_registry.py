"""Role registry port - host-owned roles and their capability grants."""

from typing import Protocol

from roleaccess.domain.entities import Role


class RoleRegistry(Protocol):
    """Port for reading roles and mutating capability grants."""

    async def list_roles(self) -> list[Role]: ...

    async def role_has_capability(self, role_id: str, capability: str) -> bool: ...

    async def grant_capability(self, role_id: str, capability: str) -> None: ...

    async def revoke_capability(self, role_id: str, capability: str) -> None: ...
