"""PostgreSQL role registry implementation."""

from psycopg import AsyncConnection

from roleaccess.domain.entities import Role
from roleaccess.domain.exceptions import NotFound


class PostgresRoleRegistry:
    """Role registry implementation over role and role_capability tables."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_roles(self) -> list[Role]:
        """List roles in display order with their capability maps."""
        cur = await self._conn.execute("SELECT id, name FROM role ORDER BY position, id")
        rows = await cur.fetchall()
        cur = await self._conn.execute(
            "SELECT role_id, capability, granted FROM role_capability"
        )
        cap_rows = await cur.fetchall()

        caps_by_role: dict[str, dict[str, bool]] = {}
        for role_id, capability, granted in cap_rows:
            caps_by_role.setdefault(role_id, {})[capability] = granted
        return [
            Role(id=r[0], name=r[1], capabilities=caps_by_role.get(r[0], {}))
            for r in rows
        ]

    async def role_has_capability(self, role_id: str, capability: str) -> bool:
        """Check whether role holds capability with value true."""
        cur = await self._conn.execute(
            "SELECT granted FROM role_capability WHERE role_id = %s AND capability = %s",
            (role_id, capability),
        )
        r = await cur.fetchone()
        return bool(r and r[0])

    async def grant_capability(self, role_id: str, capability: str) -> None:
        """Grant capability to role."""
        await self._require_role(role_id)
        await self._conn.execute(
            "INSERT INTO role_capability (role_id, capability, granted) "
            "VALUES (%s, %s, TRUE) "
            "ON CONFLICT (role_id, capability) DO UPDATE SET granted = TRUE",
            (role_id, capability),
        )

    async def revoke_capability(self, role_id: str, capability: str) -> None:
        """Remove capability from role."""
        await self._require_role(role_id)
        await self._conn.execute(
            "DELETE FROM role_capability WHERE role_id = %s AND capability = %s",
            (role_id, capability),
        )

    async def _require_role(self, role_id: str) -> None:
        cur = await self._conn.execute("SELECT 1 FROM role WHERE id = %s", (role_id,))
        if not await cur.fetchone():
            raise NotFound("Role", role_id)
