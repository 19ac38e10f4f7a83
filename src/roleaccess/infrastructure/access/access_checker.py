"""Access checker implementation - manager roles and super-admin flag."""

from collections.abc import Iterable

from roleaccess.domain.value_objects import UserContext


class RoleAccessChecker:
    """Allows super-admins and users holding one of the manager roles."""

    def __init__(self, manager_roles: Iterable[str]) -> None:
        self._manager_roles = frozenset(manager_roles)

    async def can_manage(self, user: UserContext) -> bool:
        """Check if user may manage capabilities and UI hiding."""
        if user.is_super_admin:
            return True
        return not self._manager_roles.isdisjoint(user.roles)
