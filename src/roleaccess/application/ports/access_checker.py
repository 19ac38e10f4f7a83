"""Access checker port - who may manage access settings."""

from typing import Protocol

from roleaccess.domain.value_objects import UserContext


class AccessChecker(Protocol):
    """Port for checking whether a user may manage roles and UI hiding."""

    async def can_manage(self, user: UserContext) -> bool: ...
