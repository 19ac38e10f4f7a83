"""Role selector - which roles an import may touch."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class RoleSelector:
    """Either all roles (chosen is None) or an explicit allow-list."""

    chosen: frozenset[str] | None = None

    @classmethod
    def all(cls) -> "RoleSelector":
        return cls(chosen=None)

    @classmethod
    def of(cls, role_ids: Iterable[str]) -> "RoleSelector":
        return cls(chosen=frozenset(role_ids))

    def includes(self, role_id: str) -> bool:
        """Return True if role is selected. An empty allow-list selects nothing."""
        return self.chosen is None or role_id in self.chosen
