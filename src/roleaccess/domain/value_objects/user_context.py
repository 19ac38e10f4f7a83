"""Current user context for access evaluation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserContext:
    """Roles of the current user and whether the user is a super-admin."""

    roles: frozenset[str] = field(default_factory=frozenset)
    is_super_admin: bool = False
