"""Capability DTOs."""

from dataclasses import dataclass, field

from roleaccess.domain.value_objects import CapabilityChanges


@dataclass
class RoleColumn:
    """Role as shown in admin tables."""

    id: str
    name: str


@dataclass
class CapabilityMatrix:
    """Roles x capabilities table with current grants."""

    roles: list[RoleColumn]
    capabilities: list[str]
    granted: dict[str, frozenset[str]]

    def is_granted(self, role_id: str, capability: str) -> bool:
        return capability in self.granted.get(role_id, frozenset())


@dataclass
class CapabilityUpdateResult:
    """Outcome of applying a capability form submission."""

    changes: dict[str, CapabilityChanges] = field(default_factory=dict)
    notice: str = "Capabilities updated successfully."

    @property
    def updated_roles(self) -> list[str]:
        return sorted(role_id for role_id, c in self.changes.items() if not c.is_empty)
