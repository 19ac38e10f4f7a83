"""Role entity - host-defined role and its capability grants."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Role - editor, author, administrator with capability grants.

    A capability may be present with value False; only True entries count as
    granted.
    """

    id: str
    name: str
    capabilities: dict[str, bool] = field(default_factory=dict)

    @property
    def granted(self) -> frozenset[str]:
        """Capabilities with value True."""
        return frozenset(cap for cap, value in self.capabilities.items() if value is True)

    def has_capability(self, capability: str) -> bool:
        return self.capabilities.get(capability, False) is True
