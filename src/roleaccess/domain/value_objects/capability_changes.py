"""Capability mutations planned for one role."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CapabilityChanges:
    """Capabilities to grant and revoke on a single role."""

    grant: frozenset[str] = field(default_factory=frozenset)
    revoke: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.grant and not self.revoke
