"""UI hide setting - which roles each catalogued item is hidden for."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from roleaccess.domain.markers import is_truthy


@dataclass
class UIHideSetting:
    """Item id -> role ids the item is hidden for.

    Stored as one document shaped ``{item_id: {role_id: true}}``. Items never
    hold an empty role set; removing the last role drops the item.
    """

    rules: dict[str, set[str]] = field(default_factory=dict)

    @classmethod
    def from_document(cls, raw: object) -> "UIHideSetting":
        """Build from a stored document. Rows that are not objects are ignored."""
        rules: dict[str, set[str]] = {}
        if not isinstance(raw, Mapping):
            return cls(rules)
        for item_id, markers in raw.items():
            if not isinstance(markers, Mapping):
                continue
            hidden = {str(role_id) for role_id, marker in markers.items() if is_truthy(marker)}
            if hidden:
                rules[str(item_id)] = hidden
        return cls(rules)

    def to_document(self) -> dict[str, dict[str, bool]]:
        """Serialize to the stored/exported document shape."""
        return {
            item_id: {role_id: True for role_id in sorted(roles)}
            for item_id, roles in sorted(self.rules.items())
            if roles
        }

    def roles_for(self, item_id: str) -> frozenset[str]:
        return frozenset(self.rules.get(item_id, ()))

    def set_entry(self, item_id: str, role_id: str, hidden: bool) -> None:
        """Hide or unhide one item for one role."""
        if hidden:
            self.rules.setdefault(item_id, set()).add(role_id)
            return
        roles = self.rules.get(item_id)
        if roles is None:
            return
        roles.discard(role_id)
        if not roles:
            del self.rules[item_id]

    def copy(self) -> "UIHideSetting":
        return UIHideSetting({item_id: set(roles) for item_id, roles in self.rules.items()})
