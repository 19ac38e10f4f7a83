"""UI hiding DTOs."""

from dataclasses import dataclass

from roleaccess.application.dto.capability_dto import RoleColumn
from roleaccess.domain.entities import UIHideItem, UIHideSetting


@dataclass
class HideRulesView:
    """Catalog, roles and current setting for the hide-rules form."""

    items: list[UIHideItem]
    roles: list[RoleColumn]
    setting: UIHideSetting

    def is_hidden_for(self, item_id: str, role_id: str) -> bool:
        return role_id in self.setting.roles_for(item_id)


@dataclass
class HideRulesUpdateResult:
    """Outcome of replacing the hide rules."""

    setting: UIHideSetting
    notice: str = "UI visibility settings saved."
