"""Domain entities."""

from roleaccess.domain.entities.export_document import ExportDocument
from roleaccess.domain.entities.role import Role
from roleaccess.domain.entities.ui_hide_item import (
    MenuPage,
    MetaBox,
    StyleRule,
    UIHideItem,
    UIHidePayload,
)
from roleaccess.domain.entities.ui_hide_setting import UIHideSetting

__all__ = [
    "ExportDocument",
    "MenuPage",
    "MetaBox",
    "Role",
    "StyleRule",
    "UIHideItem",
    "UIHidePayload",
    "UIHideSetting",
]
