"""Kinds of hideable UI elements."""

from enum import StrEnum


class UIHideKind(StrEnum):
    """How a hidden UI element is removed by the host."""

    MENU_PAGE = "menu_page"
    META_BOX = "meta_box"
    STYLE_RULE = "style_rule"
