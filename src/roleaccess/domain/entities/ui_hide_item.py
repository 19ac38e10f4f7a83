"""Hideable UI element - catalog entry with a kind-specific payload."""

from dataclasses import dataclass

from roleaccess.domain.value_objects import UIHideKind


@dataclass(frozen=True)
class MenuPage:
    """Admin menu entry, removed by slug."""

    slug: str


@dataclass(frozen=True)
class MetaBox:
    """Panel removed from each listed screen in the given context."""

    box_id: str
    screens: tuple[str, ...]
    context: str = "normal"


@dataclass(frozen=True)
class StyleRule:
    """Region hidden by injecting style text."""

    css: str


UIHidePayload = MenuPage | MetaBox | StyleRule

_KIND_BY_PAYLOAD: dict[type, UIHideKind] = {
    MenuPage: UIHideKind.MENU_PAGE,
    MetaBox: UIHideKind.META_BOX,
    StyleRule: UIHideKind.STYLE_RULE,
}


@dataclass(frozen=True)
class UIHideItem:
    """Catalogued UI element that can be hidden per role."""

    id: str
    label: str
    payload: UIHidePayload

    @property
    def kind(self) -> UIHideKind:
        return _KIND_BY_PAYLOAD[type(self.payload)]
