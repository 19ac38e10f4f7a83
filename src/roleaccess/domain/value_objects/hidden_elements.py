"""UI elements the host must remove for the current user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MetaBoxRemoval:
    """One panel removal on one screen."""

    box_id: str
    screen: str
    context: str


@dataclass(frozen=True)
class HiddenElements:
    """Apply-by-kind instructions for one rendering pass."""

    menu_slugs: tuple[str, ...] = ()
    meta_boxes: tuple[MetaBoxRemoval, ...] = ()
    style: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.menu_slugs and not self.meta_boxes and self.style is None
