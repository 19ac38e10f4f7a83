"""UI hide rule engine - evaluate, validate and merge hide rules."""

from collections.abc import Iterable, Mapping, Set

from roleaccess.domain.entities import MenuPage, MetaBox, StyleRule, UIHideItem, UIHideSetting
from roleaccess.domain.exceptions import ValidationError
from roleaccess.domain.value_objects import (
    HiddenElements,
    MetaBoxRemoval,
    RoleSelector,
    UserContext,
)


def is_hidden(item: UIHideItem, user: UserContext, setting: UIHideSetting) -> bool:
    """True if any of the user's roles hides the item. Super-admins see everything."""
    if user.is_super_admin:
        return False
    hidden_for = setting.roles_for(item.id)
    return any(role_id in hidden_for for role_id in user.roles)


def resolve_hidden_elements(
    catalog: Iterable[UIHideItem],
    setting: UIHideSetting,
    user: UserContext,
) -> HiddenElements:
    """Collect menu, panel and style removals for one rendering pass."""
    if user.is_super_admin:
        return HiddenElements()

    menu_slugs: list[str] = []
    meta_boxes: list[MetaBoxRemoval] = []
    styles: list[str] = []
    for item in catalog:
        if not is_hidden(item, user, setting):
            continue
        payload = item.payload
        if isinstance(payload, MenuPage):
            menu_slugs.append(payload.slug)
        elif isinstance(payload, MetaBox):
            meta_boxes.extend(
                MetaBoxRemoval(box_id=payload.box_id, screen=screen, context=payload.context)
                for screen in payload.screens
            )
        elif isinstance(payload, StyleRule):
            css = payload.css.strip()
            if css and css not in styles:
                styles.append(css)

    return HiddenElements(
        menu_slugs=tuple(menu_slugs),
        meta_boxes=tuple(meta_boxes),
        style="\n".join(styles) if styles else None,
    )


def build_hide_setting(
    new_rules: Mapping[str, Iterable[str]],
    known_items: Set[str],
    known_roles: Set[str],
) -> UIHideSetting:
    """Validate a submitted hide table and turn it into a setting.

    Raises ValidationError on an unknown item or role.
    """
    unknown_items = sorted(set(new_rules) - known_items)
    if unknown_items:
        raise ValidationError(f"Unknown UI items: {', '.join(unknown_items)}")

    rules: dict[str, set[str]] = {}
    for item_id, role_ids in new_rules.items():
        roles = set(role_ids)
        unknown_roles = sorted(roles - known_roles)
        if unknown_roles:
            raise ValidationError(
                f"Unknown roles for {item_id}: {', '.join(unknown_roles)}"
            )
        if roles:
            rules[item_id] = roles
    return UIHideSetting(rules)


def merge_hide_rules(
    existing: UIHideSetting,
    incoming: Mapping[str, Mapping[str, bool]],
    selector: RoleSelector,
    known_roles: Set[str],
    known_items: Set[str],
) -> tuple[UIHideSetting, int]:
    """Overwrite only the (item, role) pairs named in ``incoming``.

    Pairs whose role is unselected or unknown, or whose item is not in the
    catalog, are skipped. Everything not mentioned is preserved. Returns the
    merged setting and the number of pairs written.
    """
    merged = existing.copy()
    applied = 0
    for item_id, markers in incoming.items():
        if item_id not in known_items:
            continue
        for role_id, hidden in markers.items():
            if not selector.includes(role_id) or role_id not in known_roles:
                continue
            merged.set_entry(item_id, role_id, hidden)
            applied += 1
    return merged, applied
