"""Catalog: the fixed set of admin UI elements that can be hidden per role."""

from roleaccess.domain.entities import MenuPage, MetaBox, StyleRule, UIHideItem

_HIDDEN_STYLE = "{ display: none !important; }"

# item id -> catalog entry, in display order
_ITEMS_BY_ID: dict[str, UIHideItem] = {
    item.id: item
    for item in (
        UIHideItem("menu_dashboard", "Dashboard menu", MenuPage("index.php")),
        UIHideItem("menu_posts", "Posts menu", MenuPage("edit.php")),
        UIHideItem("menu_media", "Media menu", MenuPage("upload.php")),
        UIHideItem("menu_pages", "Pages menu", MenuPage("edit.php?post_type=page")),
        UIHideItem("menu_comments", "Comments menu", MenuPage("edit-comments.php")),
        UIHideItem("menu_appearance", "Appearance menu", MenuPage("themes.php")),
        UIHideItem("menu_plugins", "Plugins menu", MenuPage("plugins.php")),
        UIHideItem("menu_users", "Users menu", MenuPage("users.php")),
        UIHideItem("menu_tools", "Tools menu", MenuPage("tools.php")),
        UIHideItem("menu_settings", "Settings menu", MenuPage("options-general.php")),
        UIHideItem(
            "box_dashboard_quick_draft",
            "Quick Draft panel",
            MetaBox("dashboard_quick_press", ("dashboard",), "side"),
        ),
        UIHideItem(
            "box_dashboard_activity",
            "Activity panel",
            MetaBox("dashboard_activity", ("dashboard",), "normal"),
        ),
        UIHideItem(
            "box_dashboard_news",
            "News and events panel",
            MetaBox("dashboard_primary", ("dashboard",), "side"),
        ),
        UIHideItem(
            "box_custom_fields",
            "Custom fields panel",
            MetaBox("postcustom", ("post", "page"), "normal"),
        ),
        UIHideItem(
            "box_slug",
            "Slug panel",
            MetaBox("slugdiv", ("post", "page"), "normal"),
        ),
        UIHideItem(
            "box_discussion",
            "Discussion panel",
            MetaBox("commentstatusdiv", ("post", "page"), "normal"),
        ),
        UIHideItem(
            "style_admin_bar_updates",
            "Updates indicator in the toolbar",
            StyleRule(f"#wp-admin-bar-updates {_HIDDEN_STYLE}"),
        ),
        UIHideItem(
            "style_screen_options",
            "Screen Options tab",
            StyleRule(f"#screen-options-link-wrap {_HIDDEN_STYLE}"),
        ),
        UIHideItem(
            "style_help_tab",
            "Help tab",
            StyleRule(f"#contextual-help-link-wrap {_HIDDEN_STYLE}"),
        ),
        UIHideItem(
            "style_update_nag",
            "Core update notice",
            StyleRule(f".update-nag {_HIDDEN_STYLE}"),
        ),
    )
}


def default_catalog() -> list[UIHideItem]:
    """Return all catalog entries in display order."""
    return list(_ITEMS_BY_ID.values())
