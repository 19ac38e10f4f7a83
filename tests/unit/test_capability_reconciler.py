"""Unit tests for capability_reconciler."""

from roleaccess.domain.services.capability_reconciler import (
    capability_universe,
    parse_capability_form,
    reconcile,
)
from roleaccess.domain.value_objects import CapabilityChanges


def _apply(current: dict[str, set[str]], plan: dict[str, CapabilityChanges]) -> dict[str, set[str]]:
    result = {role_id: set(caps) for role_id, caps in current.items()}
    for role_id, change in plan.items():
        result[role_id] |= change.grant
        result[role_id] -= change.revoke
    return result


class TestParseCapabilityForm:
    """Tests for parse_capability_form."""

    def test_none_returns_empty(self) -> None:
        assert parse_capability_form(None) == {}

    def test_non_mapping_returns_empty(self) -> None:
        assert parse_capability_form(["editor"]) == {}

    def test_checkbox_values_typed(self) -> None:
        desired = parse_capability_form(
            {"editor": {"edit_posts": "1", "delete_posts": "0", "publish_posts": True}}
        )
        assert desired == {
            "editor": {"edit_posts": True, "delete_posts": False, "publish_posts": True}
        }

    def test_unchecked_keys_kept_as_false(self) -> None:
        desired = parse_capability_form({"author": {"upload_files": ""}})
        assert desired == {"author": {"upload_files": False}}

    def test_non_mapping_row_dropped(self) -> None:
        desired = parse_capability_form({"editor": "1", "author": {"read": "1"}})
        assert desired == {"author": {"read": True}}


class TestCapabilityUniverse:
    def test_union_of_all_rows(self) -> None:
        universe = capability_universe(
            {"editor": {"a": True, "b": False}, "author": {"c": False}}
        )
        assert universe == {"a", "b", "c"}


class TestReconcile:
    """Tests for reconcile."""

    def test_grant_and_revoke(self) -> None:
        current = {"editor": {"edit_posts", "delete_posts"}}
        desired = {"editor": {"edit_posts": True, "delete_posts": False, "publish_posts": True}}

        plan = reconcile(current, desired)

        assert plan["editor"].grant == {"publish_posts"}
        assert plan["editor"].revoke == {"delete_posts"}

    def test_capabilities_outside_universe_untouched(self) -> None:
        current = {"editor": {"edit_posts", "moderate_comments"}}
        desired = {"editor": {"edit_posts": False}}

        plan = reconcile(current, desired)

        assert plan["editor"].revoke == {"edit_posts"}
        assert "moderate_comments" not in plan["editor"].revoke

    def test_role_missing_from_submission_loses_universe_caps(self) -> None:
        current = {"editor": {"edit_posts"}, "author": {"edit_posts", "read"}}
        desired = {"editor": {"edit_posts": True}}

        plan = reconcile(current, desired)

        assert plan["editor"].is_empty
        assert plan["author"].revoke == {"edit_posts"}
        assert plan["author"].grant == frozenset()

    def test_grants_capability_no_role_holds(self) -> None:
        current = {"editor": set()}
        desired = {"editor": {"brand_new_cap": True}}

        plan = reconcile(current, desired)

        assert plan["editor"].grant == {"brand_new_cap"}

    def test_nothing_submitted_touches_nothing(self) -> None:
        current = {"editor": {"edit_posts"}, "author": {"read"}}
        assert reconcile(current, {}) == {}
        assert reconcile(current, None) == {}

    def test_unknown_role_in_submission_ignored(self) -> None:
        current = {"editor": {"edit_posts"}}
        desired = {"editor": {"edit_posts": True}, "ghost": {"edit_posts": True}}

        plan = reconcile(current, desired)

        assert set(plan) == {"editor"}

    def test_only_true_counts_as_wanted(self) -> None:
        current = {"editor": {"edit_posts"}}
        desired = {"editor": {"edit_posts": "1"}}

        plan = reconcile(current, desired)

        assert plan["editor"].revoke == {"edit_posts"}

    def test_idempotent(self) -> None:
        current = {
            "administrator": {"read", "manage_options"},
            "editor": {"read", "edit_posts", "delete_posts"},
            "author": {"read"},
        }
        desired = {
            "administrator": {"read": True, "edit_posts": True, "delete_posts": True},
            "editor": {"read": True, "edit_posts": True, "delete_posts": False},
            "author": {"read": False, "edit_posts": True},
        }

        first = reconcile(current, desired)
        after = _apply(current, first)
        second = reconcile(after, desired)

        assert any(not c.is_empty for c in first.values())
        assert all(c.is_empty for c in second.values())
        assert after["administrator"] == {"read", "manage_options", "edit_posts", "delete_posts"}
        assert after["author"] == {"edit_posts"}
