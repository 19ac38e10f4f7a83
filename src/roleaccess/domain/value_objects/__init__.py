"""Domain value objects."""

from roleaccess.domain.value_objects.capability_changes import CapabilityChanges
from roleaccess.domain.value_objects.hidden_elements import HiddenElements, MetaBoxRemoval
from roleaccess.domain.value_objects.role_selector import RoleSelector
from roleaccess.domain.value_objects.ui_hide_kind import UIHideKind
from roleaccess.domain.value_objects.user_context import UserContext

__all__ = [
    "CapabilityChanges",
    "HiddenElements",
    "MetaBoxRemoval",
    "RoleSelector",
    "UIHideKind",
    "UserContext",
]
