"""Resolve hidden elements use case."""

from collections.abc import Sequence

from roleaccess.domain.entities import UIHideItem
from roleaccess.domain.services.hide_rule_engine import resolve_hidden_elements
from roleaccess.domain.value_objects import HiddenElements, UserContext


class ResolveHiddenElementsUseCase:
    """Tell the host which menus, panels and styles to remove for a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: Sequence[UIHideItem],
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self, user: UserContext) -> HiddenElements:
        """Evaluate stored hide rules for the user. Super-admins get nothing hidden."""
        if user.is_super_admin:
            return HiddenElements()

        async with self._uow_factory() as uow:
            setting = await uow.settings.get_ui_hide_settings()

        return resolve_hidden_elements(self._catalog, setting, user)
