"""Get hide rules use case."""

from collections.abc import Sequence

from roleaccess.application.dto.capability_dto import RoleColumn
from roleaccess.application.dto.ui_hiding_dto import HideRulesView
from roleaccess.application.ports import AccessChecker
from roleaccess.domain.entities import UIHideItem
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.value_objects import UserContext


class GetHideRulesUseCase:
    """Load catalog, roles and stored hide rules for the admin form."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_checker: AccessChecker,
        catalog: Sequence[UIHideItem],
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_checker = access_checker
        self._catalog = catalog

    async def execute(self, actor: UserContext) -> HideRulesView:
        if not await self._access_checker.can_manage(actor):
            raise PermissionDenied("User may not manage access settings")

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()
            setting = await uow.settings.get_ui_hide_settings()

        return HideRulesView(
            items=list(self._catalog),
            roles=[RoleColumn(id=r.id, name=r.name) for r in roles],
            setting=setting,
        )
