"""Update hide rules use case."""

import logging
from collections.abc import Iterable, Mapping, Sequence

from roleaccess.application.dto.ui_hiding_dto import HideRulesUpdateResult
from roleaccess.application.ports import AccessChecker
from roleaccess.domain.entities import UIHideItem
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.services.hide_rule_engine import build_hide_setting
from roleaccess.domain.value_objects import UserContext

logger = logging.getLogger(__name__)


class UpdateHideRulesUseCase:
    """Replace the stored hide rules with a submitted table."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_checker: AccessChecker,
        catalog: Sequence[UIHideItem],
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_checker = access_checker
        self._catalog = catalog

    async def execute(
        self,
        actor: UserContext,
        new_rules: Mapping[str, Iterable[str]],
    ) -> HideRulesUpdateResult:
        """Replace hide rules wholesale. Unknown items or roles raise ValidationError."""
        if not await self._access_checker.can_manage(actor):
            logger.warning("Hide rules update denied for roles %s", sorted(actor.roles))
            raise PermissionDenied("User may not manage access settings")

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()
            setting = build_hide_setting(
                new_rules,
                known_items={item.id for item in self._catalog},
                known_roles={r.id for r in roles},
            )
            await uow.settings.set_ui_hide_settings(setting)

        logger.info("UI hide rules replaced: %d items hidden", len(setting.rules))
        return HideRulesUpdateResult(setting=setting)
