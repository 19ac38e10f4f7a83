"""Import settings use case."""

import logging
from collections.abc import Sequence

from roleaccess.application.dto.transfer_dto import ImportResult
from roleaccess.application.ports import AccessChecker
from roleaccess.application.use_cases.capability.apply_changes import (
    apply_capability_changes,
)
from roleaccess.domain.entities import UIHideItem
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.services.hide_rule_engine import merge_hide_rules
from roleaccess.domain.services.settings_transfer import parse_import, plan_import
from roleaccess.domain.value_objects import RoleSelector, UserContext

logger = logging.getLogger(__name__)


class ImportSettingsUseCase:
    """Apply an uploaded settings document to the selected roles."""

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
        raw: str | bytes,
        selector: RoleSelector,
    ) -> ImportResult:
        """Import capabilities (full sync per role) and merge hide rules.

        Structural problems raise ParseError before anything is written.
        Unknown or malformed role rows are skipped.
        """
        if not await self._access_checker.can_manage(actor):
            logger.warning("Settings import denied for roles %s", sorted(actor.roles))
            raise PermissionDenied("User may not manage access settings")

        document = parse_import(raw)

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()
            current = {r.id: r.granted for r in roles}

            plan = plan_import(current, document, selector)
            for role_id in sorted(plan.skipped_roles):
                logger.warning("Import skipped role %s", role_id)
            updated = await apply_capability_changes(uow.roles, plan.capabilities)

            existing = await uow.settings.get_ui_hide_settings()
            merged, applied = merge_hide_rules(
                existing,
                document.ui_hiding,
                selector,
                known_roles=set(current),
                known_items={item.id for item in self._catalog},
            )
            if applied:
                await uow.settings.set_ui_hide_settings(merged)

        logger.info(
            "Settings imported: %d roles updated, %d hide entries applied",
            len(updated),
            applied,
        )
        return ImportResult(
            updated_roles=sorted(updated),
            skipped_roles=sorted(plan.skipped_roles),
            hide_entries_applied=applied,
        )
