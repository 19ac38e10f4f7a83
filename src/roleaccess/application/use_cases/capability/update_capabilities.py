"""Update capabilities use case."""

import logging
from collections.abc import Mapping

from roleaccess.application.dto.capability_dto import CapabilityUpdateResult
from roleaccess.application.ports import AccessChecker
from roleaccess.application.use_cases.capability.apply_changes import (
    apply_capability_changes,
)
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.services.capability_reconciler import (
    parse_capability_form,
    reconcile,
)
from roleaccess.domain.value_objects import UserContext

logger = logging.getLogger(__name__)


class UpdateCapabilitiesUseCase:
    """Apply a submitted capability form as a toggle-by-toggle diff."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_checker: AccessChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_checker = access_checker

    async def execute(
        self,
        actor: UserContext,
        submitted: Mapping[str, Mapping[str, object]] | None,
    ) -> CapabilityUpdateResult:
        """Reconcile submitted checkboxes with current grants.

        ``submitted`` must carry every rendered checkbox, unchecked ones
        included. Capabilities not in the submission are left untouched.
        """
        if not await self._access_checker.can_manage(actor):
            logger.warning("Capability update denied for roles %s", sorted(actor.roles))
            raise PermissionDenied("User may not manage access settings")

        desired = parse_capability_form(submitted)
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()
            plan = reconcile({r.id: r.granted for r in roles}, desired)
            await apply_capability_changes(uow.roles, plan)

        return CapabilityUpdateResult(changes=plan)
