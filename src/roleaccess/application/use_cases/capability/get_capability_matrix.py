"""Get capability matrix use case."""

import logging

from roleaccess.application.dto.capability_dto import CapabilityMatrix, RoleColumn
from roleaccess.application.ports import AccessChecker
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.value_objects import UserContext

logger = logging.getLogger(__name__)


class GetCapabilityMatrixUseCase:
    """List every role against every known capability."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_checker: AccessChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_checker = access_checker

    async def execute(self, actor: UserContext) -> CapabilityMatrix:
        """Build the roles x capabilities table. Actor must manage access settings."""
        if not await self._access_checker.can_manage(actor):
            logger.warning("Capability matrix denied for roles %s", sorted(actor.roles))
            raise PermissionDenied("User may not manage access settings")

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()

        universe: set[str] = set()
        for role in roles:
            universe.update(role.capabilities)

        return CapabilityMatrix(
            roles=[RoleColumn(id=r.id, name=r.name) for r in roles],
            capabilities=sorted(universe),
            granted={r.id: r.granted for r in roles},
        )
