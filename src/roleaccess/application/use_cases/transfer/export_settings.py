"""Export settings use case."""

from datetime import UTC, datetime

from roleaccess.application.dto.transfer_dto import ExportOutput
from roleaccess.application.ports import AccessChecker
from roleaccess.domain.exceptions import PermissionDenied
from roleaccess.domain.services.settings_transfer import build_export, serialize_export
from roleaccess.domain.value_objects import UserContext


class ExportSettingsUseCase:
    """Snapshot capability grants and hide rules as a JSON document."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_checker: AccessChecker,
        version: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_checker = access_checker
        self._version = version

    async def execute(self, actor: UserContext) -> ExportOutput:
        """Build the export document. Actor must manage access settings."""
        if not await self._access_checker.can_manage(actor):
            raise PermissionDenied("User may not manage access settings")

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_roles()
            setting = await uow.settings.get_ui_hide_settings()

        now = datetime.now(UTC)
        document = build_export(roles, setting, version=self._version, generated_at=now)
        return ExportOutput(
            document=document,
            content=serialize_export(document),
            filename=f"roleaccess-settings-{now:%Y-%m-%d}.json",
        )
