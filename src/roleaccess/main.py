"""Composition root - wires adapters and use cases for the host."""

import logging
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from roleaccess.application.use_cases.capability.get_capability_matrix import (
    GetCapabilityMatrixUseCase,
)
from roleaccess.application.use_cases.capability.update_capabilities import (
    UpdateCapabilitiesUseCase,
)
from roleaccess.application.use_cases.transfer.export_settings import ExportSettingsUseCase
from roleaccess.application.use_cases.transfer.import_settings import ImportSettingsUseCase
from roleaccess.application.use_cases.ui_hiding.get_hide_rules import GetHideRulesUseCase
from roleaccess.application.use_cases.ui_hiding.resolve_hidden_elements import (
    ResolveHiddenElementsUseCase,
)
from roleaccess.application.use_cases.ui_hiding.update_hide_rules import (
    UpdateHideRulesUseCase,
)
from roleaccess.config import Settings, get_settings
from roleaccess.infrastructure.access.access_checker import RoleAccessChecker
from roleaccess.infrastructure.persistence.postgres.connection import create_pool
from roleaccess.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from roleaccess.infrastructure.ui_hiding.catalog import default_catalog

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class RoleAccessServices:
    """Use cases the host calls from its request handlers."""

    pool: AsyncConnectionPool | None
    get_capability_matrix: GetCapabilityMatrixUseCase
    update_capabilities: UpdateCapabilitiesUseCase
    get_hide_rules: GetHideRulesUseCase
    update_hide_rules: UpdateHideRulesUseCase
    resolve_hidden_elements: ResolveHiddenElementsUseCase
    export_settings: ExportSettingsUseCase
    import_settings: ImportSettingsUseCase


def configure_logging(settings: Settings) -> None:
    """Apply configured log level to the roleaccess loggers."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger("roleaccess").setLevel(level)


def create_roleaccess_services(
    settings: Settings | None = None,
    uow_factory: object | None = None,
) -> RoleAccessServices:
    """Build pool, unit of work factory, access checker and use cases.

    ``uow_factory`` replaces the PostgreSQL unit of work when given; no pool
    is created then.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    pool = None
    if uow_factory is None:
        pool = create_pool(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        uow_factory = create_uow_factory(pool, settings.ui_hide_option_name)

    access_checker = RoleAccessChecker(settings.manager_roles)
    catalog = default_catalog()

    return RoleAccessServices(
        pool=pool,
        get_capability_matrix=GetCapabilityMatrixUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
        ),
        update_capabilities=UpdateCapabilitiesUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
        ),
        get_hide_rules=GetHideRulesUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
            catalog=catalog,
        ),
        update_hide_rules=UpdateHideRulesUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
            catalog=catalog,
        ),
        resolve_hidden_elements=ResolveHiddenElementsUseCase(
            unit_of_work_factory=uow_factory,
            catalog=catalog,
        ),
        export_settings=ExportSettingsUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
            version=settings.export_version,
        ),
        import_settings=ImportSettingsUseCase(
            unit_of_work_factory=uow_factory,
            access_checker=access_checker,
            catalog=catalog,
        ),
    )
