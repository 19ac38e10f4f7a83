"""Application ports - interfaces for external adapters."""

from roleaccess.application.ports.access_checker import AccessChecker
from roleaccess.application.ports.role_registry import RoleRegistry
from roleaccess.application.ports.settings_store import SettingsStore
from roleaccess.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessChecker",
    "RoleRegistry",
    "SettingsStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
