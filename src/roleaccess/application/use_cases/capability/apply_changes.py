"""Apply planned capability changes through the role registry."""

import logging
from collections.abc import Mapping

from roleaccess.application.ports import RoleRegistry
from roleaccess.domain.value_objects import CapabilityChanges

logger = logging.getLogger(__name__)


async def apply_capability_changes(
    registry: RoleRegistry,
    changes: Mapping[str, CapabilityChanges],
) -> list[str]:
    """Grant and revoke per role. Returns ids of roles that were mutated."""
    updated: list[str] = []
    for role_id, change in changes.items():
        if change.is_empty:
            continue
        for cap in sorted(change.grant):
            await registry.grant_capability(role_id, cap)
        for cap in sorted(change.revoke):
            await registry.revoke_capability(role_id, cap)
        logger.info(
            "Role %s: granted %s, revoked %s",
            role_id,
            sorted(change.grant),
            sorted(change.revoke),
        )
        updated.append(role_id)
    return updated
