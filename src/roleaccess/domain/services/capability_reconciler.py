"""Capability reconciler - diff submitted toggles against current grants."""

from collections.abc import Mapping, Set

from roleaccess.domain.markers import is_truthy
from roleaccess.domain.value_objects import CapabilityChanges

DesiredCapabilities = Mapping[str, Mapping[str, bool]]


def parse_capability_form(raw: object) -> dict[str, dict[str, bool]]:
    """Type a submitted form payload ``{role: {cap: "1" | "0"}}``.

    Every rendered key is kept, unchecked ones as False, so the reconciler can
    tell an explicit revoke from a capability that was not offered. Rows that
    are not objects are dropped.
    """
    desired: dict[str, dict[str, bool]] = {}
    if not isinstance(raw, Mapping):
        return desired
    for role_id, caps in raw.items():
        if not isinstance(caps, Mapping):
            continue
        desired[str(role_id)] = {str(cap): is_truthy(value) for cap, value in caps.items()}
    return desired


def capability_universe(desired: DesiredCapabilities) -> frozenset[str]:
    """Every capability mentioned anywhere in the submission."""
    return frozenset(cap for caps in desired.values() for cap in caps)


def reconcile(
    current: Mapping[str, Set[str]],
    desired: DesiredCapabilities | None,
) -> dict[str, CapabilityChanges]:
    """Plan grants and revokes for every current role.

    Only capabilities in the submitted universe are considered; anything else a
    role holds is left alone. A role missing from ``desired`` has every
    universe capability revoked. Roles in ``desired`` that are not in
    ``current`` are ignored. Nothing submitted means nothing changes.
    """
    if not desired:
        return {}

    universe = capability_universe(desired)
    plan: dict[str, CapabilityChanges] = {}
    for role_id, held in current.items():
        wanted = desired.get(role_id) or {}
        grant: set[str] = set()
        revoke: set[str] = set()
        for cap in universe:
            wants = wanted.get(cap) is True
            has = cap in held
            if wants and not has:
                grant.add(cap)
            elif has and not wants:
                revoke.add(cap)
        plan[role_id] = CapabilityChanges(grant=frozenset(grant), revoke=frozenset(revoke))
    return plan
