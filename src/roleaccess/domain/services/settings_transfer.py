"""Export and import of access settings as a portable JSON document."""

import json
from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field
from datetime import datetime

from roleaccess.domain.entities import ExportDocument, Role, UIHideSetting
from roleaccess.domain.exceptions import MalformedJSON, MissingField
from roleaccess.domain.markers import is_truthy
from roleaccess.domain.value_objects import CapabilityChanges, RoleSelector

REQUIRED_FIELDS = ("capabilities", "ui_hiding")


@dataclass(frozen=True)
class ImportPlan:
    """Per-role full-sync changes and the selected rows that were skipped."""

    capabilities: dict[str, CapabilityChanges] = field(default_factory=dict)
    skipped_roles: frozenset[str] = field(default_factory=frozenset)


def build_export(
    roles: Iterable[Role],
    setting: UIHideSetting,
    version: str,
    generated_at: datetime,
) -> ExportDocument:
    """Snapshot true grants per role and the full hide setting."""
    return ExportDocument(
        version=version,
        generated_at=generated_at.isoformat(),
        capabilities={role.id: role.granted for role in roles},
        ui_hiding=setting.to_document(),
    )


def serialize_export(document: ExportDocument) -> str:
    """Render the export document as JSON text. False grants are never written."""
    payload = {
        "plugin_version": document.version,
        "generated_at": document.generated_at,
        "capabilities": {
            role_id: {cap: True for cap in sorted(caps)}
            for role_id, caps in document.capabilities.items()
        },
        "ui_hiding": {
            item_id: {role_id: True for role_id, hidden in markers.items() if hidden}
            for item_id, markers in document.ui_hiding.items()
        },
    }
    return json.dumps(payload, indent=2)


def parse_import(raw: str | bytes) -> ExportDocument:
    """Parse an uploaded settings document.

    Raises MalformedJSON if the text is not a JSON object and MissingField if
    ``capabilities`` or ``ui_hiding`` is absent. Rows inside those sections
    are not validated further: capability rows that are not objects are
    recorded in ``malformed_roles`` and hide rows that are not objects are
    dropped.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedJSON(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedJSON("Settings document must be a JSON object")

    for name in REQUIRED_FIELDS:
        if name not in data:
            raise MissingField(name)

    capabilities: dict[str, frozenset[str]] = {}
    malformed: set[str] = set()
    raw_caps = data["capabilities"]
    if isinstance(raw_caps, Mapping):
        for role_id, caps in raw_caps.items():
            if not isinstance(caps, Mapping):
                malformed.add(str(role_id))
                continue
            capabilities[str(role_id)] = frozenset(
                str(cap) for cap, value in caps.items() if is_truthy(value)
            )

    ui_hiding: dict[str, dict[str, bool]] = {}
    raw_hiding = data["ui_hiding"]
    if isinstance(raw_hiding, Mapping):
        for item_id, markers in raw_hiding.items():
            if not isinstance(markers, Mapping):
                continue
            ui_hiding[str(item_id)] = {
                str(role_id): is_truthy(marker) for role_id, marker in markers.items()
            }

    return ExportDocument(
        version=str(data.get("plugin_version", "")),
        generated_at=str(data.get("generated_at", "")),
        capabilities=capabilities,
        ui_hiding=ui_hiding,
        malformed_roles=frozenset(malformed),
    )


def plan_import(
    current: Mapping[str, Set[str]],
    document: ExportDocument,
    selector: RoleSelector,
) -> ImportPlan:
    """Plan a full capability sync for each selected role in the document.

    A selected role ends up with exactly the document's grants: held
    capabilities missing from the document are revoked. Roles unknown to the
    registry and malformed rows are skipped.
    """
    changes: dict[str, CapabilityChanges] = {}
    skipped = {role_id for role_id in document.malformed_roles if selector.includes(role_id)}
    for role_id, wanted in document.capabilities.items():
        if not selector.includes(role_id):
            continue
        held = current.get(role_id)
        if held is None:
            skipped.add(role_id)
            continue
        changes[role_id] = CapabilityChanges(
            grant=frozenset(wanted - held),
            revoke=frozenset(held - wanted),
        )
    return ImportPlan(capabilities=changes, skipped_roles=frozenset(skipped))
