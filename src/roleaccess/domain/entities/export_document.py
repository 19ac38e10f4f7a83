"""Export document - portable snapshot of access settings."""

from dataclasses import dataclass, field


@dataclass
class ExportDocument:
    """Snapshot of true capability grants per role plus UI hide rules.

    ``ui_hiding`` keeps the per-pair marker so an import can unhide as well as
    hide. ``malformed_roles`` lists capability rows that were not objects.
    """

    version: str
    generated_at: str
    capabilities: dict[str, frozenset[str]]
    ui_hiding: dict[str, dict[str, bool]]
    malformed_roles: frozenset[str] = field(default_factory=frozenset)
