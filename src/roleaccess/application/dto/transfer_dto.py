"""Export/import DTOs."""

from dataclasses import dataclass

from roleaccess.domain.entities import ExportDocument


@dataclass
class ExportOutput:
    """Serialized export ready to be offered as a download."""

    document: ExportDocument
    content: str
    filename: str


@dataclass
class ImportResult:
    """Outcome of an import."""

    updated_roles: list[str]
    skipped_roles: list[str]
    hide_entries_applied: int
    notice: str = "Settings imported successfully."
