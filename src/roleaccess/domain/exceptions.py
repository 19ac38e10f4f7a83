"""Domain exceptions."""

from enum import StrEnum


class RoleAccessError(Exception):
    """Base exception for roleaccess."""

    pass


class PermissionDenied(RoleAccessError):
    """Actor is not allowed to manage access settings."""

    pass


class NotFound(RoleAccessError):
    """Requested role was not found."""

    pass


class ValidationError(RoleAccessError):
    """Validation failed for input data."""

    pass


class ParseErrorKind(StrEnum):
    """Structural failures of an imported settings document."""

    MALFORMED_JSON = "malformed_json"
    MISSING_FIELD = "missing_field"


class ParseError(RoleAccessError):
    """Imported settings document could not be used."""

    kind: ParseErrorKind


class MalformedJSON(ParseError):
    """Input text is not a JSON object."""

    kind = ParseErrorKind.MALFORMED_JSON


class MissingField(ParseError):
    """Required top-level key is absent."""

    kind = ParseErrorKind.MISSING_FIELD

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field
