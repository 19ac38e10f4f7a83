"""Truthy markers used by form payloads and stored documents."""

_TRUE_STRINGS = frozenset({"1", "true", "on", "yes"})


def is_truthy(value: object) -> bool:
    """Return True for True, 1, "1", "true", "on" and "yes"; False otherwise."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False
