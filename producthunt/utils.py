import json

NULL_PLACEHOLDER = "<nil>"


def stringify(value) -> str:
    """Render a decoded JSON value as text.

    Strings pass through, booleans become "true"/"false", numbers use their
    Python text form, containers become compact JSON and null (or a missing
    key) becomes NULL_PLACEHOLDER.

    Example: stringify(None) -> "<nil>", stringify(42) -> "42"
    """
    if value is None:
        return NULL_PLACEHOLDER
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"))


def day_window(date: str) -> tuple[str, str]:
    """Return (posted_after, posted_before) covering the UTC day of date.

    Example: "2024-05-01" -> ("2024-05-01T00:00:00Z", "2024-05-01T23:59:59Z")
    """
    return f"{date}T00:00:00Z", f"{date}T23:59:59Z"
