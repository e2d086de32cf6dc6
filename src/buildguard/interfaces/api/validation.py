"""Type checks for JSON request bodies.

Every helper raises TypeError on a wrong JSON type; resources answer 400.
"""

from datetime import UTC, datetime
from typing import Any


def require_object(value: Any, name: str = "Request body") -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{name} must be a JSON object")
    return value


def require_bool(value: Any, name: str) -> bool:
    """Only true JSON booleans; "false", 0 and null are rejected."""
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a boolean")
    return value


def require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def optional_project_id(value: Any) -> str | None:
    """Project ids are compared as strings; numeric ids are accepted as their text."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError("project_id must be a string")
    return str(value)


def parse_datetime(value: Any) -> datetime | None:
    """ISO 8601 timestamp; naive values are taken as UTC."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(require_str(value, "expires_at"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
