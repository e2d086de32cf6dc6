"""Domain exceptions.

The API maps PermissionDenied to 403, NotFound to 404 and ValidationError to 400.
"""


class BuildGuardError(Exception):
    """Base exception for buildguard."""


class PermissionDenied(BuildGuardError):
    """Actor lacks the permission an administrative action requires."""


class NotFound(BuildGuardError):
    """No override (or other record) with the given id."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class ValidationError(BuildGuardError):
    """Input rejected before it reaches the override store."""
