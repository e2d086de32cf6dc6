"""User roles."""

from enum import StrEnum


class Role(StrEnum):
    """Role held by a user. Exactly one per user."""

    ADMIN = "ADMIN"
    PROJECT_MANAGER = "PROJECT_MANAGER"
    DEVELOPER = "DEVELOPER"
    ARCHITECT = "ARCHITECT"
    FOREMAN = "FOREMAN"
    CREW_LEADER = "CREW_LEADER"
    OFFICE_STAFF = "OFFICE_STAFF"
    FIELD_WORKER = "FIELD_WORKER"
    VIEWER = "VIEWER"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()
