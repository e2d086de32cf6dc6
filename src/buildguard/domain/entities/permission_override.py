"""Per-user and per-project permission overrides."""

from dataclasses import dataclass
from datetime import UTC, datetime

from buildguard.domain.value_objects import Permission


@dataclass(frozen=True)
class UserPermissionOverride:
    """Standing grant or revocation of one permission for one user."""

    id: str
    user_id: str
    permission: Permission
    granted: bool

    @property
    def display_status(self) -> str:
        return "Added" if self.granted else "Removed"


@dataclass(frozen=True)
class ProjectPermissionOverride:
    """Grant or revocation scoped to one project, optionally temporary."""

    id: str
    user_id: str
    project_id: str
    permission: Permission
    granted: bool
    expires_at: datetime | None = None

    def __post_init__(self) -> None:
        # Naive deadlines are UTC.
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            object.__setattr__(self, "expires_at", self.expires_at.replace(tzinfo=UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Expired overrides stay in the collection but are ignored."""
        if self.expires_at is None:
            return False
        return self.expires_at < (now or datetime.now(UTC))
