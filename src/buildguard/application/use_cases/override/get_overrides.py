"""Read override use cases - list and fetch."""

from buildguard.application.ports import OverrideSnapshot, OverrideStore, PermissionChecker
from buildguard.domain.entities import (
    ProjectPermissionOverride,
    User,
    UserPermissionOverride,
)
from buildguard.domain.exceptions import NotFound, PermissionDenied
from buildguard.domain.value_objects import Permission


def _can_read(
    permission_checker: PermissionChecker, actor: User | None, owner_id: str | None
) -> bool:
    """Managers read everything; other users only their own overrides."""
    if actor is None:
        return False
    if permission_checker.has_permission(Permission.MANAGE_PERMISSIONS, actor):
        return True
    return owner_id == actor.id


class ListOverridesUseCase:
    """List overrides, optionally for one user."""

    def __init__(
        self,
        override_store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._store = override_store
        self._permission_checker = permission_checker

    async def execute(self, actor: User | None, user_id: str | None = None) -> OverrideSnapshot:
        """Overrides from one snapshot, filtered by user_id when given."""
        if not _can_read(self._permission_checker, actor, user_id):
            raise PermissionDenied("User does not have permission to read overrides")

        snapshot = self._store.snapshot()
        if user_id is None:
            return snapshot
        return OverrideSnapshot(
            user_overrides=tuple(o for o in snapshot.user_overrides if o.user_id == user_id),
            project_overrides=tuple(
                o for o in snapshot.project_overrides if o.user_id == user_id
            ),
        )


class GetOverrideUseCase:
    """Fetch one override by id."""

    def __init__(
        self,
        override_store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._store = override_store
        self._permission_checker = permission_checker

    async def execute(
        self, actor: User | None, override_id: str
    ) -> UserPermissionOverride | ProjectPermissionOverride:
        override = self._store.get(override_id)
        owner_id = override.user_id if override is not None else None
        if not _can_read(self._permission_checker, actor, owner_id):
            raise PermissionDenied("User does not have permission to read overrides")
        if override is None:
            raise NotFound("Override", override_id)
        return override
