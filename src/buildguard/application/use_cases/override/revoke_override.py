"""Revoke override use case."""

from buildguard.application.ports import OverrideStore, PermissionChecker
from buildguard.domain.entities import User
from buildguard.domain.exceptions import NotFound, PermissionDenied
from buildguard.domain.value_objects import Permission


class RevokeOverrideUseCase:
    """Delete an override so the next lower tier applies again."""

    def __init__(
        self,
        override_store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._store = override_store
        self._permission_checker = permission_checker

    async def execute(self, actor: User | None, override_id: str) -> None:
        """Remove override by id. Actor must have manage_permissions."""
        if not self._permission_checker.has_permission(
            Permission.MANAGE_PERMISSIONS, actor
        ):
            raise PermissionDenied("User does not have permission to manage permissions")

        if not self._store.remove_override(override_id):
            raise NotFound("Override", override_id)
