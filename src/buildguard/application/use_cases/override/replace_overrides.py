"""Replace overrides use case - full refresh from the admin API."""

from buildguard.application.ports import OverrideStore, PermissionChecker
from buildguard.domain.entities import (
    ProjectPermissionOverride,
    User,
    UserPermissionOverride,
)
from buildguard.domain.exceptions import PermissionDenied
from buildguard.domain.value_objects import Permission


class ReplaceOverridesUseCase:
    """Load a freshly fetched override set. Last fetched wins."""

    def __init__(
        self,
        override_store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._store = override_store
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor: User | None,
        user_overrides: list[UserPermissionOverride],
        project_overrides: list[ProjectPermissionOverride],
    ) -> None:
        if not self._permission_checker.has_permission(
            Permission.MANAGE_PERMISSIONS, actor
        ):
            raise PermissionDenied("User does not have permission to manage permissions")
        self._store.replace_all(user_overrides, project_overrides)
