"""Grant override use cases - user-level and project-level."""

from datetime import datetime
from uuid import uuid4

from buildguard.application.ports import OverrideStore, PermissionChecker
from buildguard.domain.entities import (
    ProjectPermissionOverride,
    User,
    UserPermissionOverride,
)
from buildguard.domain.exceptions import PermissionDenied, ValidationError
from buildguard.domain.value_objects import Permission


class GrantUserOverrideUseCase:
    """Add or revoke one permission for a user across all projects."""

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
        user_id: str,
        permission: Permission,
        granted: bool,
    ) -> UserPermissionOverride:
        """Record the override. Actor must have manage_permissions."""
        if not self._permission_checker.has_permission(
            Permission.MANAGE_PERMISSIONS, actor
        ):
            raise PermissionDenied("User does not have permission to manage permissions")

        override = UserPermissionOverride(
            id=str(uuid4()),
            user_id=user_id,
            permission=permission,
            granted=granted,
        )
        self._store.add_user_override(override)
        return override


class GrantProjectOverrideUseCase:
    """Add or revoke one permission for a user on one project, optionally until a deadline."""

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
        user_id: str,
        project_id: str,
        permission: Permission,
        granted: bool,
        expires_at: datetime | None = None,
    ) -> ProjectPermissionOverride:
        """Record the override. Actor must have manage_permissions."""
        if not self._permission_checker.has_permission(
            Permission.MANAGE_PERMISSIONS, actor
        ):
            raise PermissionDenied("User does not have permission to manage permissions")
        if not project_id:
            raise ValidationError("project_id must not be empty")

        override = ProjectPermissionOverride(
            id=str(uuid4()),
            user_id=user_id,
            project_id=project_id,
            permission=permission,
            granted=granted,
            expires_at=expires_at,
        )
        self._store.add_project_override(override)
        return override
