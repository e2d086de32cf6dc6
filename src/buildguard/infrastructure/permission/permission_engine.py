"""Permission engine - role defaults layered with user and project overrides."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from buildguard.application.ports import OverrideStore
from buildguard.domain import role_catalog
from buildguard.domain.entities import User
from buildguard.domain.value_objects import DailyLogVisibility, Permission, Role

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PermissionEngine:
    """Computes authorization decisions from the role catalog and an override store.

    Precedence, lowest to highest: role default, user-level overrides,
    unexpired project-level overrides for the requested project. Within a
    tier overrides are applied in collection order, so the last match wins.
    A missing user never holds any permission.
    """

    def __init__(
        self,
        override_store: OverrideStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = override_store
        self._clock = clock

    def has_permission(
        self, permission: Permission, user: User | None, project_id: str | None = None
    ) -> bool:
        """Check if user holds permission, optionally within a project."""
        if user is None:
            return False

        granted = permission in role_catalog.default_permissions(user.role)
        snapshot = self._store.snapshot()

        for override in snapshot.user_overrides:
            if override.user_id == user.id and override.permission == permission:
                granted = override.granted

        if project_id is not None:
            now = self._clock()
            for override in snapshot.project_overrides:
                if (
                    override.user_id == user.id
                    and override.project_id == project_id
                    and override.permission == permission
                    and not override.is_expired(now)
                ):
                    granted = override.granted

        return granted

    def effective_permissions(
        self, user: User | None, project_id: str | None = None
    ) -> frozenset[Permission]:
        """All permissions user holds, optionally within a project."""
        if user is None:
            return frozenset()

        permissions = set(role_catalog.default_permissions(user.role))
        snapshot = self._store.snapshot()

        for override in snapshot.user_overrides:
            if override.user_id == user.id:
                _apply(permissions, override.permission, override.granted)

        if project_id is not None:
            now = self._clock()
            for override in snapshot.project_overrides:
                if (
                    override.user_id == user.id
                    and override.project_id == project_id
                    and not override.is_expired(now)
                ):
                    _apply(permissions, override.permission, override.granted)

        return frozenset(permissions)

    def can_manage(self, manager: User | None, target: User) -> bool:
        """Manager needs manage_users by role default and a strictly higher level.

        Overrides are not consulted here.
        """
        if manager is None:
            return False
        if Permission.MANAGE_USERS not in role_catalog.default_permissions(manager.role):
            logger.debug("User %s (%s) lacks manage_users", manager.id, manager.role)
            return False
        return role_catalog.hierarchy_level(manager.role) > role_catalog.hierarchy_level(
            target.role
        )

    def can_assign_role(self, assigner: User | None, role: Role) -> bool:
        """Roles can only be handed out strictly below the assigner's own level."""
        if assigner is None:
            return False
        if Permission.ASSIGN_ROLES not in role_catalog.default_permissions(assigner.role):
            logger.debug("User %s (%s) lacks assign_roles", assigner.id, assigner.role)
            return False
        return role_catalog.hierarchy_level(assigner.role) > role_catalog.hierarchy_level(role)

    def daily_log_visibility(self, user: User) -> DailyLogVisibility:
        # Role-fixed; overrides do not apply.
        return role_catalog.default_daily_log_visibility(user.role)


def _apply(permissions: set[Permission], permission: Permission, granted: bool) -> None:
    if granted:
        permissions.add(permission)
    else:
        permissions.discard(permission)
