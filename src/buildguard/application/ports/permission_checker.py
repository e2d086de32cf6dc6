"""Permission checker port - role and override based authorization."""

from typing import Protocol

from buildguard.domain.entities import User
from buildguard.domain.value_objects import Permission


class PermissionChecker(Protocol):
    """Port for yes/no authorization decisions."""

    def has_permission(
        self, permission: Permission, user: User | None, project_id: str | None = None
    ) -> bool: ...
