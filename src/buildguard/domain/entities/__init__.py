"""Domain entities."""

from buildguard.domain.entities.permission_override import (
    ProjectPermissionOverride,
    UserPermissionOverride,
)
from buildguard.domain.entities.permission_template import (
    PermissionTemplate,
    ProjectPermissionAssignment,
    UserCompanyPermission,
    UserPermissions,
)
from buildguard.domain.entities.user import User

__all__ = [
    "PermissionTemplate",
    "ProjectPermissionAssignment",
    "ProjectPermissionOverride",
    "User",
    "UserCompanyPermission",
    "UserPermissionOverride",
    "UserPermissions",
]
