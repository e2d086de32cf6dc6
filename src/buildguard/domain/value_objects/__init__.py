"""Domain value objects."""

from buildguard.domain.value_objects.access_level import AccessLevel
from buildguard.domain.value_objects.daily_log_visibility import DailyLogVisibility
from buildguard.domain.value_objects.permission import Permission, PermissionCategory
from buildguard.domain.value_objects.role import Role
from buildguard.domain.value_objects.tool import COMPANY_TOOLS, PROJECT_TOOLS, is_company_tool

__all__ = [
    "AccessLevel",
    "COMPANY_TOOLS",
    "DailyLogVisibility",
    "PROJECT_TOOLS",
    "Permission",
    "PermissionCategory",
    "Role",
    "is_company_tool",
]
