"""Tool-level permission templates resolved by the backend."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from buildguard.domain.value_objects import AccessLevel


@dataclass
class PermissionTemplate:
    """Bundle of per-tool access levels, scoped to a project or the company."""

    id: str
    name: str
    scope: str
    tool_permissions: dict[str, str] = field(default_factory=dict)
    granular_permissions: dict[str, Any] = field(default_factory=dict)
    description: str | None = None
    is_system_default: bool = False
    is_protected: bool = False
    sort_order: int = 0
    usage_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_project_scope(self) -> bool:
        return self.scope == "project"

    @property
    def is_company_scope(self) -> bool:
        return self.scope == "company"

    def access_level(self, tool: str) -> AccessLevel:
        """Level granted for tool; absent or unrecognised entries mean none."""
        return AccessLevel.parse(self.tool_permissions.get(tool))

    def has_tool_access(
        self, tool: str, required: AccessLevel = AccessLevel.READ_ONLY
    ) -> bool:
        return self.access_level(tool).at_least(required)


@dataclass
class ProjectPermissionAssignment:
    """Project template assigned to a user on one project."""

    id: str
    project_id: str
    project_name: str | None = None
    project_template_id: str | None = None
    project_template_name: str | None = None
    role_override: str | None = None
    assigned_by: str | None = None


@dataclass
class UserCompanyPermission:
    """Company template assigned to a user."""

    id: str
    user_id: str
    company_template_id: str | None = None
    company_template_name: str | None = None
    assigned_by: str | None = None
    assigned_at: datetime | None = None


@dataclass
class UserPermissions:
    """User's template state as resolved server-side.

    effective_permissions is the backend's merge of company and project
    templates and is taken as-is.
    """

    user_id: str
    company_template: PermissionTemplate | None = None
    project_assignments: list[ProjectPermissionAssignment] = field(default_factory=list)
    effective_permissions: dict[str, str] = field(default_factory=dict)

    def access_level(self, tool: str) -> AccessLevel:
        return AccessLevel.parse(self.effective_permissions.get(tool))
