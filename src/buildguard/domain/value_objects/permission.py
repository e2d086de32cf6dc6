"""Permission capabilities and their display categories."""

from enum import StrEnum


class PermissionCategory(StrEnum):
    """Display grouping for permissions. Has no effect on evaluation."""

    PROJECTS = "Projects"
    DAILY_LOGS = "Daily Logs"
    TIME_TRACKING = "Time Tracking"
    EQUIPMENT = "Equipment"
    DOCUMENTS = "Documents"
    FINANCIALS = "Financials"
    SAFETY = "Safety & Quality"
    USERS = "User Management"
    ADMIN = "Administration"
    REPORTS = "Reports & Analytics"
    WARNINGS = "Warnings"
    APPROVALS = "Approvals"

    @property
    def permissions(self) -> list["Permission"]:
        """Permissions in this category, in declaration order."""
        return [p for p in Permission if p.category is self]


class Permission(StrEnum):
    """Capabilities a user can hold. Closed set."""

    # Projects
    VIEW_PROJECTS = "view_projects"
    CREATE_PROJECTS = "create_projects"
    EDIT_PROJECTS = "edit_projects"
    DELETE_PROJECTS = "delete_projects"
    ASSIGN_USERS_TO_PROJECTS = "assign_users_to_projects"

    # Daily logs
    VIEW_DAILY_LOGS = "view_daily_logs"
    VIEW_ALL_DAILY_LOGS = "view_all_daily_logs"
    CREATE_DAILY_LOGS = "create_daily_logs"
    EDIT_DAILY_LOGS = "edit_daily_logs"
    DELETE_DAILY_LOGS = "delete_daily_logs"
    APPROVE_DAILY_LOGS = "approve_daily_logs"

    # Time tracking
    VIEW_TIME_TRACKING = "view_time_tracking"
    VIEW_ALL_TIME_ENTRIES = "view_all_time_entries"
    CLOCK_IN_OUT = "clock_in_out"
    EDIT_TIME_ENTRIES = "edit_time_entries"
    APPROVE_TIME_ENTRIES = "approve_time_entries"

    # Equipment
    VIEW_EQUIPMENT = "view_equipment"
    MANAGE_EQUIPMENT = "manage_equipment"

    # Documents
    VIEW_DOCUMENTS = "view_documents"
    UPLOAD_DOCUMENTS = "upload_documents"
    DELETE_DOCUMENTS = "delete_documents"

    # Financials
    VIEW_FINANCIALS = "view_financials"
    MANAGE_FINANCIALS = "manage_financials"
    APPROVE_EXPENSES = "approve_expenses"

    # Safety & quality
    VIEW_SAFETY = "view_safety"
    MANAGE_SAFETY = "manage_safety"
    VIEW_INCIDENTS = "view_incidents"
    CREATE_INCIDENTS = "create_incidents"

    # User management
    VIEW_USERS = "view_users"
    MANAGE_USERS = "manage_users"
    ASSIGN_ROLES = "assign_roles"

    # Administration
    MANAGE_COMPANY_SETTINGS = "manage_company_settings"
    MANAGE_MODULES = "manage_modules"
    MANAGE_PERMISSIONS = "manage_permissions"
    VIEW_AUDIT_LOGS = "view_audit_logs"

    # Reports & analytics
    VIEW_REPORTS = "view_reports"
    EXPORT_REPORTS = "export_reports"
    VIEW_ANALYTICS = "view_analytics"

    # Warnings & discipline
    VIEW_WARNINGS = "view_warnings"
    ISSUE_WARNINGS = "issue_warnings"
    MANAGE_WARNINGS = "manage_warnings"

    # Approvals
    ACCESS_APPROVAL_QUEUE = "access_approval_queue"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self) or self.value.replace("_", " ").title()

    @property
    def category(self) -> PermissionCategory:
        return _CATEGORIES[self]


# Only names that differ from the title-cased wire value are listed.
_DISPLAY_NAMES: dict[Permission, str] = {
    Permission.ASSIGN_USERS_TO_PROJECTS: "Assign Users to Projects",
    Permission.CLOCK_IN_OUT: "Clock In/Out",
}

_CATEGORY_MEMBERS: dict[PermissionCategory, tuple[Permission, ...]] = {
    PermissionCategory.PROJECTS: (
        Permission.VIEW_PROJECTS,
        Permission.CREATE_PROJECTS,
        Permission.EDIT_PROJECTS,
        Permission.DELETE_PROJECTS,
        Permission.ASSIGN_USERS_TO_PROJECTS,
    ),
    PermissionCategory.DAILY_LOGS: (
        Permission.VIEW_DAILY_LOGS,
        Permission.VIEW_ALL_DAILY_LOGS,
        Permission.CREATE_DAILY_LOGS,
        Permission.EDIT_DAILY_LOGS,
        Permission.DELETE_DAILY_LOGS,
        Permission.APPROVE_DAILY_LOGS,
    ),
    PermissionCategory.TIME_TRACKING: (
        Permission.VIEW_TIME_TRACKING,
        Permission.VIEW_ALL_TIME_ENTRIES,
        Permission.CLOCK_IN_OUT,
        Permission.EDIT_TIME_ENTRIES,
        Permission.APPROVE_TIME_ENTRIES,
    ),
    PermissionCategory.EQUIPMENT: (
        Permission.VIEW_EQUIPMENT,
        Permission.MANAGE_EQUIPMENT,
    ),
    PermissionCategory.DOCUMENTS: (
        Permission.VIEW_DOCUMENTS,
        Permission.UPLOAD_DOCUMENTS,
        Permission.DELETE_DOCUMENTS,
    ),
    PermissionCategory.FINANCIALS: (
        Permission.VIEW_FINANCIALS,
        Permission.MANAGE_FINANCIALS,
        Permission.APPROVE_EXPENSES,
    ),
    PermissionCategory.SAFETY: (
        Permission.VIEW_SAFETY,
        Permission.MANAGE_SAFETY,
        Permission.VIEW_INCIDENTS,
        Permission.CREATE_INCIDENTS,
    ),
    PermissionCategory.USERS: (
        Permission.VIEW_USERS,
        Permission.MANAGE_USERS,
        Permission.ASSIGN_ROLES,
    ),
    PermissionCategory.ADMIN: (
        Permission.MANAGE_COMPANY_SETTINGS,
        Permission.MANAGE_MODULES,
        Permission.MANAGE_PERMISSIONS,
        Permission.VIEW_AUDIT_LOGS,
    ),
    PermissionCategory.REPORTS: (
        Permission.VIEW_REPORTS,
        Permission.EXPORT_REPORTS,
        Permission.VIEW_ANALYTICS,
    ),
    PermissionCategory.WARNINGS: (
        Permission.VIEW_WARNINGS,
        Permission.ISSUE_WARNINGS,
        Permission.MANAGE_WARNINGS,
    ),
    PermissionCategory.APPROVALS: (Permission.ACCESS_APPROVAL_QUEUE,),
}

_CATEGORIES: dict[Permission, PermissionCategory] = {
    permission: category
    for category, members in _CATEGORY_MEMBERS.items()
    for permission in members
}
