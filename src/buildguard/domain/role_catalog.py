"""Role catalog - static defaults per role.

Each role's permission set is listed explicitly. Hierarchy levels only gate
who may manage whom; a higher level does not imply a superset of
permissions.
"""

from buildguard.domain.value_objects import DailyLogVisibility, Permission, Role

P = Permission

_DEFAULT_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(Permission),
    Role.PROJECT_MANAGER: frozenset({
        P.VIEW_PROJECTS, P.CREATE_PROJECTS, P.EDIT_PROJECTS, P.ASSIGN_USERS_TO_PROJECTS,
        P.VIEW_DAILY_LOGS, P.VIEW_ALL_DAILY_LOGS, P.CREATE_DAILY_LOGS, P.EDIT_DAILY_LOGS,
        P.APPROVE_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.VIEW_ALL_TIME_ENTRIES, P.CLOCK_IN_OUT, P.EDIT_TIME_ENTRIES,
        P.APPROVE_TIME_ENTRIES,
        P.VIEW_EQUIPMENT, P.MANAGE_EQUIPMENT,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS, P.DELETE_DOCUMENTS,
        P.VIEW_FINANCIALS, P.MANAGE_FINANCIALS, P.APPROVE_EXPENSES,
        P.VIEW_SAFETY, P.MANAGE_SAFETY, P.VIEW_INCIDENTS, P.CREATE_INCIDENTS,
        P.VIEW_USERS,
        P.VIEW_REPORTS, P.EXPORT_REPORTS, P.VIEW_ANALYTICS,
        P.VIEW_WARNINGS, P.ISSUE_WARNINGS, P.MANAGE_WARNINGS,
        P.ACCESS_APPROVAL_QUEUE,
    }),
    Role.DEVELOPER: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS, P.VIEW_ALL_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.VIEW_ALL_TIME_ENTRIES,
        P.VIEW_DOCUMENTS,
        P.VIEW_FINANCIALS,
        P.VIEW_SAFETY, P.VIEW_INCIDENTS,
        P.VIEW_REPORTS, P.VIEW_ANALYTICS,
    }),
    Role.ARCHITECT: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS,
        P.VIEW_SAFETY, P.VIEW_INCIDENTS, P.CREATE_INCIDENTS,
        P.VIEW_REPORTS,
    }),
    Role.FOREMAN: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS, P.VIEW_ALL_DAILY_LOGS, P.CREATE_DAILY_LOGS, P.EDIT_DAILY_LOGS,
        P.APPROVE_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.VIEW_ALL_TIME_ENTRIES, P.CLOCK_IN_OUT, P.EDIT_TIME_ENTRIES,
        P.APPROVE_TIME_ENTRIES,
        P.VIEW_EQUIPMENT, P.MANAGE_EQUIPMENT,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS,
        P.VIEW_SAFETY, P.MANAGE_SAFETY, P.VIEW_INCIDENTS, P.CREATE_INCIDENTS,
        P.VIEW_WARNINGS, P.ISSUE_WARNINGS,
        P.ACCESS_APPROVAL_QUEUE,
    }),
    Role.CREW_LEADER: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS, P.CREATE_DAILY_LOGS, P.EDIT_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.CLOCK_IN_OUT, P.EDIT_TIME_ENTRIES,
        P.VIEW_EQUIPMENT,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS,
        P.VIEW_SAFETY, P.VIEW_INCIDENTS, P.CREATE_INCIDENTS,
        P.VIEW_WARNINGS,
    }),
    Role.OFFICE_STAFF: frozenset({
        P.VIEW_PROJECTS, P.CREATE_PROJECTS, P.EDIT_PROJECTS,
        P.VIEW_DAILY_LOGS, P.VIEW_ALL_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.VIEW_ALL_TIME_ENTRIES, P.EDIT_TIME_ENTRIES,
        P.VIEW_EQUIPMENT, P.MANAGE_EQUIPMENT,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS, P.DELETE_DOCUMENTS,
        P.VIEW_FINANCIALS, P.MANAGE_FINANCIALS,
        P.VIEW_SAFETY,
        P.VIEW_USERS,
        P.VIEW_REPORTS, P.EXPORT_REPORTS,
    }),
    Role.FIELD_WORKER: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS, P.CREATE_DAILY_LOGS,
        P.VIEW_TIME_TRACKING, P.CLOCK_IN_OUT,
        P.VIEW_DOCUMENTS, P.UPLOAD_DOCUMENTS,
        P.VIEW_SAFETY, P.VIEW_INCIDENTS, P.CREATE_INCIDENTS,
    }),
    Role.VIEWER: frozenset({
        P.VIEW_PROJECTS,
        P.VIEW_DAILY_LOGS,
        P.VIEW_DOCUMENTS,
        P.VIEW_SAFETY,
        P.VIEW_REPORTS,
    }),
}

_DAILY_LOG_VISIBILITY: dict[Role, DailyLogVisibility] = {
    Role.ADMIN: DailyLogVisibility.ALL,
    Role.PROJECT_MANAGER: DailyLogVisibility.ALL,
    Role.DEVELOPER: DailyLogVisibility.ALL,
    Role.ARCHITECT: DailyLogVisibility.ASSIGNED_PROJECTS,
    Role.FOREMAN: DailyLogVisibility.ASSIGNED_PROJECTS,
    Role.CREW_LEADER: DailyLogVisibility.ASSIGNED_PROJECTS,
    Role.OFFICE_STAFF: DailyLogVisibility.ASSIGNED_PROJECTS,
    Role.FIELD_WORKER: DailyLogVisibility.OWN_ONLY,
    Role.VIEWER: DailyLogVisibility.OWN_ONLY,
}

# Crew leader and office staff share level 3.
_HIERARCHY_LEVELS: dict[Role, int] = {
    Role.VIEWER: 1,
    Role.FIELD_WORKER: 2,
    Role.CREW_LEADER: 3,
    Role.OFFICE_STAFF: 3,
    Role.FOREMAN: 4,
    Role.ARCHITECT: 5,
    Role.DEVELOPER: 6,
    Role.PROJECT_MANAGER: 7,
    Role.ADMIN: 8,
}


def default_permissions(role: Role) -> frozenset[Permission]:
    """Permissions a role holds before any override is applied."""
    return _DEFAULT_PERMISSIONS[role]


def default_daily_log_visibility(role: Role) -> DailyLogVisibility:
    return _DAILY_LOG_VISIBILITY[role]


def hierarchy_level(role: Role) -> int:
    """Seniority from 1 (viewer) to 8 (admin)."""
    return _HIERARCHY_LEVELS[role]


def roles_by_hierarchy() -> list[Role]:
    """All roles, most senior first. Ties keep declaration order."""
    return sorted(Role, key=hierarchy_level, reverse=True)
