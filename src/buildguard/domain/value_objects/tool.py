"""Tools covered by permission templates."""

PROJECT_TOOLS: tuple[str, ...] = (
    "daily_logs",
    "time_tracking",
    "equipment",
    "documents",
    "drawings",
    "schedule",
    "punch_lists",
    "safety",
    "drone_flights",
    "rfis",
    "materials",
    "approvals",
)

COMPANY_TOOLS: tuple[str, ...] = (
    "directory",
    "subcontractors",
    "certifications",
    "financials",
    "reports",
    "analytics",
    "label_library",
    "settings",
    "user_management",
    "warnings",
)


def is_company_tool(tool: str) -> bool:
    """Company tools are governed by the company template, others per project."""
    return tool in COMPANY_TOOLS
