"""Daily log visibility levels."""

from enum import StrEnum


class DailyLogVisibility(StrEnum):
    """Which daily log records a user may list."""

    ALL = "ALL"
    ASSIGNED_PROJECTS = "ASSIGNED_PROJECTS"
    OWN_ONLY = "OWN_ONLY"

    @property
    def display_name(self) -> str:
        return {
            DailyLogVisibility.ALL: "All Logs",
            DailyLogVisibility.ASSIGNED_PROJECTS: "Assigned Projects Only",
            DailyLogVisibility.OWN_ONLY: "Own Logs Only",
        }[self]

    @property
    def description(self) -> str:
        return {
            DailyLogVisibility.ALL: "Can see all daily logs in the company",
            DailyLogVisibility.ASSIGNED_PROJECTS: "Only logs from projects they're assigned to",
            DailyLogVisibility.OWN_ONLY: "Only logs they've submitted",
        }[self]
