"""Override store port - in-memory override collections."""

from collections.abc import Iterable
from typing import NamedTuple, Protocol

from buildguard.domain.entities import ProjectPermissionOverride, UserPermissionOverride


class OverrideSnapshot(NamedTuple):
    """Both override collections as of one point in time."""

    user_overrides: tuple[UserPermissionOverride, ...]
    project_overrides: tuple[ProjectPermissionOverride, ...]

    @property
    def size(self) -> int:
        return len(self.user_overrides) + len(self.project_overrides)


class OverrideStore(Protocol):
    """Port for the override collections the engine evaluates against."""

    def snapshot(self) -> OverrideSnapshot: ...

    def get(
        self, override_id: str
    ) -> UserPermissionOverride | ProjectPermissionOverride | None: ...

    def add_user_override(self, override: UserPermissionOverride) -> None: ...

    def add_project_override(self, override: ProjectPermissionOverride) -> None: ...

    def remove_override(self, override_id: str) -> bool: ...

    def replace_all(
        self,
        user_overrides: Iterable[UserPermissionOverride],
        project_overrides: Iterable[ProjectPermissionOverride],
    ) -> None: ...
