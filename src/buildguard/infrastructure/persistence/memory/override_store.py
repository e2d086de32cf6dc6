"""In-memory override store.

Both collections live in one immutable snapshot that is replaced wholesale
on every write, so a reader never sees a half-applied update. Writers are
serialized with a lock.
"""

import logging
import threading
from collections.abc import Iterable

from buildguard.application.ports.override_store import OverrideSnapshot
from buildguard.domain.entities import ProjectPermissionOverride, UserPermissionOverride

logger = logging.getLogger(__name__)


class InMemoryOverrideStore:
    """Holds user-level and project-level overrides in insertion order.

    Duplicates for the same key are kept; evaluation applies them in order so
    the last one wins.
    """

    def __init__(
        self,
        user_overrides: Iterable[UserPermissionOverride] = (),
        project_overrides: Iterable[ProjectPermissionOverride] = (),
    ) -> None:
        self._lock = threading.Lock()
        self._snapshot = OverrideSnapshot(tuple(user_overrides), tuple(project_overrides))

    def snapshot(self) -> OverrideSnapshot:
        return self._snapshot

    def get(
        self, override_id: str
    ) -> UserPermissionOverride | ProjectPermissionOverride | None:
        snap = self._snapshot
        for override in (*snap.user_overrides, *snap.project_overrides):
            if override.id == override_id:
                return override
        return None

    def add_user_override(self, override: UserPermissionOverride) -> None:
        with self._lock:
            snap = self._snapshot
            self._snapshot = snap._replace(user_overrides=(*snap.user_overrides, override))
        logger.info(
            "Added user override %s: user=%s permission=%s granted=%s",
            override.id,
            override.user_id,
            override.permission,
            override.granted,
        )

    def add_project_override(self, override: ProjectPermissionOverride) -> None:
        with self._lock:
            snap = self._snapshot
            self._snapshot = snap._replace(
                project_overrides=(*snap.project_overrides, override)
            )
        logger.info(
            "Added project override %s: user=%s project=%s permission=%s granted=%s",
            override.id,
            override.user_id,
            override.project_id,
            override.permission,
            override.granted,
        )

    def remove_override(self, override_id: str) -> bool:
        """Remove every override with this id from both collections."""
        with self._lock:
            snap = self._snapshot
            new = OverrideSnapshot(
                tuple(o for o in snap.user_overrides if o.id != override_id),
                tuple(o for o in snap.project_overrides if o.id != override_id),
            )
            removed = new.size != snap.size
            self._snapshot = new
        if removed:
            logger.info("Removed override %s", override_id)
        return removed

    def replace_all(
        self,
        user_overrides: Iterable[UserPermissionOverride],
        project_overrides: Iterable[ProjectPermissionOverride],
    ) -> None:
        """Swap in a freshly fetched set of overrides."""
        new = OverrideSnapshot(tuple(user_overrides), tuple(project_overrides))
        with self._lock:
            self._snapshot = new
        logger.info(
            "Replaced overrides: %d user-level, %d project-level",
            len(new.user_overrides),
            len(new.project_overrides),
        )
