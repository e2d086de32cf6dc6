"""Pytest fixtures for buildguard tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from buildguard.domain.entities import (
    ProjectPermissionOverride,
    User,
    UserPermissionOverride,
)
from buildguard.domain.value_objects import Permission, Role
from buildguard.infrastructure.permission.permission_engine import PermissionEngine
from buildguard.infrastructure.persistence.memory.override_store import InMemoryOverrideStore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

_ids = count(1)


# --- Builders ---


def make_user(role: Role, user_id: str | None = None) -> User:
    """User with the given role and a generated id unless one is passed."""
    return User(id=user_id or f"user-{next(_ids)}", role=role)


def user_override(
    user: User, permission: Permission, granted: bool
) -> UserPermissionOverride:
    return UserPermissionOverride(
        id=f"uo-{next(_ids)}",
        user_id=user.id,
        permission=permission,
        granted=granted,
    )


def project_override(
    user: User,
    project_id: str,
    permission: Permission,
    granted: bool,
    expires_at: datetime | None = None,
) -> ProjectPermissionOverride:
    return ProjectPermissionOverride(
        id=f"po-{next(_ids)}",
        user_id=user.id,
        project_id=project_id,
        permission=permission,
        granted=granted,
        expires_at=expires_at,
    )


def past() -> datetime:
    return NOW - timedelta(days=1)


def future() -> datetime:
    return NOW + timedelta(days=1)


# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryOverrideStore:
    """Fresh, empty override store for each test."""
    return InMemoryOverrideStore()


@pytest.fixture
def engine(store: InMemoryOverrideStore) -> PermissionEngine:
    """Engine over the test store with the clock pinned to NOW."""
    return PermissionEngine(store, clock=lambda: NOW)


@pytest.fixture
def admin() -> User:
    return make_user(Role.ADMIN, "admin-1")


@pytest.fixture
def field_worker() -> User:
    return make_user(Role.FIELD_WORKER, "worker-1")
