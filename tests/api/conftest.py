"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from buildguard.infrastructure.persistence.memory.override_store import InMemoryOverrideStore
from buildguard.main import create_buildguard_app

ADMIN_HEADERS = {"X-User-Id": "admin-1", "X-User-Role": "ADMIN"}
WORKER_HEADERS = {"X-User-Id": "worker-1", "X-User-Role": "FIELD_WORKER"}
VIEWER_HEADERS = {"X-User-Id": "viewer-1", "X-User-Role": "VIEWER"}


@pytest.fixture
def store() -> InMemoryOverrideStore:
    """Store shared by all requests in a test."""
    return InMemoryOverrideStore()


@pytest.fixture
def app(store: InMemoryOverrideStore):
    """Fully wired Falcon ASGI app over the test store."""
    return create_buildguard_app(override_store=store)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
