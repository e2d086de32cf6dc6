"""API resource tests."""

from datetime import UTC, datetime, timedelta

import pytest
from falcon.testing import TestClient

from buildguard.domain.value_objects import Permission, Role
from buildguard.interfaces.api.validation import (
    optional_project_id,
    parse_datetime,
    require_bool,
    require_object,
)

from tests.api.conftest import ADMIN_HEADERS, VIEWER_HEADERS, WORKER_HEADERS
from tests.conftest import make_user, project_override, user_override


class TestValidation:
    def test_parse_datetime_none(self) -> None:
        assert parse_datetime(None) is None

    def test_parse_datetime_naive_taken_as_utc(self) -> None:
        assert parse_datetime("2026-05-01T08:00:00") == datetime(2026, 5, 1, 8, tzinfo=UTC)

    def test_parse_datetime_zulu_suffix(self) -> None:
        assert parse_datetime("2026-05-01T08:00:00Z") == datetime(2026, 5, 1, 8, tzinfo=UTC)

    def test_parse_datetime_rejects_number(self) -> None:
        with pytest.raises(TypeError):
            parse_datetime(12345)

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_require_bool_rejects_non_booleans(self, value) -> None:
        with pytest.raises(TypeError, match="granted"):
            require_bool(value, "granted")

    def test_require_object_rejects_list(self) -> None:
        with pytest.raises(TypeError):
            require_object([{"permission": "view_projects"}])

    @pytest.mark.parametrize(
        ("value", "expected"), [(None, None), ("proj-1", "proj-1"), (5, "5")]
    )
    def test_optional_project_id(self, value, expected) -> None:
        assert optional_project_id(value) == expected

    @pytest.mark.parametrize("value", [True, 1.5, ["proj-1"], {"id": 1}])
    def test_optional_project_id_rejects_other_types(self, value) -> None:
        with pytest.raises(TypeError):
            optional_project_id(value)


class TestRoles:
    def test_get_roles(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles")
        assert r.status_code == 200
        items = r.json["items"]
        assert [i["role"] for i in items][0] == "ADMIN"
        assert len(items) == len(Role)
        viewer = next(i for i in items if i["role"] == "VIEWER")
        assert viewer["hierarchy_level"] == 1
        assert viewer["daily_log_visibility"] == "OWN_ONLY"
        assert "view_projects" in viewer["default_permissions"]


class TestPermissionCheck:
    def test_no_user_fails_closed(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/permissions/check", json={"permission": "view_projects"})
        assert r.status_code == 200
        assert r.json["granted"] is False

    def test_unknown_role_header_fails_closed(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "view_projects"},
            headers={"X-User-Id": "u-1", "X-User-Role": "OVERLORD"},
        )
        assert r.status_code == 200
        assert r.json["granted"] is False

    def test_role_default(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "clock_in_out"},
            headers=WORKER_HEADERS,
        )
        assert r.json["granted"] is True

    def test_project_override_applies(self, client: TestClient, store) -> None:
        worker = make_user(Role.FIELD_WORKER, "worker-1")
        store.add_project_override(
            project_override(worker, "proj-1", Permission.APPROVE_DAILY_LOGS, True)
        )
        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "approve_daily_logs", "project_id": "proj-1"},
            headers=WORKER_HEADERS,
        )
        assert r.json == {
            "permission": "approve_daily_logs",
            "project_id": "proj-1",
            "granted": True,
        }

    def test_unknown_permission(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/check", json={"permission": "fly"}, headers=WORKER_HEADERS
        )
        assert r.status_code == 400

    def test_missing_permission_field(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/permissions/check", json={}, headers=WORKER_HEADERS)
        assert r.status_code == 400
        assert "permission" in r.json["error"]


class TestEffectivePermissions:
    def test_effective_with_override(self, client: TestClient, store) -> None:
        worker = make_user(Role.FIELD_WORKER, "worker-1")
        store.add_user_override(user_override(worker, Permission.CLOCK_IN_OUT, False))
        r = client.simulate_get("/v1/permissions/effective", headers=WORKER_HEADERS)
        assert r.status_code == 200
        assert r.json["user_id"] == "worker-1"
        assert r.json["role"] == "FIELD_WORKER"
        assert "clock_in_out" not in r.json["permissions"]
        assert "view_projects" in r.json["permissions"]
        assert r.json["daily_log_visibility"] == "OWN_ONLY"

    def test_effective_no_user(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/permissions/effective")
        assert r.json["permissions"] == []
        assert r.json["user_id"] is None


class TestRoleManagement:
    def test_admin_can_manage_worker(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/manage",
            json={"target_user_id": "worker-1", "target_role": "FIELD_WORKER"},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 200
        assert r.json["allowed"] is True

    def test_admin_cannot_manage_admin(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/manage",
            json={"target_user_id": "admin-2", "target_role": "ADMIN"},
            headers=ADMIN_HEADERS,
        )
        assert r.json["allowed"] is False

    def test_assign_role(self, client: TestClient) -> None:
        pm_headers = {"X-User-Id": "pm-1", "X-User-Role": "PROJECT_MANAGER"}
        r = client.simulate_post(
            "/v1/permissions/assign-role", json={"role": "ADMIN"}, headers=pm_headers
        )
        assert r.json == {"role": "ADMIN", "allowed": False}

        r = client.simulate_post(
            "/v1/permissions/assign-role", json={"role": "VIEWER"}, headers=ADMIN_HEADERS
        )
        assert r.json["allowed"] is True

    def test_assign_unknown_role(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/assign-role", json={"role": "KING"}, headers=ADMIN_HEADERS
        )
        assert r.status_code == 400


class TestOverrides:
    def test_requires_user(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/overrides").status_code == 401
        assert client.simulate_delete("/v1/overrides/x").status_code == 401

    def test_grant_and_list_flow(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "approve_time_entries", "granted": True},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 201
        override_id = r.json["id"]
        assert r.json["status"] == "Added"

        r = client.simulate_get(
            "/v1/overrides", params={"user_id": "worker-1"}, headers=ADMIN_HEADERS
        )
        assert [o["id"] for o in r.json["user_overrides"]] == [override_id]

        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "approve_time_entries"},
            headers=WORKER_HEADERS,
        )
        assert r.json["granted"] is True

    def test_grant_project_override(self, client: TestClient) -> None:
        expires = (datetime.now(UTC) + timedelta(days=7)).isoformat()
        r = client.simulate_post(
            "/v1/overrides",
            json={
                "user_id": "worker-1",
                "project_id": "proj-7",
                "permission": "manage_safety",
                "granted": True,
                "expires_at": expires,
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 201
        assert r.json["project_id"] == "proj-7"
        assert r.json["is_expired"] is False

        r = client.simulate_get(
            f"/v1/overrides/{r.json['id']}", headers=ADMIN_HEADERS
        )
        assert r.status_code == 200
        assert r.json["permission"] == "manage_safety"

    def test_grant_forbidden_for_worker(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "manage_users"},
            headers=WORKER_HEADERS,
        )
        assert r.status_code == 403

    def test_grant_invalid_permission(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "teleport"},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 400

    def test_delete_override(self, client: TestClient, store) -> None:
        worker = make_user(Role.FIELD_WORKER, "worker-1")
        override = user_override(worker, Permission.VIEW_REPORTS, True)
        store.add_user_override(override)

        r = client.simulate_delete(f"/v1/overrides/{override.id}", headers=ADMIN_HEADERS)
        assert r.status_code == 204
        r = client.simulate_delete(f"/v1/overrides/{override.id}", headers=ADMIN_HEADERS)
        assert r.status_code == 404

    def test_get_missing_override(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/overrides/nope", headers=ADMIN_HEADERS)
        assert r.status_code == 404

    def test_replace_overrides(self, client: TestClient, store) -> None:
        r = client.simulate_put(
            "/v1/overrides",
            json={
                "user_overrides": [
                    {
                        "id": "uo-1",
                        "user_id": "worker-1",
                        "permission": "view_reports",
                        "granted": True,
                    }
                ],
                "project_overrides": [
                    {
                        "id": "po-1",
                        "user_id": "worker-1",
                        "project_id": "proj-1",
                        "permission": "view_reports",
                        "granted": False,
                        "expires_at": "2000-01-01T00:00:00Z",
                    }
                ],
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 200
        assert r.json == {"user_overrides": 1, "project_overrides": 1}
        assert store.snapshot().size == 2

        # Expired project override is ignored
        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "view_reports", "project_id": "proj-1"},
            headers=WORKER_HEADERS,
        )
        assert r.json["granted"] is True

    def test_replace_rejects_unknown_permission(self, client: TestClient, store) -> None:
        r = client.simulate_put(
            "/v1/overrides",
            json={
                "user_overrides": [
                    {"id": "uo-1", "user_id": "u", "permission": "nope", "granted": True}
                ]
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 400
        assert store.snapshot().size == 0


class TestTemplateAccess:
    TEMPLATE = {
        "id": "tpl-1",
        "name": "Foreman",
        "scope": "project",
        "tool_permissions": {"daily_logs": "admin", "documents": "read_only"},
    }

    def test_access_granted(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/templates/access",
            json={"template": self.TEMPLATE, "tool": "daily_logs", "required_level": "standard"},
        )
        assert r.status_code == 200
        assert r.json["level"] == "admin"
        assert r.json["has_access"] is True
        assert r.json["company_tool"] is False

    def test_access_missing_tool(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/templates/access", json={"template": self.TEMPLATE, "tool": "financials"}
        )
        assert r.json["level"] == "none"
        assert r.json["required_level"] == "read_only"
        assert r.json["has_access"] is False
        assert r.json["company_tool"] is True

    def test_unknown_required_level(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/templates/access",
            json={"template": self.TEMPLATE, "tool": "documents", "required_level": "god"},
        )
        assert r.status_code == 400

    @pytest.mark.parametrize(
        "body",
        [
            [],
            {"template": ["tpl-1"], "tool": "documents"},
            {"template": {**TEMPLATE, "tool_permissions": ["documents"]}, "tool": "documents"},
            {"template": TEMPLATE, "tool": ["documents"]},
        ],
    )
    def test_malformed_body(self, client: TestClient, body) -> None:
        r = client.simulate_post("/v1/templates/access", json=body)
        assert r.status_code == 400


class TestCors:
    def test_preflight_allowed_origin(self, client: TestClient) -> None:
        r = client.simulate_options(
            "/v1/permissions/check", headers={"Origin": "http://localhost:3000"}
        )
        assert r.status_code == 204
        assert r.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
        assert "X-User-Role" in r.headers["Access-Control-Allow-Headers"]

    def test_other_origin_not_echoed(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health", headers={"Origin": "http://evil.example"})
        assert "Access-Control-Allow-Origin" not in r.headers


class TestMalformedBodies:
    @pytest.mark.parametrize(
        "path",
        [
            "/v1/permissions/check",
            "/v1/permissions/manage",
            "/v1/permissions/assign-role",
            "/v1/overrides",
        ],
    )
    def test_list_body_rejected(self, client: TestClient, path: str) -> None:
        r = client.simulate_post(
            path, json=[{"permission": "view_projects"}], headers=ADMIN_HEADERS
        )
        assert r.status_code == 400

    def test_list_body_rejected_on_replace(self, client: TestClient, store) -> None:
        r = client.simulate_put("/v1/overrides", json=[], headers=ADMIN_HEADERS)
        assert r.status_code == 400

    def test_replace_item_not_an_object(self, client: TestClient, store) -> None:
        r = client.simulate_put(
            "/v1/overrides", json={"user_overrides": ["uo-1"]}, headers=ADMIN_HEADERS
        )
        assert r.status_code == 400
        assert store.snapshot().size == 0

    def test_numeric_expires_at_rejected(self, client: TestClient, store) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={
                "user_id": "worker-1",
                "project_id": "proj-1",
                "permission": "manage_safety",
                "granted": True,
                "expires_at": 12345,
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 400
        assert store.snapshot().size == 0

    def test_project_id_object_rejected(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "view_projects", "project_id": {"id": 5}},
            headers=WORKER_HEADERS,
        )
        assert r.status_code == 400


class TestOverrideGrantedFlag:
    @pytest.mark.parametrize("granted", ["false", 0, None])
    def test_non_boolean_rejected(self, client: TestClient, store, granted) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "manage_users", "granted": granted},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 400
        assert store.snapshot().size == 0

        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "manage_users"},
            headers=WORKER_HEADERS,
        )
        assert r.json["granted"] is False

    @pytest.mark.parametrize("granted", ["false", 0, None])
    def test_non_boolean_rejected_on_replace(self, client: TestClient, store, granted) -> None:
        r = client.simulate_put(
            "/v1/overrides",
            json={
                "project_overrides": [
                    {
                        "id": "po-1",
                        "user_id": "worker-1",
                        "project_id": "proj-1",
                        "permission": "manage_users",
                        "granted": granted,
                    }
                ]
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 400
        assert store.snapshot().size == 0

    def test_false_creates_revocation(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "clock_in_out", "granted": False},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 201
        assert r.json["granted"] is False
        assert r.json["status"] == "Removed"

        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "clock_in_out"},
            headers=WORKER_HEADERS,
        )
        assert r.json["granted"] is False

    def test_absent_defaults_to_grant(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={"user_id": "worker-1", "permission": "view_reports"},
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 201
        assert r.json["granted"] is True


class TestOverrideReadAccess:
    @pytest.fixture
    def worker_override(self, store):
        worker = make_user(Role.FIELD_WORKER, "worker-1")
        override = user_override(worker, Permission.VIEW_FINANCIALS, True)
        store.add_user_override(override)
        return override

    def test_viewer_cannot_list_all(self, client: TestClient, worker_override) -> None:
        r = client.simulate_get("/v1/overrides", headers=VIEWER_HEADERS)
        assert r.status_code == 403
        assert "user_overrides" not in r.json

    def test_viewer_cannot_list_other_user(self, client: TestClient, worker_override) -> None:
        r = client.simulate_get(
            "/v1/overrides", params={"user_id": "worker-1"}, headers=VIEWER_HEADERS
        )
        assert r.status_code == 403

    def test_user_lists_own(self, client: TestClient, worker_override) -> None:
        r = client.simulate_get(
            "/v1/overrides", params={"user_id": "worker-1"}, headers=WORKER_HEADERS
        )
        assert r.status_code == 200
        assert [o["id"] for o in r.json["user_overrides"]] == [worker_override.id]

    def test_viewer_cannot_fetch_other_user_override(
        self, client: TestClient, worker_override
    ) -> None:
        r = client.simulate_get(f"/v1/overrides/{worker_override.id}", headers=VIEWER_HEADERS)
        assert r.status_code == 403

    def test_owner_fetches_own_override(self, client: TestClient, worker_override) -> None:
        r = client.simulate_get(f"/v1/overrides/{worker_override.id}", headers=WORKER_HEADERS)
        assert r.status_code == 200
        assert r.json["permission"] == "view_financials"

    def test_admin_lists_all(self, client: TestClient, worker_override) -> None:
        r = client.simulate_get("/v1/overrides", headers=ADMIN_HEADERS)
        assert r.status_code == 200
        assert [o["id"] for o in r.json["user_overrides"]] == [worker_override.id]


class TestNumericProjectId:
    def test_numeric_project_id_matches_on_check(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/overrides",
            json={
                "user_id": "worker-1",
                "project_id": 5,
                "permission": "approve_daily_logs",
                "granted": True,
            },
            headers=ADMIN_HEADERS,
        )
        assert r.status_code == 201
        assert r.json["project_id"] == "5"

        r = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": "approve_daily_logs", "project_id": 5},
            headers=WORKER_HEADERS,
        )
        assert r.json["project_id"] == "5"
        assert r.json["granted"] is True

        r = client.simulate_get(
            "/v1/permissions/effective", params={"project_id": "5"}, headers=WORKER_HEADERS
        )
        assert "approve_daily_logs" in r.json["permissions"]
