"""Permission decision endpoints."""

import falcon.asgi

from buildguard.domain.entities import User
from buildguard.domain.value_objects import Permission, Role
from buildguard.infrastructure.permission.permission_engine import PermissionEngine
from buildguard.interfaces.api.validation import optional_project_id, require_object


class PermissionCheckResource:
    """POST /v1/permissions/check - yes/no decision for the request user."""

    def __init__(self, engine: PermissionEngine) -> None:
        self._engine = engine

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body: {"permission": "...", "project_id": "..."?}."""
        try:
            body = require_object(await req.get_media())
            permission = Permission(body["permission"])
            project_id = optional_project_id(body.get("project_id"))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Unknown permission"}
            return
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        user = getattr(req.context, "user", None)
        resp.media = {
            "permission": permission.value,
            "project_id": project_id,
            "granted": self._engine.has_permission(permission, user, project_id),
        }
        resp.status = falcon.HTTP_200


class EffectivePermissionsResource:
    """GET /v1/permissions/effective - full permission set for the request user."""

    def __init__(self, engine: PermissionEngine) -> None:
        self._engine = engine

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        project_id = req.get_param("project_id")
        user = getattr(req.context, "user", None)
        permissions = self._engine.effective_permissions(user, project_id)
        resp.media = {
            "user_id": user.id if user else None,
            "role": user.role.value if user else None,
            "project_id": project_id,
            "permissions": sorted(p.value for p in permissions),
            "daily_log_visibility": (
                self._engine.daily_log_visibility(user).value if user else None
            ),
        }
        resp.status = falcon.HTTP_200


class RoleManagementResource:
    """Hierarchy checks for the request user.

    POST /v1/permissions/manage - may the user manage a target user?
    POST /v1/permissions/assign-role - may the user hand out a role?
    """

    def __init__(self, engine: PermissionEngine) -> None:
        self._engine = engine

    async def on_post_manage(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body: {"target_user_id": "...", "target_role": "..."}."""
        try:
            body = require_object(await req.get_media())
            target = User(id=str(body["target_user_id"]), role=Role(body["target_role"]))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Unknown role"}
            return
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        user = getattr(req.context, "user", None)
        resp.media = {
            "target_user_id": target.id,
            "allowed": self._engine.can_manage(user, target),
        }
        resp.status = falcon.HTTP_200

    async def on_post_assign(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body: {"role": "..."}."""
        try:
            body = require_object(await req.get_media())
            role = Role(body["role"])
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Unknown role"}
            return
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        user = getattr(req.context, "user", None)
        resp.media = {"role": role.value, "allowed": self._engine.can_assign_role(user, role)}
        resp.status = falcon.HTTP_200
