"""Override administration API resources."""

from typing import Any

import falcon.asgi

from buildguard.application.use_cases.override.get_overrides import (
    GetOverrideUseCase,
    ListOverridesUseCase,
)
from buildguard.application.use_cases.override.grant_override import (
    GrantProjectOverrideUseCase,
    GrantUserOverrideUseCase,
)
from buildguard.application.use_cases.override.replace_overrides import (
    ReplaceOverridesUseCase,
)
from buildguard.application.use_cases.override.revoke_override import RevokeOverrideUseCase
from buildguard.domain.entities import ProjectPermissionOverride, UserPermissionOverride
from buildguard.domain.exceptions import NotFound, PermissionDenied, ValidationError
from buildguard.domain.value_objects import Permission
from buildguard.interfaces.api.validation import (
    optional_project_id,
    parse_datetime,
    require_bool,
    require_object,
)


def _parse_user_override(item: Any) -> UserPermissionOverride:
    item = require_object(item, "user override")
    return UserPermissionOverride(
        id=str(item["id"]),
        user_id=str(item["user_id"]),
        permission=Permission(item["permission"]),
        granted=require_bool(item["granted"], "granted"),
    )


def _parse_project_override(item: Any) -> ProjectPermissionOverride:
    item = require_object(item, "project override")
    project_id = optional_project_id(item["project_id"])
    if project_id is None:
        raise TypeError("project_id must be a string")
    return ProjectPermissionOverride(
        id=str(item["id"]),
        user_id=str(item["user_id"]),
        project_id=project_id,
        permission=Permission(item["permission"]),
        granted=require_bool(item["granted"], "granted"),
        expires_at=parse_datetime(item.get("expires_at")),
    )


def _serialize(override: UserPermissionOverride | ProjectPermissionOverride) -> dict:
    data = {
        "id": override.id,
        "user_id": override.user_id,
        "permission": override.permission.value,
        "granted": override.granted,
    }
    if isinstance(override, ProjectPermissionOverride):
        data["project_id"] = override.project_id
        data["expires_at"] = override.expires_at.isoformat() if override.expires_at else None
        data["is_expired"] = override.is_expired()
    else:
        data["status"] = override.display_status
    return data


class OverridesResource:
    """GET/POST/PUT /v1/overrides - list, grant and bulk-replace overrides."""

    def __init__(
        self,
        list_overrides: ListOverridesUseCase,
        grant_user_override: GrantUserOverrideUseCase,
        grant_project_override: GrantProjectOverrideUseCase,
        replace_overrides: ReplaceOverridesUseCase,
    ) -> None:
        self._list = list_overrides
        self._grant_user = grant_user_override
        self._grant_project = grant_project_override
        self._replace = replace_overrides

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List overrides, optionally filtered by user_id.

        Without manage_permissions a user may only list their own.
        """
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            snapshot = await self._list.execute(user, req.get_param("user_id"))
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "user_overrides": [_serialize(o) for o in snapshot.user_overrides],
            "project_overrides": [_serialize(o) for o in snapshot.project_overrides],
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Grant an override. A project_id in the body makes it project-scoped.

        granted defaults to true when absent; when present it must be a boolean.
        """
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = require_object(await req.get_media())
            user_id = str(body["user_id"])
            permission = Permission(body["permission"])
            granted = require_bool(body["granted"], "granted") if "granted" in body else True
            project_id = optional_project_id(body.get("project_id"))
            expires_at = parse_datetime(body.get("expires_at"))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid value: {e}"}
            return

        try:
            if project_id is None:
                override = await self._grant_user.execute(user, user_id, permission, granted)
            else:
                override = await self._grant_project.execute(
                    user, user_id, project_id, permission, granted, expires_at
                )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = _serialize(override)
        resp.status = falcon.HTTP_201

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Replace every override with the payload from the admin API."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = require_object(await req.get_media())
            user_overrides = [_parse_user_override(i) for i in body.get("user_overrides", [])]
            project_overrides = [
                _parse_project_override(i) for i in body.get("project_overrides", [])
            ]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid value: {e}"}
            return

        try:
            await self._replace.execute(user, user_overrides, project_overrides)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "user_overrides": len(user_overrides),
            "project_overrides": len(project_overrides),
        }
        resp.status = falcon.HTTP_200


class OverrideResource:
    """GET/DELETE /v1/overrides/{override_id}."""

    def __init__(
        self,
        get_override: GetOverrideUseCase,
        revoke_override: RevokeOverrideUseCase,
    ) -> None:
        self._get = get_override
        self._revoke = revoke_override

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, override_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            override = await self._get.execute(user, override_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Override not found"}
            return
        resp.media = _serialize(override)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, override_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._revoke.execute(user, override_id)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Override not found"}
