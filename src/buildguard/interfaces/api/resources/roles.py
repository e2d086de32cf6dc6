"""Role catalog endpoint."""

import falcon.asgi

from buildguard.domain import role_catalog


class RolesResource:
    """GET /v1/roles - roles with their defaults, most senior first."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        items = []
        for role in role_catalog.roles_by_hierarchy():
            visibility = role_catalog.default_daily_log_visibility(role)
            items.append({
                "role": role.value,
                "display_name": role.display_name,
                "hierarchy_level": role_catalog.hierarchy_level(role),
                "daily_log_visibility": visibility.value,
                "default_permissions": sorted(
                    p.value for p in role_catalog.default_permissions(role)
                ),
            })
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200
