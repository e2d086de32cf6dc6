"""Permission template access-level endpoint."""

from typing import Any

import falcon.asgi

from buildguard.domain.entities import PermissionTemplate
from buildguard.domain.value_objects import AccessLevel, is_company_tool
from buildguard.interfaces.api.validation import require_object, require_str


def _parse_template(data: Any) -> PermissionTemplate:
    """Template as sent by the backend (snake_case keys). Optional fields default."""
    data = require_object(data, "template")
    return PermissionTemplate(
        id=str(data["id"]),
        name=data["name"],
        scope=data["scope"],
        description=data.get("description"),
        tool_permissions=require_object(data.get("tool_permissions") or {}, "tool_permissions"),
        granular_permissions=require_object(
            data.get("granular_permissions") or {}, "granular_permissions"
        ),
        is_system_default=data.get("is_system_default", False),
        is_protected=data.get("is_protected", False),
        sort_order=data.get("sort_order", 0),
        usage_count=data.get("usage_count", 0),
    )


class TemplateAccessResource:
    """POST /v1/templates/access - access level a template grants for a tool."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body: {"template": {...}, "tool": "...", "required_level": "..."?}."""
        try:
            body = require_object(await req.get_media())
            template = _parse_template(body["template"])
            tool = require_str(body["tool"], "tool")
            required = AccessLevel(body.get("required_level", AccessLevel.READ_ONLY.value))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Unknown access level"}
            return
        except TypeError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "template_id": template.id,
            "tool": tool,
            "company_tool": is_company_tool(tool),
            "level": template.access_level(tool).value,
            "required_level": required.value,
            "has_access": template.has_tool_access(tool, required),
        }
        resp.status = falcon.HTTP_200
