"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from buildguard.interfaces.api.resources.health import HealthResource
from buildguard.interfaces.api.resources.overrides import OverrideResource, OverridesResource
from buildguard.interfaces.api.resources.permissions import (
    EffectivePermissionsResource,
    PermissionCheckResource,
    RoleManagementResource,
)
from buildguard.interfaces.api.resources.roles import RolesResource
from buildguard.interfaces.api.resources.templates import TemplateAccessResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log and answer 500 for anything the resources did not handle."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    health_resource: HealthResource,
    roles_resource: RolesResource,
    check_resource: PermissionCheckResource,
    effective_resource: EffectivePermissionsResource,
    management_resource: RoleManagementResource,
    overrides_resource: OverridesResource,
    override_resource: OverrideResource,
    template_access_resource: TemplateAccessResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/permissions/check", check_resource)
    app.add_route("/v1/permissions/effective", effective_resource)
    app.add_route("/v1/permissions/manage", management_resource, suffix="manage")
    app.add_route("/v1/permissions/assign-role", management_resource, suffix="assign")
    app.add_route("/v1/overrides", overrides_resource)
    app.add_route("/v1/overrides/{override_id}", override_resource)
    app.add_route("/v1/templates/access", template_access_resource)
    return app
