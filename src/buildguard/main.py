"""Application entry point and composition root."""

import argparse
import logging

from buildguard import __version__
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
from buildguard.config import get_settings
from buildguard.infrastructure.permission.permission_engine import PermissionEngine
from buildguard.infrastructure.persistence.memory.override_store import InMemoryOverrideStore
from buildguard.interfaces.api.app import create_app
from buildguard.interfaces.api.middleware.auth import AuthMiddleware
from buildguard.interfaces.api.middleware.cors import CORSMiddleware
from buildguard.interfaces.api.resources.health import HealthResource
from buildguard.interfaces.api.resources.overrides import OverrideResource, OverridesResource
from buildguard.interfaces.api.resources.permissions import (
    EffectivePermissionsResource,
    PermissionCheckResource,
    RoleManagementResource,
)
from buildguard.interfaces.api.resources.roles import RolesResource
from buildguard.interfaces.api.resources.templates import TemplateAccessResource
from buildguard.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_buildguard_app(override_store: InMemoryOverrideStore | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logging(settings.log_level)

    store = override_store if override_store is not None else InMemoryOverrideStore()
    engine = PermissionEngine(store)

    grant_user_override = GrantUserOverrideUseCase(
        override_store=store,
        permission_checker=engine,
    )
    grant_project_override = GrantProjectOverrideUseCase(
        override_store=store,
        permission_checker=engine,
    )
    revoke_override = RevokeOverrideUseCase(
        override_store=store,
        permission_checker=engine,
    )
    list_overrides = ListOverridesUseCase(
        override_store=store,
        permission_checker=engine,
    )
    get_override = GetOverrideUseCase(
        override_store=store,
        permission_checker=engine,
    )
    replace_overrides = ReplaceOverridesUseCase(
        override_store=store,
        permission_checker=engine,
    )

    app = create_app(
        health_resource=HealthResource(store),
        roles_resource=RolesResource(),
        check_resource=PermissionCheckResource(engine),
        effective_resource=EffectivePermissionsResource(engine),
        management_resource=RoleManagementResource(engine),
        overrides_resource=OverridesResource(
            list_overrides, grant_user_override, grant_project_override, replace_overrides
        ),
        override_resource=OverrideResource(get_override, revoke_override),
        template_access_resource=TemplateAccessResource(),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            AuthMiddleware(),
        ],
    )
    logger.info("buildguard v%s ready (%s)", __version__, settings.environment)
    return app


def main() -> None:
    """CLI entry point - run the API with uvicorn."""
    parser = argparse.ArgumentParser(prog="buildguard", description="Permission engine API")
    parser.add_argument("--version", action="version", version=f"buildguard {__version__}")
    parser.add_argument("--host", default=None, help="Bind address (overrides settings)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (overrides settings)")
    args = parser.parse_args()

    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_buildguard_app(),
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
