"""Health check endpoints."""

import falcon.asgi

from buildguard.application.ports import OverrideStore


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, override_store: OverrideStore) -> None:
        self._store = override_store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness, with the number of loaded overrides."""
        resp.media = {"status": "ready", "overrides": self._store.snapshot().size}
        resp.status = falcon.HTTP_200
