"""CORS middleware - echoes allowed origins and answers preflight."""

import falcon.asgi

from buildguard.interfaces.api.middleware.auth import USER_ID_HEADER, USER_ROLE_HEADER


class CORSMiddleware:
    """Adds CORS headers for the dashboard origins and handles OPTIONS preflight."""

    def __init__(self, origins: list[str]) -> None:
        self._origins = set(origins)

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        resp.set_header("Vary", "Origin")
        if not origin or origin not in self._origins:
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS")
        resp.set_header(
            "Access-Control-Allow-Headers",
            f"Content-Type, {USER_ID_HEADER}, {USER_ROLE_HEADER}",
        )
        resp.set_header("Access-Control-Max-Age", "600")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._set_cors_headers(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._set_cors_headers(req, resp)
