"""Auth middleware - reads the authenticated user from gateway headers."""

import logging

import falcon.asgi

from buildguard.domain.entities import User
from buildguard.domain.value_objects import Role

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"
USER_ROLE_HEADER = "X-User-Role"


class AuthMiddleware:
    """Sets req.context.user from headers injected by the upstream gateway.

    Missing or unrecognised values leave the user unset; decision endpoints
    then answer "no permission".
    """

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.user = None
        user_id = req.get_header(USER_ID_HEADER)
        role = req.get_header(USER_ROLE_HEADER)
        if not user_id or not role:
            return
        try:
            req.context.user = User(id=user_id, role=Role(role.upper()))
        except ValueError:
            logger.warning("Rejected unknown role %r for user %s", role, user_id)
