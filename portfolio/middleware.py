import logging
import uuid

from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from portfolio.core.logging import request_id_ctx_var
from portfolio.core.security import admin_redirect, is_admin_path, session_from_request

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware:
    """Attach or generate an X-Correlation-ID for each request and set it on a contextvar
    so log records can include it via RequestIdFilter.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        # Only act on HTTP requests
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        correlation_id = headers.get(b"x-correlation-id")
        if correlation_id is None:
            correlation_id = str(uuid.uuid4()).encode()
        token = request_id_ctx_var.set(correlation_id.decode("latin-1"))

        async def send_with_id(message: Message):
            if message["type"] == "http.response.start":
                message["headers"] = list(message.get("headers", [])) + [(b"x-correlation-id", correlation_id)]
            await send(message)

        try:
            await self.app(scope, receive, send_with_id)
        finally:
            request_id_ctx_var.reset(token)


class AdminGuardMiddleware:
    """Gate the admin area: sign-in redirect without a session, site root without the ADMIN role.

    The decision is made on every request from the token alone.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http" or not is_admin_path(scope["path"]):
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        target = admin_redirect(str(request.url), request.url.path, session_from_request(request))
        if target is None:
            await self.app(scope, receive, send)
            return

        logger.info("Admin area redirect", extra={"path": request.url.path, "target": target})
        response = RedirectResponse(target, status_code=307)
        await response(scope, receive, send)
