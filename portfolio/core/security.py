"""
Session handling shared by the API dependencies and the admin route guard.

A request's session is whatever a valid access token says it is: the token
is read from the session cookie, or from an ``Authorization: Bearer`` header,
and verified on every request. Nothing is cached between requests.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import jwt
from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from portfolio.core.config import settings
from portfolio.models.user import Role
from portfolio.schemas.auth import TokenPayload
from portfolio.services.auth_service import decode_access_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Capability object handed to handlers: the current session, if any."""

    session: Optional[TokenPayload] = None

    @property
    def username(self) -> Optional[str]:
        return self.session.sub if self.session else None

    @property
    def role(self) -> Optional[str]:
        return self.session.role if self.session else None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def read_session_token(headers, cookies) -> Optional[str]:
    token = cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    authorization = headers.get("authorization") or ""
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def resolve_session(token: Optional[str]) -> Optional[TokenPayload]:
    """Verified claims for a token, or None when absent, invalid or expired."""
    if not token:
        return None
    try:
        return TokenPayload(**decode_access_token(token))
    except (jwt.PyJWTError, ValidationError, TypeError) as exc:
        logger.info("Rejected session token", extra={"reason": type(exc).__name__})
        return None


def session_from_request(request: Request) -> SessionContext:
    token = read_session_token(request.headers, request.cookies)
    return SessionContext(session=resolve_session(token))


async def get_session_context(request: Request) -> SessionContext:
    return session_from_request(request)


async def require_admin(ctx: SessionContext = Depends(get_session_context)) -> SessionContext:
    if ctx.session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not ctx.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Operation not permitted")
    return ctx


def is_admin_path(path: str) -> bool:
    prefix = settings.ADMIN_PREFIX.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def admin_redirect(url: str, path: str, ctx: SessionContext) -> Optional[str]:
    """
    Decide where an admin-area request goes.

    Returns the redirect target, or None when the request may proceed:
    no session sends the visitor to sign in with the original url as
    ``callbackUrl``, a non-admin role sends them to the site root.
    """
    if not is_admin_path(path):
        return None
    if ctx.session is None:
        return f"{settings.SIGNIN_PATH}?{urlencode({'callbackUrl': url})}"
    if not ctx.is_admin:
        return "/"
    return None
