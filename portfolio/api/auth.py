import logging
from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.config import settings
from portfolio.core.database import get_session
from portfolio.schemas.auth import SignInInfo, Token
from portfolio.schemas.common import OkResponse
from portfolio.services.auth_service import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=Token)
async def token(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    session: AsyncSession = Depends(get_session),
):
    user = await authenticate_user(session, form_data.username, form_data.password)
    if not user:
        logger.info("Failed sign-in", extra={"username": form_data.username})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password")
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(subject=user.username, role=user.role.value, expires_delta=access_token_expires)
    max_age = int(access_token_expires.total_seconds())
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        access_token,
        max_age=max_age,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
    )
    return Token(access_token=access_token, expires_in=max_age)


@router.get("/signin", response_model=SignInInfo)
async def signin(callback_url: Optional[str] = Query(None, alias="callbackUrl")):
    """Where the admin guard sends visitors without a session."""
    return SignInInfo(token_url="/api/auth/token", callback_url=callback_url)


@router.post("/signout", response_model=OkResponse)
async def signout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/", secure=settings.secure_cookies, httponly=True, samesite="lax")
    return OkResponse()
