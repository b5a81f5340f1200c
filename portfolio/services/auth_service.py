from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.config import settings
from portfolio.models.user import User, Role

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

JWT_ALGORITHM = settings.ALGORITHM
JWT_SECRET = settings.SECRET_KEY
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


def get_password_hash(password: str) -> str:
    """Hash password using argon2."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password with argon2."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # malformed or unknown hash
        return False


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    q = await session.execute(select(User).where(User.username == username))
    return q.scalars().first()


async def create_user(session: AsyncSession, username: str, password: str, role: Role = Role.USER) -> User:
    user = User(username=username, hashed_password=get_password_hash(password), role=role)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def authenticate_user(session: AsyncSession, username: str, password: str) -> Optional[User]:
    user = await get_user_by_username(session, username)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def create_access_token(subject: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    exp = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": str(subject), "exp": exp, "iat": now, "role": role}
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decode and verify a token. Raises jwt.PyJWTError (incl. ExpiredSignatureError)."""
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
