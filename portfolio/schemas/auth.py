from pydantic import BaseModel
from typing import Optional


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None


class TokenPayload(BaseModel):
    sub: str
    exp: int
    role: Optional[str] = None


class SignInInfo(BaseModel):
    token_url: str
    callback_url: Optional[str] = None
