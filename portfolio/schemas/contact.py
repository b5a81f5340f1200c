from typing import Optional

from pydantic import EmailStr

from portfolio.schemas.common import CamelModel, NonEmptyStr, TrimmedStr, UtcDatetime


class ContactMessageInput(CamelModel):
    name: Optional[TrimmedStr] = None
    email: EmailStr
    subject: Optional[TrimmedStr] = None
    message: NonEmptyStr


class ContactMessageRead(CamelModel):
    id: str
    name: Optional[str]
    email: str
    subject: Optional[str]
    message: str
    read: bool
    created_at: UtcDatetime
