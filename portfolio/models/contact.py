from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Text

from portfolio.utils.clock import utc_now
from portfolio.utils.ids import new_id


class ContactMessage(SQLModel, table=True):
    __tablename__ = "contact_message"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: Optional[str] = None
    email: str
    subject: Optional[str] = None
    message: str = Field(sa_column=Column(Text, nullable=False))
    read: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
