from datetime import datetime
from typing import Optional
from enum import Enum
from sqlalchemy import Column, DateTime, func

from sqlmodel import SQLModel, Field

from portfolio.utils.clock import utc_now


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, sa_column_kwargs={"unique": True})
    hashed_password: str
    role: Role = Field(default=Role.USER)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(
            DateTime(timezone=True),
            server_default=func.now(),
            nullable=False,
        )
    )
