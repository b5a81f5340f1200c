from typing import Optional
from datetime import datetime
from enum import Enum
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, LargeBinary

from portfolio.utils.clock import utc_now
from portfolio.utils.ids import new_id


class MediaType(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


class GalleryItem(SQLModel, table=True):
    __tablename__ = "gallery_item"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    title: str = Field(index=True)
    description: Optional[str] = None
    caption: Optional[str] = None
    media_type: MediaType

    # IMAGE items carry bytes, VIDEO items a (YouTube) url
    image: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    image_type: Optional[str] = None
    video_url: Optional[str] = None

    tags: str = ""
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
