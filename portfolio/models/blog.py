from typing import Optional, List
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, ForeignKey, LargeBinary, String, Text

from portfolio.utils.clock import utc_now
from portfolio.utils.ids import new_id


class BlogPost(SQLModel, table=True):
    __tablename__ = "blog_post"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    title: str = Field(index=True)
    slug: str = Field(index=True, sa_column_kwargs={"unique": True})
    excerpt: str
    content: str = Field(sa_column=Column(Text, nullable=False))

    cover_image: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    image_type: Optional[str] = None

    published: bool = Field(default=False, index=True)
    published_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True), index=True)
    tags: str = ""

    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    # rows are removed by the database cascade, never loaded for deletion
    comments: List["Comment"] = Relationship(
        back_populates="post",
        sa_relationship_kwargs={"passive_deletes": True},
    )


class Comment(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    post_id: str = Field(
        sa_column=Column(
            String(32),
            ForeignKey("blog_post.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    name: Optional[str] = None
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    post: Optional[BlogPost] = Relationship(back_populates="comments")


class BlogImage(SQLModel, table=True):
    __tablename__ = "blog_image"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    image: bytes = Field(sa_column=Column(LargeBinary, nullable=False))
    image_type: str
    alt_text: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
