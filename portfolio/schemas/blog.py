from typing import List, Optional

from pydantic import field_validator, model_validator

from portfolio.schemas.common import CamelModel, NonEmptyStr, TrimmedStr, UtcDatetime, encode_image
from portfolio.utils.tags import split_tags


class BlogPostInput(CamelModel):
    title: NonEmptyStr
    slug: NonEmptyStr
    excerpt: NonEmptyStr
    content: NonEmptyStr
    cover_image: Optional[str] = None  # base64
    image_type: Optional[str] = None
    published: bool = False
    published_at: Optional[UtcDatetime] = None
    tags: TrimmedStr = ""
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_image: Optional[str] = None


class BlogPostSummary(CamelModel):
    id: str
    title: str
    slug: str
    excerpt: str
    published: bool
    published_at: Optional[UtcDatetime]
    tags: str
    image_type: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime

    has_image: bool = False
    tag_list: List[str] = []
    comment_count: Optional[int] = None

    @model_validator(mode="after")
    def derive_fields(self):
        self.has_image = self.image_type is not None
        self.tag_list = split_tags(self.tags)
        return self


class BlogPostDetail(BlogPostSummary):
    content: str
    meta_title: Optional[str]
    meta_description: Optional[str]
    og_image: Optional[str]


class BlogPostRead(BlogPostDetail):
    cover_image: Optional[str] = None

    @field_validator("cover_image", mode="before")
    @classmethod
    def encode_cover(cls, value):
        return encode_image(value)


class CommentInput(CamelModel):
    name: Optional[TrimmedStr] = None
    content: NonEmptyStr


class CommentRead(CamelModel):
    id: str
    post_id: str
    name: Optional[str]
    content: str
    created_at: UtcDatetime


class BlogPostWithComments(BlogPostDetail):
    comments: List[CommentRead] = []


class BlogImageInput(CamelModel):
    image: NonEmptyStr  # base64
    image_type: NonEmptyStr
    alt_text: Optional[TrimmedStr] = None


class BlogImageRead(CamelModel):
    id: str
    image_type: str
    alt_text: Optional[str]
    created_at: UtcDatetime
