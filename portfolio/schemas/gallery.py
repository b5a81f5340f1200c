from typing import List, Optional

from pydantic import field_validator, model_validator

from portfolio.models.gallery import MediaType
from portfolio.schemas.common import CamelModel, NonEmptyStr, TrimmedStr, UrlStr, UtcDatetime, encode_image
from portfolio.utils.tags import split_tags
from portfolio.utils.video import youtube_id


class GalleryItemInput(CamelModel):
    title: NonEmptyStr
    description: Optional[TrimmedStr] = None
    caption: Optional[TrimmedStr] = None
    media_type: MediaType
    image: Optional[str] = None  # base64, IMAGE only
    image_type: Optional[str] = None
    video_url: Optional[UrlStr] = None  # VIDEO only
    tags: TrimmedStr = ""


class GalleryItemSummary(CamelModel):
    id: str
    title: str
    description: Optional[str]
    caption: Optional[str]
    media_type: MediaType
    image_type: Optional[str]
    video_url: Optional[str]
    tags: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    has_image: bool = False
    youtube_id: Optional[str] = None
    tag_list: List[str] = []

    @model_validator(mode="after")
    def derive_fields(self):
        self.has_image = self.image_type is not None
        self.youtube_id = youtube_id(self.video_url)
        self.tag_list = split_tags(self.tags)
        return self


class GalleryItemRead(GalleryItemSummary):
    image: Optional[str] = None

    @field_validator("image", mode="before")
    @classmethod
    def encode_image_bytes(cls, value):
        return encode_image(value)
