from typing import Optional

from portfolio.schemas.common import CamelModel


class ContentCounts(CamelModel):
    projects: int
    posts: int
    published_posts: int
    comments: int
    blog_images: int
    gallery_items: int
    messages: int
    unread_messages: int


class AdminDashboard(CamelModel):
    signed_in_as: Optional[str]
    role: Optional[str] = None
    counts: ContentCounts
