from typing import Any, Dict
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.project import Project
from portfolio.models.blog import BlogPost, Comment, BlogImage
from portfolio.models.gallery import GalleryItem
from portfolio.models.contact import ContactMessage


async def _count(session: AsyncSession, model, *filters) -> int:
    return (await session.scalar(select(func.count()).select_from(model).where(*filters))) or 0


async def content_counts(session: AsyncSession) -> Dict[str, Any]:
    return {
        "projects": await _count(session, Project),
        "posts": await _count(session, BlogPost),
        "published_posts": await _count(session, BlogPost, BlogPost.published.is_(True)),
        "comments": await _count(session, Comment),
        "blog_images": await _count(session, BlogImage),
        "gallery_items": await _count(session, GalleryItem),
        "messages": await _count(session, ContactMessage),
        "unread_messages": await _count(session, ContactMessage, ContactMessage.read.is_(False)),
    }
