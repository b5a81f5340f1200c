import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple
from datetime import datetime
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from portfolio.models.blog import BlogPost, Comment, BlogImage
from portfolio.schemas.blog import BlogPostInput, CommentInput, BlogImageInput
from portfolio.services.query_builder import build_filters, fetch_page
from portfolio.utils.images import validate_image
from portfolio.utils.clock import utc_now

logger = logging.getLogger(__name__)

SLUG_REGEX = re.compile(r"[^a-z0-9]+")
COVER_FIELDS = {"cover_image", "image_type"}
DUPLICATE_SLUG = "A post with this slug already exists"


def slugify(title: str) -> str:
    return SLUG_REGEX.sub("-", title.lower()).strip("-")


def resolve_published_at(published: bool, requested: Optional[datetime], current: Optional[datetime] = None) -> Optional[datetime]:
    """Drafts never carry a publish date; a post published without one gets its first publish time."""
    if not published:
        return None
    return requested or current or utc_now()


# --- POSTS ---

async def list_published_posts(
    session: AsyncSession,
    search: Optional[str] = None,
    tags: Optional[List[str]] = None,
    page: int = 1,
    limit: int = 12,
) -> Tuple[List[BlogPost], int]:
    filters = [BlogPost.published.is_(True), *build_filters(BlogPost.title, BlogPost.tags, search, tags)]
    return await fetch_page(
        session,
        BlogPost,
        filters,
        order_by=(BlogPost.published_at.desc(), BlogPost.id.desc()),
        page=page,
        limit=limit,
        options=(defer(BlogPost.cover_image), defer(BlogPost.content)),
    )


async def list_all_posts(
    session: AsyncSession,
    search: Optional[str] = None,
    tags: Optional[List[str]] = None,
    page: int = 1,
    limit: int = 12,
) -> Tuple[List[BlogPost], int]:
    filters = build_filters(BlogPost.title, BlogPost.tags, search, tags)
    return await fetch_page(
        session,
        BlogPost,
        filters,
        order_by=(BlogPost.created_at.desc(), BlogPost.id.desc()),
        page=page,
        limit=limit,
        options=(defer(BlogPost.cover_image), defer(BlogPost.content)),
    )


async def comment_counts(session: AsyncSession, post_ids: Sequence[str]) -> Dict[str, int]:
    if not post_ids:
        return {}
    stmt = (
        select(Comment.post_id, func.count(Comment.id))
        .where(Comment.post_id.in_(post_ids))
        .group_by(Comment.post_id)
    )
    result = await session.execute(stmt)
    return {post_id: count for post_id, count in result.all()}


async def get_post(session: AsyncSession, post_id: str) -> Optional[BlogPost]:
    return await session.get(BlogPost, post_id)


async def get_post_by_slug(session: AsyncSession, slug: str) -> Optional[BlogPost]:
    stmt = select(BlogPost).where(BlogPost.slug == slug).options(defer(BlogPost.cover_image))
    result = await session.execute(stmt)
    return result.scalars().first()


async def list_comments(session: AsyncSession, post_id: str) -> List[Comment]:
    stmt = select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at.desc(), Comment.id.desc())
    result = await session.execute(stmt)
    return result.scalars().all()


async def slug_taken(session: AsyncSession, slug: str, exclude_id: Optional[str] = None) -> bool:
    stmt = select(BlogPost.id).where(BlogPost.slug == slug)
    if exclude_id:
        stmt = stmt.where(BlogPost.id != exclude_id)
    result = await session.execute(stmt)
    return result.first() is not None


async def _commit_post(session: AsyncSession, post: BlogPost) -> BlogPost:
    session.add(post)
    try:
        await session.commit()
    except IntegrityError:
        # lost a race on the unique slug index
        await session.rollback()
        raise ValueError(DUPLICATE_SLUG)
    await session.refresh(post)
    return post


async def create_post(session: AsyncSession, payload: BlogPostInput) -> BlogPost:
    """Raises ValueError when the slug is already used."""
    if await slug_taken(session, payload.slug):
        raise ValueError(DUPLICATE_SLUG)

    post = BlogPost(**payload.model_dump(exclude=COVER_FIELDS))
    post.published_at = resolve_published_at(payload.published, payload.published_at)
    if payload.cover_image:
        post.cover_image = validate_image(payload.cover_image, payload.image_type)
        post.image_type = payload.image_type

    post = await _commit_post(session, post)
    logger.info("Blog post created", extra={"post_id": post.id, "published": post.published})
    return post


async def update_post(session: AsyncSession, post_id: str, payload: BlogPostInput) -> Optional[BlogPost]:
    """Returns None for an unknown id; raises ValueError when the new slug is taken."""
    post = await session.get(BlogPost, post_id)
    if not post:
        return None
    if await slug_taken(session, payload.slug, exclude_id=post_id):
        raise ValueError(DUPLICATE_SLUG)

    cover = validate_image(payload.cover_image, payload.image_type) if payload.cover_image else None
    current_published_at = post.published_at

    for k, v in payload.model_dump(exclude=COVER_FIELDS).items():
        setattr(post, k, v)
    post.published_at = resolve_published_at(payload.published, payload.published_at, current_published_at)
    if cover is not None:
        post.cover_image = cover
        post.image_type = payload.image_type
    post.updated_at = utc_now()

    post = await _commit_post(session, post)
    logger.info("Blog post updated", extra={"post_id": post.id, "published": post.published})
    return post


async def delete_post(session: AsyncSession, post_id: str) -> bool:
    post = await session.get(BlogPost, post_id)
    if not post:
        return False
    await session.execute(delete(Comment).where(Comment.post_id == post_id))
    await session.delete(post)
    await session.commit()
    logger.info("Blog post deleted", extra={"post_id": post_id})
    return True


# --- COMMENTS ---

async def add_comment(session: AsyncSession, post_id: str, payload: CommentInput) -> Optional[Comment]:
    """Comment on a published post; None when there is no such post."""
    result = await session.execute(
        select(BlogPost.id).where(BlogPost.id == post_id, BlogPost.published.is_(True))
    )
    if result.first() is None:
        return None
    comment = Comment(post_id=post_id, name=payload.name or None, content=payload.content)
    session.add(comment)
    await session.commit()
    await session.refresh(comment)
    return comment


async def delete_comment(session: AsyncSession, comment_id: str) -> bool:
    comment = await session.get(Comment, comment_id)
    if not comment:
        return False
    await session.delete(comment)
    await session.commit()
    return True


# --- IMAGE LIBRARY ---

async def list_images(session: AsyncSession, page: int = 1, limit: int = 12) -> Tuple[List[BlogImage], int]:
    return await fetch_page(
        session,
        BlogImage,
        filters=(),
        order_by=(BlogImage.created_at.desc(), BlogImage.id.desc()),
        page=page,
        limit=limit,
        options=(defer(BlogImage.image),),
    )


async def upload_image(session: AsyncSession, payload: BlogImageInput) -> BlogImage:
    data = validate_image(payload.image, payload.image_type)
    image = BlogImage(image=data, image_type=payload.image_type, alt_text=payload.alt_text or None)
    session.add(image)
    await session.commit()
    await session.refresh(image)
    logger.info("Blog image uploaded", extra={"image_id": image.id, "size": len(data)})
    return image


async def delete_image(session: AsyncSession, image_id: str) -> bool:
    image = await session.get(BlogImage, image_id)
    if not image:
        return False
    await session.delete(image)
    await session.commit()
    return True
