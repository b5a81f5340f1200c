from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.media import image_response
from portfolio.api.params import LimitParam, PageParam, SearchParam, TagsParam, require_valid_id
from portfolio.core.config import settings
from portfolio.core.database import get_session
from portfolio.core.security import SessionContext, get_session_context, require_admin
from portfolio.models.blog import BlogPost, BlogImage
from portfolio.schemas.common import OkResponse, Page
from portfolio.schemas.blog import (
    BlogPostInput,
    BlogPostSummary,
    BlogPostDetail,
    BlogPostRead,
    BlogPostWithComments,
    CommentInput,
    CommentRead,
    BlogImageInput,
    BlogImageRead,
)
from portfolio.services import blog_service
from portfolio.services.query_builder import page_response

router = APIRouter(prefix="/blog", tags=["blog"])


async def _with_comments(session: AsyncSession, post: BlogPost) -> BlogPostWithComments:
    comments = await blog_service.list_comments(session, post.id)
    detail = BlogPostDetail.model_validate(post)
    return BlogPostWithComments(
        **detail.model_dump(),
        comments=[CommentRead.model_validate(c) for c in comments],
    )


# --- POSTS ---

@router.get("/posts", response_model=Page[BlogPostSummary])
async def list_published_posts(
    search: SearchParam = None,
    tags: TagsParam = None,
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
):
    rows, total = await blog_service.list_published_posts(session, search, tags, page, limit)
    items = [BlogPostSummary.model_validate(p) for p in rows]
    return page_response(items, total, page, limit)


@router.get("/posts/all", response_model=Page[BlogPostSummary])
async def list_all_posts(
    search: SearchParam = None,
    tags: TagsParam = None,
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    """Drafts included, newest first, with comment counts."""
    rows, total = await blog_service.list_all_posts(session, search, tags, page, limit)
    counts = await blog_service.comment_counts(session, [p.id for p in rows])
    items = [
        BlogPostSummary.model_validate(p).model_copy(update={"comment_count": counts.get(p.id, 0)})
        for p in rows
    ]
    return page_response(items, total, page, limit)


@router.get("/posts/slug/{slug}", response_model=BlogPostWithComments)
async def get_post_by_slug(
    slug: str,
    session: AsyncSession = Depends(get_session),
    ctx: SessionContext = Depends(get_session_context),
):
    post = await blog_service.get_post_by_slug(session, slug)
    # drafts exist only for admins
    if not post or (not post.published and not ctx.is_admin):
        raise HTTPException(status_code=404, detail="Blog post not found")
    return await _with_comments(session, post)


@router.get("/posts/{post_id}/cover")
async def get_post_cover(post_id: str, session: AsyncSession = Depends(get_session)) -> Response:
    return await image_response(session, post_id, BlogPost.cover_image, BlogPost.image_type, BlogPost.id)


@router.get("/posts/{post_id}/comments", response_model=BlogPostWithComments)
async def get_post_with_comments(post_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    post = await blog_service.get_post(session, require_valid_id(post_id))
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return await _with_comments(session, post)


@router.get("/posts/{post_id}", response_model=BlogPostRead)
async def get_post(post_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    post = await blog_service.get_post(session, require_valid_id(post_id))
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return BlogPostRead.model_validate(post)


@router.post("/posts", response_model=BlogPostRead, status_code=status.HTTP_201_CREATED)
async def create_post(payload: BlogPostInput, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    try:
        post = await blog_service.create_post(session, payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return BlogPostRead.model_validate(post)


@router.put("/posts/{post_id}", response_model=BlogPostRead)
async def update_post(
    post_id: str,
    payload: BlogPostInput,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    try:
        post = await blog_service.update_post(session, require_valid_id(post_id), payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return BlogPostRead.model_validate(post)


@router.delete("/posts/{post_id}", response_model=OkResponse)
async def delete_post(post_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await blog_service.delete_post(session, require_valid_id(post_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return OkResponse(id=post_id)


# --- COMMENTS ---

@router.post("/posts/{post_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def add_comment(post_id: str, payload: CommentInput, session: AsyncSession = Depends(get_session)):
    comment = await blog_service.add_comment(session, require_valid_id(post_id), payload)
    if not comment:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return CommentRead.model_validate(comment)


@router.delete("/comments/{comment_id}", response_model=OkResponse)
async def delete_comment(comment_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await blog_service.delete_comment(session, require_valid_id(comment_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Comment not found")
    return OkResponse(id=comment_id)


# --- IMAGE LIBRARY ---

@router.get("/images", response_model=Page[BlogImageRead])
async def list_images(
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    rows, total = await blog_service.list_images(session, page, limit)
    return page_response([BlogImageRead.model_validate(i) for i in rows], total, page, limit)


@router.get("/images/{image_id}")
async def get_image(image_id: str, session: AsyncSession = Depends(get_session)) -> Response:
    return await image_response(session, image_id, BlogImage.image, BlogImage.image_type, BlogImage.id)


@router.post("/images", response_model=BlogImageRead, status_code=status.HTTP_201_CREATED)
async def upload_image(payload: BlogImageInput, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    image = await blog_service.upload_image(session, payload)
    return BlogImageRead.model_validate(image)


@router.delete("/images/{image_id}", response_model=OkResponse)
async def delete_image(image_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await blog_service.delete_image(session, require_valid_id(image_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Image not found")
    return OkResponse(id=image_id)
