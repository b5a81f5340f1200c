import logging
from typing import List, Optional, Tuple
from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from portfolio.models.gallery import GalleryItem, MediaType
from portfolio.schemas.gallery import GalleryItemInput
from portfolio.services.query_builder import build_filters, fetch_page
from portfolio.utils.images import validate_image
from portfolio.utils.clock import utc_now
from portfolio.utils.tags import collect_tags

logger = logging.getLogger(__name__)

MEDIA_FIELDS = {"image", "image_type", "video_url"}


async def list_items(
    session: AsyncSession,
    search: Optional[str] = None,
    tags: Optional[List[str]] = None,
    page: int = 1,
    limit: int = 12,
) -> Tuple[List[GalleryItem], int]:
    filters = build_filters(GalleryItem.title, GalleryItem.tags, search, tags)
    return await fetch_page(
        session,
        GalleryItem,
        filters,
        order_by=(GalleryItem.created_at.desc(), GalleryItem.id.desc()),
        page=page,
        limit=limit,
        options=(defer(GalleryItem.image),),
    )


async def list_tags(session: AsyncSession) -> List[str]:
    result = await session.execute(select(GalleryItem.tags))
    return collect_tags(result.scalars().all())


async def get_item(session: AsyncSession, item_id: str) -> Optional[GalleryItem]:
    return await session.get(GalleryItem, item_id)


def _apply_media(item: GalleryItem, payload: GalleryItemInput, image: Optional[bytes]) -> None:
    """Keep exactly one of image / videoUrl populated, matching the media type."""
    if payload.media_type == MediaType.VIDEO:
        item.image = None
        item.image_type = None
        item.video_url = str(payload.video_url)
        return
    item.video_url = None
    if image is not None:
        item.image = image
        item.image_type = payload.image_type


def check_media(payload: GalleryItemInput, has_stored_image: bool = False) -> None:
    """
    Image XOR video, matching the media type. Raises HTTPException(400).

    An IMAGE update may omit the image when the row already stores one.
    """
    if payload.media_type == MediaType.VIDEO:
        if payload.video_url is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="A VIDEO item needs a videoUrl")
        if payload.image:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="A VIDEO item cannot carry an image")
        return
    if payload.video_url is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="An IMAGE item cannot carry a videoUrl")
    if not payload.image and not has_stored_image:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="An IMAGE item needs an image")


async def create_item(session: AsyncSession, payload: GalleryItemInput) -> GalleryItem:
    check_media(payload)
    image = validate_image(payload.image, payload.image_type) if payload.image else None

    item = GalleryItem(**payload.model_dump(exclude=MEDIA_FIELDS))
    _apply_media(item, payload, image)

    session.add(item)
    await session.commit()
    await session.refresh(item)
    logger.info("Gallery item created", extra={"item_id": item.id, "media_type": item.media_type.value})
    return item


async def update_item(session: AsyncSession, item_id: str, payload: GalleryItemInput) -> Optional[GalleryItem]:
    item = await session.get(GalleryItem, item_id)
    if not item:
        return None
    # switching a VIDEO item to IMAGE must bring an image along
    check_media(payload, has_stored_image=item.image is not None)
    image = validate_image(payload.image, payload.image_type) if payload.image else None

    for k, v in payload.model_dump(exclude=MEDIA_FIELDS).items():
        setattr(item, k, v)
    _apply_media(item, payload, image)
    item.updated_at = utc_now()

    session.add(item)
    await session.commit()
    await session.refresh(item)
    logger.info("Gallery item updated", extra={"item_id": item.id, "media_type": item.media_type.value})
    return item


async def delete_item(session: AsyncSession, item_id: str) -> bool:
    item = await session.get(GalleryItem, item_id)
    if not item:
        return False
    await session.delete(item)
    await session.commit()
    logger.info("Gallery item deleted", extra={"item_id": item_id})
    return True
