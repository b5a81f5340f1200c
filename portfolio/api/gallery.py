from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.media import image_response
from portfolio.api.params import LimitParam, PageParam, SearchParam, TagsParam, require_valid_id
from portfolio.core.config import settings
from portfolio.core.database import get_session
from portfolio.core.security import require_admin
from portfolio.models.gallery import GalleryItem
from portfolio.schemas.common import OkResponse, Page
from portfolio.schemas.gallery import GalleryItemInput, GalleryItemRead, GalleryItemSummary
from portfolio.services import gallery_service
from portfolio.services.query_builder import page_response

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("", response_model=Page[GalleryItemSummary])
async def list_items(
    search: SearchParam = None,
    tags: TagsParam = None,
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
):
    rows, total = await gallery_service.list_items(session, search, tags, page, limit)
    items = [GalleryItemSummary.model_validate(i) for i in rows]
    return page_response(items, total, page, limit)


@router.get("/tags", response_model=List[str])
async def list_tags(session: AsyncSession = Depends(get_session)):
    return await gallery_service.list_tags(session)


@router.get("/{item_id}/image")
async def get_item_image(item_id: str, session: AsyncSession = Depends(get_session)) -> Response:
    return await image_response(session, item_id, GalleryItem.image, GalleryItem.image_type, GalleryItem.id)


@router.get("/{item_id}", response_model=GalleryItemRead)
async def get_item(item_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    item = await gallery_service.get_item(session, require_valid_id(item_id))
    if not item:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return GalleryItemRead.model_validate(item)


@router.post("", response_model=GalleryItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(payload: GalleryItemInput, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    item = await gallery_service.create_item(session, payload)
    return GalleryItemRead.model_validate(item)


@router.put("/{item_id}", response_model=GalleryItemRead)
async def update_item(
    item_id: str,
    payload: GalleryItemInput,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    item = await gallery_service.update_item(session, require_valid_id(item_id), payload)
    if not item:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return GalleryItemRead.model_validate(item)


@router.delete("/{item_id}", response_model=OkResponse)
async def delete_item(item_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await gallery_service.delete_item(session, require_valid_id(item_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Gallery item not found")
    return OkResponse(id=item_id)
