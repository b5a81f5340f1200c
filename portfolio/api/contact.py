from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.params import LimitParam, PageParam, require_valid_id
from portfolio.core.config import settings
from portfolio.core.database import get_session
from portfolio.core.security import require_admin
from portfolio.schemas.common import OkResponse, Page
from portfolio.schemas.contact import ContactMessageInput, ContactMessageRead
from portfolio.services import contact_service
from portfolio.services.query_builder import page_response

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
async def submit_message(payload: ContactMessageInput, session: AsyncSession = Depends(get_session)):
    """Public contact form."""
    message = await contact_service.submit_message(session, payload)
    return ContactMessageRead.model_validate(message)


@router.get("", response_model=Page[ContactMessageRead])
async def list_messages(
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    rows, total = await contact_service.list_messages(session, page, limit)
    return page_response([ContactMessageRead.model_validate(m) for m in rows], total, page, limit)


@router.patch("/{message_id}/read", response_model=ContactMessageRead)
async def mark_as_read(message_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    message = await contact_service.mark_as_read(session, require_valid_id(message_id))
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return ContactMessageRead.model_validate(message)


@router.delete("/{message_id}", response_model=OkResponse)
async def delete_message(message_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await contact_service.delete_message(session, require_valid_id(message_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Message not found")
    return OkResponse(id=message_id)
