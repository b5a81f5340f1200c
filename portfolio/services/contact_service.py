import logging
from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.contact import ContactMessage
from portfolio.schemas.contact import ContactMessageInput
from portfolio.services.query_builder import fetch_page

logger = logging.getLogger(__name__)


async def submit_message(session: AsyncSession, payload: ContactMessageInput) -> ContactMessage:
    message = ContactMessage(
        name=payload.name or None,
        email=str(payload.email),
        subject=payload.subject or None,
        message=payload.message,
    )
    session.add(message)
    await session.commit()
    await session.refresh(message)
    logger.info("Contact message received", extra={"message_id": message.id})
    return message


async def list_messages(session: AsyncSession, page: int = 1, limit: int = 12) -> Tuple[List[ContactMessage], int]:
    return await fetch_page(
        session,
        ContactMessage,
        filters=(),
        order_by=(ContactMessage.created_at.desc(), ContactMessage.id.desc()),
        page=page,
        limit=limit,
    )


async def mark_as_read(session: AsyncSession, message_id: str) -> Optional[ContactMessage]:
    message = await session.get(ContactMessage, message_id)
    if not message:
        return None
    message.read = True
    session.add(message)
    await session.commit()
    await session.refresh(message)
    return message


async def delete_message(session: AsyncSession, message_id: str) -> bool:
    message = await session.get(ContactMessage, message_id)
    if not message:
        return False
    await session.delete(message)
    await session.commit()
    return True
