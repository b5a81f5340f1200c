from typing import Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


async def fetch_image(session: AsyncSession, image_column, type_column, id_column, record_id: str) -> Optional[Tuple[bytes, str]]:
    """Stored bytes and MIME type for one row, or None when the row or its image is missing."""
    result = await session.execute(select(image_column, type_column).where(id_column == record_id))
    row = result.first()
    if row is None:
        return None
    data, image_type = row
    if not data or not image_type:
        return None
    return bytes(data), image_type
