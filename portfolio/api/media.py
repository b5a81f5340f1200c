import logging

from fastapi import Response
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.config import settings
from portfolio.services.media_service import fetch_image
from portfolio.utils.ids import is_valid_id

logger = logging.getLogger(__name__)


async def image_response(session: AsyncSession, record_id: str, image_column, type_column, id_column) -> Response:
    """Raw stored bytes for one row, with its MIME type and a one-year immutable cache header."""
    if not is_valid_id(record_id):
        return PlainTextResponse("Invalid id", status_code=400)
    try:
        found = await fetch_image(session, image_column, type_column, id_column, record_id)
    except SQLAlchemyError:
        logger.exception("Error fetching image", extra={"record_id": record_id})
        return PlainTextResponse("Internal Server Error", status_code=500)

    if found is None:
        return PlainTextResponse("Image not found", status_code=404)

    data, image_type = found
    return Response(
        content=data,
        media_type=image_type,
        headers={"Cache-Control": settings.IMAGE_CACHE_CONTROL},
    )
