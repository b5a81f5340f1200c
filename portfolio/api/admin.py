from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.core.database import get_session
from portfolio.core.security import SessionContext, require_admin
from portfolio.schemas.admin import AdminDashboard, ContentCounts
from portfolio.services import admin_service

router = APIRouter(tags=["admin"])


@router.get("", response_model=AdminDashboard)
async def dashboard(session: AsyncSession = Depends(get_session), ctx: SessionContext = Depends(require_admin)):
    """
    Admin landing data. The guard middleware has already redirected anyone
    without an ADMIN session; the dependency covers direct API calls.
    """
    counts = await admin_service.content_counts(session)
    return AdminDashboard(signed_in_as=ctx.username, role=ctx.role, counts=ContentCounts(**counts))
