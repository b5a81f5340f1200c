from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.media import image_response
from portfolio.api.params import LimitParam, PageParam, SearchParam, require_valid_id
from portfolio.core.config import settings
from portfolio.core.database import get_session
from portfolio.core.security import require_admin
from portfolio.models.project import Project
from portfolio.schemas.common import OkResponse, Page
from portfolio.schemas.project import ProjectInput, ProjectRead, ProjectSummary
from portfolio.services import project_service
from portfolio.services.query_builder import page_response

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=Page[ProjectSummary])
async def list_projects(
    search: SearchParam = None,
    tech_stacks: Optional[List[str]] = Query(None, alias="techStacks"),
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
    session: AsyncSession = Depends(get_session),
):
    """Public listing, newest start date first. Image bytes are never included."""
    rows, total = await project_service.list_projects(session, search, tech_stacks, page, limit)
    items = [ProjectSummary.model_validate(p) for p in rows]
    return page_response(items, total, page, limit)


@router.get("/tech-stacks", response_model=List[str])
async def list_tech_stacks(session: AsyncSession = Depends(get_session)):
    return await project_service.list_tech_stacks(session)


@router.get("/{project_id}/image")
async def get_project_image(project_id: str, session: AsyncSession = Depends(get_session)) -> Response:
    return await image_response(session, project_id, Project.image, Project.image_type, Project.id)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    project = await project_service.get_project(session, require_valid_id(project_id))
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectRead.model_validate(project)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectInput, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    project = await project_service.create_project(session, payload)
    return ProjectRead.model_validate(project)


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: str,
    payload: ProjectInput,
    session: AsyncSession = Depends(get_session),
    ctx=Depends(require_admin),
):
    project = await project_service.update_project(session, require_valid_id(project_id), payload)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectRead.model_validate(project)


@router.delete("/{project_id}", response_model=OkResponse)
async def delete_project(project_id: str, session: AsyncSession = Depends(get_session), ctx=Depends(require_admin)):
    ok = await project_service.delete_project(session, require_valid_id(project_id))
    if not ok:
        raise HTTPException(status_code=404, detail="Project not found")
    return OkResponse(id=project_id)
