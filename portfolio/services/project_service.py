import logging
from typing import List, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from portfolio.models.project import Project
from portfolio.schemas.project import ProjectInput
from portfolio.services.query_builder import build_filters, fetch_page
from portfolio.utils.images import validate_image
from portfolio.utils.clock import utc_now
from portfolio.utils.tags import collect_tags

logger = logging.getLogger(__name__)

IMAGE_FIELDS = {"image", "image_type"}


async def list_projects(
    session: AsyncSession,
    search: Optional[str] = None,
    tech_stacks: Optional[List[str]] = None,
    page: int = 1,
    limit: int = 12,
) -> Tuple[List[Project], int]:
    filters = build_filters(Project.name, Project.tech_stacks, search, tech_stacks)
    return await fetch_page(
        session,
        Project,
        filters,
        order_by=(Project.start_date.desc(), Project.id.desc()),
        page=page,
        limit=limit,
        options=(defer(Project.image),),
    )


async def list_tech_stacks(session: AsyncSession) -> List[str]:
    result = await session.execute(select(Project.tech_stacks))
    return collect_tags(result.scalars().all())


async def get_project(session: AsyncSession, project_id: str) -> Optional[Project]:
    return await session.get(Project, project_id)


async def create_project(session: AsyncSession, payload: ProjectInput) -> Project:
    project = Project(**payload.model_dump(exclude=IMAGE_FIELDS))
    if payload.image:
        project.image = validate_image(payload.image, payload.image_type)
        project.image_type = payload.image_type

    session.add(project)
    await session.commit()
    await session.refresh(project)
    logger.info("Project created", extra={"project_id": project.id})
    return project


async def update_project(session: AsyncSession, project_id: str, payload: ProjectInput) -> Optional[Project]:
    project = await session.get(Project, project_id)
    if not project:
        return None

    # validate before touching the row so a bad image leaves it unchanged
    image = validate_image(payload.image, payload.image_type) if payload.image else None

    for k, v in payload.model_dump(exclude=IMAGE_FIELDS).items():
        setattr(project, k, v)
    if image is not None:
        project.image = image
        project.image_type = payload.image_type
    project.updated_at = utc_now()

    session.add(project)
    await session.commit()
    await session.refresh(project)
    logger.info("Project updated", extra={"project_id": project.id})
    return project


async def delete_project(session: AsyncSession, project_id: str) -> bool:
    project = await session.get(Project, project_id)
    if not project:
        return False
    await session.delete(project)
    await session.commit()
    logger.info("Project deleted", extra={"project_id": project_id})
    return True
