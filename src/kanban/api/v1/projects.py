from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...commands.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from ...database.session import get_async_session
from ...database.transaction import transactional
from ...models.project import ProjectStatus
from ...ports.project import ProjectPort
from ...schemas.common import PageResponse, ProblemDetail
from ...schemas.project import ProjectRequest, ProjectResponse
from ..deps import get_project_port

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    responses={400: {"model": ProblemDetail}},
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProjectResponse,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def create_project(
    payload: ProjectRequest,
    session: AsyncSession = Depends(get_async_session),
    port: ProjectPort = Depends(get_project_port),
):
    return await port.create(payload)


@router.get("", response_model=PageResponse[ProjectResponse])
async def list_projects(
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: list[str] = Query(["name"], description="field[,asc|desc], repeatable"),
    port: ProjectPort = Depends(get_project_port),
):
    return await port.list(page, size, sort)


@router.get(
    "/{project_uuid}",
    response_model=ProjectResponse,
    responses={404: {"model": ProblemDetail}},
)
async def get_project(
    project_uuid: UUID,
    port: ProjectPort = Depends(get_project_port),
):
    return await port.find(project_uuid)


@router.put(
    "/{project_uuid}",
    response_model=ProjectResponse,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def update_project(
    project_uuid: UUID,
    payload: ProjectRequest,
    session: AsyncSession = Depends(get_async_session),
    port: ProjectPort = Depends(get_project_port),
):
    return await port.update(project_uuid, payload)


@router.patch(
    "/{project_uuid}/status",
    response_model=ProjectResponse,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def change_project_status(
    project_uuid: UUID,
    status: ProjectStatus = Query(..., description="New Kanban status"),
    session: AsyncSession = Depends(get_async_session),
    port: ProjectPort = Depends(get_project_port),
):
    return await port.change_status(project_uuid, status)


@router.delete(
    "/{project_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def delete_project(
    project_uuid: UUID,
    session: AsyncSession = Depends(get_async_session),
    port: ProjectPort = Depends(get_project_port),
):
    await port.delete(project_uuid)
