from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...commands.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from ...database.session import get_async_session
from ...database.transaction import transactional
from ...ports.secretariat import SecretariatPort
from ...schemas.common import PageResponse, ProblemDetail
from ...schemas.secretariat import SecretariatRequest, SecretariatResponse
from ..deps import get_secretariat_port

router = APIRouter(
    prefix="/api/secretariats",
    tags=["secretariats"],
    responses={400: {"model": ProblemDetail}},
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SecretariatResponse)
@transactional
async def create_secretariat(
    payload: SecretariatRequest,
    session: AsyncSession = Depends(get_async_session),
    port: SecretariatPort = Depends(get_secretariat_port),
):
    return await port.create(payload)


@router.get("", response_model=PageResponse[SecretariatResponse])
async def list_secretariats(
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: list[str] = Query(["name"], description="field[,asc|desc], repeatable"),
    port: SecretariatPort = Depends(get_secretariat_port),
):
    return await port.list(page, size, sort)


@router.get(
    "/{secretariat_uuid}",
    response_model=SecretariatResponse,
    responses={404: {"model": ProblemDetail}},
)
async def get_secretariat(
    secretariat_uuid: UUID,
    port: SecretariatPort = Depends(get_secretariat_port),
):
    return await port.find(secretariat_uuid)


@router.put(
    "/{secretariat_uuid}",
    response_model=SecretariatResponse,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def update_secretariat(
    secretariat_uuid: UUID,
    payload: SecretariatRequest,
    session: AsyncSession = Depends(get_async_session),
    port: SecretariatPort = Depends(get_secretariat_port),
):
    return await port.update(secretariat_uuid, payload)


@router.delete(
    "/{secretariat_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ProblemDetail}, 409: {"model": ProblemDetail}},
)
@transactional
async def delete_secretariat(
    secretariat_uuid: UUID,
    session: AsyncSession = Depends(get_async_session),
    port: SecretariatPort = Depends(get_secretariat_port),
):
    await port.delete(secretariat_uuid)
