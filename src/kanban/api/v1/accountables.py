from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...commands.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from ...database.session import get_async_session
from ...database.transaction import transactional
from ...ports.accountable import AccountablePort
from ...schemas.accountable import AccountableRequest, AccountableResponse
from ...schemas.common import PageResponse, ProblemDetail
from ..deps import get_accountable_port

router = APIRouter(
    prefix="/api/accountables",
    tags=["accountables"],
    responses={400: {"model": ProblemDetail}},
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountableResponse,
    responses={404: {"model": ProblemDetail}, 409: {"model": ProblemDetail}},
)
@transactional
async def create_accountable(
    payload: AccountableRequest,
    session: AsyncSession = Depends(get_async_session),
    port: AccountablePort = Depends(get_accountable_port),
):
    return await port.create(payload)


@router.get("", response_model=PageResponse[AccountableResponse])
async def list_accountables(
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: list[str] = Query(["name"], description="field[,asc|desc], repeatable"),
    port: AccountablePort = Depends(get_accountable_port),
):
    return await port.list(page, size, sort)


@router.get(
    "/{accountable_uuid}",
    response_model=AccountableResponse,
    responses={404: {"model": ProblemDetail}},
)
async def get_accountable(
    accountable_uuid: UUID,
    port: AccountablePort = Depends(get_accountable_port),
):
    return await port.find(accountable_uuid)


@router.put(
    "/{accountable_uuid}",
    response_model=AccountableResponse,
    responses={404: {"model": ProblemDetail}, 409: {"model": ProblemDetail}},
)
@transactional
async def update_accountable(
    accountable_uuid: UUID,
    payload: AccountableRequest,
    session: AsyncSession = Depends(get_async_session),
    port: AccountablePort = Depends(get_accountable_port),
):
    return await port.update(accountable_uuid, payload)


@router.delete(
    "/{accountable_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ProblemDetail}},
)
@transactional
async def delete_accountable(
    accountable_uuid: UUID,
    session: AsyncSession = Depends(get_async_session),
    port: AccountablePort = Depends(get_accountable_port),
):
    await port.delete(accountable_uuid)
