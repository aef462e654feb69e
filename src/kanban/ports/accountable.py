from typing import Protocol
from uuid import UUID

from ..commands.pagination import PageRequest
from ..mapping import accountable as mapper
from ..schemas.accountable import AccountableRequest, AccountableResponse
from ..schemas.common import PageResponse
from ..usecases.accountable import (
    CreateAccountableUseCase,
    DeleteAccountableUseCase,
    FindAccountableUseCase,
    ListAccountablesUseCase,
    UpdateAccountableUseCase,
)


class AccountablePort(Protocol):
    async def create(self, request: AccountableRequest) -> AccountableResponse: ...

    async def find(self, accountable_uuid: UUID) -> AccountableResponse: ...

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[AccountableResponse]: ...

    async def update(self, accountable_uuid: UUID, request: AccountableRequest) -> AccountableResponse: ...

    async def delete(self, accountable_uuid: UUID) -> None: ...


class AccountableAdapter:
    def __init__(
        self,
        create_use_case: CreateAccountableUseCase,
        find_use_case: FindAccountableUseCase,
        list_use_case: ListAccountablesUseCase,
        update_use_case: UpdateAccountableUseCase,
        delete_use_case: DeleteAccountableUseCase,
    ):
        self.create_use_case = create_use_case
        self.find_use_case = find_use_case
        self.list_use_case = list_use_case
        self.update_use_case = update_use_case
        self.delete_use_case = delete_use_case

    async def create(self, request: AccountableRequest) -> AccountableResponse:
        output = await self.create_use_case.execute(mapper.to_create_input(request))
        return mapper.to_response(output)

    async def find(self, accountable_uuid: UUID) -> AccountableResponse:
        output = await self.find_use_case.execute(mapper.to_find_input(accountable_uuid))
        return mapper.to_response(output)

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[AccountableResponse]:
        result = await self.list_use_case.execute(PageRequest.of(page, size, sort))
        return mapper.to_response_page(result)

    async def update(self, accountable_uuid: UUID, request: AccountableRequest) -> AccountableResponse:
        output = await self.update_use_case.execute(mapper.to_update_input(accountable_uuid, request))
        return mapper.to_response(output)

    async def delete(self, accountable_uuid: UUID) -> None:
        await self.delete_use_case.execute(mapper.to_delete_input(accountable_uuid))
