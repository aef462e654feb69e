"""
Secretariat port: what the HTTP layer may ask of the secretariat feature.

Methods speak wire schemas and paging primitives only, so routers never
import use-case or command types.
"""

from typing import Protocol
from uuid import UUID

from ..commands.pagination import PageRequest
from ..mapping import secretariat as mapper
from ..schemas.common import PageResponse
from ..schemas.secretariat import SecretariatRequest, SecretariatResponse
from ..usecases.secretariat import (
    CreateSecretariatUseCase,
    DeleteSecretariatUseCase,
    FindSecretariatUseCase,
    ListSecretariatsUseCase,
    UpdateSecretariatUseCase,
)


class SecretariatPort(Protocol):
    async def create(self, request: SecretariatRequest) -> SecretariatResponse: ...

    async def find(self, secretariat_uuid: UUID) -> SecretariatResponse: ...

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[SecretariatResponse]: ...

    async def update(self, secretariat_uuid: UUID, request: SecretariatRequest) -> SecretariatResponse: ...

    async def delete(self, secretariat_uuid: UUID) -> None: ...


class SecretariatAdapter:
    """SecretariatPort implementation backed by the secretariat use cases."""

    def __init__(
        self,
        create_use_case: CreateSecretariatUseCase,
        find_use_case: FindSecretariatUseCase,
        list_use_case: ListSecretariatsUseCase,
        update_use_case: UpdateSecretariatUseCase,
        delete_use_case: DeleteSecretariatUseCase,
    ):
        self.create_use_case = create_use_case
        self.find_use_case = find_use_case
        self.list_use_case = list_use_case
        self.update_use_case = update_use_case
        self.delete_use_case = delete_use_case

    async def create(self, request: SecretariatRequest) -> SecretariatResponse:
        output = await self.create_use_case.execute(mapper.to_create_input(request))
        return mapper.to_response(output)

    async def find(self, secretariat_uuid: UUID) -> SecretariatResponse:
        output = await self.find_use_case.execute(mapper.to_find_input(secretariat_uuid))
        return mapper.to_response(output)

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[SecretariatResponse]:
        result = await self.list_use_case.execute(PageRequest.of(page, size, sort))
        return mapper.to_response_page(result)

    async def update(self, secretariat_uuid: UUID, request: SecretariatRequest) -> SecretariatResponse:
        output = await self.update_use_case.execute(mapper.to_update_input(secretariat_uuid, request))
        return mapper.to_response(output)

    async def delete(self, secretariat_uuid: UUID) -> None:
        await self.delete_use_case.execute(mapper.to_delete_input(secretariat_uuid))
