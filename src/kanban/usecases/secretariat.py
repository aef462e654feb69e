"""
Secretariat use cases.

Each class performs one operation against the repository and returns command
outputs; HTTP concerns stay in the API layer.
"""

import logging

from ..commands.pagination import Page, PageRequest
from ..commands.secretariat import (
    CreateSecretariatInput,
    DeleteSecretariatInput,
    FindSecretariatInput,
    SecretariatOutput,
    UpdateSecretariatInput,
)
from ..mapping import secretariat as mapper
from ..mapping.common import utcnow
from ..repositories.secretariat_repository import SecretariatRepository

logger = logging.getLogger(__name__)


class CreateSecretariatUseCase:
    def __init__(self, secretariat_repo: SecretariatRepository):
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: CreateSecretariatInput) -> SecretariatOutput:
        record = await self.secretariat_repo.save(mapper.new_record(data, utcnow()))
        logger.info("usecase.secretariat.create.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class FindSecretariatUseCase:
    def __init__(self, secretariat_repo: SecretariatRepository):
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: FindSecretariatInput) -> SecretariatOutput:
        record = await self.secretariat_repo.get_by_uuid_or_raise(data.uuid)
        return mapper.to_output(record)


class ListSecretariatsUseCase:
    """
    One page of secretariats plus totals. The page query and the count are
    two separate reads, so totals may drift under concurrent writes.
    """

    def __init__(self, secretariat_repo: SecretariatRepository):
        self.secretariat_repo = secretariat_repo

    async def execute(self, request: PageRequest) -> Page[SecretariatOutput]:
        records = await self.secretariat_repo.find_page(request.offset, request.size, request.sort)
        total = await self.secretariat_repo.count()
        return Page.build([mapper.to_output(r) for r in records], request, total)


class UpdateSecretariatUseCase:
    def __init__(self, secretariat_repo: SecretariatRepository):
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: UpdateSecretariatInput) -> SecretariatOutput:
        existing = await self.secretariat_repo.get_by_uuid_or_raise(data.uuid)
        record = await self.secretariat_repo.save(
            mapper.replacement_record(existing, data, utcnow())
        )
        logger.info("usecase.secretariat.update.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class DeleteSecretariatUseCase:
    def __init__(self, secretariat_repo: SecretariatRepository):
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: DeleteSecretariatInput) -> None:
        existing = await self.secretariat_repo.get_by_uuid_or_raise(data.uuid)
        await self.secretariat_repo.delete_by_id(existing.id)
        logger.info("usecase.secretariat.delete.success", extra={"uuid": str(data.uuid)})
