import logging

from ..commands.accountable import (
    AccountableOutput,
    CreateAccountableInput,
    DeleteAccountableInput,
    FindAccountableInput,
    UpdateAccountableInput,
)
from ..commands.pagination import Page, PageRequest
from ..exceptions.base import DuplicateError
from ..mapping import accountable as mapper
from ..mapping.common import utcnow
from ..repositories.accountable_repository import AccountableRepository
from ..repositories.secretariat_repository import SecretariatRepository

logger = logging.getLogger(__name__)


class CreateAccountableUseCase:
    """
    Create an accountable after checking the email is not taken.

    The check and the insert are not atomic; the unique index on lower(email)
    catches the concurrent case and is reported as the same DuplicateError.
    """

    def __init__(self, accountable_repo: AccountableRepository, secretariat_repo: SecretariatRepository):
        self.accountable_repo = accountable_repo
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: CreateAccountableInput) -> AccountableOutput:
        if await self.accountable_repo.exists_by_email_ignore_case(data.email):
            logger.info("usecase.accountable.create.duplicate_email")
            raise DuplicateError(
                "An accountable with this email already exists",
                fields=["email"],
            )

        secretariat_id = await self.secretariat_repo.resolve_reference(data.secretariat_uuid)
        record = await self.accountable_repo.save(
            mapper.new_record(data, utcnow(), secretariat_id)
        )
        logger.info("usecase.accountable.create.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class FindAccountableUseCase:
    def __init__(self, accountable_repo: AccountableRepository):
        self.accountable_repo = accountable_repo

    async def execute(self, data: FindAccountableInput) -> AccountableOutput:
        record = await self.accountable_repo.get_by_uuid_or_raise(data.uuid)
        return mapper.to_output(record)


class ListAccountablesUseCase:
    def __init__(self, accountable_repo: AccountableRepository):
        self.accountable_repo = accountable_repo

    async def execute(self, request: PageRequest) -> Page[AccountableOutput]:
        records = await self.accountable_repo.find_page(request.offset, request.size, request.sort)
        total = await self.accountable_repo.count()
        return Page.build([mapper.to_output(r) for r in records], request, total)


class UpdateAccountableUseCase:
    def __init__(self, accountable_repo: AccountableRepository, secretariat_repo: SecretariatRepository):
        self.accountable_repo = accountable_repo
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: UpdateAccountableInput) -> AccountableOutput:
        existing = await self.accountable_repo.get_by_uuid_or_raise(data.uuid)
        secretariat_id = await self.secretariat_repo.resolve_reference(data.secretariat_uuid)
        # Email clashes with other rows surface from the unique index as DuplicateError.
        record = await self.accountable_repo.save(
            mapper.replacement_record(existing, data, utcnow(), secretariat_id)
        )
        logger.info("usecase.accountable.update.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class DeleteAccountableUseCase:
    def __init__(self, accountable_repo: AccountableRepository):
        self.accountable_repo = accountable_repo

    async def execute(self, data: DeleteAccountableInput) -> None:
        existing = await self.accountable_repo.get_by_uuid_or_raise(data.uuid)
        await self.accountable_repo.delete_by_id(existing.id)
        logger.info("usecase.accountable.delete.success", extra={"uuid": str(data.uuid)})
