import uuid

import pytest

from kanban.commands.accountable import (
    CreateAccountableInput,
    DeleteAccountableInput,
    FindAccountableInput,
    UpdateAccountableInput,
)
from kanban.exceptions.base import DuplicateError, NotFoundError
from kanban.usecases.accountable import (
    CreateAccountableUseCase,
    DeleteAccountableUseCase,
    FindAccountableUseCase,
    UpdateAccountableUseCase,
)


@pytest.fixture
def create_uc(accountable_repository, secretariat_repository):
    return CreateAccountableUseCase(accountable_repository, secretariat_repository)


@pytest.fixture
def update_uc(accountable_repository, secretariat_repository):
    return UpdateAccountableUseCase(accountable_repository, secretariat_repository)


@pytest.mark.asyncio
class TestCreateAccountable:

    async def test_create_with_secretariat(self, create_uc, created_secretariat):
        output = await create_uc.execute(
            CreateAccountableInput(
                name="Maria",
                email="maria@example.com",
                role="Coordinator",
                secretariat_uuid=created_secretariat.uuid,
            )
        )

        assert output.secretariat_uuid == created_secretariat.uuid
        assert output.email == "maria@example.com"

    async def test_email_differing_only_by_case_is_duplicate(self, create_uc):
        """
        Behavior:
                - Create an accountable, then another with the same email in upper case.

        Importance:
                - Emails identify people; uniqueness is case-insensitive and the second
                  create must fail with DuplicateError on `email` (HTTP 409).
        """
        await create_uc.execute(CreateAccountableInput(name="A", email="same@example.com", role="R"))

        with pytest.raises(DuplicateError) as exc_info:
            await create_uc.execute(CreateAccountableInput(name="B", email="SAME@EXAMPLE.COM", role="R"))

        assert exc_info.value.fields == ["email"]

    async def test_unknown_secretariat_is_not_found(self, create_uc):
        with pytest.raises(NotFoundError) as exc_info:
            await create_uc.execute(
                CreateAccountableInput(name="A", email="a@example.com", role="R", secretariat_uuid=uuid.uuid4())
            )

        assert exc_info.value.fields == ["secretariatId"]


@pytest.mark.asyncio
class TestUpdateAccountable:

    async def test_update_can_detach_secretariat(self, create_uc, update_uc, created_secretariat):
        created = await create_uc.execute(
            CreateAccountableInput(
                name="Joao", email="joao@example.com", role="Analyst", secretariat_uuid=created_secretariat.uuid
            )
        )

        updated = await update_uc.execute(
            UpdateAccountableInput(uuid=created.uuid, name="Joao", email="joao@example.com", role="Lead")
        )

        assert updated.role == "Lead"
        assert updated.secretariat_uuid is None

    async def test_update_keeps_own_email_in_other_case(self, create_uc, update_uc):
        created = await create_uc.execute(CreateAccountableInput(name="Ana", email="ana@example.com", role="R"))

        updated = await update_uc.execute(
            UpdateAccountableInput(uuid=created.uuid, name="Ana", email="Ana@Example.com", role="R")
        )

        assert updated.email == "Ana@Example.com"

    async def test_update_to_someone_elses_email_is_duplicate(self, create_uc, update_uc):
        await create_uc.execute(CreateAccountableInput(name="Taken", email="taken@example.com", role="R"))
        other = await create_uc.execute(CreateAccountableInput(name="Other", email="other@example.com", role="R"))

        with pytest.raises(DuplicateError):
            await update_uc.execute(
                UpdateAccountableInput(uuid=other.uuid, name="Other", email="TAKEN@example.com", role="R")
            )

    async def test_update_unknown_is_not_found(self, update_uc):
        with pytest.raises(NotFoundError):
            await update_uc.execute(
                UpdateAccountableInput(uuid=uuid.uuid4(), name="X", email="x@example.com", role="R")
            )


@pytest.mark.asyncio
async def test_delete_then_find_is_not_found(create_uc, accountable_repository):
    created = await create_uc.execute(CreateAccountableInput(name="Gone", email="gone@example.com", role="R"))

    await DeleteAccountableUseCase(accountable_repository).execute(DeleteAccountableInput(uuid=created.uuid))

    with pytest.raises(NotFoundError):
        await FindAccountableUseCase(accountable_repository).execute(FindAccountableInput(uuid=created.uuid))
