import uuid

import pytest

from kanban.commands.pagination import PageRequest
from kanban.commands.secretariat import (
    CreateSecretariatInput,
    DeleteSecretariatInput,
    FindSecretariatInput,
    UpdateSecretariatInput,
)
from kanban.exceptions.base import NotFoundError
from kanban.usecases.secretariat import (
    CreateSecretariatUseCase,
    DeleteSecretariatUseCase,
    FindSecretariatUseCase,
    ListSecretariatsUseCase,
    UpdateSecretariatUseCase,
)


@pytest.mark.asyncio
class TestSecretariatUseCases:

    async def test_create_assigns_fresh_uuid_for_identical_payloads(self, secretariat_repository):
        """
        Behavior:
                - Create two secretariats from the same input.

        Importance:
                - Identity is assigned by the service, never derived from the payload.
        """
        create = CreateSecretariatUseCase(secretariat_repository)
        data = CreateSecretariatInput(name="Health", description="Public health")

        first = await create.execute(data)
        second = await create.execute(data)

        assert first.uuid != second.uuid
        assert first.name == second.name == "Health"
        assert first.created_at.tzinfo is not None

    async def test_find_returns_created_fields(self, secretariat_repository):
        created = await CreateSecretariatUseCase(secretariat_repository).execute(
            CreateSecretariatInput(name="Education")
        )

        found = await FindSecretariatUseCase(secretariat_repository).execute(
            FindSecretariatInput(uuid=created.uuid)
        )

        assert found == created

    async def test_update_replaces_fields_and_keeps_identity(self, secretariat_repository):
        created = await CreateSecretariatUseCase(secretariat_repository).execute(
            CreateSecretariatInput(name="Old", description="to be cleared")
        )

        updated = await UpdateSecretariatUseCase(secretariat_repository).execute(
            UpdateSecretariatInput(uuid=created.uuid, name="New")
        )

        assert updated.uuid == created.uuid
        assert updated.name == "New"
        assert updated.description is None
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.parametrize("use_case_cls,data_cls", [
        (FindSecretariatUseCase, FindSecretariatInput),
        (DeleteSecretariatUseCase, DeleteSecretariatInput),
    ])
    async def test_unknown_uuid_is_not_found(self, secretariat_repository, use_case_cls, data_cls):
        with pytest.raises(NotFoundError):
            await use_case_cls(secretariat_repository).execute(data_cls(uuid=uuid.uuid4()))

    async def test_update_unknown_uuid_is_not_found(self, secretariat_repository):
        with pytest.raises(NotFoundError):
            await UpdateSecretariatUseCase(secretariat_repository).execute(
                UpdateSecretariatInput(uuid=uuid.uuid4(), name="Ghost")
            )

    async def test_delete_then_find_is_not_found(self, secretariat_repository, created_secretariat):
        target = created_secretariat.uuid

        await DeleteSecretariatUseCase(secretariat_repository).execute(DeleteSecretariatInput(uuid=target))

        with pytest.raises(NotFoundError):
            await FindSecretariatUseCase(secretariat_repository).execute(FindSecretariatInput(uuid=target))

    async def test_list_pages_cover_every_record_once(self, secretariat_repository, create_secretariat):
        """
        Behavior:
                - Create 7 secretariats and walk them in pages of 3.

        Importance:
                - total_pages must be ceil(N / size) and the union of all pages must be
                  exactly the stored set, without duplicates.
        """
        created = {(await create_secretariat()).uuid for _ in range(7)}
        list_uc = ListSecretariatsUseCase(secretariat_repository)

        first = await list_uc.execute(PageRequest.of(0, 3, ["name"]))
        assert first.total_elements == 7
        assert first.total_pages == 3

        seen = []
        for page in range(first.total_pages):
            result = await list_uc.execute(PageRequest.of(page, 3, ["name"]))
            seen.extend(item.uuid for item in result.content)

        assert len(seen) == 7
        assert set(seen) == created

    async def test_list_empty(self, secretariat_repository):
        result = await ListSecretariatsUseCase(secretariat_repository).execute(PageRequest())

        assert result.content == []
        assert result.total_elements == 0
        assert result.total_pages == 0
