from datetime import datetime
from uuid import UUID, uuid4

from ..commands.pagination import Page
from ..commands.secretariat import (
    CreateSecretariatInput,
    DeleteSecretariatInput,
    FindSecretariatInput,
    SecretariatOutput,
    UpdateSecretariatInput,
)
from ..models.secretariat import Secretariat
from ..schemas.common import PageResponse
from ..schemas.secretariat import SecretariatRequest, SecretariatResponse
from .common import as_utc, replace_record, to_page_response


def to_create_input(request: SecretariatRequest) -> CreateSecretariatInput:
    return CreateSecretariatInput(name=request.name, description=request.description)


def to_update_input(secretariat_uuid: UUID, request: SecretariatRequest) -> UpdateSecretariatInput:
    return UpdateSecretariatInput(
        uuid=secretariat_uuid,
        name=request.name,
        description=request.description,
    )


def to_find_input(secretariat_uuid: UUID) -> FindSecretariatInput:
    return FindSecretariatInput(uuid=secretariat_uuid)


def to_delete_input(secretariat_uuid: UUID) -> DeleteSecretariatInput:
    return DeleteSecretariatInput(uuid=secretariat_uuid)


def new_record(data: CreateSecretariatInput, now: datetime) -> Secretariat:
    return Secretariat(
        uuid=uuid4(),
        name=data.name,
        description=data.description,
        created_at=now,
        updated_at=now,
    )


def replacement_record(existing: Secretariat, data: UpdateSecretariatInput, now: datetime) -> Secretariat:
    return replace_record(
        existing,
        name=data.name,
        description=data.description,
        updated_at=now,
    )


def to_output(record: Secretariat) -> SecretariatOutput:
    return SecretariatOutput(
        uuid=record.uuid,
        name=record.name,
        description=record.description,
        created_at=as_utc(record.created_at),
        updated_at=as_utc(record.updated_at),
    )


def to_response(output: SecretariatOutput) -> SecretariatResponse:
    return SecretariatResponse(
        uuid=output.uuid,
        name=output.name,
        description=output.description,
        created_at=output.created_at,
        updated_at=output.updated_at,
    )


def to_response_page(page: Page[SecretariatOutput]) -> PageResponse[SecretariatResponse]:
    return to_page_response(page, to_response)
