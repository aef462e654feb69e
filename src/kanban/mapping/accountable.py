from datetime import datetime
from uuid import UUID, uuid4

from ..commands.accountable import (
    AccountableOutput,
    CreateAccountableInput,
    DeleteAccountableInput,
    FindAccountableInput,
    UpdateAccountableInput,
)
from ..commands.pagination import Page
from ..models.accountable import Accountable
from ..schemas.accountable import AccountableRequest, AccountableResponse
from ..schemas.common import PageResponse
from .common import as_utc, replace_record, to_page_response


def to_create_input(request: AccountableRequest) -> CreateAccountableInput:
    return CreateAccountableInput(
        name=request.name,
        email=request.email,
        role=request.role,
        secretariat_uuid=request.secretariat_id,
    )


def to_update_input(accountable_uuid: UUID, request: AccountableRequest) -> UpdateAccountableInput:
    return UpdateAccountableInput(
        uuid=accountable_uuid,
        name=request.name,
        email=request.email,
        role=request.role,
        secretariat_uuid=request.secretariat_id,
    )


def to_find_input(accountable_uuid: UUID) -> FindAccountableInput:
    return FindAccountableInput(uuid=accountable_uuid)


def to_delete_input(accountable_uuid: UUID) -> DeleteAccountableInput:
    return DeleteAccountableInput(uuid=accountable_uuid)


def new_record(data: CreateAccountableInput, now: datetime, secretariat_id: int | None) -> Accountable:
    return Accountable(
        uuid=uuid4(),
        name=data.name,
        email=data.email,
        role=data.role,
        secretariat_id=secretariat_id,
        created_at=now,
        updated_at=now,
    )


def replacement_record(
    existing: Accountable,
    data: UpdateAccountableInput,
    now: datetime,
    secretariat_id: int | None,
) -> Accountable:
    return replace_record(
        existing,
        name=data.name,
        email=data.email,
        role=data.role,
        secretariat_id=secretariat_id,
        updated_at=now,
    )


def to_output(record: Accountable) -> AccountableOutput:
    return AccountableOutput(
        uuid=record.uuid,
        name=record.name,
        email=record.email,
        role=record.role,
        secretariat_uuid=record.secretariat_uuid,
        created_at=as_utc(record.created_at),
        updated_at=as_utc(record.updated_at),
    )


def to_response(output: AccountableOutput) -> AccountableResponse:
    return AccountableResponse(
        uuid=output.uuid,
        name=output.name,
        email=output.email,
        role=output.role,
        secretariat_id=output.secretariat_uuid,
        created_at=output.created_at,
        updated_at=output.updated_at,
    )


def to_response_page(page: Page[AccountableOutput]) -> PageResponse[AccountableResponse]:
    return to_page_response(page, to_response)
