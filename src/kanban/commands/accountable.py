from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CreateAccountableInput:
    name: str
    email: str
    role: str
    secretariat_uuid: UUID | None = None


@dataclass(frozen=True)
class UpdateAccountableInput:
    uuid: UUID
    name: str
    email: str
    role: str
    secretariat_uuid: UUID | None = None


@dataclass(frozen=True)
class FindAccountableInput:
    uuid: UUID


@dataclass(frozen=True)
class DeleteAccountableInput:
    uuid: UUID


@dataclass(frozen=True)
class AccountableOutput:
    uuid: UUID
    name: str
    email: str
    role: str
    secretariat_uuid: UUID | None
    created_at: datetime
    updated_at: datetime
