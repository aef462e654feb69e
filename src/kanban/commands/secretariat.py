from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CreateSecretariatInput:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class UpdateSecretariatInput:
    uuid: UUID
    name: str
    description: str | None = None


@dataclass(frozen=True)
class FindSecretariatInput:
    uuid: UUID


@dataclass(frozen=True)
class DeleteSecretariatInput:
    uuid: UUID


@dataclass(frozen=True)
class SecretariatOutput:
    uuid: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
