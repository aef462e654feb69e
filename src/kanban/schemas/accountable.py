from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import ConfigDict, EmailStr, StringConstraints, field_validator

from .common import CamelModel, must_not_be_blank

EMAIL_MAX_LENGTH = 150


class AccountableRequest(CamelModel):
    """
    Payload for creating or replacing an accountable.
    `secretariatId` is the business uuid of the secretariat, not its row id.
    """

    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
    email: EmailStr
    role: Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]
    secretariat_id: UUID | None = None

    @field_validator("name", "role")
    @classmethod
    def text_must_not_be_blank(cls, v: str, info) -> str:
        return must_not_be_blank(v, info.field_name)

    @field_validator("email")
    @classmethod
    def email_within_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must have at most {EMAIL_MAX_LENGTH} characters")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Maria Souza",
                "email": "maria.souza@example.com",
                "role": "Coordinator",
                "secretariatId": "550e8400-e29b-41d4-a716-446655440000",
            }
        }
    )


class AccountableResponse(CamelModel):
    uuid: UUID
    name: str
    email: str
    role: str
    secretariat_id: UUID | None = None
    created_at: datetime
    updated_at: datetime
