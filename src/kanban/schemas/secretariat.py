from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import ConfigDict, Field, StringConstraints, field_validator

from .common import CamelModel, must_not_be_blank


class SecretariatRequest(CamelModel):
    """Payload for creating or replacing a secretariat."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)] = Field(
        ..., description="Secretariat name"
    )
    description: str | None = Field(None, max_length=255, description="Optional description")

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return must_not_be_blank(v, "name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Finance", "description": "Budget and accounting"}
        }
    )


class SecretariatResponse(CamelModel):
    uuid: UUID
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
