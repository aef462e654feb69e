from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import ConfigDict, Field, StrictInt, StringConstraints, field_validator

from .common import CamelModel, must_not_be_blank


class ProjectRequest(CamelModel):
    """
    Payload for creating or replacing a project. Timestamps are ISO-8601;
    values without an offset are read as UTC.
    """

    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]
    status: Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)] = Field(
        ..., description="Kanban status, e.g. TODO"
    )
    expected_start: datetime
    expected_end: datetime
    start_actual: datetime | None = None
    end_actual: datetime | None = None
    days_late: StrictInt | None = Field(None, ge=0)
    percentage_of_time_remaining: float | None = Field(None, ge=0, allow_inf_nan=False)
    secretariat_id: UUID | None = None

    @field_validator("name", "status")
    @classmethod
    def text_must_not_be_blank(cls, v: str, info) -> str:
        return must_not_be_blank(v, info.field_name)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Farm management system",
                "status": "TODO",
                "expectedStart": "2025-01-01T00:00:00Z",
                "expectedEnd": "2025-03-01T00:00:00Z",
                "daysLate": 0,
                "percentageOfTimeRemaining": 100.0,
            }
        }
    )


class ProjectResponse(CamelModel):
    uuid: UUID
    name: str
    status: str
    expected_start: datetime
    expected_end: datetime
    start_actual: datetime | None = None
    end_actual: datetime | None = None
    days_late: int | None = None
    percentage_of_time_remaining: float | None = None
    secretariat_id: UUID | None = None
    created_at: datetime
    updated_at: datetime
