from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ..models.project import ProjectStatus


@dataclass(frozen=True)
class CreateProjectInput:
    name: str
    status: str
    expected_start: datetime
    expected_end: datetime
    start_actual: datetime | None = None
    end_actual: datetime | None = None
    days_late: int | None = None
    percentage_of_time_remaining: float | None = None
    secretariat_uuid: UUID | None = None


@dataclass(frozen=True)
class UpdateProjectInput:
    uuid: UUID
    name: str
    status: str
    expected_start: datetime
    expected_end: datetime
    start_actual: datetime | None = None
    end_actual: datetime | None = None
    days_late: int | None = None
    percentage_of_time_remaining: float | None = None
    secretariat_uuid: UUID | None = None


@dataclass(frozen=True)
class FindProjectInput:
    uuid: UUID


@dataclass(frozen=True)
class DeleteProjectInput:
    uuid: UUID


@dataclass(frozen=True)
class ChangeProjectStatusInput:
    uuid: UUID
    status: ProjectStatus


@dataclass(frozen=True)
class ProjectOutput:
    uuid: UUID
    name: str
    status: str
    expected_start: datetime
    expected_end: datetime
    start_actual: datetime | None
    end_actual: datetime | None
    days_late: int | None
    percentage_of_time_remaining: float | None
    secretariat_uuid: UUID | None
    created_at: datetime
    updated_at: datetime
