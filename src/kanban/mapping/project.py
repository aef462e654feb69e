from datetime import datetime
from uuid import UUID, uuid4

from ..commands.pagination import Page
from ..commands.project import (
    ChangeProjectStatusInput,
    CreateProjectInput,
    DeleteProjectInput,
    FindProjectInput,
    ProjectOutput,
    UpdateProjectInput,
)
from ..models.project import Project, ProjectStatus
from ..schemas.common import PageResponse
from ..schemas.project import ProjectRequest, ProjectResponse
from .common import as_utc, replace_record, to_page_response


def to_create_input(request: ProjectRequest) -> CreateProjectInput:
    return CreateProjectInput(
        name=request.name,
        status=request.status,
        expected_start=as_utc(request.expected_start),
        expected_end=as_utc(request.expected_end),
        start_actual=as_utc(request.start_actual),
        end_actual=as_utc(request.end_actual),
        days_late=request.days_late,
        percentage_of_time_remaining=request.percentage_of_time_remaining,
        secretariat_uuid=request.secretariat_id,
    )


def to_update_input(project_uuid: UUID, request: ProjectRequest) -> UpdateProjectInput:
    return UpdateProjectInput(
        uuid=project_uuid,
        name=request.name,
        status=request.status,
        expected_start=as_utc(request.expected_start),
        expected_end=as_utc(request.expected_end),
        start_actual=as_utc(request.start_actual),
        end_actual=as_utc(request.end_actual),
        days_late=request.days_late,
        percentage_of_time_remaining=request.percentage_of_time_remaining,
        secretariat_uuid=request.secretariat_id,
    )


def to_find_input(project_uuid: UUID) -> FindProjectInput:
    return FindProjectInput(uuid=project_uuid)


def to_delete_input(project_uuid: UUID) -> DeleteProjectInput:
    return DeleteProjectInput(uuid=project_uuid)


def to_change_status_input(project_uuid: UUID, status: ProjectStatus) -> ChangeProjectStatusInput:
    return ChangeProjectStatusInput(uuid=project_uuid, status=status)


def new_record(data: CreateProjectInput, now: datetime, secretariat_id: int | None) -> Project:
    return Project(
        uuid=uuid4(),
        name=data.name,
        status=data.status,
        expected_start=data.expected_start,
        expected_end=data.expected_end,
        start_actual=data.start_actual,
        end_actual=data.end_actual,
        days_late=data.days_late,
        percentage_of_time_remaining=data.percentage_of_time_remaining,
        secretariat_id=secretariat_id,
        created_at=now,
        updated_at=now,
    )


def replacement_record(
    existing: Project,
    data: UpdateProjectInput,
    now: datetime,
    secretariat_id: int | None,
) -> Project:
    return replace_record(
        existing,
        name=data.name,
        status=data.status,
        expected_start=data.expected_start,
        expected_end=data.expected_end,
        start_actual=data.start_actual,
        end_actual=data.end_actual,
        days_late=data.days_late,
        percentage_of_time_remaining=data.percentage_of_time_remaining,
        secretariat_id=secretariat_id,
        updated_at=now,
    )


def status_replacement_record(existing: Project, status: ProjectStatus, now: datetime) -> Project:
    return replace_record(existing, status=status.value, updated_at=now)


def to_output(record: Project) -> ProjectOutput:
    return ProjectOutput(
        uuid=record.uuid,
        name=record.name,
        status=record.status,
        expected_start=as_utc(record.expected_start),
        expected_end=as_utc(record.expected_end),
        start_actual=as_utc(record.start_actual),
        end_actual=as_utc(record.end_actual),
        days_late=record.days_late,
        percentage_of_time_remaining=record.percentage_of_time_remaining,
        secretariat_uuid=record.secretariat_uuid,
        created_at=as_utc(record.created_at),
        updated_at=as_utc(record.updated_at),
    )


def to_response(output: ProjectOutput) -> ProjectResponse:
    return ProjectResponse(
        uuid=output.uuid,
        name=output.name,
        status=output.status,
        expected_start=output.expected_start,
        expected_end=output.expected_end,
        start_actual=output.start_actual,
        end_actual=output.end_actual,
        days_late=output.days_late,
        percentage_of_time_remaining=output.percentage_of_time_remaining,
        secretariat_id=output.secretariat_uuid,
        created_at=output.created_at,
        updated_at=output.updated_at,
    )


def to_response_page(page: Page[ProjectOutput]) -> PageResponse[ProjectResponse]:
    return to_page_response(page, to_response)
