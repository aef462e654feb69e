from typing import Protocol
from uuid import UUID

from ..commands.pagination import PageRequest
from ..mapping import project as mapper
from ..models.project import ProjectStatus
from ..schemas.common import PageResponse
from ..schemas.project import ProjectRequest, ProjectResponse
from ..usecases.project import (
    ChangeProjectStatusUseCase,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    FindProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)


class ProjectPort(Protocol):
    async def create(self, request: ProjectRequest) -> ProjectResponse: ...

    async def find(self, project_uuid: UUID) -> ProjectResponse: ...

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[ProjectResponse]: ...

    async def update(self, project_uuid: UUID, request: ProjectRequest) -> ProjectResponse: ...

    async def change_status(self, project_uuid: UUID, status: ProjectStatus) -> ProjectResponse: ...

    async def delete(self, project_uuid: UUID) -> None: ...


class ProjectAdapter:
    def __init__(
        self,
        create_use_case: CreateProjectUseCase,
        find_use_case: FindProjectUseCase,
        list_use_case: ListProjectsUseCase,
        update_use_case: UpdateProjectUseCase,
        change_status_use_case: ChangeProjectStatusUseCase,
        delete_use_case: DeleteProjectUseCase,
    ):
        self.create_use_case = create_use_case
        self.find_use_case = find_use_case
        self.list_use_case = list_use_case
        self.update_use_case = update_use_case
        self.change_status_use_case = change_status_use_case
        self.delete_use_case = delete_use_case

    async def create(self, request: ProjectRequest) -> ProjectResponse:
        output = await self.create_use_case.execute(mapper.to_create_input(request))
        return mapper.to_response(output)

    async def find(self, project_uuid: UUID) -> ProjectResponse:
        output = await self.find_use_case.execute(mapper.to_find_input(project_uuid))
        return mapper.to_response(output)

    async def list(self, page: int, size: int, sort: list[str]) -> PageResponse[ProjectResponse]:
        result = await self.list_use_case.execute(PageRequest.of(page, size, sort))
        return mapper.to_response_page(result)

    async def update(self, project_uuid: UUID, request: ProjectRequest) -> ProjectResponse:
        output = await self.update_use_case.execute(mapper.to_update_input(project_uuid, request))
        return mapper.to_response(output)

    async def change_status(self, project_uuid: UUID, status: ProjectStatus) -> ProjectResponse:
        output = await self.change_status_use_case.execute(
            mapper.to_change_status_input(project_uuid, status)
        )
        return mapper.to_response(output)

    async def delete(self, project_uuid: UUID) -> None:
        await self.delete_use_case.execute(mapper.to_delete_input(project_uuid))
