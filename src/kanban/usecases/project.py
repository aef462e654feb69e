import logging

from ..commands.pagination import Page, PageRequest
from ..commands.project import (
    ChangeProjectStatusInput,
    CreateProjectInput,
    DeleteProjectInput,
    FindProjectInput,
    ProjectOutput,
    UpdateProjectInput,
)
from ..mapping import project as mapper
from ..mapping.common import utcnow
from ..repositories.project_repository import ProjectRepository
from ..repositories.secretariat_repository import SecretariatRepository

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    def __init__(self, project_repo: ProjectRepository, secretariat_repo: SecretariatRepository):
        self.project_repo = project_repo
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: CreateProjectInput) -> ProjectOutput:
        secretariat_id = await self.secretariat_repo.resolve_reference(data.secretariat_uuid)
        record = await self.project_repo.save(mapper.new_record(data, utcnow(), secretariat_id))
        logger.info("usecase.project.create.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class FindProjectUseCase:
    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(self, data: FindProjectInput) -> ProjectOutput:
        record = await self.project_repo.get_by_uuid_or_raise(data.uuid)
        return mapper.to_output(record)


class ListProjectsUseCase:
    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(self, request: PageRequest) -> Page[ProjectOutput]:
        records = await self.project_repo.find_page(request.offset, request.size, request.sort)
        total = await self.project_repo.count()
        return Page.build([mapper.to_output(r) for r in records], request, total)


class UpdateProjectUseCase:
    def __init__(self, project_repo: ProjectRepository, secretariat_repo: SecretariatRepository):
        self.project_repo = project_repo
        self.secretariat_repo = secretariat_repo

    async def execute(self, data: UpdateProjectInput) -> ProjectOutput:
        existing = await self.project_repo.get_by_uuid_or_raise(data.uuid)
        secretariat_id = await self.secretariat_repo.resolve_reference(data.secretariat_uuid)
        record = await self.project_repo.save(
            mapper.replacement_record(existing, data, utcnow(), secretariat_id)
        )
        logger.info("usecase.project.update.success", extra={"uuid": str(record.uuid)})
        return mapper.to_output(record)


class ChangeProjectStatusUseCase:
    """
    Set a project's status and nothing else (updatedAt is re-stamped).
    Any status may follow any other.
    """

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(self, data: ChangeProjectStatusInput) -> ProjectOutput:
        existing = await self.project_repo.get_by_uuid_or_raise(data.uuid)
        previous = existing.status
        record = await self.project_repo.save(
            mapper.status_replacement_record(existing, data.status, utcnow())
        )
        logger.info(
            "usecase.project.status_changed",
            extra={"uuid": str(record.uuid), "from_status": previous, "to_status": record.status},
        )
        return mapper.to_output(record)


class DeleteProjectUseCase:
    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(self, data: DeleteProjectInput) -> None:
        existing = await self.project_repo.get_by_uuid_or_raise(data.uuid)
        await self.project_repo.delete_by_id(existing.id)
        logger.info("usecase.project.delete.success", extra={"uuid": str(data.uuid)})
