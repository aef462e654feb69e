"""
Links between projects and their accountables.

Both sides are addressed by internal id; callers resolve business uuids
through the entity repositories first.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions.base import RepositoryError
from ..exceptions.mapper import db_error_handler
from ..models.accountable import Accountable
from ..models.project_accountable import ProjectAccountable

logger = logging.getLogger(__name__)


class ProjectAccountableRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def link(self, project_id: int, accountable_id: int) -> ProjectAccountable:
        """
        Attach an accountable to a project.

        Raises:
            DuplicateError: The pair is already linked.
            ReferenceConstraintError: Either side does not exist.
        """
        link = ProjectAccountable(project_id=project_id, accountable_id=accountable_id)
        async with db_error_handler(self.db, ProjectAccountable.__name__):
            self.db.add(link)
            await self.db.flush()
        logger.info(
            "repo.project_accountable.linked",
            extra={"project_id": project_id, "accountable_id": accountable_id},
        )
        return link

    async def unlink(self, project_id: int, accountable_id: int) -> bool:
        async with db_error_handler(self.db, ProjectAccountable.__name__):
            result = await self.db.execute(
                delete(ProjectAccountable).where(
                    ProjectAccountable.project_id == project_id,
                    ProjectAccountable.accountable_id == accountable_id,
                )
            )
        return result.rowcount > 0

    async def is_linked(self, project_id: int, accountable_id: int) -> bool:
        try:
            result = await self.db.execute(
                select(ProjectAccountable.id).where(
                    ProjectAccountable.project_id == project_id,
                    ProjectAccountable.accountable_id == accountable_id,
                )
            )
            return result.scalar() is not None
        except Exception as e:
            logger.error(f"Error checking project/accountable link: {e}")
            raise RepositoryError("Failed to check ProjectAccountable link") from e

    async def list_accountables(self, project_id: int) -> list[Accountable]:
        """Accountables linked to a project, ordered by name."""
        query = (
            select(Accountable)
            .join(ProjectAccountable, ProjectAccountable.accountable_id == Accountable.id)
            .where(ProjectAccountable.project_id == project_id)
            .order_by(Accountable.name, Accountable.id)
        )
        try:
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error listing accountables of project {project_id}: {e}")
            raise RepositoryError("Failed to list project accountables") from e
