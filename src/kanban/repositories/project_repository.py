from sqlalchemy.ext.asyncio import AsyncSession

from ..models.project import Project
from .base_repository import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    sort_aliases = {"secretariat_id": "secretariat_uuid"}

    def __init__(self, db: AsyncSession):
        super().__init__(Project, db)
