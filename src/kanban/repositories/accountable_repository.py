import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions.base import RepositoryError
from ..models.accountable import Accountable
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class AccountableRepository(BaseRepository[Accountable]):
    sort_aliases = {"secretariat_id": "secretariat_uuid"}

    def __init__(self, db: AsyncSession):
        super().__init__(Accountable, db)

    async def exists_by_email_ignore_case(self, email: str) -> bool:
        """Whether an accountable already uses `email`, compared case-insensitively."""
        query = select(Accountable.id).where(func.lower(Accountable.email) == email.strip().lower())
        try:
            result = await self.db.execute(query.limit(1))
            exists = result.scalar() is not None
        except Exception as e:
            logger.error(f"Error checking Accountable email uniqueness: {e}")
            raise RepositoryError("Failed to check Accountable email") from e

        logger.debug(f"Accountable email taken: {exists}")
        return exists
