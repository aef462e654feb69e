import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions.base import NotFoundError, RepositoryError
from ..models.secretariat import Secretariat
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SecretariatRepository(BaseRepository[Secretariat]):
    def __init__(self, db: AsyncSession):
        super().__init__(Secretariat, db)

    async def get_id_by_uuid(self, secretariat_uuid: UUID) -> int | None:
        """Internal id for a business uuid, or None when no such secretariat exists."""
        try:
            result = await self.db.execute(
                select(Secretariat.id).where(Secretariat.uuid == secretariat_uuid)
            )
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Error resolving Secretariat UUID {secretariat_uuid}: {e}")
            raise RepositoryError("Failed to resolve Secretariat") from e

    async def resolve_reference(self, secretariat_uuid: UUID | None) -> int | None:
        """
        Turn an optional secretariat reference from a request into the foreign
        key value to store.

        Raises:
            NotFoundError: A uuid was given but no secretariat has it.
        """
        if secretariat_uuid is None:
            return None
        secretariat_id = await self.get_id_by_uuid(secretariat_uuid)
        if secretariat_id is None:
            logger.info("repo.secretariat.reference_not_found", extra={"uuid": str(secretariat_uuid)})
            raise NotFoundError(
                f"Secretariat with UUID {secretariat_uuid} not found",
                fields=["secretariatId"],
            )
        return secretariat_id
