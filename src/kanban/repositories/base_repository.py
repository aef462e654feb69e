"""
Base repository class providing the storage operations every Kanban entity
needs: lookup by internal id or business uuid, ordered page scans, counting,
save (insert or replace) and delete.

Repositories never commit. They flush so database-generated values and
constraint violations surface immediately, and leave the commit/rollback
decision to the `@transactional` wrapper around the request.
"""
import logging
import re
import time
from typing import Any, Generic, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import Column, delete, func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from ..commands.pagination import SortOrder
from ..database.base import Base
from ..exceptions.base import InvalidFieldError, NotFoundError, RepositoryError
from ..exceptions.mapper import db_error_handler

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# Never sortable from the outside: the internal key must not leak through ordering.
_HIDDEN_SORT_COLUMNS = {"id"}


def to_snake_case(name: str) -> str:
    """`createdAt` -> `created_at`; snake_case input is returned unchanged."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    # Sort key -> attribute actually ordered by, e.g. a reference ordered by
    # the referenced business uuid instead of its internal id.
    sort_aliases: dict[str, str] = {}

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: The SQLAlchemy model class (e.g. `Project`, not `Project()`)
            db: The async database session shared with the rest of the request
        """
        self.model = model
        self.db = db

    # =================================================================================================================
    # Read Operations (Single Entity)
    # =================================================================================================================

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """
        Get an entity by its internal id.

        Returns:
            The entity if found, otherwise None

        Raises:
            RepositoryError: If the query fails.
        """
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == entity_id))
            entity = result.scalar_one_or_none()
            logger.debug(f"Retrieved {self.model.__name__} by ID: {entity_id}")
            return entity
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} by ID {entity_id}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__}") from e

    async def get_by_uuid(self, entity_uuid: UUID) -> ModelType | None:
        """
        Get an entity by its business uuid.

        Returns:
            The entity if found, otherwise None

        Raises:
            RepositoryError: If the query fails.
        """
        try:
            result = await self.db.execute(select(self.model).where(self.model.uuid == entity_uuid))
            entity = result.scalar_one_or_none()
            logger.debug(f"Retrieved {self.model.__name__} by UUID: {entity_uuid}")
            return entity
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} by UUID {entity_uuid}: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__}") from e

    async def get_by_uuid_or_raise(self, entity_uuid: UUID) -> ModelType:
        """
        Like `get_by_uuid` but fails fast.

        Raises:
            NotFoundError: If no entity carries this uuid.
        """
        entity = await self.get_by_uuid(entity_uuid)
        if entity is None:
            logger.info(
                "repo.get.not_found",
                extra={"model": self.model.__name__, "uuid": str(entity_uuid)},
            )
            raise NotFoundError(f"{self.model.__name__} with UUID {entity_uuid} not found")
        return entity

    # =================================================================================================================
    # Read Operations (Multiple Entities)
    # =================================================================================================================

    def sortable_columns(self) -> dict[str, Any]:
        """
        Attributes a client may order by, keyed by attribute name.

        Plain table columns are sortable as themselves. Foreign keys hold
        internal ids and are only sortable through `sort_aliases`.
        """
        mapper = sa_inspect(self.model)
        columns = {
            attr.key: getattr(self.model, attr.key)
            for attr in mapper.column_attrs
            if attr.key not in _HIDDEN_SORT_COLUMNS
            and isinstance(attr.columns[0], Column)
            and attr.columns[0].table is self.model.__table__
            and not attr.columns[0].foreign_keys
        }
        for key, target in self.sort_aliases.items():
            columns[key] = getattr(self.model, target)
        return columns

    def _order_by_clauses(self, sort: Sequence[SortOrder]) -> list:
        """
        Translate sort orders into ORDER BY clauses, always ending with the
        internal id so that pages are stable when sort keys tie.

        Raises:
            InvalidFieldError: If a sort field is not a column of the model.
        """
        columns = self.sortable_columns()
        clauses = []
        unknown = []
        for order in sort:
            column = columns.get(to_snake_case(order.field))
            if column is None:
                unknown.append(order.field)
                continue
            clauses.append(column.desc() if order.descending else column.asc())

        if unknown:
            logger.info(
                "repo.find_page.invalid_sort",
                extra={"model": self.model.__name__, "invalid_fields": unknown},
            )
            raise InvalidFieldError(
                f"Unknown sort field(s) for {self.model.__name__}: {', '.join(unknown)}",
                fields=unknown,
            )

        clauses.append(self.model.id.asc())
        return clauses

    async def find_page(
        self,
        offset: int = 0,                            # rows to skip
        limit: int = 20,                            # page size
        sort: Sequence[SortOrder] = (),             # client-facing ordering
    ) -> list[ModelType]:
        """
        Fetch one ordered page of entities.

        Args:
            offset: Number of entities to skip.
            limit: Maximum number of entities to return.
            sort: Ordering terms; the internal id is appended as tie-breaker.

        Returns:
            A list of model instances (empty past the last page).

        Raises:
            InvalidFieldError: If a sort field does not exist on the model.
            RepositoryError: If the query fails.
        """
        query = (
            select(self.model)
            .order_by(*self._order_by_clauses(sort))
            .offset(offset)
            .limit(limit)
        )
        try:
            result = await self.db.execute(query)
            entities = list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} page: {e}")
            raise RepositoryError(f"Failed to retrieve {self.model.__name__} entities") from e

        logger.debug(f"Retrieved {len(entities)} {self.model.__name__} entities (offset={offset}, limit={limit})")
        return entities

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count()).select_from(self.model))
            return int(result.scalar_one())
        except Exception as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise RepositoryError(f"Failed to count {self.model.__name__} entities") from e

    # =================================================================================================================
    # Write Operations
    # =================================================================================================================

    async def save(self, entity: ModelType) -> ModelType:
        """
        Persist `entity` and return the managed instance.

        A record without `id` is inserted. A record carrying an `id` is a
        full replacement of an existing row: its state is merged onto the
        persistent instance. Either way the session is flushed and the
        instance refreshed so generated and derived columns are loaded.

        Raises:
            DuplicateError / InvalidInputError / ReferenceConstraintError:
                mapped from the IntegrityError raised by the flush.
            RepositoryError: any other storage failure.
        """
        model_name = self.model.__name__
        operation = "create" if entity.id is None else "replace"
        start = time.perf_counter()

        logger.debug("repo.save.start", extra={"model": model_name, "operation": operation})

        async with db_error_handler(self.db, model_name):
            if operation == "create":
                self.db.add(entity)
                managed = entity
            else:
                managed = await self.db.merge(entity)
            await self.db.flush()
            await self.db.refresh(managed)

        logger.info(
            f"repo.{operation}.success",
            extra={
                "model": model_name,
                "operation": operation,
                "id": managed.id,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return managed

    async def delete_by_id(self, entity_id: int) -> bool:
        """
        Delete an entity by its internal id.

        Returns:
            True if a row was deleted, False if none matched.

        Raises:
            ReferenceConstraintError: If other rows still reference it.
            RepositoryError: For other database errors.
        """
        async with db_error_handler(self.db, self.model.__name__):
            result = await self.db.execute(delete(self.model).where(self.model.id == entity_id))

        if result.rowcount > 0:
            logger.info("repo.delete.success", extra={"model": self.model.__name__, "id": entity_id})
            return True

        logger.warning(f"{self.model.__name__} with ID {entity_id} not found for deletion")
        return False
