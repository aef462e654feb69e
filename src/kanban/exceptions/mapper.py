import re
import logging
from contextlib import asynccontextmanager

from sqlalchemy import Column
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import visitors

from ..database.base import Base
from .integrity_classifier import (
    classify_integrity_error,
    UniqueConstraintError,
    NotNullConstraintError,
    ForeignKeyConstraintError,
    CheckConstraintError,
)
from .base import (
    DuplicateError,
    InvalidInputError,
    ReferenceConstraintError,
    RepositoryError,
)

logger = logging.getLogger(__name__)

# -----------------------
# Column extraction helpers
# -----------------------

def _extract_columns_postgres(msg: str) -> list[str] | None:
    """
    Pull column names out of Postgres messages such as:
      - 'null value in column "name" violates not-null constraint'
      - 'DETAIL:  Key (secretariat_id)=(7) is not present in table "secretariat".'
    """
    if not msg:
        return None

    m = re.search(r'null value in column "(?P<col>[^"]+)"', msg, flags=re.IGNORECASE)
    if m:
        return [m.group("col")]

    # Plain column lists only; expression keys like lower(email::text) are
    # resolved through the constraint name instead.
    m = re.search(r'key \((?P<cols>[\w", ]+)\)=', msg, flags=re.IGNORECASE)
    if m:
        return [c.strip().strip('"') for c in m.group("cols").split(",")]

    return None


def _extract_columns_sqlite(msg: str) -> list[str] | None:
    # 'UNIQUE constraint failed: accountable.email' / 'NOT NULL constraint failed: project.name'
    m = re.search(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>[\w.]+(?:,\s*[\w.]+)*)$', msg, flags=re.IGNORECASE)
    if m:
        return [c.split('.')[-1].strip() for c in re.split(r',\s*', m.group("cols"))]
    return None


def _extract_constraint_sqlite(msg: str) -> str | None:
    # 'UNIQUE constraint failed: index 'uq_accountable_email_lower''
    # 'CHECK constraint failed: ck_project_days_late_non_negative'
    m = re.search(r"constraint failed: index '(?P<name>[^']+)'", msg, flags=re.IGNORECASE)
    if m:
        return m.group("name")
    m = re.search(r"CHECK constraint failed: (?P<name>\w+)", msg, flags=re.IGNORECASE)
    if m:
        return m.group("name")
    return None


def columns_for_constraint(name: str | None) -> list[str] | None:
    """
    Look a constraint or index up by name in the ORM metadata and return the
    table columns it covers, including columns used inside expressions
    (lower(email) -> ['email']).
    """
    if not name:
        return None
    for table in Base.metadata.tables.values():
        for item in (*table.indexes, *table.constraints):
            if item.name != name:
                continue
            expressions = list(getattr(item, "expressions", None) or getattr(item, "columns", []))
            found: list[str] = []
            for expr in expressions:
                for element in visitors.iterate(expr):
                    if isinstance(element, Column) and element.name not in found:
                        found.append(element.name)
            return found or None
    return None


def extract_columns_from_integrity(exc: IntegrityError, constraint_name: str | None = None) -> list[str] | None:
    """
    Best-effort extraction of column names (Postgres and SQLite wording).
    """
    orig = exc.orig
    msg = str(orig) if orig is not None else str(exc)

    cols = columns_for_constraint(constraint_name or _extract_constraint_sqlite(msg))
    if cols:
        return cols

    cols = _extract_columns_postgres(msg)
    if cols:
        return cols

    return _extract_columns_sqlite(msg)


# -----------------------
# Mapper
# -----------------------

def raise_mapped_integrity_error(exc: IntegrityError, model_name: str | None = None) -> None:
    """
    Map an IntegrityError to an app-level exception and raise it.
    Populates `.fields` and `.constraint` where possible.
    """
    exc_cls, constraint_name = classify_integrity_error(exc)
    if constraint_name is None:
        constraint_name = _extract_constraint_sqlite(str(exc.orig))
    columns = extract_columns_from_integrity(exc, constraint_name)

    model_part = model_name or "Record"
    context = {"model": model_part, "fields": columns, "constraint": constraint_name}

    if exc_cls is UniqueConstraintError:
        # Expected client-level conflict (409), INFO is enough.
        logger.info("mapper.duplicate_detected", extra=context)
        if columns:
            raise DuplicateError(
                f"{model_part} already exists for field(s): {', '.join(columns)}",
                fields=columns, constraint=constraint_name,
            ) from exc
        raise DuplicateError(f"{model_part} already exists", constraint=constraint_name) from exc

    if exc_cls is NotNullConstraintError:
        logger.info("mapper.not_null_violation", extra=context)
        if columns:
            raise InvalidInputError(
                f"Missing required field(s): {', '.join(columns)} for {model_part}",
                fields=columns, constraint=constraint_name,
            ) from exc
        raise InvalidInputError(f"Missing required field for {model_part}", constraint=constraint_name) from exc

    if exc_cls is ForeignKeyConstraintError:
        logger.info("mapper.foreign_key_violation", extra=context)
        if columns:
            raise ReferenceConstraintError(
                f"{model_part} is referenced by, or references, a missing record via: {', '.join(columns)}",
                fields=columns, constraint=constraint_name,
            ) from exc
        raise ReferenceConstraintError(
            f"{model_part} violates a reference constraint", constraint=constraint_name,
        ) from exc

    if exc_cls is CheckConstraintError:
        raw = str(exc.orig) if exc.orig is not None else str(exc)
        # Raw DB text stays at DEBUG; the client gets a safe message.
        logger.debug("mapper.check_constraint_failure", extra={**context, "raw": raw})
        raise InvalidInputError(
            f"{model_part} has a value out of the allowed range",
            fields=columns, constraint=constraint_name,
        ) from exc

    raw = str(exc.orig) if exc.orig is not None else str(exc)
    logger.warning("mapper.unknown_integrity_error", extra={"model": model_part, "constraint": constraint_name})
    logger.debug("mapper.unknown_integrity_raw", extra={"model": model_part, "raw": raw})
    raise RepositoryError(f"{model_part} database integrity error.") from exc


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, model_name: str | None = None):
    """
    Usage:
        async with db_error_handler(self.db, self.model.__name__):
            ... DB ops that may raise IntegrityError ...

    On IntegrityError the session is rolled back and a mapped app-level
    exception is raised. App-level errors raised inside the block pass
    through untouched. Anything else is rolled back, logged with its stack
    and wrapped in a code-less RepositoryError (HTTP 500).
    """
    try:
        yield
    except IntegrityError as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after IntegrityError", extra={"model": model_name})
        raise_mapped_integrity_error(exc, model_name)
    except RepositoryError:
        raise
    except Exception as exc:
        try:
            await db.rollback()
        except Exception:
            logger.exception("Failed to rollback session after unexpected error", extra={"model": model_name})

        logger.exception("Unexpected DB error for %s", model_name, extra={"model": model_name})
        raise RepositoryError(f"Failed to operate on {model_name or 'database'}") from exc
