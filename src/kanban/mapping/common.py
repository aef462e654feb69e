"""
Helpers shared by the per-entity mappers.
"""

from datetime import datetime, timezone
from typing import Callable, TypeVar

from sqlalchemy import Column
from sqlalchemy import inspect as sa_inspect

from ..commands.pagination import Page
from ..database.base import Base
from ..schemas.common import PageResponse

ModelType = TypeVar("ModelType", bound=Base)
S = TypeVar("S")
T = TypeVar("T")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """
    Make `value` timezone-aware in UTC. Naive values are taken to be UTC
    already (SQLite hands back naive datetimes).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def replace_record(record: ModelType, **changes) -> ModelType:
    """
    Build a detached copy of `record` with every table column set, then
    apply `changes`. Saving the copy replaces the stored row as a whole.
    """
    model = type(record)
    values = {
        attr.key: getattr(record, attr.key)
        for attr in sa_inspect(model).column_attrs
        if isinstance(attr.columns[0], Column)
    }
    unknown = set(changes) - set(values)
    if unknown:
        raise AttributeError(f"{model.__name__} has no column(s): {', '.join(sorted(unknown))}")
    values.update(changes)
    return model(**values)


def to_page_response(page: Page[S], convert: Callable[[S], T]) -> PageResponse[T]:
    return PageResponse(
        content=[convert(item) for item in page.content],
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
    )
