"""
Paging primitives shared by every list operation.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from ..exceptions.base import InvalidFieldError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
# Largest page whose offset still fits a signed 64-bit SQL integer at any page size.
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE


@dataclass(frozen=True)
class SortOrder:
    """One `ORDER BY` term. `field` is the client-facing name (e.g. `createdAt`)."""

    field: str
    direction: Literal["asc", "desc"] = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        Parse `field` or `field,asc|desc` (the `sort` query parameter form).

        Raises:
            InvalidFieldError: empty field or unknown direction.
        """
        name, _, direction = raw.partition(",")
        name = name.strip()
        direction = (direction.strip() or "asc").lower()
        if not name:
            raise InvalidFieldError("Sort field must not be empty", fields=["sort"])
        if direction not in ("asc", "desc"):
            raise InvalidFieldError(
                f"Unknown sort direction '{direction}' (expected asc or desc)", fields=["sort"]
            )
        return cls(field=name, direction=direction)


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: tuple[SortOrder, ...] = field(default_factory=lambda: (SortOrder("name"),))

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int, size: int, sort: list[str] | None = None) -> "PageRequest":
        orders = tuple(SortOrder.parse(s) for s in (sort or []) if s.strip())
        return cls(page=page, size=size, sort=orders or (SortOrder("name"),))


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of results plus the totals needed to navigate the rest."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def build(cls, content: list[T], request: PageRequest, total_elements: int) -> "Page[T]":
        return cls(
            content=list(content),
            page=request.page,
            size=request.size,
            total_elements=total_elements,
            total_pages=total_pages_for(total_elements, request.size),
        )


def total_pages_for(total_elements: int, size: int) -> int:
    if size <= 0:
        return 0
    return math.ceil(total_elements / size)
