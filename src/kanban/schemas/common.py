from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base for every wire schema: camelCase on the wire, snake_case in Python.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def must_not_be_blank(value: str | None, label: str) -> str | None:
    """Strip `value` and reject it when nothing is left."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError(f"{label} must not be blank")
    return value


class PageResponse(CamelModel, Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int


class ProblemDetail(BaseModel):
    """
    Error body returned by every failing endpoint.
    `type` is a URI identifying the problem kind; `errors` itemizes field
    messages for validation failures.
    """

    title: str
    type: str
    detail: str
    status: int
    errors: list[str] | None = None
