import pytest

from kanban.commands.pagination import (
    DEFAULT_PAGE_SIZE,
    Page,
    PageRequest,
    SortOrder,
    total_pages_for,
)
from kanban.exceptions.base import InvalidFieldError


@pytest.mark.parametrize("raw,expected", [
    ("name", SortOrder("name", "asc")),
    ("name,desc", SortOrder("name", "desc")),
    (" createdAt , DESC ", SortOrder("createdAt", "desc")),
    ("status,asc", SortOrder("status", "asc")),
])
def test_sort_order_parse(raw, expected):
    assert SortOrder.parse(raw) == expected


@pytest.mark.parametrize("raw", ["", ",desc", "name,up"])
def test_sort_order_parse_rejects(raw):
    with pytest.raises(InvalidFieldError):
        SortOrder.parse(raw)


def test_page_request_defaults_to_name():
    request = PageRequest.of(2, 5)

    assert request.sort == (SortOrder("name"),)
    assert request.offset == 10
    assert PageRequest().size == DEFAULT_PAGE_SIZE


def test_page_request_keeps_multiple_orders():
    request = PageRequest.of(0, 10, ["status,desc", "name"])

    assert request.sort == (SortOrder("status", "desc"), SortOrder("name", "asc"))


@pytest.mark.parametrize("total,size,pages", [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (7, 3, 3)])
def test_total_pages_is_ceiling(total, size, pages):
    assert total_pages_for(total, size) == pages


def test_page_build():
    page = Page.build(["a", "b"], PageRequest.of(1, 2), total_elements=5)

    assert page.content == ["a", "b"]
    assert page.page == 1
    assert page.size == 2
    assert page.total_pages == 3
