import httpx
import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from kanban.api.v1.error_handlers import register_exception_handlers, to_problem
from kanban.exceptions.base import (
    DuplicateError,
    InvalidFieldError,
    InvalidInputError,
    NotFoundError,
    ReferenceConstraintError,
    RepositoryError,
)

BASE_URL = "https://kanban.test/problems"


@pytest.mark.parametrize("exc,status,slug", [
    (InvalidFieldError("bad sort", fields=["budget"]), 400, "invalid_field"),
    (InvalidInputError("out of range", fields=["days_late"]), 400, "invalid_input"),
    (NotFoundError("missing"), 404, "not_found"),
    (DuplicateError("taken", fields=["email"]), 409, "duplicate"),
    (ReferenceConstraintError("in use"), 409, "reference"),
])
def test_repository_errors_map_to_status(exc, status, slug):
    problem = to_problem(exc, BASE_URL)

    assert problem.status == status
    assert problem.type == f"{BASE_URL}/{slug}"
    assert problem.detail == exc.message


def test_field_errors_only_listed_for_bad_requests():
    assert to_problem(InvalidFieldError("bad sort", fields=["budget"]), BASE_URL).errors == ["budget: bad sort"]
    assert to_problem(DuplicateError("taken", fields=["email"]), BASE_URL).errors is None


def test_uncoded_repository_error_is_500_without_internals():
    """
    Behavior:
            - Classify a RepositoryError that carries no error code.

    Importance:
            - Storage failures are not the client's fault; the body must be a generic
              500 that does not echo driver or table details.
    """
    problem = to_problem(RepositoryError("Failed to operate on Project: connection reset"), BASE_URL)

    assert problem.status == 500
    assert problem.title == "Internal error"
    assert "connection reset" not in problem.detail


def test_validation_error_lists_fields():
    exc = RequestValidationError([
        {"loc": ("body", "name"), "msg": "Field required", "type": "missing"},
        {"loc": ("query", "size"), "msg": "Input should be less than or equal to 100", "type": "less_than_equal"},
    ])

    problem = to_problem(exc, BASE_URL)

    assert problem.status == 400
    assert problem.errors == ["name: Field required", "size: Input should be less than or equal to 100"]


def test_http_exception_keeps_status():
    problem = to_problem(StarletteHTTPException(status_code=405, detail="Method Not Allowed"), BASE_URL)

    assert problem.status == 405
    assert problem.detail == "Method Not Allowed"


def test_unexpected_exception_is_generic_500():
    problem = to_problem(RuntimeError("boom"), BASE_URL)

    assert problem.status == 500
    assert problem.detail == "An unexpected error occurred"
    assert "boom" not in problem.model_dump_json()


def test_default_type_is_about_blank():
    assert to_problem(NotFoundError()).type == "about:blank"


@pytest.mark.asyncio
async def test_unhandled_exception_renders_problem_body():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("secret internals")

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/explode")

    assert resp.status_code == 500
    assert resp.json()["title"] == "Internal error"
    assert "secret internals" not in resp.text


@pytest.mark.asyncio
async def test_unknown_route_is_problem_404(client):
    resp = await client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("application/problem+json")
