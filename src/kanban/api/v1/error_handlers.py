"""
Exception handlers mapping every failure to a problem body:

    {"title": ..., "type": ..., "detail": ..., "status": ..., "errors": [...]}

`to_problem()` is the one place where error kinds become status codes; the
handlers registered on the app only log and delegate to it.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...exceptions.base import RepositoryError
from ...schemas.common import ProblemDetail

logger = logging.getLogger(__name__)

DEFAULT_PROBLEM_BASE_URL = "about:blank"

# Location prefixes FastAPI puts in front of field paths.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _format_validation_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return messages


def _type_uri(base_url: str, slug: str) -> str:
    if base_url == DEFAULT_PROBLEM_BASE_URL:
        return base_url
    return f"{base_url}/{slug}"


def to_problem(exc: Exception, base_url: str = DEFAULT_PROBLEM_BASE_URL) -> ProblemDetail:
    """
    Classify `exc` and build the matching problem body.

    - RequestValidationError -> 400 with one `errors` entry per field
    - RepositoryError and subclasses -> status from the error code
      (400 invalid, 404 not found, 409 conflict, 500 when uncoded)
    - Starlette HTTPException (unknown route, wrong method) -> its own status
    - anything else -> 500 with a generic detail
    """
    if isinstance(exc, RequestValidationError):
        return ProblemDetail(
            title="Validation failed",
            type=_type_uri(base_url, "validation"),
            detail="Request has invalid fields",
            status=400,
            errors=_format_validation_errors(exc),
        )

    if isinstance(exc, RepositoryError):
        status_code = exc.http_status()
        if status_code >= 500:
            detail = "An unexpected storage error occurred"
        else:
            detail = exc.message
        return ProblemDetail(
            title=exc.title(),
            type=_type_uri(base_url, exc.error_code or "internal"),
            detail=detail,
            status=status_code,
            errors=[f"{field}: {exc.message}" for field in exc.fields] if exc.fields and status_code == 400 else None,
        )

    if isinstance(exc, StarletteHTTPException):
        return ProblemDetail(
            title="HTTP error",
            type=_type_uri(base_url, f"http-{exc.status_code}"),
            detail=str(exc.detail),
            status=exc.status_code,
        )

    return ProblemDetail(
        title="Internal error",
        type=_type_uri(base_url, "internal"),
        detail="An unexpected error occurred",
        status=500,
    )


def _problem_response(request: Request, exc: Exception) -> JSONResponse:
    settings = getattr(request.app.state, "settings", None)
    base_url = getattr(settings, "PROBLEM_BASE_URL", DEFAULT_PROBLEM_BASE_URL)
    problem = to_problem(exc, base_url)
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type="application/problem+json",
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "http.validation_error",
        extra={"method": request.method, "path": request.url.path, "error_count": len(exc.errors())},
    )
    return _problem_response(request, exc)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    context = {
        "method": request.method,
        "path": request.url.path,
        "error_code": exc.error_code,
        "fields": exc.fields,
    }
    if exc.http_status() >= 500:
        logger.error("http.repository_error", extra=context, exc_info=exc)
    else:
        logger.info("http.domain_error", extra=context)
    return _problem_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info(
        "http.error",
        extra={"method": request.method, "path": request.url.path, "status": exc.status_code},
    )
    return _problem_response(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "http.unhandled_exception",
        extra={"method": request.method, "path": request.url.path},
        exc_info=exc,
    )
    return _problem_response(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
