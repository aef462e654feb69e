"""
Logging filters.

RequestIdFilter stamps every record with the id of the HTTP request it was
emitted under. The id lives in a ContextVar, so it follows the request across
awaits and tasks, and RequestIDMiddleware sets and resets it per request.

RedactFilter masks sensitive attributes passed through `extra=...`.
"""

import contextvars
import logging
from logging import LogRecord

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id for the current context.

    Returns:
        token: pass it to reset_request_id() to restore the previous value.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee `record.request_id` exists.

    Precedence: an explicit `extra={"request_id": ...}`, then the context
    value, then "-" so format strings using %(request_id)s never fail.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Replace the value of sensitive record attributes with a mask.
    Emails are personal data and are masked too.
    """

    SENSITIVE = {
        "password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
        "email",
        "database_url",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
