"""
App-level errors raised by repositories and use cases.

The HTTP layer never inspects database exceptions; it only sees these classes
and asks them for a status code and a client-safe payload.
"""

from typing import Iterable


class RepositoryError(Exception):
    """
    Base exception for repository/use-case errors.

    - message: human-friendly message (safe to show to clients)
    - fields: optional list of field names related to the error (e.g., ['email'])
    - constraint: optional DB constraint name (for logs only)
    - error_code: canonical short code (e.g., 'duplicate', 'not_found') used by clients
    """

    ERROR_CODE_TO_STATUS = {
        "invalid_field": 400,
        "invalid_input": 400,
        "not_found": 404,
        "duplicate": 409,
        "reference": 409,
    }

    ERROR_CODE_TO_TITLE = {
        "invalid_field": "Invalid field",
        "invalid_input": "Invalid input",
        "not_found": "Resource not found",
        "duplicate": "Duplicate resource",
        "reference": "Reference constraint violated",
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.constraint = constraint
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def http_status(self) -> int:
        """
        HTTP status for this error. Errors without a known code are storage
        failures the client cannot fix, hence 500.
        """
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 500)
        return 500

    def title(self) -> str:
        if self.error_code:
            return self.ERROR_CODE_TO_TITLE.get(self.error_code, "Repository error")
        return "Internal error"


class NotFoundError(RepositoryError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")


class DuplicateError(RepositoryError):
    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="duplicate")


class InvalidFieldError(RepositoryError):
    """Raised when the caller names a field the model does not have (e.g. an unknown sort key)."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_field")


class InvalidInputError(RepositoryError):
    """Raised when stored data would break a NOT NULL or CHECK rule."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="invalid_input")


class ReferenceConstraintError(RepositoryError):
    """Raised when a write or delete would leave a dangling foreign key."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="reference")


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "InvalidFieldError",
    "InvalidInputError",
    "ReferenceConstraintError",
]
