# exceptions/
# ├── base.py                    # app-level errors (RepositoryError, NotFoundError, ...)
# ├── integrity_classifier.py    # label an IntegrityError by constraint kind
# └── mapper.py                  # labels -> app-level errors, db_error_handler

from .base import (
    RepositoryError,
    NotFoundError,
    DuplicateError,
    InvalidFieldError,
    InvalidInputError,
    ReferenceConstraintError,
)

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "InvalidFieldError",
    "InvalidInputError",
    "ReferenceConstraintError",
]
