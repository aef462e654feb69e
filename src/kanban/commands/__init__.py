from .pagination import Page, PageRequest, SortOrder, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .secretariat import (
    CreateSecretariatInput,
    UpdateSecretariatInput,
    FindSecretariatInput,
    DeleteSecretariatInput,
    SecretariatOutput,
)
from .accountable import (
    CreateAccountableInput,
    UpdateAccountableInput,
    FindAccountableInput,
    DeleteAccountableInput,
    AccountableOutput,
)
from .project import (
    CreateProjectInput,
    UpdateProjectInput,
    FindProjectInput,
    DeleteProjectInput,
    ChangeProjectStatusInput,
    ProjectOutput,
)

__all__ = [
    "Page",
    "PageRequest",
    "SortOrder",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "CreateSecretariatInput",
    "UpdateSecretariatInput",
    "FindSecretariatInput",
    "DeleteSecretariatInput",
    "SecretariatOutput",
    "CreateAccountableInput",
    "UpdateAccountableInput",
    "FindAccountableInput",
    "DeleteAccountableInput",
    "AccountableOutput",
    "CreateProjectInput",
    "UpdateProjectInput",
    "FindProjectInput",
    "DeleteProjectInput",
    "ChangeProjectStatusInput",
    "ProjectOutput",
]
