from .secretariat import (
    CreateSecretariatUseCase,
    FindSecretariatUseCase,
    ListSecretariatsUseCase,
    UpdateSecretariatUseCase,
    DeleteSecretariatUseCase,
)
from .accountable import (
    CreateAccountableUseCase,
    FindAccountableUseCase,
    ListAccountablesUseCase,
    UpdateAccountableUseCase,
    DeleteAccountableUseCase,
)
from .project import (
    CreateProjectUseCase,
    FindProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
    ChangeProjectStatusUseCase,
    DeleteProjectUseCase,
)

__all__ = [
    "CreateSecretariatUseCase",
    "FindSecretariatUseCase",
    "ListSecretariatsUseCase",
    "UpdateSecretariatUseCase",
    "DeleteSecretariatUseCase",
    "CreateAccountableUseCase",
    "FindAccountableUseCase",
    "ListAccountablesUseCase",
    "UpdateAccountableUseCase",
    "DeleteAccountableUseCase",
    "CreateProjectUseCase",
    "FindProjectUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
    "ChangeProjectStatusUseCase",
    "DeleteProjectUseCase",
]
