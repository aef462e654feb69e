"""
FastAPI dependency providers.

Routers depend on the port Protocols; the concrete adapters, use cases and
repositories are assembled here once per request around the request's
AsyncSession. FastAPI caches `get_async_session` within a request, so the
handler's `session` argument and the repositories share one session.

Testing:
    app.dependency_overrides[get_async_session] = lambda: test_session
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.session import get_async_session
from ..ports.accountable import AccountableAdapter, AccountablePort
from ..ports.project import ProjectAdapter, ProjectPort
from ..ports.secretariat import SecretariatAdapter, SecretariatPort
from ..repositories.accountable_repository import AccountableRepository
from ..repositories.project_repository import ProjectRepository
from ..repositories.secretariat_repository import SecretariatRepository
from ..usecases import accountable as accountable_uc
from ..usecases import project as project_uc
from ..usecases import secretariat as secretariat_uc


# =============================================================================
# Repository Providers
# =============================================================================


def get_secretariat_repo(session: AsyncSession = Depends(get_async_session)) -> SecretariatRepository:
    return SecretariatRepository(session)


def get_accountable_repo(session: AsyncSession = Depends(get_async_session)) -> AccountableRepository:
    return AccountableRepository(session)


def get_project_repo(session: AsyncSession = Depends(get_async_session)) -> ProjectRepository:
    return ProjectRepository(session)


# =============================================================================
# Port Providers
# =============================================================================


def get_secretariat_port(
    secretariat_repo: SecretariatRepository = Depends(get_secretariat_repo),
) -> SecretariatPort:
    return SecretariatAdapter(
        create_use_case=secretariat_uc.CreateSecretariatUseCase(secretariat_repo),
        find_use_case=secretariat_uc.FindSecretariatUseCase(secretariat_repo),
        list_use_case=secretariat_uc.ListSecretariatsUseCase(secretariat_repo),
        update_use_case=secretariat_uc.UpdateSecretariatUseCase(secretariat_repo),
        delete_use_case=secretariat_uc.DeleteSecretariatUseCase(secretariat_repo),
    )


def get_accountable_port(
    accountable_repo: AccountableRepository = Depends(get_accountable_repo),
    secretariat_repo: SecretariatRepository = Depends(get_secretariat_repo),
) -> AccountablePort:
    return AccountableAdapter(
        create_use_case=accountable_uc.CreateAccountableUseCase(accountable_repo, secretariat_repo),
        find_use_case=accountable_uc.FindAccountableUseCase(accountable_repo),
        list_use_case=accountable_uc.ListAccountablesUseCase(accountable_repo),
        update_use_case=accountable_uc.UpdateAccountableUseCase(accountable_repo, secretariat_repo),
        delete_use_case=accountable_uc.DeleteAccountableUseCase(accountable_repo),
    )


def get_project_port(
    project_repo: ProjectRepository = Depends(get_project_repo),
    secretariat_repo: SecretariatRepository = Depends(get_secretariat_repo),
) -> ProjectPort:
    return ProjectAdapter(
        create_use_case=project_uc.CreateProjectUseCase(project_repo, secretariat_repo),
        find_use_case=project_uc.FindProjectUseCase(project_repo),
        list_use_case=project_uc.ListProjectsUseCase(project_repo),
        update_use_case=project_uc.UpdateProjectUseCase(project_repo, secretariat_repo),
        change_status_use_case=project_uc.ChangeProjectStatusUseCase(project_repo),
        delete_use_case=project_uc.DeleteProjectUseCase(project_repo),
    )
