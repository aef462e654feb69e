from .base_repository import BaseRepository
from .secretariat_repository import SecretariatRepository
from .accountable_repository import AccountableRepository
from .project_repository import ProjectRepository
from .project_accountable_repository import ProjectAccountableRepository

__all__ = [
    "BaseRepository",
    "SecretariatRepository",
    "AccountableRepository",
    "ProjectRepository",
    "ProjectAccountableRepository",
]
