from .secretariat import Secretariat
from .accountable import Accountable
from .project import Project, ProjectStatus
from .project_accountable import ProjectAccountable

__all__ = [
    "Secretariat",
    "Accountable",
    "Project",
    "ProjectStatus",
    "ProjectAccountable",
]
