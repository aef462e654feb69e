"""
Ports: the interface each feature exposes to the HTTP layer, with the
adapter that implements it on top of the use cases. Wiring happens per
request in `kanban.api.deps`.
"""

from .secretariat import SecretariatPort, SecretariatAdapter
from .accountable import AccountablePort, AccountableAdapter
from .project import ProjectPort, ProjectAdapter

__all__ = [
    "SecretariatPort",
    "SecretariatAdapter",
    "AccountablePort",
    "AccountableAdapter",
    "ProjectPort",
    "ProjectAdapter",
]
