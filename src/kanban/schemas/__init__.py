from .common import CamelModel, PageResponse, ProblemDetail
from .secretariat import SecretariatRequest, SecretariatResponse
from .accountable import AccountableRequest, AccountableResponse
from .project import ProjectRequest, ProjectResponse

__all__ = [
    "CamelModel",
    "PageResponse",
    "ProblemDetail",
    "SecretariatRequest",
    "SecretariatResponse",
    "AccountableRequest",
    "AccountableResponse",
    "ProjectRequest",
    "ProjectResponse",
]
