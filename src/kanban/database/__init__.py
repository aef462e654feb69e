from .base import Base, EntityMixin
from .session import build_engine, build_sessionmaker, get_async_session
from .transaction import transactional

__all__ = [
    "Base",
    "EntityMixin",
    "build_engine",
    "build_sessionmaker",
    "get_async_session",
    "transactional",
]
