"""
Core pytest configuration for the entire test suite.

Provides logging setup, the test database (a fresh engine and schema per
test) and session fixtures. Domain fixtures live in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/api_fixtures.py
"""

import os
import sys
import asyncio
import logging
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before anything imports them.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "aiosqlite",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest
from pytest import FixtureRequest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

from kanban.config.settings import Settings
from kanban.core.logging.builder import setup_logging
from kanban.database.base import Base
from kanban.database.session import build_engine, build_sessionmaker
from kanban import models  # noqa: F401 - registers tables on Base.metadata

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """
    Sanitized database URL for logging: scheme, host, port and database name,
    without credentials.
    """
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    1. `TEST_DATABASE_URL` environment variable (CI against Postgres)
    2. in-memory SQLite otherwise, no server needed
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url
    return "sqlite+aiosqlite://"


TEST_DATABASE_URL = get_test_database_url()
logger.info(f"Using test DB: {safe_log_db_url(TEST_DATABASE_URL)}")

# psycopg async cannot run on the Windows ProactorEventLoop.
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(
        ENV="testing",
        TESTING=True,
        DATABASE_URL_OVERRIDE=TEST_DATABASE_URL,
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=True,
        PROBLEM_BASE_URL="https://kanban.test/problems",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest, test_settings: Settings):
    """
    Install the application's logging for the whole session, then re-attach
    pytest's capture handler (dictConfig removes it) so caplog keeps working.
    """
    setup_logging(test_settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh engine and schema per test.

    In-memory SQLite lives as long as its connection, so StaticPool keeps a
    single connection shared by every session the test opens.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = build_engine(
            test_settings,
            TEST_DATABASE_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = build_engine(test_settings, TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    Session for repository and use case tests. Code under test only flushes;
    whatever a test writes disappears with the per-test schema.
    """
    maker = build_sessionmaker(async_engine)
    async with maker() as session:
        yield session
        await session.rollback()


# Fixtures shared across suites
from .test_fixtures.repository_fixtures import (  # noqa: E402
    secretariat_repository,
    accountable_repository,
    project_repository,
    project_accountable_repository,
    create_secretariat,
    create_accountable,
    create_project,
    created_secretariat,
)
from .test_fixtures.api_fixtures import app, client  # noqa: E402
