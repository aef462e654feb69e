import pytest

from kanban.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DATABASE_URL_OVERRIDE", "TESTING", "TEST_POSTGRES_DB", "POSTGRES_DB", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)


def make_settings(**values) -> Settings:
    # Ignore any developer .env so the test only sees what it passes.
    return Settings(_env_file=None, **values)


def test_database_url_from_postgres_parts():
    settings = make_settings(POSTGRES_USERNAME="u", POSTGRES_PASSWORD="p", POSTGRES_HOST="db", POSTGRES_DB="kanban")

    assert settings.DATABASE_URL == "postgresql+psycopg://u:p@db:5432/kanban"


def test_database_url_uses_test_database_when_testing():
    settings = make_settings(TESTING=True, TEST_POSTGRES_DB="kanban_test")

    assert settings.DATABASE_URL.endswith("/kanban_test")


def test_database_url_override_wins():
    settings = make_settings(TESTING=True, TEST_POSTGRES_DB="ignored", DATABASE_URL_OVERRIDE="sqlite+aiosqlite:///./k.db")

    assert settings.DATABASE_URL == "sqlite+aiosqlite:///./k.db"


def test_log_settings_are_normalized():
    settings = make_settings(LOG_LEVEL="debug", LOG_FORMAT="TEXT")

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


def test_cors_origins_split_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    assert make_settings().cors_origins == ["https://a.example", "https://b.example"]


def test_problem_base_url_trailing_slash_is_dropped():
    assert make_settings(PROBLEM_BASE_URL="https://x.example/problems/").PROBLEM_BASE_URL == "https://x.example/problems"
