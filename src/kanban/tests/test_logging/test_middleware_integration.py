import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from kanban.core.logging.builder import setup_logging
from kanban.core.logging.middleware import RequestIDMiddleware


class StdoutSettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = True
    LOG_DIR = None
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "production"
    ENABLE_SQL_LOGGING = False


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("kanban").info("handling hello")
        return {"ok": True}

    return app


def json_lines(text: str) -> list[dict]:
    records = []
    for line in text.strip().splitlines():
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError:
            continue
    return records


def test_request_id_in_response_and_logs(capsys):
    setup_logging(StdoutSettings())
    client = TestClient(build_app())

    resp = client.get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get("X-Request-ID")
    assert rid is not None

    records = json_lines(capsys.readouterr().err)
    assert records, "Expected JSON log lines on stderr."
    assert any(r.get("request_id") == rid and r["message"] == "handling hello" for r in records)
    access = [r for r in records if r["message"] == "http.request.completed"]
    assert access and access[0]["request_id"] == rid
    assert access[0]["status"] == 200


def test_incoming_request_id_is_reused(capsys):
    setup_logging(StdoutSettings())
    client = TestClient(build_app())

    resp = client.get("/hello", headers={"X-Request-ID": "from-gateway"})

    assert resp.headers["X-Request-ID"] == "from-gateway"
    records = json_lines(capsys.readouterr().err)
    assert any(r.get("request_id") == "from-gateway" for r in records)
