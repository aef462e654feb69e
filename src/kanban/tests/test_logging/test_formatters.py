import json
import logging
import sys

from kanban.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record(**extra):
    # create a LogRecord that simulates formatting with args
    rec = logging.LogRecord("kanban", logging.INFO, __file__, 10, "hello %s", ("tester",), None)
    for key, value in extra.items():
        setattr(rec, key, value)
    return rec


def test_json_formatter_basic_fields():
    rec = make_record(custom="value", request_id="req-1")
    fmt = JsonFormatter(env="testing", service="svc")
    data = json.loads(fmt.format(rec))

    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["logger"] == "kanban"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert "timestamp" in data
    assert data["request_id"] == "req-1"
    assert data["custom"] == "value"
    assert "version" in data


def test_json_formatter_skips_standard_record_attributes():
    data = json.loads(JsonFormatter().format(make_record()))

    assert "args" not in data
    assert "msg" not in data
    assert data["service"] == "kanban-api"


def test_json_formatter_non_serializable_extra():
    class X:
        def __repr__(self):
            return "<X>"

    data = json.loads(JsonFormatter(env="dev").format(make_record(obj=X())))
    # non-serializable obj should be stringified
    assert isinstance(data["obj"], str)


def test_json_formatter_includes_exception():
    try:
        raise ValueError("broken")
    except ValueError:
        rec = logging.LogRecord("kanban", logging.ERROR, __file__, 10, "failed", (), sys.exc_info())

    data = json.loads(JsonFormatter().format(rec))
    assert "ValueError: broken" in data["exc_info"]


def test_color_formatter_line_layout():
    line = ColorFormatter().format(make_record(request_id="rid-9"))

    assert "hello tester" in line
    assert "rid-9" in line
    assert "INFO" in line
