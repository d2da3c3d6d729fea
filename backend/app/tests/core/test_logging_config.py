import importlib
import json
import logging

from app.core.logging_config import JsonFormatter, configure_logging


def _record(level: int, msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(
        name="app.agent.orchestrator",
        level=level,
        pathname=__file__,
        lineno=7,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_json_formatter_stamps_service_and_environment():
    formatter = JsonFormatter("architecture-oracle-api", "test")

    payload = json.loads(formatter.format(_record(logging.INFO, "Recommended %s", "microservices")))

    assert payload["level"] == "INFO"
    assert payload["service"] == "architecture-oracle-api"
    assert payload["env"] == "test"
    assert payload["logger"] == "app.agent.orchestrator"
    assert payload["message"] == "Recommended microservices"
    assert "where" not in payload
    assert "traceback" not in payload


def test_json_formatter_adds_location_for_warnings():
    formatter = JsonFormatter("api", "development")

    payload = json.loads(formatter.format(_record(logging.WARNING, "Slow request")))

    assert payload["where"] == "test_logging_config:7"


def test_configure_logging_replaces_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("WARNING", "json", service="oracle", environment="production")
        configure_logging("WARNING", "json", service="oracle", environment="production")

        assert len(root.handlers) == 1
        formatter = root.handlers[0].formatter
        assert isinstance(formatter, JsonFormatter)
        assert formatter.service == "oracle"
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_importing_the_app_leaves_logging_alone():
    import app.main

    root = logging.getLogger()
    handlers_before, level_before = root.handlers[:], root.level

    importlib.reload(app.main)

    assert root.handlers == handlers_before
    assert root.level == level_before
