import json
import logging
import sys

from functions.common.core.logging_config import CustomJsonFormatter, setup_logging


def test_custom_json_formatter():
    formatter = CustomJsonFormatter()
    record = logging.LogRecord(
        name="descriptor.validation",
        level=logging.INFO,
        pathname="validation.py",
        lineno=10,
        msg="Function config rejected: %s",
        args=("bad",),
        exc_info=None,
    )
    record.function = "t/ns/f"

    data = json.loads(formatter.format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "descriptor.validation"
    assert data["message"] == "Function config rejected: bad"
    assert data["function"] == "t/ns/f"
    assert data["_time"].endswith("+00:00")
    assert "msg" not in data
    assert "exception" not in data


def test_custom_json_formatter_exception():
    formatter = CustomJsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        name="descriptor", level=logging.ERROR, pathname="x.py", lineno=1,
        msg="failed", args=(), exc_info=exc_info,
    )

    data = json.loads(formatter.format(record))

    assert "ValueError: boom" in data["exception"]
    assert data["exception_type"] == "ValueError"


def test_custom_json_formatter_non_serializable_extra():
    formatter = CustomJsonFormatter()
    record = logging.LogRecord(
        name="descriptor", level=logging.INFO, pathname="x.py", lineno=1,
        msg="loaded", args=(), exc_info=None,
    )
    record.path = object()

    data = json.loads(formatter.format(record))

    assert data["path"].startswith("<object object")


def test_setup_logging_missing_file_falls_back(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    setup_logging(str(tmp_path / "missing.yml"))

    assert calls == [{"level": "DEBUG"}]


def test_setup_logging_substitutes_environment(tmp_path, monkeypatch):
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  common-test:\n"
        "    level: ${LOG_LEVEL}\n"
    )
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    setup_logging(str(config_path))

    assert logging.getLogger("common-test").level == logging.ERROR


def test_setup_logging_default_level(tmp_path, monkeypatch):
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  common-test-default:\n"
        "    level: ${LOG_LEVEL}\n"
    )
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging(str(config_path))

    assert logging.getLogger("common-test-default").level == logging.INFO


def test_custom_json_formatter_service_and_none_extras():
    formatter = CustomJsonFormatter(service="descriptor")
    record = logging.LogRecord(
        name="descriptor.validation", level=logging.INFO, pathname="x.py", lineno=1,
        msg="Function config rejected", args=(), exc_info=None,
    )
    record.field = None
    record.function = "t/ns/f"

    data = json.loads(formatter.format(record))

    assert data["service"] == "descriptor"
    assert data["function"] == "t/ns/f"
    assert "field" not in data


def test_setup_logging_defaults_fill_missing_variables(tmp_path, monkeypatch):
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  common-test-defaults:\n"
        "    level: ${LOG_LEVEL}\n"
    )
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging(str(config_path), defaults={"LOG_LEVEL": "WARNING"})

    assert logging.getLogger("common-test-defaults").level == logging.WARNING


def test_setup_logging_environment_beats_defaults(tmp_path, monkeypatch):
    config_path = tmp_path / "logging.yml"
    config_path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  common-test-env:\n"
        "    level: ${LOG_LEVEL}\n"
    )
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    setup_logging(str(config_path), defaults={"LOG_LEVEL": "WARNING"})

    assert logging.getLogger("common-test-env").level == logging.DEBUG
