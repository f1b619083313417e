import json
import logging
import sys
from logging.handlers import RotatingFileHandler

from _pytest.logging import LogCaptureFixture

from stockroom.config.settings import Settings
from stockroom.logging_config import LOG_NAME, JsonFormatter, get_logger


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]


def test_json_formatter_returns_json_with_extras() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    record.path = "inventory.json"
    record.count = 5
    data = json.loads(formatter.format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "test"
    assert data["message"] == "hello world"
    assert data["extra"] == {"path": "inventory.json", "count": 5}


def test_json_formatter_includes_exception() -> None:
    formatter = JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )
    data = json.loads(formatter.format(record))
    assert "ValueError: boom" in data["exc_info"]
    assert "extra" not in data


def test_get_logger_configures_two_handlers(tmp_path) -> None:
    log_file = tmp_path / "nested" / "app.log"
    logger = get_logger(Settings(log_file=log_file, log_level="WARNING"))
    assert logger.name == LOG_NAME
    handlers = _own_handlers(logger)
    assert len(handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    assert all(h.level == logging.WARNING for h in handlers)
    assert log_file.parent.is_dir()
    assert logger.propagate is False


def test_get_logger_is_idempotent() -> None:
    first = get_logger()
    second = get_logger()
    assert first is second
    assert len(_own_handlers(second)) == 2


def test_get_logger_ignores_foreign_handlers(tmp_path) -> None:
    logger = logging.getLogger(LOG_NAME)
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    try:
        get_logger(Settings(log_file=tmp_path / "app.log"))
        assert len(_own_handlers(logger)) == 2
        assert foreign in logger.handlers
    finally:
        logger.removeHandler(foreign)


def test_module_loggers_propagate_to_project_logger(caplog: LogCaptureFixture) -> None:
    logger = get_logger()
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOG_NAME)
    logging.getLogger("stockroom.repositories.json_log").info(
        "Data saved to file", extra={"count": 3}
    )
    logger.removeHandler(caplog.handler)
    assert len(caplog.records) == 1
    assert caplog.records[0].count == 3
