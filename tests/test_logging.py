import io
import json
import logging
import sys

from simplebank.core.logging_config import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {
            "name": "simplebank.test",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "transfer committed",
            "transfer_id": 7,
        }
    )

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "transfer committed"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "simplebank.test"
    assert entry["transfer_id"] == 7
    assert "timestamp" in entry


def test_json_formatter_renders_exceptions():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("simplebank.test").makeRecord(
            "simplebank.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    entry = json.loads(JSONFormatter().format(record))

    assert "RuntimeError: boom" in entry["exception"]


def test_setup_logging_replaces_handlers():
    logger = setup_logging("DEBUG", "json", logger_name="simplebank.test.setup")
    setup_logging("WARNING", "text", logger_name="simplebank.test.setup")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_child_loggers_write_json_lines():
    logger = setup_logging("INFO", "json", logger_name="simplebank.test.stream")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    logging.getLogger("simplebank.test.stream.child").info("hello", extra={"account_id": 1})

    entry = json.loads(stream.getvalue().strip())
    assert entry["message"] == "hello"
    assert entry["account_id"] == 1
