import importlib
import json
import logging
import sys

import pytest

from ml_download_events.utils import logger as logger_mod


@pytest.fixture()
def clean_package_logger():
    pkg = logging.getLogger(logger_mod.LOGGER_NAME)
    saved_handlers, saved_level = pkg.handlers[:], pkg.level
    pkg.handlers.clear()
    yield pkg
    pkg.handlers[:] = saved_handlers
    pkg.setLevel(saved_level)


def _record(msg, args=(), exc_info=None, level=logging.INFO):
    return logging.LogRecord("ml_download_events", level, __file__, 1, msg, args, exc_info)


def test_json_formatter_merges_extra():
    record = _record("hello %s", ("x",))
    record.extra = {"size": 42}
    line = json.loads(logger_mod.JsonFormatter().format(record))
    assert line["level"] == "INFO"
    assert line["name"] == "ml_download_events"
    assert line["message"] == "hello x"
    assert line["size"] == 42
    assert "time" in line


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record("failed", exc_info=sys.exc_info(), level=logging.ERROR)
    line = json.loads(logger_mod.JsonFormatter().format(record))
    assert "RuntimeError: boom" in line["exc_info"]


def test_configure_logging_is_idempotent(clean_package_logger):
    logger_mod.configure_logging("DEBUG")
    logger_mod.configure_logging("ERROR")
    assert len(clean_package_logger.handlers) == 1
    assert clean_package_logger.level == logging.DEBUG


def test_configure_logging_leaves_root_alone(clean_package_logger):
    logger_mod.configure_logging()
    root_formatters = [h.formatter for h in logging.getLogger().handlers]
    assert not any(isinstance(f, logger_mod.JsonFormatter) for f in root_formatters)


def test_log_level_from_environment(monkeypatch):
    from ml_download_events import settings

    monkeypatch.setenv("ML_DOWNLOAD_EVENTS_LOG_LEVEL", "warning")
    try:
        assert importlib.reload(settings).LOG_LEVEL == "WARNING"
    finally:
        monkeypatch.undo()
        importlib.reload(settings)
