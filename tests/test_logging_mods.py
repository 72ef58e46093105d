# tests/test_logging_mods.py
import importlib
import logging
import logging as std_logging

from config import settings

import utils.logging as logging_utils


def _keep_caplog_handler(caplog):
    root_logger = std_logging.getLogger()

    class Handlers(list):
        def clear(self):
            pass

    root_logger.handlers = Handlers([caplog.handler])

    # Configure structlog before reloading module so logger uses logging
    logging_utils.structlog.configure(
        logger_factory=logging_utils.structlog.stdlib.LoggerFactory()
    )
    importlib.reload(logging_utils)


def _drop_added_handlers(caplog):
    root_logger = std_logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler is not caplog.handler:
            handler.close()
            root_logger.removeHandler(handler)


def test_setup_logging_file_error(monkeypatch, caplog, tmp_path):
    caplog.set_level(logging.ERROR)
    _keep_caplog_handler(caplog)

    def raise_handler(*_a, **_k):
        raise OSError("fail")

    monkeypatch.setattr(std_logging.handlers, "RotatingFileHandler", raise_handler)
    monkeypatch.setattr(settings, "LOG_FILE", str(tmp_path / "temp.log"))
    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", False)

    logging_utils.setup_logging()

    assert any(
        "Error setting up file logger" in record.message for record in caplog.records
    )
    _drop_added_handlers(caplog)


def test_setup_logging_writes_log_file(monkeypatch, caplog, tmp_path):
    caplog.set_level(logging.INFO)
    _keep_caplog_handler(caplog)
    log_path = tmp_path / "logs" / "engine_run.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_path))
    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", False)

    logging_utils.setup_logging()

    assert log_path.parent.is_dir()
    assert std_logging.getLogger("httpx").level == logging.WARNING
    assert any(
        "Engine logging setup complete." in record.message
        for record in caplog.records
    )
    _drop_added_handlers(caplog)


def test_console_handler_follows_rich_setting(monkeypatch, caplog):
    _keep_caplog_handler(caplog)
    monkeypatch.setattr(settings, "LOG_FILE", None)
    root_logger = std_logging.getLogger()

    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", True)
    logging_utils.setup_logging()
    assert any(isinstance(h, logging_utils.RichHandler) for h in root_logger.handlers)
    _drop_added_handlers(caplog)

    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", False)
    logging_utils.setup_logging()
    added = [h for h in root_logger.handlers if h is not caplog.handler]
    assert len(added) == 1
    assert not isinstance(added[0], logging_utils.RichHandler)
    _drop_added_handlers(caplog)
