# tests/test_logging_config.py
import logging

from product_catalog_api.app.core import logging_config


def test_chatty_loggers_held_at_warning():
    logging_config.setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_chatty_loggers_follow_debug():
    logging_config.setup_logging("debug")
    try:
        assert logging.getLogger("httpx").level == logging.DEBUG
    finally:
        logging_config.setup_logging("INFO")


def test_file_handler_shares_format(tmp_path):
    logfile = tmp_path / "catalog.log"
    handlers = logging_config._build_handlers(str(logfile))
    try:
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        assert handlers[0].formatter._fmt == handlers[1].formatter._fmt == logging_config.LOG_FORMAT
    finally:
        for handler in handlers:
            handler.close()
