"""
Logging setup for the catalog service.

``setup_logging`` gives the root logger a console handler and, when a
path is configured, a file handler.  Third‑party loggers that emit a
line per HTTP request (httpx under the test client, uvicorn's access
log) are held at WARNING unless the service itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

CHATTY_LOGGERS = ("httpx", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service.

    Parameters
    ----------
    level : str
        Level name for the root logger, case insensitive.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a file that receives the same records as the
        console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    chatty_level = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    root = logging.getLogger()
    if root.handlers:
        # Someone else (pytest, uvicorn, a repeated create_app) already
        # owns the handlers; only the levels above are adjusted.
        return

    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
