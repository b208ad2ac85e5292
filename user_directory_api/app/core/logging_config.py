"""
Logging setup shared by the API and its uvicorn server.

The root logger gets one console handler, plus a file handler when
``LOG_FILE`` is set.  uvicorn's own loggers are stripped of the
handlers it would otherwise install and left to propagate to the root
logger, so request logs and application logs share one format and
one destination.
"""

import logging

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings`` and route uvicorn logs through it.

    Does nothing to the root logger if it already has handlers (pytest,
    or a second ``create_app`` call in the same process).
    """
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(resolve_level(settings.log_level))
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers = [logging.StreamHandler()]
        if settings.log_file:
            handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
