"""
Logging configuration for the application and its server.

The service is normally started through ``run.py``, where uvicorn logs
its own lifecycle messages ("Started server process", startup
failures, access lines) next to the application's messages.  Both go
through the root logger here so they share one format and one set of
handlers: uvicorn's loggers are stripped of their own handlers and
set to propagate.  ``run.py`` passes ``log_config=None`` to uvicorn so
it does not install its default configuration over this one.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_configured = False


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``logging.config.dictConfig`` mapping.

    Unknown level names fall back to ``INFO``.
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": logfile,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
        "loggers": {
            name: {"level": level_name, "handlers": [], "propagate": True}
            for name in UVICORN_LOGGERS
        },
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, force: bool = False) -> None:
    """Configure the root and uvicorn loggers.

    Only the first call takes effect unless ``force`` is set; the app
    factory may run more than once in one process (tests, reloads).
    """
    global _configured
    if _configured and not force:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
    _configured = True
