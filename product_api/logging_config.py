# product_api/logging_config.py
"""
Logging for the service.

Everything logs under the ``product_api`` logger tree, which is the only
tree configured here; uvicorn keeps its own loggers.  Access lines go to
``product_api.requests`` and read ``<METHOD> <path>[?query]``; the
timestamp comes from the formatter.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from starlette.requests import Request

REQUEST_LOGGER = "product_api.requests"

request_logger = logging.getLogger(REQUEST_LOGGER)


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    handlers: Dict[str, Dict[str, Any]] = {
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
            "default": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "product_api": {"level": level, "handlers": list(handlers)},
        },
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the ``product_api`` loggers once.

    ``create_app`` calls this on every app it builds; later calls are
    no-ops so handlers are never stacked.
    """
    if logging.getLogger("product_api").handlers:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))


def log_request(request: Request) -> None:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    request_logger.info("%s %s", request.method, path)
