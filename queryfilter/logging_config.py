"""
Logging helpers for queryfilter.

The package only creates loggers under the "queryfilter" hierarchy. Handlers
are left to the host application; scripts that run on their own can call
setup_logging to get the console (and optional file) output configured from
the QUERYFILTER_* environment variables.
"""

import functools
import logging
import logging.config
import os
import sys
import time
from typing import Any, Dict

ROOT_LOGGER = "queryfilter"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_log_level() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.getenv("QUERYFILTER_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Get log format based on environment."""
    if os.getenv("QUERYFILTER_ENV", "development").lower() == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    return "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """
    Build a dictConfig for the queryfilter loggers only.

    The root logger and loggers of other libraries are not touched.
    """
    log_level = get_log_level()
    handlers = {
        "queryfilter_console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "queryfilter_standard",
            "stream": sys.stdout,
        },
    }

    log_file = os.getenv("QUERYFILTER_LOG_FILE")
    if log_file:
        handlers["queryfilter_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "queryfilter_detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "queryfilter_standard": {"format": get_log_format(), "datefmt": "%Y-%m-%d %H:%M:%S"},
            "queryfilter_detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            ROOT_LOGGER: {"level": log_level, "handlers": list(handlers), "propagate": False},
        },
    }


def setup_logging() -> None:
    """Attach console/file handlers to the queryfilter loggers. Meant for scripts."""
    logging.config.dictConfig(get_logging_config())
    logging.getLogger(f"{ROOT_LOGGER}.logging").debug("Logging configured with level: %s", get_log_level())


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the queryfilter hierarchy."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.main" if name == "__main__" else f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator to log the duration of a pipeline stage at debug level.

    Failures are logged and re-raised.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.debug("Operation '%s' failed after %.6fs: %s", operation, time.perf_counter() - start_time, e)
                raise
            logger.debug("Operation '%s' completed in %.6fs", operation, time.perf_counter() - start_time)
            return result

        return wrapper

    return decorator
