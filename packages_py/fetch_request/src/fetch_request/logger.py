"""
Logging setup for fetch-request.

The level comes from ``FETCH_REQUEST_LOG_LEVEL`` (silent, error, warn, info,
debug, trace) and applies to every ``fetch_request`` logger.
"""
import logging
import os
import sys
from typing import Literal, Optional

LogLevel = Literal["silent", "error", "warn", "info", "debug", "trace"]

ENV_LOG_LEVEL = "FETCH_REQUEST_LOG_LEVEL"
ENV_LOG_PREFIX = "FETCH_REQUEST_LOG_PREFIX"

LOGGER_NAME = "fetch_request"

LOG_LEVELS = {
    "silent": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    # stdlib has no trace level; debug is the finest
    "trace": logging.DEBUG,
}

DEFAULT_LEVEL: LogLevel = "warn"


def get_log_level() -> LogLevel:
    """Current level name from the environment, falling back to the default."""
    env_level = os.getenv(ENV_LOG_LEVEL, "").lower()
    if env_level in LOG_LEVELS:
        return env_level  # type: ignore
    return DEFAULT_LEVEL


def set_log_level(level: LogLevel) -> None:
    if level in LOG_LEVELS:
        logging.getLogger(LOGGER_NAME).setLevel(LOG_LEVELS[level])


def configure_logging(level: Optional[LogLevel] = None, stream=None) -> logging.Logger:
    """
    Attach a prefixed stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_fetch_request", False) for h in logger.handlers):
        prefix = os.getenv(ENV_LOG_PREFIX, "[fetch-request]")
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(f"{prefix} %(levelname)s %(name)s: %(message)s"))
        handler._fetch_request = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    set_log_level(level or get_log_level())
    return logger
