"""Logging setup for the lazyval CLI."""

from __future__ import annotations

import logging
import sys
from logging import Handler
from typing import List

from lazyval.config import Config

_LOG_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(name)s %(message)s"


def _with_format(handler: Handler, level: int) -> Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    return handler


def resolve_log_level(config: Config) -> int:
    """Map the configured level name to a logging level, defaulting to INFO."""
    level = logging.getLevelName(config.logging.log_level)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: Config) -> None:
    """Route lazyval logs to the configured file, and to stderr in debug mode.

    Race workers log from their own threads, so records carry the thread name.
    """
    log_level = resolve_log_level(config)
    log_file = config.logging.log_file.expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handlers: List[Handler] = [_with_format(logging.FileHandler(log_file, encoding="utf-8"), log_level)]
    if config.developer.debug_mode:
        handlers.append(_with_format(logging.StreamHandler(sys.stderr), log_level))

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    logging.getLogger(__name__).info(
        "Logging initialized level=%s file=%s config=%s",
        logging.getLevelName(log_level),
        log_file,
        config.config_path,
    )
