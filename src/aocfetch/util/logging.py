"""Logging setup utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "aocfetch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(*, level: int | str = logging.INFO, log_path: Path | None = None) -> logging.Logger:
    """Configure project-wide logging handlers.

    Safe to call repeatedly: the stream handler is replaced by one bound to the
    current ``sys.stderr``, and a file handler is added once per path.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    # the previous stream may already be closed, so it is never flushed
    for handler in stream_handlers:
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_path and str(log_path.absolute()) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
