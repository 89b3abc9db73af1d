"""Logging helpers shared by the harness modules."""

from __future__ import annotations

import logging
import sys
from typing import Union

_ROOT_LOGGER = "manual_harness"
_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DATEFMT = "%H:%M:%S"
_HANDLER_MARK = "_manual_harness_handler"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the package logger (idempotent)."""

    logger = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not any(getattr(handler, _HANDLER_MARK, False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    return logger
