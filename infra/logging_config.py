# -*- coding: utf-8 -*-
"""
Process logging setup for the GUI and CLI entry points.

- DEBUG, INFO, WARNING -> STDOUT
- ERROR, CRITICAL -> STDERR

Library modules only ever call ``logging.getLogger(__name__)``; nothing is
printed until :func:`setup_logging` runs.
"""
from __future__ import annotations

import logging
import sys
from typing import Union

from infra.config import LOG_FORMAT, LOG_LEVEL


class MaxLevelFilter(logging.Filter):
    """Lets through records up to ``max_level`` (inclusive)."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def setup_logging(level: Union[int, str] = LOG_LEVEL) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)
    return root_logger


__all__ = ["MaxLevelFilter", "setup_logging"]
