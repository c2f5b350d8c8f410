#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging setup: one stream handler on the package logger, shared by every module.
"""

import logging
from .config import LOG_LEVEL, LOG_FORMAT

PACKAGE_LOGGER = "upsell_calc"


def _handler_owner(name: str) -> logging.Logger:
    # Module loggers under the package propagate to a single package-level handler
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module, installing the stream handler once.

    Args:
        name: Module name (typically __name__)
    """
    owner = _handler_owner(name)
    if not owner.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        owner.addHandler(handler)
        owner.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    logger = logging.getLogger(name)
    if logger is not owner:
        logger.setLevel(logging.NOTSET)
    return logger
