#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the shared package logger (upsell_calc/utils/logger.py).
"""

import logging

from upsell_calc.utils import get_logger
from upsell_calc.utils.logger import PACKAGE_LOGGER


def test_module_loggers_share_package_handler():
    engine = get_logger("upsell_calc.engine.logic")
    report = get_logger("upsell_calc.report.export")
    package = logging.getLogger(PACKAGE_LOGGER)

    assert len(package.handlers) == 1
    assert not engine.handlers and not report.handlers
    assert engine.propagate and report.propagate


def test_repeated_calls_do_not_add_handlers():
    get_logger("upsell_calc.data.loader")
    get_logger("upsell_calc.data.loader")
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


def test_outside_logger_gets_its_own_handler():
    logger = get_logger("scenario_runner")
    assert len(logger.handlers) == 1
    assert logger.level != logging.NOTSET
