"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from proximal_optimize.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)
from proximal_optimize.operators import gradient_step
from proximal_optimize.pgm import pgm


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "proximal_optimize.test_module"


def test_get_logger_keeps_package_prefix():
    logger = get_logger("proximal_optimize.pgm")
    assert logger.name == "proximal_optimize.pgm"
    assert get_logger().name == "proximal_optimize"


def test_get_logger_caching():
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_module_loggers_forward_to_package_logger():
    package = get_logger()
    assert package.propagate is False
    child = get_logger("test_module")
    assert child.propagate is True
    assert child.handlers == []
    assert child.parent is package


def test_set_log_level():
    logger = get_logger("test_module")
    set_log_level(logging.INFO)
    assert logger.getEffectiveLevel() == logging.INFO
    set_log_level(logging.WARNING)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_set_log_level_string():
    logger = get_logger("test_module")
    set_log_level("DEBUG")
    assert logger.getEffectiveLevel() == logging.DEBUG
    set_log_level("ERROR")
    assert logger.getEffectiveLevel() == logging.ERROR


def test_configure_logging_stream_and_format():
    stream = StringIO()
    configure_logging(level=logging.DEBUG, format_string="%(levelname)s|%(message)s", stream=stream)
    get_logger("test_module").debug("Debug message")
    assert "DEBUG|Debug message" in stream.getvalue()


def test_configure_logging_reaches_loggers_created_later():
    stream = StringIO()
    configure_logging(level=logging.INFO, stream=stream)
    get_logger("created_after_configure").info("late message")
    assert "proximal_optimize.created_after_configure: late message" in stream.getvalue()


def test_pgm_reports_non_convergence():
    stream = StringIO()
    configure_logging(level=logging.INFO, stream=stream)
    pgm(np.array([-1.0, -1.0]), gradient_step(lambda x: 2.0 * x), np.array([0.01, 0.01]), max_iter=2)
    output = stream.getvalue()
    assert "Completed 2 iterations" in output
    assert "did not converge" in output
