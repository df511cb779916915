"""Tests for logging utilities."""

import logging
from io import StringIO

from edgewise.graphs import random_graph
from edgewise.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger under the package namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "edgewise.test_module"


def test_get_logger_keeps_package_prefix():
    """Module names already under edgewise are not prefixed twice."""
    assert get_logger("edgewise.graphs.core").name == "edgewise.graphs.core"
    assert get_logger().name == "edgewise"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging routes messages to the given stream."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        get_logger("test_module").debug("Debug message")
        assert "Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_generator_logs_at_debug():
    """random_graph reports what it generated at DEBUG level."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        random_graph(4, 1.0, is_directed=False, seed=0)
        output = stream.getvalue()
        assert "edgewise.graphs.generators" in output
        assert "4 nodes, 12 adjacency entries" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    assert get_logger("test_module").propagate is False
