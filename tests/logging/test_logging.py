"""Tests for the eulertrail logger hierarchy and its level helpers."""

import logging
import sys
from io import StringIO

import pytest

from eulertrail.algorithms.longest_trail import longest_trail
from eulertrail.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def _root():
    return logging.getLogger("eulertrail")


def test_module_loggers_follow_level_helpers():
    """Module loggers carry no level of their own; the package root decides."""
    eulerize_logger = get_logger("eulertrail.algorithms.eulerize")
    assert eulerize_logger.level == logging.NOTSET
    assert eulerize_logger.getEffectiveLevel() == logging.INFO

    enable_debug_logging()
    assert eulerize_logger.getEffectiveLevel() == logging.DEBUG

    disable_debug_logging()
    assert eulerize_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert get_logger("eulertrail.io").getEffectiveLevel() == logging.WARNING


def test_solver_debug_records_only_when_enabled(caplog, bridge_gap):
    setup_root_logger()
    longest_trail(bridge_gap, 0, 0)
    assert not [r for r in caplog.records if r.levelno == logging.DEBUG]

    bridge_gap.clear_path_cache()
    enable_debug_logging()
    longest_trail(bridge_gap, 0, 4)
    names = {r.name for r in caplog.records if r.levelno == logging.DEBUG}
    assert "eulertrail.algorithms.eulerize" in names
    assert "eulertrail.algorithms.longest_trail" in names
    assert any("exposed nodes" in r.getMessage() for r in caplog.records)


def test_level_change_reaches_root_handler():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    logger = get_logger("eulertrail.cli")

    logger.debug("hidden")
    enable_debug_logging()
    logger.debug("shown")
    assert "hidden" not in capture.getvalue()
    assert "shown" in capture.getvalue()


def test_setup_is_idempotent_until_reset():
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(StringIO()))
    setup_root_logger(level=logging.DEBUG)
    assert len(_root().handlers) == 1
    assert _root().level == logging.INFO

    reset_logging()
    assert _root().handlers == []
    setup_root_logger(level=logging.ERROR)
    assert len(_root().handlers) == 1
    assert _root().level == logging.ERROR


def test_default_handler_writes_to_stderr():
    setup_root_logger()
    (handler,) = _root().handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_custom_format_string():
    capture = StringIO()
    fmt = "%(levelname)s|%(name)s|%(message)s"
    setup_root_logger(format_string=fmt, handler=logging.StreamHandler(capture))
    get_logger("eulertrail.io").info("loaded")
    assert capture.getvalue() == "INFO|eulertrail.io|loaded\n"
