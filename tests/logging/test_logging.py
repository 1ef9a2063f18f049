"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from dagpath import cli
from dagpath.engine import PathEngine
from dagpath.exceptions import CycleDetectedError
from dagpath.graph import build_vertices
from dagpath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("dagpath.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()
    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("dagpath.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("dagpath.module2").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("dagpath")
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    get_logger("dagpath.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:dagpath.test.format" in out
    assert "MSG:hello" in out


def test_engine_debug_messages(caplog):
    enable_debug_logging()
    engine = PathEngine()
    vertices = build_vertices([(1, 2), (2, 1), (3, 4)])

    with caplog.at_level(logging.DEBUG, logger="dagpath"):
        engine.longest_path(vertices[3])
        with pytest.raises(CycleDetectedError):
            engine.longest_path(vertices[1])
        engine.clear_cache()

    messages = [r.getMessage() for r in caplog.records]
    assert any("Longest path from vertex 3: 1" in m for m in messages)
    assert any("Cycle re-entered at vertex 1" in m for m in messages)
    assert any("Cleared path cache (2 entries)" in m for m in messages)


def test_cli_verbose_emits_engine_debug(caplog, capsys):
    with caplog.at_level(logging.DEBUG, logger="dagpath"):
        cli.main(["--verbose", "run", "--start", "4"])

    messages = [r.getMessage() for r in caplog.records]
    assert "Debug logging enabled" in messages
    assert "Using built-in sample DAG" in messages
    assert any(m.startswith("Longest path from vertex 4: 2") for m in messages)
    assert "Longest path from vertex 4: 2" in capsys.readouterr().out


def test_cli_quiet_suppresses_info_but_keeps_errors(caplog, tmp_path):
    graph = tmp_path / "cycle.yaml"
    graph.write_text("edges:\n  - [1, 2]\n  - [2, 1]\n")

    with pytest.raises(SystemExit):
        cli.main(["--quiet", "run", str(graph)])

    levels = {r.levelno for r in caplog.records if r.name.startswith("dagpath")}
    assert logging.INFO not in levels
    assert logging.ERROR in levels
    assert any(
        "Cycle detected involving vertex:" in r.getMessage() for r in caplog.records
    )


def test_cli_unknown_start_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="dagpath"):
        with pytest.raises(SystemExit):
            cli.main(["--verbose", "run", "--start", "99"])

    messages = [r.getMessage() for r in caplog.records]
    assert "No vertex with id '99'" in messages
