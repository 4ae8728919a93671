from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from devconsole.console import Console
from devconsole.log_bridge import (
    ConsoleLogHandler,
    install_log_handler,
    severity_for_record,
)
from devconsole.types import LogSeverity


@pytest.fixture
def bridged(empty_console: Console) -> Iterator[tuple[Console, logging.Logger]]:
    logger = logging.getLogger("devconsole.tests.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = install_log_handler(empty_console, logger)
    yield empty_console, logger
    logger.removeHandler(handler)


def _record(level: int, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord("x", level, __file__, 1, "msg", None, exc_info)


@pytest.mark.parametrize(
    ("level", "severity"),
    [
        (logging.DEBUG, LogSeverity.LOG),
        (logging.INFO, LogSeverity.LOG),
        (logging.WARNING, LogSeverity.WARNING),
        (logging.ERROR, LogSeverity.ERROR),
        (logging.CRITICAL, LogSeverity.ASSERT),
    ],
)
def test_severity_for_level(level: int, severity: LogSeverity) -> None:
    assert severity_for_record(_record(level)) is severity


def test_records_with_exception_info_are_exceptions() -> None:
    try:
        raise ValueError("nope")
    except ValueError:
        record = _record(logging.ERROR, sys.exc_info())
    assert severity_for_record(record) is LogSeverity.EXCEPTION


def test_install_log_handler_defaults_to_root(empty_console: Console) -> None:
    handler = install_log_handler(empty_console)
    try:
        assert isinstance(handler, ConsoleLogHandler)
        assert handler in logging.getLogger().handlers
    finally:
        logging.getLogger().removeHandler(handler)


def test_messages_are_forwarded(bridged: tuple[Console, logging.Logger]) -> None:
    console, logger = bridged
    logger.info("loaded %d levels", 3)
    logger.warning("low ammo")

    assert console.output.lines == [
        "[Log]:                loaded 3 levels",
        "[Warning]:            low ammo",
    ]
    assert __file__ in console.last_call_stack(LogSeverity.WARNING)


def test_exception_traceback_is_retained(
    bridged: tuple[Console, logging.Logger],
) -> None:
    console, logger = bridged
    try:
        raise KeyError("missing.asset")
    except KeyError:
        logger.exception("asset lookup failed")

    assert console.output.lines == ["[Exception]:          asset lookup failed"]
    stack = console.last_call_stack(LogSeverity.EXCEPTION)
    assert "Traceback" in stack
    assert "KeyError" in stack

    console.execute_line("callstack.exception")
    assert console.output.lines[2].startswith("1  Traceback")


def test_console_log_variable_disables_forwarding(
    bridged: tuple[Console, logging.Logger],
) -> None:
    console, logger = bridged
    console.execute_line("console.log false")
    console.clear()
    logger.error("not shown")
    assert console.output.lines == []
