"""Forward stdlib ``logging`` records into a console's output.

Attach a ``ConsoleLogHandler`` to a logger (the root logger by default) and
every record it receives shows up in the console with a severity prefix.
Records that carry exception info are treated as exceptions and keep their
formatted traceback, so ``callstack.exception`` can show it later.
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

from devconsole.types import LogSeverity

if TYPE_CHECKING:
    from devconsole.console import Console


def severity_for_record(record: logging.LogRecord) -> LogSeverity:
    """Map a log record to the console severity it is shown with."""
    if record.exc_info and record.exc_info[0] is not None:
        return LogSeverity.EXCEPTION
    if record.levelno >= logging.CRITICAL:
        return LogSeverity.ASSERT
    if record.levelno >= logging.ERROR:
        return LogSeverity.ERROR
    if record.levelno >= logging.WARNING:
        return LogSeverity.WARNING
    return LogSeverity.LOG


def stack_for_record(record: logging.LogRecord) -> str:
    """Return the best call stack available for ``record``."""
    if record.exc_info and record.exc_info[0] is not None:
        return "".join(traceback.format_exception(*record.exc_info))
    if record.stack_info:
        return record.stack_info
    return f"{record.pathname}:{record.lineno} in {record.funcName}"


class ConsoleLogHandler(logging.Handler):
    """Logging handler that writes records to a ``Console``."""

    def __init__(self, console: Console, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.on_log_message(
                record.getMessage(),
                stack_for_record(record),
                severity_for_record(record),
            )
        except Exception:
            self.handleError(record)


def install_log_handler(
    console: Console,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> ConsoleLogHandler:
    """Attach a ``ConsoleLogHandler`` for ``console`` and return it.

    ``logger`` defaults to the root logger. Remove the returned handler with
    ``logger.removeHandler`` to stop forwarding.
    """
    target = logger if logger is not None else logging.getLogger()
    handler = ConsoleLogHandler(console, level)
    target.addHandler(handler)
    return handler
