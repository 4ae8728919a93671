from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TypeAlias

# =============================================================================
# COMMAND TYPES
# =============================================================================

# Receives the whole raw input line, command token included.
CommandHandler: TypeAlias = Callable[[str], None]

# Host hook invoked by the ``quit`` command.
QuitHook: TypeAlias = Callable[[], None]

# =============================================================================
# LOGGING TYPES
# =============================================================================


class LogSeverity(Enum):
    """Severity of a log message forwarded into the console."""

    LOG = "log"
    WARNING = "warning"
    ERROR = "error"
    EXCEPTION = "exception"
    ASSERT = "assert"

    @property
    def retains_stack(self) -> bool:
        """Whether messages of this severity keep their call stack for later."""
        return self in (LogSeverity.WARNING, LogSeverity.ERROR, LogSeverity.EXCEPTION)
