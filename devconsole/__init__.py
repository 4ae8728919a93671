"""An in-process developer console with typed variables and autocomplete."""

from devconsole.console import Console
from devconsole.errors import ConsoleError, DuplicateNameError, InvalidValueError
from devconsole.log_bridge import ConsoleLogHandler, install_log_handler
from devconsole.registry import NamespaceRegistry
from devconsole.types import LogSeverity
from devconsole.variables import (
    BoolVariable,
    Command,
    FloatVariable,
    IntVariable,
    StrVariable,
    Variable,
)

__all__ = [
    "BoolVariable",
    "Command",
    "Console",
    "ConsoleError",
    "ConsoleLogHandler",
    "DuplicateNameError",
    "FloatVariable",
    "IntVariable",
    "InvalidValueError",
    "LogSeverity",
    "NamespaceRegistry",
    "StrVariable",
    "Variable",
    "install_log_handler",
]
