"""Exceptions raised by the console core.

Only programming-level failures are exceptions. Everything a user can cause
from the input line (unknown names, wrong parameter counts, bad values) ends
up as text in the output buffer.
"""


class ConsoleError(Exception):
    """Base class for console errors."""


class DuplicateNameError(ConsoleError, ValueError):
    """Raised when registering a name that is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Console name '{name}' already registered")
        self.name = name


class InvalidValueError(ConsoleError, ValueError):
    """Raised when text cannot be converted to a variable's value type."""

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(f"'{text}' is not a valid {type_name} value")
        self.text = text
        self.type_name = type_name
