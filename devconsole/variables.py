from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from devconsole import config
from devconsole.errors import InvalidValueError
from devconsole.parsing import tokenize, validate_param_count
from devconsole.types import CommandHandler


@dataclass(eq=False)
class Command:
    """A named, invocable console entry."""

    name: str
    handler: CommandHandler = field(repr=False)
    usage_example: str = ""
    help_text: str = config.DEFAULT_HELP_TEXT

    def invoke(self, line: str) -> None:
        """Run the handler with the whole raw input line."""
        self.handler(line)


T = TypeVar("T")


class Variable(Command, abc.ABC, Generic[T]):
    """A command that holds a typed value and reads or writes it from text.

    Typing the bare name prints the value; the name followed by one parameter
    parses that parameter and stores it. Each concrete subclass owns the text
    conversion for exactly one value type.
    """

    value_type: ClassVar[type]
    type_name: ClassVar[str]

    def __init__(
        self,
        name: str,
        write_line: Callable[[str], None],
        value: T | None = None,
        help_text: str = "",
    ) -> None:
        super().__init__(
            name=name,
            handler=self._handle_line,
            usage_example="",
            help_text=help_text,
        )
        self._write_line = write_line
        self.value: T = self.value_type() if value is None else value

    @abc.abstractmethod
    def parse(self, text: str) -> T:
        """Convert ``text`` to a value or raise ``InvalidValueError``."""

    @abc.abstractmethod
    def format(self, value: T) -> str:
        """Return the canonical text form of ``value``."""

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def set_from_string(self, text: str) -> None:
        """Parse ``text`` and store it, keeping the old value on failure."""
        self.value = self.parse(text)

    def format_value(self) -> str:
        return self.format(self.value)

    def _handle_line(self, line: str) -> None:
        tokens = tokenize(line)
        if not tokens:
            self._write_line(
                "Error: not enough parameters to set or display the value "
                "of a console variable."
            )
            return

        if len(tokens) == 1:
            self._write_line(f"{self.name} is set to {self.format_value()}")
            return

        if len(tokens) > 2:
            validate_param_count(tokens, 1, self._write_line)

        try:
            self.set_from_string(tokens[1])
        except InvalidValueError as e:
            self._write_line(f"Error: {e} for {self.name}")
            return
        self._write_line(f"{self.name} has been set to {self.format_value()}")


class BoolVariable(Variable[bool]):
    value_type = bool
    type_name = "boolean"

    def parse(self, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise InvalidValueError(text, self.type_name)

    def format(self, value: bool) -> str:
        return "True" if value else "False"

    def __bool__(self) -> bool:
        return bool(self.value)


class IntVariable(Variable[int]):
    value_type = int
    type_name = "integer"

    def parse(self, text: str) -> int:
        try:
            return int(text, 10)
        except ValueError:
            raise InvalidValueError(text, self.type_name) from None

    def format(self, value: int) -> str:
        return str(value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


class FloatVariable(Variable[float]):
    value_type = float
    type_name = "floating-point"

    def parse(self, text: str) -> float:
        try:
            return float(text)
        except ValueError:
            raise InvalidValueError(text, self.type_name) from None

    def format(self, value: float) -> str:
        return str(value)

    def __float__(self) -> float:
        return self.value


class StrVariable(Variable[str]):
    value_type = str
    type_name = "string"

    def parse(self, text: str) -> str:
        return text

    def format(self, value: str) -> str:
        return value

    def __str__(self) -> str:
        return self.value


_VARIABLE_CLASSES: dict[type, type[Variable[Any]]] = {
    bool: BoolVariable,
    int: IntVariable,
    float: FloatVariable,
    str: StrVariable,
}


def variable_class_for(value_type: type) -> type[Variable[Any]]:
    """Return the ``Variable`` subclass that stores ``value_type`` values.

    Raises:
        TypeError: If no console variable type exists for ``value_type``.
    """
    try:
        return _VARIABLE_CLASSES[value_type]
    except KeyError:
        raise TypeError(
            f"Console variables of type '{value_type.__name__}' are not supported"
        ) from None
