"""
Built-in console commands.

Every console starts with these registered:

- ``clear`` / ``cls``: Empty the output buffer
- ``echo`` / ``print``: Write the remaining tokens back to the output
- ``help``: Table of commands with usage examples and help text
- ``list``: Table of variables with help text
- ``quit``: Ask the host application to exit
- ``callstack.warning`` / ``callstack.error`` / ``callstack.exception``:
  Dump the call stack retained for the most recent log message of that
  severity

The table layouts use the fixed column widths from ``config`` so the output
lines up in a monospaced console font.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from devconsole import config
from devconsole.parsing import tokenize
from devconsole.types import LogSeverity

if TYPE_CHECKING:
    from devconsole.console import Console
    from devconsole.variables import Command, Variable


def format_help_line(command: Command) -> str:
    """Lay out one row of the ``help`` table."""
    line = command.name.ljust(config.HELP_NAME_WIDTH)
    if command.usage_example:
        line += " example: " + command.usage_example
    else:
        line += " " * len(" example: ")
    line += " " * max(0, config.HELP_EXAMPLE_WIDTH - len(command.usage_example))
    return line + command.help_text


def format_list_line(variable: Variable) -> str:
    """Lay out one row of the ``list`` table."""
    return variable.name.ljust(config.LIST_NAME_WIDTH) + variable.help_text


def format_call_stack(stack: str) -> list[str]:
    """Number the lines of ``stack`` for display, dropping trailing blank lines."""
    lines = stack.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    return [
        f"{number}{'  ' if number < 10 else ' '}{line}"
        for number, line in enumerate(lines, start=1)
    ]


def register_builtin_commands(console: Console) -> None:
    """Register the standard command set on ``console``."""

    def clear(_line: str) -> None:
        console.clear()

    def echo(line: str) -> None:
        console.write_line(" ".join(tokenize(line)[1:]))

    def show_help(_line: str) -> None:
        for command in console.registry.commands():
            console.write_line(format_help_line(command))

    def list_variables(_line: str) -> None:
        for variable in console.registry.variables():
            console.write_line(format_list_line(variable))

    def quit_app(_line: str) -> None:
        console.request_quit()

    def call_stack_dumper(severity: LogSeverity):
        def dump(_line: str) -> None:
            for text in format_call_stack(console.last_call_stack(severity)):
                console.write_line(text)

        return dump

    console.register_command("clear", clear, help_text="clear the console log")
    console.register_command(
        "cls", clear, help_text="clear the console log (alias for clear)"
    )
    console.register_command(
        "echo",
        echo,
        usage_example="echo <string>",
        help_text="writes <string> to the console log (alias for print)",
    )
    console.register_command(
        "help",
        show_help,
        help_text="displays help information for console commands where available",
    )
    console.register_command(
        "list",
        list_variables,
        help_text="lists all currently registered console variables",
    )
    console.register_command(
        "print",
        echo,
        usage_example="print <string>",
        help_text="writes <string> to the console log",
    )
    console.register_command("quit", quit_app, help_text="quit the application")
    console.register_command(
        "callstack.warning",
        call_stack_dumper(LogSeverity.WARNING),
        help_text="display the call stack for the last warning message",
    )
    console.register_command(
        "callstack.error",
        call_stack_dumper(LogSeverity.ERROR),
        help_text="display the call stack for the last error message",
    )
    console.register_command(
        "callstack.exception",
        call_stack_dumper(LogSeverity.EXCEPTION),
        help_text="display the call stack for the last exception message",
    )
