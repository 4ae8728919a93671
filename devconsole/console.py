from __future__ import annotations

import logging
import traceback
from typing import Any

from devconsole import config
from devconsole.autocomplete import autocomplete
from devconsole.buffers import HistoryBuffer, OutputBuffer
from devconsole.commands import register_builtin_commands
from devconsole.errors import DuplicateNameError
from devconsole.parsing import tokenize
from devconsole.registry import NamespaceRegistry
from devconsole.types import CommandHandler, LogSeverity, QuitHook
from devconsole.util.metrics import FrameTimeStats
from devconsole.variables import BoolVariable, Command, Variable, variable_class_for

logger = logging.getLogger(__name__)


class Console:
    """A Quake style developer console.

    Owns the namespace of commands and variables, the output scrollback, the
    history of executed lines and the line currently being typed. Everything
    runs synchronously on the caller's thread: a line is fully dispatched and
    handled before ``execute_line`` returns.

    Rendering is left to the host. Each frame it can read ``display_lines()``,
    ``prompt_text()``, ``visible``, ``fullscreen`` and ``fps_label()``.
    """

    def __init__(
        self,
        *,
        display_lines: int = config.OUTPUT_DISPLAY_LINES,
        on_quit: QuitHook | None = None,
    ) -> None:
        self.registry = NamespaceRegistry()
        self.output = OutputBuffer(display_lines)
        self.history = HistoryBuffer()
        self.input_line: str = ""
        self.visible: bool = False
        self.frame_stats = FrameTimeStats()
        self._on_quit = on_quit
        self._call_stacks: dict[LogSeverity, str] = {
            severity: config.NO_CALL_STACK_YET
            for severity in LogSeverity
            if severity.retains_stack
        }

        register_builtin_commands(self)

        self.show_fps = self._create_builtin_flag(
            "show.fps", "whether to draw framerate counter or not", False
        )
        self.fullscreen_mode = self._create_builtin_flag(
            "console.fullscreen",
            "whether to draw the console over the whole screen or not",
            False,
        )
        self.input_lock = self._create_builtin_flag(
            "console.lock", "whether to allow showing/hiding the console", False
        )
        self.log_capture = self._create_builtin_flag(
            "console.log", "whether to redirect log to the console", True
        )

    def _create_builtin_flag(
        self, name: str, help_text: str, value: bool
    ) -> BoolVariable:
        variable = BoolVariable(name, self.write_line, value, help_text)
        self.registry.insert(variable)
        return variable

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register_command(
        self,
        name: str,
        handler: CommandHandler,
        *,
        usage_example: str = "",
        help_text: str = config.DEFAULT_HELP_TEXT,
    ) -> Command | None:
        """Register a command, returning ``None`` if the name is taken."""
        command = Command(
            name=name,
            handler=handler,
            usage_example=usage_example,
            help_text=help_text,
        )
        try:
            self.registry.insert(command)
        except DuplicateNameError:
            logger.error(f"Tried to add already existing console command '{name}'")
            return None
        return command

    def create_variable(
        self,
        name: str,
        help_text: str = "",
        initial_value: Any = None,
        *,
        value_type: type | None = None,
    ) -> Variable | None:
        """Create and register a typed variable.

        The value type is ``value_type`` if given, otherwise the type of
        ``initial_value``. Without an initial value the variable starts at the
        type's default (``False``, ``0``, ``0.0`` or ``""``).

        Returns:
            The new variable, or ``None`` if the name is already registered.

        Raises:
            TypeError: If neither an initial value nor a type is given, the
                initial value is not a ``value_type``, or the type has no
                console variable implementation.
        """
        if value_type is None:
            if initial_value is None:
                raise TypeError(
                    f"Variable '{name}' needs an initial value or a value_type"
                )
            value_type = type(initial_value)
        elif initial_value is not None and not isinstance(initial_value, value_type):
            raise TypeError(
                f"Initial value {initial_value!r} for variable '{name}' "
                f"is not a {value_type.__name__}"
            )
        variable_class = variable_class_for(value_type)
        variable = variable_class(name, self.write_line, initial_value, help_text)
        try:
            self.registry.insert(variable)
        except DuplicateNameError:
            logger.error(f"Tried to add already existing console variable '{name}'")
            return None
        return variable

    def destroy_variable(self, variable: Variable) -> None:
        """Unregister ``variable`` so its name can be reused."""
        self.registry.remove(variable.name)

    def remove_command_if_exists(self, name: str) -> None:
        """Unregister the plain command ``name``. Variables are left alone."""
        entry = self.registry.lookup_exact(name)
        if entry is not None and not isinstance(entry, Variable):
            self.registry.remove(name)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def write_line(self, text: str) -> None:
        """Append ``text`` to the output as a single line."""
        self.output.append(text)
        self.history.reset_cursor()

    def clear(self) -> None:
        """Empty the output scrollback."""
        self.output.clear()

    def display_lines(self) -> list[str]:
        return self.output.display_lines()

    def prompt_text(self) -> str:
        return ">" + self.input_line

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def execute_line(self, line: str) -> None:
        """Dispatch one line of input as if it had been typed and submitted.

        The first token must exactly match a registered name; partial names
        are never completed implicitly. Failures inside a handler are written
        to the output instead of propagating.
        """
        self.write_line(">" + line)
        tokens = tokenize(line)
        if not tokens:
            return

        entry = self.registry.lookup_exact(tokens[0])
        if entry is None:
            self.write_line(f"Unrecognised command or variable name: {tokens[0]}")
            return

        self.history.append(line)
        try:
            entry.invoke(line)
        except Exception as e:
            self._call_stacks[LogSeverity.EXCEPTION] = traceback.format_exc()
            logger.debug(f"Console command '{entry.name}' raised", exc_info=True)
            self.write_line(f"Error: {entry.name} failed: {type(e).__name__}: {e}")

    def execute_current_line(self) -> None:
        """Execute the input line and leave the prompt empty."""
        line = self.input_line
        self.input_line = ""
        self.execute_line(line)

    def request_quit(self) -> None:
        """Ask the host to exit. Without a hook this raises ``SystemExit``."""
        if self._on_quit is None:
            raise SystemExit(0)
        self._on_quit()

    # ------------------------------------------------------------------
    # Line editing
    # ------------------------------------------------------------------
    def autocomplete(self) -> str:
        """Complete the input line against the registry and return it."""
        self.input_line = autocomplete(self.input_line, self.registry)
        return self.input_line

    def move_history(self, delta: int) -> None:
        """Recall an executed line into the input, ``-1`` for older."""
        entry = self.history.move(delta)
        if entry is not None:
            self.input_line = entry

    def feed_input(self, text: str) -> None:
        """Apply typed characters to the input line.

        Backspace deletes, newline or carriage return executes, tab
        autocompletes, and anything else is appended.
        """
        for char in text:
            match char:
                case "\b":
                    self.input_line = self.input_line[:-1]
                case "\n" | "\r":
                    self.execute_current_line()
                case "\t":
                    self.autocomplete()
                case _:
                    self.input_line += char

    # ------------------------------------------------------------------
    # Presentation state
    # ------------------------------------------------------------------
    @property
    def fullscreen(self) -> bool:
        return bool(self.fullscreen_mode)

    @property
    def locked(self) -> bool:
        return bool(self.input_lock)

    def toggle_visible(self) -> bool:
        """Show or hide the console unless ``console.lock`` is set.

        Showing the console starts with an empty input line. Returns the
        resulting visibility.
        """
        if self.locked:
            return self.visible
        self.visible = not self.visible
        if self.visible:
            self.input_line = ""
        return self.visible

    def update(self, delta_time: float) -> None:
        """Record the duration of the last frame for the fps readout."""
        self.frame_stats.record(delta_time)

    def fps_label(self) -> str | None:
        """Return the frame rate readout, or ``None`` while ``show.fps`` is off."""
        if not self.show_fps:
            return None
        return f"{self.frame_stats.mean_fps:.1f} fps"

    # ------------------------------------------------------------------
    # Log bridge
    # ------------------------------------------------------------------
    def on_log_message(
        self, text: str, stack_trace: str, severity: LogSeverity
    ) -> None:
        """Write a log message into the console while ``console.log`` is set.

        Warnings, errors and exceptions keep their stack trace so it can be
        shown later with the ``callstack.*`` commands.
        """
        if not self.log_capture:
            return
        if severity.retains_stack:
            self._call_stacks[severity] = stack_trace
        self.write_line(config.LOG_PREFIXES[severity.value] + text)

    def last_call_stack(self, severity: LogSeverity) -> str:
        return self._call_stacks.get(severity, config.NO_CALL_STACK_YET)
