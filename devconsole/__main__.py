"""Run a console in the terminal.

Each line read from stdin is fed to the console as typed input followed by
Enter, so a tab inside the line autocompletes whatever precedes it. ``quit``
or end of input ends the session.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable

from devconsole import config
from devconsole.console import Console
from devconsole.log_bridge import install_log_handler


def run_repl(
    console: Console,
    read_line: Callable[[], str],
    write: Callable[[str], None],
) -> None:
    """Feed lines from ``read_line`` to ``console`` and ``write`` new output."""
    shown = 0
    clears_seen = console.output.clear_count

    def flush() -> None:
        nonlocal shown, clears_seen
        output = console.output
        # Anything still in the buffer after a clear was written since it.
        if output.clear_count != clears_seen:
            clears_seen = output.clear_count
            shown = 0
        lines = output.lines
        for line in lines[shown:]:
            write(line)
        shown = len(lines)

    flush()
    while True:
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            break
        try:
            console.feed_input(line + "\n")
        except SystemExit:
            flush()
            break
        flush()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive developer console")
    parser.add_argument(
        "--display-lines",
        type=int,
        default=config.OUTPUT_DISPLAY_LINES,
        help="Number of recent output lines kept on screen",
    )
    parser.add_argument(
        "--capture-logging",
        action="store_true",
        help="Forward log records from the root logger into the console",
    )
    args = parser.parse_args(argv)

    console = Console(display_lines=args.display_lines)
    if args.capture_logging:
        install_log_handler(console)
    console.write_line("Type 'help' for available commands.")
    run_repl(console, input, print)


if __name__ == "__main__":
    main()
