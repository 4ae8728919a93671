from __future__ import annotations

from devconsole import config


def flatten_newlines(text: str) -> str:
    """Collapse embedded line breaks so ``text`` renders as one physical line."""
    return (
        text.replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\n", config.NEWLINE_SEPARATOR)
    )


class OutputBuffer:
    """Append-only scrollback of console output lines.

    Every line is stored, but only the most recent ``display_size`` entries are
    handed to the presentation layer.
    """

    def __init__(self, display_size: int = config.OUTPUT_DISPLAY_LINES) -> None:
        if display_size < 1:
            raise ValueError("display_size must be at least 1")
        self.display_size = display_size
        self.lines: list[str] = []
        # revision increments whenever the buffer changes. Presenters use this
        # to skip re-laying out text when nothing was written.
        self.revision = 0
        # clear_count lets readers that track a line offset notice a clear.
        self.clear_count = 0

    def append(self, text: str) -> str:
        """Store ``text`` as a single line and return the stored form."""
        line = flatten_newlines(text)
        self.lines.append(line)
        self.revision += 1
        return line

    def clear(self) -> None:
        self.lines.clear()
        self.revision += 1
        self.clear_count += 1

    def display_lines(self) -> list[str]:
        """Return the display window, oldest first."""
        return self.lines[-self.display_size :]

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]


class HistoryBuffer:
    """Executed input lines with a cursor for backward/forward recall."""

    def __init__(self) -> None:
        self.entries: list[str] = []
        self.cursor = 0

    def append(self, line: str) -> None:
        self.entries.append(line)
        self.reset_cursor()

    def reset_cursor(self) -> None:
        """Park the cursor one past the most recent entry."""
        self.cursor = len(self.entries)

    def move(self, delta: int) -> str | None:
        """Step the cursor by ``delta`` and return the entry it lands on.

        The cursor is clamped to the stored entries rather than wrapping.
        Returns ``None`` when there is no history to navigate.
        """
        if not self.entries:
            return None
        self.cursor = max(0, min(self.cursor + delta, len(self.entries) - 1))
        return self.entries[self.cursor]

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> str:
        return self.entries[index]
