from __future__ import annotations

import pytest

from devconsole.console import Console


@pytest.fixture
def console() -> Console:
    """A fresh console with only the built-in commands and variables."""
    return Console(on_quit=lambda: None)


@pytest.fixture
def empty_console(console: Console) -> Console:
    """A fresh console whose output buffer has been emptied."""
    console.clear()
    return console
