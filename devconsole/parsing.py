"""Tokenizing raw input lines and checking parameter counts."""

from __future__ import annotations

from collections.abc import Callable


def tokenize(line: str) -> list[str]:
    """Split ``line`` on runs of whitespace, dropping empty tokens."""
    return line.split()


def validate_param_count(
    tokens: list[str], required: int, write_line: Callable[[str], None]
) -> list[str]:
    """Report a parameter count mismatch for a tokenized command line.

    ``tokens[0]`` is the command name, so the parameter count is one less
    than the token count. Too few parameters produce an error line and too
    many produce a single warning line naming every dropped token. Either way
    ``tokens`` is returned so the command can carry on with what it has.
    """
    found = max(len(tokens) - 1, 0)
    if found < required:
        write_line(
            "Error: not enough parameters for command. "
            f"Expected {required} found {found}"
        )
    elif found > required:
        dropped = tokens[required + 1 :]
        quoted = " ".join(f'"{token}"' for token in dropped)
        write_line(
            f"Warning: {len(dropped)} additional parameters will be dropped: {quoted}"
        )
    return tokens
