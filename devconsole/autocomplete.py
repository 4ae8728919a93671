"""Tab completion for the console input line.

Completion never executes anything and keeps no state between calls: the
current input line goes in and the completed line comes out.

Names complete one hierarchy level at a time. With ``console.fullscreen``
registered, ``cons`` completes to ``console.`` and a further completion of
``console.f`` yields the full name. Once the name is already complete and the
user is typing a parameter, boolean-like literals are completed instead, so
``show.fps t`` becomes ``show.fps true``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from devconsole import config
from devconsole.parsing import tokenize

if TYPE_CHECKING:
    from devconsole.registry import NamespaceRegistry


def complete_tail_literal(
    line: str, literals: Sequence[str] = config.TAIL_COMPLETION_LITERALS
) -> str:
    """Complete a trailing partial literal such as ``" tr"`` to ``" true"``.

    The line must end with a space followed by a strict prefix of one of
    ``literals``. The first literal that matches wins; if none do, ``line``
    is returned unchanged.
    """
    for literal in literals:
        for length in range(1, len(literal)):
            if line.endswith(" " + literal[:length]):
                return line[: len(line) - length] + literal
    return line


def autocomplete(line: str, registry: NamespaceRegistry) -> str:
    """Return ``line`` completed against the names in ``registry``."""
    tokens = tokenize(line)
    if not tokens:
        return line

    prefix = tokens[0]
    nearest = registry.lookup_nearest(prefix)
    if nearest is None:
        return line

    # Stop at the next separator the user has not typed yet.
    insertion = nearest.name
    dot_index = insertion.find(".", len(prefix))
    if dot_index >= 0:
        insertion = insertion[: dot_index + 1]

    if len(insertion) < len(line):
        return complete_tail_literal(line)
    return insertion
