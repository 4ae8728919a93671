from __future__ import annotations

import bisect
from collections.abc import Iterator

from devconsole.errors import DuplicateNameError
from devconsole.variables import Command, Variable


class NamespaceRegistry:
    """Ordered namespace of every command and variable, keyed by dotted name.

    Names are kept in one case-sensitive lexicographic order so that partial
    input can be resolved to its alphabetical neighbours with a binary search.
    Commands and variables share the namespace; ``commands()`` and
    ``variables()`` are filtered views over it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Command] = {}
        self._sorted_names: list[str] = []
        self._variable_names: set[str] = set()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, entry: Command) -> None:
        """Add ``entry`` under its name.

        Raises:
            DuplicateNameError: If the name is already registered.
            ValueError: If the name is empty.
        """
        name = entry.name
        if not name:
            raise ValueError("Console names must not be empty")
        if name in self._entries:
            raise DuplicateNameError(name)
        self._entries[name] = entry
        bisect.insort(self._sorted_names, name)
        if isinstance(entry, Variable):
            self._variable_names.add(name)

    def remove(self, name: str) -> None:
        """Remove ``name`` from every view. Unknown names are ignored."""
        if self._entries.pop(name, None) is None:
            return
        index = bisect.bisect_left(self._sorted_names, name)
        del self._sorted_names[index]
        self._variable_names.discard(name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def lookup_exact(self, name: str) -> Command | None:
        return self._entries.get(name)

    def upper_bound(self, query: str) -> Command | None:
        """Return the entry with the smallest name that sorts at or after ``query``."""
        index = bisect.bisect_left(self._sorted_names, query)
        if index == len(self._sorted_names):
            return None
        return self._entries[self._sorted_names[index]]

    def lower_bound(self, query: str) -> Command | None:
        """Return the entry with the largest name that sorts at or before ``query``."""
        index = bisect.bisect_right(self._sorted_names, query) - 1
        if index < 0:
            return None
        return self._entries[self._sorted_names[index]]

    def lookup_nearest(self, query: str) -> Command | None:
        """Resolve partial input to the alphabetically nearest registered name.

        The first name at or after ``query`` wins. When ``query`` sorts after
        everything registered, the last name before it is used instead. Only
        an empty registry yields ``None``.
        """
        upper = self.upper_bound(query)
        if upper is not None:
            return upper
        return self.lower_bound(query)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def all(self) -> list[Command]:
        """Return every entry sorted by name."""
        return [self._entries[name] for name in self._sorted_names]

    def commands(self) -> list[Command]:
        """Return plain commands sorted by name."""
        return [
            self._entries[name]
            for name in self._sorted_names
            if name not in self._variable_names
        ]

    def variables(self) -> list[Variable]:
        """Return variables sorted by name."""
        entries = (
            self._entries[name]
            for name in self._sorted_names
            if name in self._variable_names
        )
        return [entry for entry in entries if isinstance(entry, Variable)]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sorted_names))
