from __future__ import annotations

import itertools

import pytest

from devconsole.errors import DuplicateNameError
from devconsole.registry import NamespaceRegistry
from devconsole.variables import BoolVariable, Command, IntVariable


def _noop(_line: str) -> None:
    pass


def make_registry(*names: str) -> NamespaceRegistry:
    registry = NamespaceRegistry()
    for name in names:
        registry.insert(Command(name, _noop))
    return registry


def test_insert_and_lookup_exact() -> None:
    registry = make_registry("show.fps")
    entry = registry.lookup_exact("show.fps")
    assert entry is not None
    assert entry.name == "show.fps"
    assert registry.lookup_exact("show") is None
    assert registry.lookup_exact("SHOW.FPS") is None


def test_duplicate_insert_raises_and_keeps_original() -> None:
    registry = NamespaceRegistry()
    original = Command("echo", _noop, help_text="original help")
    registry.insert(original)

    with pytest.raises(DuplicateNameError):
        registry.insert(Command("echo", print, help_text="replacement"))

    entry = registry.lookup_exact("echo")
    assert entry is original
    assert entry.help_text == "original help"
    assert entry.handler is _noop


def test_duplicate_name_error_is_a_value_error() -> None:
    registry = make_registry("a")
    with pytest.raises(ValueError, match="already registered"):
        registry.insert(Command("a", _noop))


def test_empty_name_rejected() -> None:
    registry = NamespaceRegistry()
    with pytest.raises(ValueError):
        registry.insert(Command("", _noop))


def test_insert_remove_lookup_round_trip() -> None:
    registry = make_registry("a.b", "a.c")
    registry.remove("a.b")
    assert registry.lookup_exact("a.b") is None
    assert "a.b" not in registry
    assert list(registry) == ["a.c"]


def test_remove_missing_name_is_noop() -> None:
    registry = make_registry("a")
    registry.remove("missing")
    assert list(registry) == ["a"]


def test_views_split_commands_and_variables() -> None:
    registry = NamespaceRegistry()
    registry.insert(Command("echo", _noop))
    registry.insert(BoolVariable("show.fps", _noop, False))
    registry.insert(IntVariable("game.speed", _noop, 1))
    registry.insert(Command("clear", _noop))

    assert [c.name for c in registry.commands()] == ["clear", "echo"]
    assert [v.name for v in registry.variables()] == ["game.speed", "show.fps"]
    assert [e.name for e in registry.all()] == [
        "clear",
        "echo",
        "game.speed",
        "show.fps",
    ]

    registry.remove("show.fps")
    assert [v.name for v in registry.variables()] == ["game.speed"]
    assert "show.fps" not in registry


def test_ordering_is_case_sensitive() -> None:
    registry = make_registry("b", "B", "a", "A")
    assert list(registry) == ["A", "B", "a", "b"]


def test_bounds() -> None:
    registry = make_registry("console.fullscreen", "console.lock", "show.fps")

    upper = registry.upper_bound("cons")
    lower = registry.lower_bound("cons")
    assert upper is not None and upper.name == "console.fullscreen"
    assert lower is None

    upper = registry.upper_bound("console.m")
    lower = registry.lower_bound("console.m")
    assert upper is not None and upper.name == "show.fps"
    assert lower is not None and lower.name == "console.lock"


def test_exact_match_is_both_bounds() -> None:
    registry = make_registry("a", "b", "c")
    upper = registry.upper_bound("b")
    lower = registry.lower_bound("b")
    nearest = registry.lookup_nearest("b")
    assert upper is not None and lower is not None and nearest is not None
    assert upper.name == lower.name == nearest.name == "b"


def test_lookup_nearest_prefers_upper_candidate() -> None:
    registry = make_registry("show.fps", "console.fullscreen", "console.lock")
    nearest = registry.lookup_nearest("cons")
    assert nearest is not None
    assert nearest.name == "console.fullscreen"


def test_lookup_nearest_falls_back_to_lower_candidate() -> None:
    registry = make_registry("alpha", "beta")
    nearest = registry.lookup_nearest("zzz")
    assert nearest is not None
    assert nearest.name == "beta"


def test_lookup_nearest_on_empty_registry() -> None:
    assert NamespaceRegistry().lookup_nearest("anything") is None


def test_lookup_nearest_has_nothing_in_between() -> None:
    names = ["a", "a.b", "a.c", "b", "ba", "c.d.e", "clear", "cls", "z"]
    registry = make_registry(*names)
    queries = ["", "a", "a.", "a.bb", "b.", "c", "cl", "cz", "y", "zz", "~"]
    for query in queries:
        nearest = registry.lookup_nearest(query)
        assert nearest is not None
        found = nearest.name
        if found >= query:
            assert not any(query <= name < found for name in names)
        else:
            # Only falls back below the query when nothing sorts after it.
            assert all(name < query for name in names)
            assert not any(found < name <= query for name in names)


def test_insertion_order_does_not_matter() -> None:
    names = ["b.x", "a", "c", "b"]
    expected = sorted(names)
    for order in itertools.permutations(names):
        assert list(make_registry(*order)) == expected
