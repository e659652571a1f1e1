# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for var() reference resolution."""

import logging

import pytest

from compdoc.tokens import resolve_value, resolve_variable

# ###############
# Helpers
# ###############


def _warnings(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


class _CountingTable(dict):
    """Variable table that counts how often each value is looked up."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.lookups = 0

    def __getitem__(self, key: str) -> str:
        self.lookups += 1
        return super().__getitem__(key)


def _doubling_chain(depth: int, terminal: str) -> _CountingTable:
    """Each level references the previous level twice."""
    table = _CountingTable({"--v0": terminal})
    for i in range(1, depth + 1):
        table[f"--v{i}"] = f"var(--v{i - 1})var(--v{i - 1})"
    return table


# ###############
# Normal Cases
# ###############


def test_value_without_references_is_unchanged() -> None:
    """A plain value is returned as-is."""
    assert resolve_value("#ff0000", {}) == "#ff0000"


def test_chain_resolves_to_terminal_value() -> None:
    """A chain of references resolves all the way down."""
    table = {"--a": "var(--b)", "--b": "var(--c)", "--c": "10px"}
    assert resolve_variable("--a", table) == "10px"
    assert resolve_variable("--b", table) == "10px"
    assert resolve_variable("--c", table) == "10px"


def test_reference_embedded_in_larger_value() -> None:
    """Text around a reference is preserved."""
    table = {"--space": "4px", "--color": "#000"}
    assert resolve_value("0 var(--space) 2px var(--color)", table) == "0 4px 2px #000"


def test_fallback_used_for_undefined_name() -> None:
    """An undefined reference with a fallback resolves to the fallback."""
    assert resolve_value("var(--missing, 4px)", {}) == "4px"


def test_nested_fallback_is_resolved() -> None:
    """A fallback that is itself a reference is resolved recursively."""
    table = {"--c": "10px"}
    assert resolve_value("var(--missing, var(--c))", table) == "10px"


def test_defined_name_ignores_fallback() -> None:
    """The fallback is only used when the name is undefined."""
    assert resolve_value("var(--c, 1px)", {"--c": "2px"}) == "2px"


def test_same_reference_twice_is_not_a_cycle(caplog: pytest.LogCaptureFixture) -> None:
    """Repeating a reference side by side resolves both occurrences."""
    table = {"--a": "var(--b) var(--b)", "--b": "1px"}
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_variable("--a", table) == "1px 1px"
    assert _warnings(caplog) == []


def test_function_names_ending_in_var_are_not_references() -> None:
    """Only ``var(`` itself opens a reference."""
    assert resolve_value("somevar(--a)", {"--a": "1px"}) == "somevar(--a)"


# ###############
# Error Cases
# ###############


def test_undefined_reference_left_in_place(caplog: pytest.LogCaptureFixture) -> None:
    """An undefined reference without fallback is kept verbatim and warned about."""
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_value("1px solid var( --nope )", {}) == "1px solid var( --nope )"
    warnings = _warnings(caplog)
    assert len(warnings) == 1
    assert "--nope" in warnings[0]


def test_cycle_terminates_with_single_warning(caplog: pytest.LogCaptureFixture) -> None:
    """A two-variable cycle stops where it re-enters and warns once."""
    table = {"--a": "var(--b)", "--b": "var(--a)"}
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_variable("--a", table) == "var(--a)"
    warnings = _warnings(caplog)
    assert len(warnings) == 1
    assert "Cyclic" in warnings[0]


def test_self_reference_is_a_cycle(caplog: pytest.LogCaptureFixture) -> None:
    """A variable referring to itself keeps its raw value."""
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_variable("--a", {"--a": "var(--a)"}) == "var(--a)"
    assert len(_warnings(caplog)) == 1


def test_cycle_does_not_affect_other_variables() -> None:
    """Resolving a cyclic variable leaves unrelated lookups intact."""
    table = {"--a": "var(--b)", "--b": "var(--a)", "--c": "var(--d)", "--d": "3px"}
    resolve_variable("--a", table)
    assert resolve_variable("--c", table) == "3px"


def test_unknown_variable_raises_key_error() -> None:
    """resolve_variable() requires the name to be defined."""
    with pytest.raises(KeyError):
        resolve_variable("--missing", {})


# ###############
# Shared References
# ###############


def test_shared_chain_resolves_each_variable_once(caplog: pytest.LogCaptureFixture) -> None:
    """A deep chain of shared references is resolved in linear work."""
    table = _doubling_chain(30, "")
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_variable("--v30", table) == ""
    assert table.lookups == 31
    assert _warnings(caplog) == []


def test_shared_chain_result_matches_expansion() -> None:
    """Reusing a resolved variable yields the same text as expanding it again."""
    assert resolve_variable("--v3", _doubling_chain(3, "x")) == "x" * 8


def test_cycle_below_shared_reference_is_reported_per_path(caplog: pytest.LogCaptureFixture) -> None:
    """A variable whose resolution hit a cycle is not reused."""
    table = {"--a": "var(--b) var(--b)", "--b": "var(--c)", "--c": "var(--b)"}
    with caplog.at_level(logging.WARNING, logger="compdoc"):
        assert resolve_variable("--a", table) == "var(--b) var(--b)"
    assert len(_warnings(caplog)) == 2
