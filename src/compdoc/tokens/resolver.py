# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive resolution of ``var(--name)`` references in token values.

Each call threads its own set of in-progress names through the recursion, so
a cycle is cut where it re-enters and resolving one variable never affects
the resolution of another. Within one call every variable is resolved at most
once and later references reuse that result, unless its resolution ran into
a cycle. References that cannot be resolved are left in place verbatim and
reported as warnings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from compdoc.logging import get_logger

# ###############
# Public Interface
# ###############


def resolve_value(value: str, table: Mapping[str, str], visited: frozenset[str] = frozenset()) -> str:
    """Substitute every variable reference in *value*.

    For each ``var(--name)`` or ``var(--name, fallback)`` reference:

    * a name already in *visited* is a cycle: the reference is kept and a
      warning is logged;
    * a name defined in *table* is replaced by its own resolved value;
    * an undefined name with a fallback is replaced by the resolved fallback;
    * an undefined name without a fallback is kept and a warning is logged.

    Args:
        value: The raw value text.
        table: Variable name (with ``--``) to raw value.
        visited: Names being resolved by the enclosing calls.

    Returns:
        The value with every resolvable reference substituted. A value
        without references is returned unchanged.
    """
    return _resolve_text(value, table, visited, {})[0]


def resolve_variable(name: str, table: Mapping[str, str]) -> str:
    """Resolve the variable *name* of *table*.

    Raises:
        KeyError: If *name* is not defined in *table*.
    """
    return resolve_value(table[name], table, frozenset({name}))


# ################
# Implementation
# ################

_LOGGER = get_logger("tokens")

_VAR_OPEN = "var("


@dataclass(frozen=True)
class _Reference:
    """One ``var(...)`` occurrence within a value."""

    start: int
    end: int
    name: str
    fallback: str | None
    text: str


def _find_references(value: str) -> list[_Reference]:
    """Return the top-level ``var(...)`` references of *value* in order.

    References nested inside a fallback belong to that fallback and are
    resolved when the fallback is.
    """
    references: list[_Reference] = []
    i = value.find(_VAR_OPEN)
    while i != -1:
        if i > 0 and (value[i - 1].isalnum() or value[i - 1] in "-_"):
            i = value.find(_VAR_OPEN, i + 1)
            continue
        close = _matching_paren(value, i + len(_VAR_OPEN) - 1)
        if close == -1:
            break
        inner = value[i + len(_VAR_OPEN) : close]
        name, comma, fallback = inner.partition(",")
        name = name.strip()
        if name.startswith("--"):
            fallback_text = fallback.strip() if comma else None
            references.append(_Reference(i, close + 1, name, fallback_text, value[i : close + 1]))
        i = value.find(_VAR_OPEN, close + 1)
    return references


def _matching_paren(value: str, open_index: int) -> int:
    depth = 0
    for i in range(open_index, len(value)):
        if value[i] == "(":
            depth += 1
        elif value[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _resolve_text(
    value: str, table: Mapping[str, str], visited: frozenset[str], memo: dict[str, str]
) -> tuple[str, bool]:
    """Resolve *value*; the flag tells whether a cycle was cut on the way."""
    references = _find_references(value)
    if not references:
        return value, False

    parts: list[str] = []
    cyclic = False
    last = 0
    for ref in references:
        parts.append(value[last : ref.start])
        text, hit = _resolve_reference(ref, table, visited, memo)
        parts.append(text)
        cyclic = cyclic or hit
        last = ref.end
    parts.append(value[last:])
    return "".join(parts), cyclic


def _resolve_reference(
    ref: _Reference, table: Mapping[str, str], visited: frozenset[str], memo: dict[str, str]
) -> tuple[str, bool]:
    original = ref.text
    if ref.name in visited:
        _LOGGER.warning("Cyclic reference %s left in place", original)
        return original, True
    if ref.name in memo:
        return memo[ref.name], False
    if ref.name in table:
        text, cyclic = _resolve_text(table[ref.name], table, visited | {ref.name}, memo)
        if not cyclic:
            memo[ref.name] = text
        return text, cyclic
    if ref.fallback is not None:
        return _resolve_text(ref.fallback, table, visited, memo)
    _LOGGER.warning("Undefined variable in %s left in place", original)
    return original, False
