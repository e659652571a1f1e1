# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical type names and normalization of informally written type expressions."""

from __future__ import annotations

import re
from enum import Enum

# ###############
# Public Interface
# ###############


class CanonicalType(Enum):
    """The closed set of type names a documented member may carry."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    ARRAY = "Array"
    OBJECT = "Object"
    FUNCTION = "Function"
    SYMBOL = "Symbol"
    ANY = "any"


ANY_TYPE = CanonicalType.ANY.value


def normalize_type(raw: str | None) -> str:
    """Map a raw type expression to a canonical type name.

    Decoration is stripped before matching: the braces of a JSDoc type
    (``{string}``), an optional marker (``string?``, ``string=``) and generic
    arguments (``Array<string>`` becomes ``Array``). The remaining token is
    compared case-insensitively against :class:`CanonicalType`.

    A handful of structural shapes map directly: ``T[]`` is an ``Array``, an
    arrow type ``(a: T) => U`` is a ``Function`` and an object type literal
    ``{ a: T }`` is an ``Object``. A union whose members, after dropping
    ``null`` and ``undefined``, reduce to a single member normalizes that
    member; any other union normalizes to ``any``.

    Args:
        raw: The type expression as written by the author, or ``None``.

    Returns:
        The canonical name (e.g. ``"String"``) or ``"any"``.
    """
    if raw is None:
        return ANY_TYPE
    text = _strip_decoration(raw)
    if not text:
        return ANY_TYPE

    if "|" in text:
        members = [m for m in (_unquote(part) for part in _split_union(text)) if m and m not in _NULLISH]
        if len(members) != 1:
            return ANY_TYPE
        text = _strip_decoration(members[0])

    if _ARROW_RE.search(text):
        return CanonicalType.FUNCTION.value
    if text.endswith("[]"):
        return CanonicalType.ARRAY.value
    if text.startswith("{"):
        return CanonicalType.OBJECT.value

    base = _GENERIC_RE.sub("", text).replace("[", "").replace("]", "").strip()
    return _CANONICAL_BY_LOWER.get(base.lower(), ANY_TYPE)


def extract_union_values(raw: str | None) -> list[str] | None:
    """Return the literal members of a union type expression.

    The expression is split on ``|``; quoting and whitespace are stripped
    from each member and ``null``/``undefined`` members are discarded.

    Returns:
        The remaining members in declaration order, or ``None`` when the
        expression is not a union.
    """
    if raw is None:
        return None
    text = _strip_braces(raw.strip())
    if "|" not in text:
        return None
    values = [_unquote(part) for part in _split_union(text)]
    return [v for v in values if v and v not in _NULLISH]


# ################
# Implementation
# ################

_NULLISH = frozenset({"null", "undefined"})

_CANONICAL_BY_LOWER: dict[str, str] = {t.value.lower(): t.value for t in CanonicalType}

_ARROW_RE = re.compile(r"\)\s*=>")
_GENERIC_RE = re.compile(r"<.*>$", re.DOTALL)


def _strip_braces(text: str) -> str:
    """Remove one pair of JSDoc type braces around the whole expression."""
    if text.startswith("{") and text.endswith("}") and _is_jsdoc_braced(text):
        return text[1:-1].strip()
    return text


def _is_jsdoc_braced(text: str) -> bool:
    """Return True when the outer braces wrap a type rather than an object literal."""
    inner = text[1:-1].strip()
    return ":" not in inner and ";" not in inner


def _strip_decoration(raw: str) -> str:
    text = _strip_braces(raw.strip())
    text = text.rstrip("?=").strip()
    if text.startswith("?"):
        text = text[1:].strip()
    if text.startswith("(") and text.endswith(")") and not _ARROW_RE.search(text):
        text = text[1:-1].strip()
    return text


def _split_union(text: str) -> list[str]:
    """Split on top-level ``|`` only, leaving nested generics and literals intact."""
    parts: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = ""
            continue
        if ch in "'\"`":
            quote = ch
        elif ch in "<([{":
            depth += 1
        elif ch in ">)]}":
            depth = max(depth - 1, 0)
        elif ch == "|" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return [p.strip() for p in parts]


def _unquote(member: str) -> str:
    return member.strip().strip("'\"`").strip()
