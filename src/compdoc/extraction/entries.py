# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tolerant per-entry grammar shared by the pattern extractors.

Entries come in two shapes: members of a type literal
(``label?: string``, ``(e: 'close'): void``, ``'update:open': [value: boolean]``)
and entries of an object literal (``size: { type: String, default: 'md' }``,
``toggle(force) { ... }``). Attribute order inside an entry is free and
unknown attributes are ignored by the callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from compdoc.extraction.comments import DocComment, parse_doc_comment
from compdoc.extraction.scanner import (
    Segment,
    find_closing,
    split_top_level,
    strip_comments,
    strip_leading_comments,
)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SignatureParam:
    """One parameter of a function or call signature."""

    name: str
    type: str | None = None
    optional: bool = False


@dataclass(frozen=True)
class TypeMember:
    """A member of a type literal or interface body.

    Attributes:
        name: Property name, or the event name of an emit call signature.
        kind: ``"property"``, ``"method"`` or ``"call"``.
        optional: Whether the member carries a ``?`` marker.
        type: The type expression, or ``None`` when none is written.
        params: Parameters of a method or call signature (without the
            leading event-name parameter of a call signature).
        doc: The structured comment preceding the member.
        offset: Position of the member within the scanned body.
    """

    name: str
    kind: str = "property"
    optional: bool = False
    type: str | None = None
    params: list[SignatureParam] = field(default_factory=list)
    doc: DocComment | None = None
    offset: int = 0


@dataclass(frozen=True)
class ObjectEntry:
    """An entry of an object literal.

    Attributes:
        name: The key, unquoted.
        value: The value expression (for shorthand methods, the body).
        kind: ``"value"`` for ``key: value`` entries, ``"method"`` for
            shorthand methods and ``"shorthand"`` for bare identifiers.
        params: Parameters of a shorthand method or function value.
        return_type: Annotated return type of a method, if any.
        doc: The structured comment preceding the entry.
        offset: Position of the entry within the scanned body.
    """

    name: str
    value: str = ""
    kind: str = "value"
    params: list[SignatureParam] = field(default_factory=list)
    return_type: str | None = None
    doc: DocComment | None = None
    offset: int = 0


def parse_type_members(body: str) -> list[TypeMember]:
    """Parse every member of a type literal or interface body."""
    members: list[TypeMember] = []
    for segment in split_top_level(body, ";,", type_members=True):
        member = parse_type_member(segment)
        if member is not None:
            members.append(member)
    return members


def parse_type_member(segment: Segment) -> TypeMember | None:
    """Parse one type-literal member; returns None for unrecognized text."""
    doc_block, code = strip_leading_comments(segment.text)
    doc = parse_doc_comment(doc_block) if doc_block else None
    code = strip_comments(code)
    if not code:
        return None

    if code.startswith("("):
        params = parse_signature_params(_paren_body(code))
        if not params:
            return None
        event = _unquote(params[0].type or "")
        if not event:
            return None
        return TypeMember(name=event, kind="call", params=params[1:], doc=doc, offset=segment.offset)

    match = _MEMBER_RE.match(code)
    if match is None:
        return None
    name = _unquote(match.group("name"))
    optional = bool(match.group("optional"))
    rest = code[match.end() :].strip()
    if rest.startswith("("):
        params = parse_signature_params(_paren_body(rest))
        after = rest[len(_paren_body(rest)) + 2 :].strip()
        return_type = after[1:].strip() if after.startswith(":") else None
        return TypeMember(
            name=name,
            kind="method",
            optional=optional,
            type=return_type,
            params=params,
            doc=doc,
            offset=segment.offset,
        )
    type_expr = rest[1:].strip() if rest.startswith(":") else None
    return TypeMember(
        name=name,
        optional=optional,
        type=type_expr or None,
        doc=doc,
        offset=segment.offset,
    )


def parse_object_entries(body: str) -> list[ObjectEntry]:
    """Parse every entry of an object literal body."""
    entries: list[ObjectEntry] = []
    for segment in split_top_level(body, ","):
        entry = parse_object_entry(segment)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_object_entry(segment: Segment) -> ObjectEntry | None:
    """Parse one object-literal entry; returns None for spreads and unrecognized text."""
    doc_block, code = strip_leading_comments(segment.text)
    doc = parse_doc_comment(doc_block) if doc_block else None
    if not code or code.startswith("..."):
        return None

    method = _METHOD_RE.match(code)
    if method is not None:
        params_text = _paren_body(code[method.end() - 1 :])
        after = code[method.end() + len(params_text) + 1 :].strip()
        return_type = None
        if after.startswith(":"):
            return_type = after[1:].split("{", 1)[0].strip() or None
        return ObjectEntry(
            name=_unquote(method.group("name")),
            value=after,
            kind="method",
            params=parse_signature_params(params_text),
            return_type=return_type,
            doc=doc,
            offset=segment.offset,
        )

    keyed = _KEY_RE.match(code)
    if keyed is not None:
        value = code[keyed.end() :].strip()
        params: list[SignatureParam] = []
        function = _FUNCTION_VALUE_RE.match(value)
        if function is not None:
            params = parse_signature_params(_paren_body(value[function.end() - 1 :]))
        return ObjectEntry(
            name=_unquote(keyed.group("name")),
            value=value,
            params=params,
            doc=doc,
            offset=segment.offset,
        )

    if _IDENTIFIER_RE.fullmatch(code) or _STRING_RE.fullmatch(code):
        return ObjectEntry(name=_unquote(code), kind="shorthand", doc=doc, offset=segment.offset)
    return None


def parse_attributes(value: str) -> dict[str, str]:
    """Parse ``{ key: value, ... }`` into a mapping of raw value texts.

    Returns an empty mapping when *value* is not an object literal.
    """
    text = value.strip()
    if not text.startswith("{") or not text.endswith("}"):
        return {}
    attributes: dict[str, str] = {}
    for entry in parse_object_entries(text[1:-1]):
        if entry.kind == "method":
            attributes[entry.name] = f"({', '.join(p.name for p in entry.params)}) {entry.value}"
        elif entry.kind == "value":
            attributes[entry.name] = strip_comments(entry.value)
    return attributes


def parse_signature_params(text: str) -> list[SignatureParam]:
    """Parse a parameter list such as ``value: string, force?: boolean, ...rest``.

    Default values mark a parameter optional. Destructured parameters keep
    their pattern text as the name.
    """
    params: list[SignatureParam] = []
    for segment in split_top_level(text, ",", type_members=True):
        code = strip_comments(strip_leading_comments(segment.text)[1])
        if not code:
            continue
        default_split = _split_default(code)
        has_default = default_split != code
        code = default_split
        match = _PARAM_RE.match(code)
        if match is None:
            params.append(SignatureParam(name=code, optional=has_default))
            continue
        type_expr = code[match.end() :].strip()
        type_expr = type_expr[1:].strip() if type_expr.startswith(":") else ""
        params.append(
            SignatureParam(
                name=match.group("name"),
                type=type_expr or None,
                optional=has_default or bool(match.group("optional")),
            )
        )
    return params


def parse_default_literal(text: str) -> Any:
    """Convert a default-value expression into a literal where possible.

    ``true``/``false`` become booleans, ``null``/``undefined`` become ``None``,
    numbers become ``int``/``float`` and quoted strings lose their quotes.
    Anything else (factories, identifiers, expressions) is returned as text.
    """
    value = strip_comments(text).strip()
    if value in ("true", "false"):
        return value == "true"
    if value in ("null", "undefined", ""):
        return None
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    if len(value) >= 2 and value[0] in "'\"`" and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_defaults_block(body: str) -> dict[str, Any]:
    """Parse the object passed as defaults (``withDefaults(..., { ... })``)."""
    defaults: dict[str, Any] = {}
    for entry in parse_object_entries(body):
        if entry.kind == "value":
            defaults[entry.name] = parse_default_literal(entry.value)
        elif entry.kind == "method":
            defaults[entry.name] = f"{entry.name}() {entry.value}".strip()
    return defaults


# ################
# Implementation
# ################

_NAME = r"(?P<name>[\w$]+|'[^']*'|\"[^\"]*\")"
_MEMBER_RE = re.compile(rf"^(?:readonly\s+)?{_NAME}\s*(?P<optional>\?)?\s*(?=[:(]|$)")
_KEY_RE = re.compile(rf"^{_NAME}\s*:")
_METHOD_RE = re.compile(rf"^(?:(?:async|get|set|static)\s+)*\*?\s*{_NAME}\s*\(")
_FUNCTION_VALUE_RE = re.compile(r"^(?:async\s+)?(?:function\b\s*[\w$]*\s*)?\(")
_PARAM_RE = re.compile(r"^(?:\.\.\.)?(?P<name>[\w$]+)\s*(?P<optional>\?)?")
_IDENTIFIER_RE = re.compile(r"[\w$]+")
_STRING_RE = re.compile(r"'[^']*'|\"[^\"]*\"")
_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _unquote(text: str) -> str:
    return text.strip().strip("'\"`")


def _paren_body(text: str) -> str:
    """Return the text inside the parenthesis group that *text* starts with."""
    start = text.find("(")
    if start == -1:
        return ""
    close = find_closing(text, start)
    if close == -1:
        return text[start + 1 :]
    return text[start + 1 : close]


def _split_default(code: str) -> str:
    """Drop a ``= default`` suffix at nesting depth zero, keeping ``=>`` arrows."""
    depth = 0
    for i, ch in enumerate(code):
        if ch in "([{<":
            depth += 1
        elif ch in ")]}" or (ch == ">" and code[i - 1] != "="):
            depth -= 1
        elif ch == "=" and depth == 0 and code[i + 1 : i + 2] != ">" and code[i - 1 : i] not in "!=<>":
            return code[:i].strip()
    return code
