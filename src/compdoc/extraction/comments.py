# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for structured documentation comments (``/** ... */`` blocks).

A block is associated with the declaration that immediately follows it. Its
free-text description is every line before the first tag; ``@param``,
``@returns`` and ``@example`` tags are parsed into structured entries and
every other tag is kept verbatim in :attr:`DocComment.tags`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from compdoc.extraction.scanner import find_closing
from compdoc.model.types import ANY_TYPE, normalize_type

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DocParam:
    """A ``@param`` entry.

    Attributes:
        name: Parameter name without optional markers.
        type: Canonical type name.
        raw_type: The type expression as written, or ``""``.
        description: Parameter description.
        required: False when the type or name carries an optional marker.
    """

    name: str
    type: str = ANY_TYPE
    raw_type: str = ""
    description: str = ""
    required: bool = True


@dataclass(frozen=True)
class DocReturn:
    """A ``@returns`` entry."""

    type: str = ANY_TYPE
    raw_type: str = ""
    description: str = ""


@dataclass(frozen=True)
class DocComment:
    """The parsed content of one structured comment block."""

    description: str = ""
    params: list[DocParam] = field(default_factory=list)
    returns: DocReturn | None = None
    examples: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    def param(self, name: str) -> DocParam | None:
        """Return the ``@param`` entry named *name*, if documented."""
        for entry in self.params:
            if entry.name == name:
                return entry
        return None


def parse_doc_comment(block: str) -> DocComment:
    """Parse a structured comment block.

    Args:
        block: The comment including or excluding its ``/**`` and ``*/``
            delimiters.

    Returns:
        The parsed :class:`DocComment`. A block without tags yields only a
        description.
    """
    description_lines: list[str] = []
    sections: list[tuple[str, list[str]]] = []
    for line in _comment_lines(block):
        tag_match = _TAG_RE.match(line.strip())
        if tag_match:
            sections.append((tag_match.group("tag"), [tag_match.group("rest")]))
        elif sections:
            sections[-1][1].append(line)
        else:
            description_lines.append(line)

    params: list[DocParam] = []
    returns: DocReturn | None = None
    examples: list[str] = []
    tags: dict[str, str] = {}
    for tag, lines in sections:
        if tag in _PARAM_TAGS:
            param = _parse_param(_collapse(" ".join(lines)))
            if param is not None:
                params.append(param)
        elif tag in _RETURN_TAGS:
            if returns is None:
                returns = _parse_returns(_collapse(" ".join(lines)))
        elif tag == "example":
            example = _verbatim(lines)
            if example:
                examples.append(example)
        else:
            value = _collapse(" ".join(lines))
            if tag == "type":
                value = value.strip("{}").strip()
            tags[tag] = value

    return DocComment(
        description=_collapse(" ".join(description_lines)),
        params=params,
        returns=returns,
        examples=examples,
        tags=tags,
    )


def doc_comment_before(text: str, index: int) -> DocComment | None:
    """Return the structured comment ending immediately before *index*.

    Only whitespace may separate the end of the block from *index*.

    Returns:
        The parsed block, or ``None`` when no block precedes the position.
    """
    block = doc_block_before(text, index)
    return parse_doc_comment(block) if block is not None else None


def doc_block_before(text: str, index: int) -> str | None:
    """Return the raw ``/** ... */`` block ending immediately before *index*, if any."""
    j = index
    while j > 0 and text[j - 1].isspace():
        j -= 1
    if j < 2 or text[j - 2 : j] != "*/":
        return None
    start = text.rfind("/*", 0, j - 2)
    if start == -1 or not text.startswith("/**", start):
        return None
    return text[start:j]


def find_doc_comment(text: str, identifier: str) -> DocComment | None:
    """Find and parse the structured comment documenting *identifier*.

    The block must be followed, after optional declaration keywords
    (``export``, ``const``, ``function``, ``async``, ``readonly``, ...), by the
    identifier itself, optionally quoted, or by an emit call signature
    ``(e: 'identifier'``.

    Returns:
        The parsed block, or ``None`` when the identifier is undocumented.
    """
    pattern = re.compile(
        r"/\*\*(?P<body>(?:(?!\*/).)*?)\*/\s*"
        r"(?:(?:export|default|const|let|var|function|async|readonly|public|static|get|set)\s+)*"
        r"(?:\(\s*[\w$]+\s*:\s*)?"
        rf"(?P<q>['\"]?){re.escape(identifier)}(?P=q)\s*[?:(=<,\]]",
        re.DOTALL,
    )
    match = pattern.search(text)
    if match is None:
        return None
    return parse_doc_comment(match.group("body"))


def placeholder_description(kind: str, name: str) -> str:
    """Return the generated description used when *name* is undocumented.

    Args:
        kind: One of ``prop``, ``event``, ``method``, ``computed``, ``component``.
        name: The member or component name.
    """
    return _PLACEHOLDERS.get(kind, "The {name} " + kind).format(name=name)


# ################
# Implementation
# ################

_TAG_RE = re.compile(r"^@(?P<tag>[A-Za-z]+)\b\s*(?P<rest>.*)$", re.DOTALL)
_STAR_LINE_RE = re.compile(r"^\s*\*(?!/) ?(?P<content>.*)$")
_PARAM_NAME_RE = re.compile(r"^(?P<name>\[[^\]]*\]|[\w$.]+\??)\s*(?:-\s*)?(?P<desc>.*)$", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")

_PARAM_TAGS = frozenset({"param", "arg", "argument"})
_RETURN_TAGS = frozenset({"returns", "return"})

_PLACEHOLDERS: dict[str, str] = {
    "prop": "The {name} prop",
    "event": "The {name} event",
    "method": "The {name} method",
    "computed": "Computed property {name}",
    "component": "The {name} component",
}


def _comment_lines(block: str) -> list[str]:
    """Return the content lines of a block with delimiters and ``*`` markers removed."""
    body = block.strip()
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]
    lines: list[str] = []
    for raw in body.splitlines():
        match = _STAR_LINE_RE.match(raw)
        lines.append(match.group("content").rstrip() if match else raw.strip())
    return lines


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _verbatim(lines: list[str]) -> str:
    """Join example lines, trimming leading and trailing blank lines."""
    kept = list(lines)
    while kept and not kept[0].strip():
        kept.pop(0)
    while kept and not kept[-1].strip():
        kept.pop()
    return "\n".join(kept)


def _split_braced_type(text: str) -> tuple[str, str]:
    """Split a leading ``{type}`` from *text*, honouring nested braces."""
    if not text.startswith("{"):
        return "", text
    close = find_closing(text, 0)
    if close == -1:
        return text[1:].strip(), ""
    return text[1:close].strip(), text[close + 1 :].strip()


def _parse_param(text: str) -> DocParam | None:
    raw_type, rest = _split_braced_type(text)
    match = _PARAM_NAME_RE.match(rest)
    if match is None:
        return None
    name = match.group("name")
    optional = raw_type.endswith(("?", "=")) or raw_type.startswith("?")
    if name.startswith("["):
        optional = True
        name = name[1:-1].split("=", 1)[0].strip()
    if name.endswith("?"):
        optional = True
        name = name[:-1]
    return DocParam(
        name=name,
        type=normalize_type(raw_type) if raw_type else ANY_TYPE,
        raw_type=raw_type,
        description=match.group("desc").strip(),
        required=not optional,
    )


def _parse_returns(text: str) -> DocReturn:
    raw_type, rest = _split_braced_type(text)
    return DocReturn(
        type=normalize_type(raw_type) if raw_type else ANY_TYPE,
        raw_type=raw_type,
        description=rest.lstrip("- ").strip(),
    )
