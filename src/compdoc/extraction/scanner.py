# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bracket-aware scanning helpers for component script text.

The extractors do not parse JavaScript or TypeScript. They locate declaration
anchors with regular expressions and rely on this module to find where a
bracketed region ends and to split its body into top-level entries, while
stepping over string literals, template literals and comments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Segment:
    """A slice of a larger text.

    Attributes:
        text: The slice content, stripped of surrounding whitespace.
        offset: Index of the slice start within the scanned text.
    """

    text: str
    offset: int


@dataclass(frozen=True)
class Block:
    """A bracketed region of a text.

    Attributes:
        start: Index of the opening bracket.
        end: Index of the matching closing bracket.
        body: The text between the brackets.
    """

    start: int
    end: int
    body: str


@dataclass(frozen=True)
class CallSite:
    """A call expression such as ``defineProps<Props>({ ... })``.

    Attributes:
        start: Index of the callee name.
        end: Index just past the closing parenthesis.
        type_argument: Text between the generic angle brackets, if any.
        arguments: Top-level argument texts in order.
    """

    start: int
    end: int
    type_argument: str | None
    arguments: list[str] = field(default_factory=list)


def mask(text: str) -> str:
    """Blank out comments and string contents, preserving length and quotes.

    Regular expressions run on the masked text cannot match inside a comment
    or a string literal, while indices stay valid for the original text.
    """
    out = list(text)
    i = 0
    n = len(text)
    while i < n:
        end = _skip_opaque(text, i)
        if end is None:
            i += 1
            continue
        if text[i] in _QUOTES:
            for j in range(i + 1, max(end - 1, i + 1)):
                if out[j] != "\n":
                    out[j] = " "
        else:
            for j in range(i, end):
                if out[j] != "\n":
                    out[j] = " "
        i = end
    return "".join(out)


def find_closing(text: str, open_index: int) -> int:
    """Return the index of the bracket closing the one at *open_index*.

    Supports ``(``, ``[``, ``{`` and ``<``; for angle brackets the ``>`` of an
    arrow (``=>``) is not counted.

    Returns:
        The index of the closing bracket, or ``-1`` when it is missing.
    """
    opener = text[open_index]
    closer = _PAIRS[opener]
    depth = 0
    i = open_index
    n = len(text)
    while i < n:
        end = _skip_opaque(text, i)
        if end is not None:
            i = end
            continue
        ch = text[i]
        if ch == ">" and opener == "<" and i > 0 and text[i - 1] == "=":
            i += 1
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def block_at(text: str, open_index: int) -> Block | None:
    """Return the bracketed block opening at *open_index*, or None if unbalanced."""
    if open_index < 0 or open_index >= len(text) or text[open_index] not in _PAIRS:
        return None
    close = find_closing(text, open_index)
    if close == -1:
        return None
    return Block(start=open_index, end=close, body=text[open_index + 1 : close])


def block_after(text: str, index: int, opener: str = "{") -> Block | None:
    """Return the block whose opening bracket is the first non-space character at or after *index*."""
    i = _skip_space(text, index)
    if i >= len(text) or text[i] != opener:
        return None
    return block_at(text, i)


def split_top_level(body: str, separators: str = ",", *, type_members: bool = False) -> list[Segment]:
    """Split *body* on separators that are not nested inside brackets.

    Comments stay attached to the segment that follows them, so a leading
    documentation block travels with its entry. Segments holding only
    whitespace or comments are dropped.

    Args:
        body: Text between the brackets of an object or type literal.
        separators: Characters that end an entry at nesting depth zero.
        type_members: Treat the body as a type literal: angle brackets nest,
            and a newline also ends a member unless the expression visibly
            continues on the next line (a leading or trailing ``|``, ``&``,
            ``=>`` or ``:``).

    Returns:
        The non-empty segments in source order.
    """
    segments: list[Segment] = []
    depth = 0
    start = 0
    has_code = False
    i = 0
    n = len(body)
    while i < n:
        end = _skip_opaque(body, i)
        if end is not None:
            if body[i] in _QUOTES:
                has_code = True
            i = end
            continue
        ch = body[i]
        if ch in "([{" or (type_members and ch == "<"):
            depth += 1
        elif ch in ")]}" or (type_members and ch == ">" and not (i > 0 and body[i - 1] == "=")):
            depth = max(depth - 1, 0)
        elif depth == 0 and (
            ch in separators or (type_members and ch == "\n" and has_code and not _continues(body, start, i))
        ):
            _append_segment(segments, body, start, i)
            start = i + 1
            has_code = False
            i += 1
            continue
        if not ch.isspace():
            has_code = True
        i += 1
    _append_segment(segments, body, start, n)
    return segments


def strip_leading_comments(text: str) -> tuple[str | None, str]:
    """Remove the comments preceding the code of an entry.

    Returns:
        A tuple of the last ``/** ... */`` block found among the leading
        comments (or ``None``) and the remaining code.
    """
    doc: str | None = None
    i = _skip_space(text, 0)
    while i < len(text) and text.startswith(("//", "/*"), i):
        end = _skip_opaque(text, i)
        if end is None:
            break
        if text.startswith("/**", i) and not text.startswith("/**/", i):
            doc = text[i:end]
        i = _skip_space(text, end)
    return doc, text[i:].strip()


def strip_comments(text: str) -> str:
    """Return *text* with every comment removed and whitespace collapsed."""
    parts: list[str] = []
    i = 0
    n = len(text)
    last = 0
    while i < n:
        end = _skip_opaque(text, i)
        if end is None:
            i += 1
            continue
        if text[i] not in _QUOTES:
            parts.append(text[last:i])
            parts.append(" ")
            last = end
        i = end
    parts.append(text[last:])
    return _WHITESPACE_RE.sub(" ", "".join(parts)).strip()


def find_calls(text: str, callee: str, masked: str | None = None) -> list[CallSite]:
    """Locate every call of *callee* in code, including generic calls.

    Both ``callee(...)`` and ``callee<T>(...)`` are recognized. Occurrences
    inside comments and strings are ignored.
    """
    masked = mask(text) if masked is None else masked
    calls: list[CallSite] = []
    pattern = re.compile(rf"(?<![\w$.]){re.escape(callee)}\s*(?=[<(])")
    for match in pattern.finditer(masked):
        i = match.end()
        type_argument: str | None = None
        if masked[i] == "<":
            close = find_closing(text, i)
            if close == -1:
                continue
            type_argument = text[i + 1 : close].strip()
            i = _skip_space(text, close + 1)
            if i >= len(text) or text[i] != "(":
                continue
        paren = block_at(text, i)
        if paren is None:
            continue
        arguments = [segment.text for segment in split_top_level(paren.body, ",")]
        calls.append(CallSite(match.start(), paren.end + 1, type_argument, arguments))
    return calls


def find_keyed_block(text: str, key: str, openers: str = "{", masked: str | None = None) -> Block | None:
    """Find the value block of an object key such as ``props: { ... }``.

    Args:
        text: Script text to search.
        key: The object key (``props``, ``emits``, ``methods``, ...).
        openers: Bracket characters accepted as the start of the value.
        masked: Pre-computed :func:`mask` of *text*.

    Returns:
        The first matching block, or None.
    """
    masked = mask(text) if masked is None else masked
    pattern = re.compile(rf"(?<![\w$.]){re.escape(key)}\s*:\s*(?=[{re.escape(openers)}])")
    for match in pattern.finditer(masked):
        block = block_at(text, match.end())
        if block is not None:
            return block
    return None


# ################
# Implementation
# ################

_PAIRS: dict[str, str] = {"(": ")", "[": "]", "{": "}", "<": ">"}
_QUOTES = "'\"`"
_WHITESPACE_RE = re.compile(r"\s+")


def _skip_opaque(text: str, i: int) -> int | None:
    """Return the index just past a string, template literal or comment starting at *i*.

    Returns None when no such construct starts at *i*. Unterminated
    constructs extend to the end of the text.
    """
    ch = text[i]
    n = len(text)
    if ch in _QUOTES:
        j = i + 1
        while j < n:
            c = text[j]
            if c == "\\":
                j += 2
                continue
            if c == ch:
                return j + 1
            if c == "\n" and ch != "`":
                return j
            j += 1
        return n
    if ch == "/" and i + 1 < n:
        nxt = text[i + 1]
        if nxt == "/":
            j = text.find("\n", i)
            return n if j == -1 else j
        if nxt == "*":
            j = text.find("*/", i + 2)
            return n if j == -1 else j + 2
    return None


def _skip_space(text: str, i: int) -> int:
    n = len(text)
    while i < n and text[i].isspace():
        i += 1
    return i


def _continues(body: str, start: int, newline: int) -> bool:
    """Return True when a type member visibly continues past the newline at *newline*."""
    before = strip_comments(body[start:newline])
    if before.endswith(("|", "&", "=>", ":", "(", "<")):
        return True
    after = body[_skip_space(body, newline) :]
    return after.startswith(("|", "&", "=>"))


def _append_segment(segments: list[Segment], body: str, start: int, end: int) -> None:
    raw = body[start:end]
    text = raw.strip()
    if not text:
        return
    _, code = strip_leading_comments(text)
    if not code:
        return
    segments.append(Segment(text=text, offset=start + (len(raw) - len(raw.lstrip()))))
