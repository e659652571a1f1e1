# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizers for emitted events.

Tried in this order:

1. **interface-based**: a type literal given to ``defineEmits<...>()``,
   either inline or through a named ``interface``/``type`` (``Emits`` when no
   call names one). Members are call signatures ``(e: 'close', reason: string): void``
   or named tuples ``'update:open': [value: boolean]``.
2. **call-with-object**: ``defineEmits(['close'])`` or ``defineEmits({ close: (reason) => true })``.
3. **legacy-keyed**: the options-API ``emits`` key.
"""

from __future__ import annotations

import re

from compdoc.extraction.comments import DocComment, find_doc_comment, placeholder_description
from compdoc.extraction.entries import (
    SignatureParam,
    TypeMember,
    parse_object_entries,
    parse_signature_params,
    parse_type_members,
)
from compdoc.extraction.matching import Matched, MatchResult, NoMatch, first_match
from compdoc.extraction.props import find_named_type_body
from compdoc.extraction.scanner import find_calls, find_keyed_block, mask
from compdoc.extraction.sfc import ScriptSource
from compdoc.model.entities import Event, Param
from compdoc.model.types import ANY_TYPE, normalize_type

# ###############
# Public Interface
# ###############

EventsResult = MatchResult[dict[str, Event]]


def extract_interface_events(source: ScriptSource) -> EventsResult:
    """Recognize events declared as a type literal."""
    text = source.combined
    masked = mask(text)
    body: str | None = None
    for call in find_calls(text, "defineEmits", masked):
        type_argument = call.type_argument or ""
        if type_argument.startswith("{") and type_argument.endswith("}"):
            body = type_argument[1:-1]
            break
        if _IDENTIFIER_RE.fullmatch(type_argument):
            body = find_named_type_body(text, type_argument, masked)
            break
    if body is None:
        body = find_named_type_body(text, "Emits", masked)
    if body is None:
        return NoMatch("interface")

    events: dict[str, Event] = {}
    for member in parse_type_members(body):
        event = _event_from_member(member)
        events[event.name] = event
    return Matched(events, "interface")


def extract_call_object_events(source: ScriptSource) -> EventsResult:
    """Recognize ``defineEmits([...])`` and ``defineEmits({ ... })``."""
    text = source.combined
    for call in find_calls(text, "defineEmits"):
        if call.type_argument is None and call.arguments and call.arguments[0][:1] in ("{", "["):
            return Matched(_events_from_runtime(call.arguments[0], text), "call-object")
    return NoMatch("call-object")


def extract_legacy_events(source: ScriptSource) -> EventsResult:
    """Recognize the options-API ``emits`` key."""
    text = source.combined
    block = find_keyed_block(text, "emits", "{[")
    if block is None:
        return NoMatch("legacy")
    return Matched(_events_from_runtime(text[block.start : block.end + 1], text), "legacy")


EVENT_RECOGNIZERS = (
    extract_interface_events,
    extract_call_object_events,
    extract_legacy_events,
)


def extract_events(source: ScriptSource) -> EventsResult:
    """Run the event recognizers in priority order; the first match wins."""
    return first_match(EVENT_RECOGNIZERS, source)


def params_from_signature(signature: list[SignatureParam], doc: DocComment | None) -> list[Param]:
    """Combine signature parameters with their ``@param`` documentation.

    Parameters documented but absent from the signature are appended, so a
    runtime declaration without annotations still reports its documented
    payload.
    """
    params: list[Param] = []
    seen: set[str] = set()
    for entry in signature:
        documented = doc.param(entry.name) if doc is not None else None
        if entry.type:
            type_name = normalize_type(entry.type)
        elif documented is not None:
            type_name = documented.type
        else:
            type_name = ANY_TYPE
        params.append(
            Param(
                name=entry.name,
                type=type_name,
                description=documented.description if documented is not None else "",
            )
        )
        seen.add(entry.name)
    if doc is not None:
        for documented in doc.params:
            if documented.name not in seen:
                params.append(Param(name=documented.name, type=documented.type, description=documented.description))
    return params


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[\w$]+")


def _describe(doc: DocComment | None, name: str) -> str:
    if doc is not None and doc.description:
        return doc.description
    return placeholder_description("event", name)


def _tuple_params(type_expr: str | None) -> list[SignatureParam]:
    """Read the payload of a named-tuple or function-typed event member."""
    if not type_expr:
        return []
    text = type_expr.strip()
    if text.startswith("[") and text.endswith("]"):
        params: list[SignatureParam] = []
        for index, entry in enumerate(parse_signature_params(text[1:-1])):
            if entry.type is None:
                # Unlabeled tuple element: the text is the type.
                params.append(SignatureParam(name=f"arg{index}", type=entry.name, optional=entry.optional))
            else:
                params.append(entry)
        return params
    if text.startswith("("):
        close = text.find(")")
        inner = text[1:close] if close != -1 else text[1:]
        return parse_signature_params(inner)
    return []


def _event_from_member(member: TypeMember) -> Event:
    if member.kind in ("call", "method"):
        signature = member.params
    else:
        signature = _tuple_params(member.type)
    return Event(
        name=member.name,
        description=_describe(member.doc, member.name),
        params=params_from_signature(signature, member.doc),
    )


def _events_from_runtime(declaration: str, text: str) -> dict[str, Event]:
    """Build events from an array of names or an object of validators."""
    events: dict[str, Event] = {}
    for entry in parse_object_entries(declaration.strip()[1:-1]):
        doc = entry.doc or find_doc_comment(text, entry.name)
        events[entry.name] = Event(
            name=entry.name,
            description=_describe(doc, entry.name),
            params=params_from_signature(entry.params, doc),
        )
    return events
