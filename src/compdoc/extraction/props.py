# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizers for component property declarations.

Four idioms are supported, tried in this order:

1. **interface-based**: ``interface Props { ... }`` (or ``type Props = { ... }``)
   used through ``defineProps<Props>()``, with defaults from
   ``withDefaults(defineProps<Props>(), { ... })``.
2. **call-with-object**: ``defineProps({ size: { type: String } })`` or
   ``defineProps(['size'])``.
3. **call-with-external-type**: ``defineProps<{ size?: string }>()`` with an
   inline type argument, optionally wrapped in ``withDefaults``.
4. **legacy-keyed**: the options-API ``props: { ... }`` / ``props: [...]``.
"""

from __future__ import annotations

import re
from typing import Any

from compdoc.extraction.comments import DocComment, placeholder_description
from compdoc.extraction.entries import (
    ObjectEntry,
    TypeMember,
    parse_attributes,
    parse_default_literal,
    parse_defaults_block,
    parse_object_entries,
    parse_type_members,
)
from compdoc.extraction.matching import Matched, MatchResult, NoMatch, first_match
from compdoc.extraction.scanner import block_after, find_calls, find_keyed_block, mask
from compdoc.extraction.sfc import ScriptSource
from compdoc.model.entities import Prop
from compdoc.model.types import ANY_TYPE, CanonicalType, extract_union_values, normalize_type

# ###############
# Public Interface
# ###############

PropsResult = MatchResult[dict[str, Prop]]


def extract_interface_props(source: ScriptSource) -> PropsResult:
    """Recognize props declared by a named interface or type alias."""
    text = source.combined
    masked = mask(text)
    calls = find_calls(text, "defineProps", masked)
    type_name = "Props"
    for call in calls:
        if call.type_argument and _IDENTIFIER_RE.fullmatch(call.type_argument):
            type_name = call.type_argument
            break

    body = find_named_type_body(text, type_name, masked)
    if body is None:
        return NoMatch("interface")
    defaults = _defaults_for(text, masked)
    props = {m.name: _prop_from_member(m, defaults) for m in parse_type_members(body) if m.kind != "call"}
    return Matched(props, "interface")


def extract_call_object_props(source: ScriptSource) -> PropsResult:
    """Recognize ``defineProps({ ... })`` and ``defineProps([...])``."""
    text = source.combined
    for call in find_calls(text, "defineProps"):
        if call.type_argument is None and call.arguments and call.arguments[0][:1] in ("{", "["):
            return Matched(_props_from_runtime(call.arguments[0]), "call-object")
    return NoMatch("call-object")


def extract_call_type_props(source: ScriptSource) -> PropsResult:
    """Recognize ``defineProps<{ ... }>()`` with an inline type argument."""
    text = source.combined
    masked = mask(text)
    for call in find_calls(text, "defineProps", masked):
        type_argument = call.type_argument or ""
        if type_argument.startswith("{") and type_argument.endswith("}"):
            defaults = _defaults_for(text, masked)
            members = parse_type_members(type_argument[1:-1])
            props = {m.name: _prop_from_member(m, defaults) for m in members if m.kind != "call"}
            return Matched(props, "call-type")
    return NoMatch("call-type")


def extract_legacy_props(source: ScriptSource) -> PropsResult:
    """Recognize the options-API ``props`` key."""
    block = find_keyed_block(source.combined, "props", "{[")
    if block is None:
        return NoMatch("legacy")
    text = source.combined[block.start : block.end + 1]
    return Matched(_props_from_runtime(text), "legacy")


PROP_RECOGNIZERS = (
    extract_interface_props,
    extract_call_object_props,
    extract_call_type_props,
    extract_legacy_props,
)


def extract_props(source: ScriptSource) -> PropsResult:
    """Run the prop recognizers in priority order; the first match wins."""
    return first_match(PROP_RECOGNIZERS, source)


def find_named_type_body(text: str, type_name: str, masked: str | None = None) -> str | None:
    """Return the body of ``interface <type_name> { ... }`` or ``type <type_name> = { ... }``."""
    masked = mask(text) if masked is None else masked
    pattern = re.compile(
        rf"\binterface\s+{re.escape(type_name)}\b[^{{;]*(?=\{{)|\btype\s+{re.escape(type_name)}\s*=\s*(?=\{{)"
    )
    match = pattern.search(masked)
    if match is None:
        return None
    block = block_after(text, match.end())
    return block.body if block is not None else None


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[\w$]+")
_PROP_TYPE_RE = re.compile(r"\bas\s+PropType\s*<(?P<inner>.*)>\s*$", re.DOTALL)


def _defaults_for(text: str, masked: str) -> dict[str, Any]:
    """Return the defaults object of ``withDefaults(defineProps<...>(), { ... })``."""
    for call in find_calls(text, "withDefaults", masked):
        if len(call.arguments) >= 2 and "defineProps" in call.arguments[0]:
            second = call.arguments[1].strip()
            if second.startswith("{") and second.endswith("}"):
                return parse_defaults_block(second[1:-1])
    return {}


def _describe(doc: DocComment | None, name: str) -> str:
    if doc is not None and doc.description:
        return doc.description
    return placeholder_description("prop", name)


def _prop_from_member(member: TypeMember, defaults: dict[str, Any]) -> Prop:
    doc = member.doc
    if member.name in defaults:
        default = defaults[member.name]
    elif doc is not None and "default" in doc.tags:
        default = parse_default_literal(doc.tags["default"])
    else:
        default = None

    if member.kind == "method":
        type_name = CanonicalType.FUNCTION.value
        values = None
    else:
        raw_type = member.type or (doc.tags.get("type") if doc is not None else None)
        type_name = normalize_type(raw_type)
        values = extract_union_values(raw_type)

    return Prop(
        name=member.name,
        type=type_name,
        required=not member.optional,
        default=default,
        description=_describe(doc, member.name),
        values=values,
    )


def _props_from_runtime(declaration: str) -> dict[str, Prop]:
    """Build props from a runtime declaration: an object literal or an array of names."""
    declaration = declaration.strip()
    entries = parse_object_entries(declaration[1:-1])
    props: dict[str, Prop] = {}
    for entry in entries:
        prop = _prop_from_entry(entry)
        if prop is not None:
            props[prop.name] = prop
    return props


def _prop_from_entry(entry: ObjectEntry) -> Prop | None:
    if entry.kind == "shorthand":
        return Prop(name=entry.name, description=_describe(entry.doc, entry.name))
    if entry.kind != "value":
        return None

    attributes = parse_attributes(entry.value)
    if attributes:
        type_name, values = _runtime_type(attributes.get("type"))
        required = attributes.get("required", "false").strip() == "true"
        default = parse_default_literal(attributes["default"]) if "default" in attributes else None
        description = ""
        if "description" in attributes:
            literal = parse_default_literal(attributes["description"])
            description = literal if isinstance(literal, str) else ""
        return Prop(
            name=entry.name,
            type=type_name,
            required=required,
            default=default,
            description=description or _describe(entry.doc, entry.name),
            values=values,
        )

    type_name, values = _runtime_type(entry.value)
    return Prop(name=entry.name, type=type_name, description=_describe(entry.doc, entry.name), values=values)


def _runtime_type(expression: str | None) -> tuple[str, list[str] | None]:
    """Normalize a runtime type such as ``String`` or ``Object as PropType<'a' | 'b'>``."""
    if not expression:
        return ANY_TYPE, None
    prop_type = _PROP_TYPE_RE.search(expression)
    if prop_type is None:
        return normalize_type(expression), None
    constructor = expression[: prop_type.start()].strip()
    inner = prop_type.group("inner").strip()
    type_name = normalize_type(constructor)
    if type_name == ANY_TYPE:
        type_name = normalize_type(inner)
    return type_name, extract_union_values(inner)


