# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizers for public methods and computed values.

Setup-style declarations (top-level functions, arrow functions and
``computed(...)`` bindings) take precedence over the options-API ``methods``
and ``computed`` keys.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from compdoc.extraction.comments import DocComment, doc_comment_before, find_doc_comment, placeholder_description
from compdoc.extraction.entries import ObjectEntry, SignatureParam, parse_object_entries, parse_signature_params
from compdoc.extraction.matching import Matched, MatchResult, NoMatch, first_match
from compdoc.extraction.scanner import block_at, find_calls, find_closing, find_keyed_block, mask
from compdoc.extraction.sfc import ScriptSource
from compdoc.model.entities import Computed, Method, MethodParam, ReturnInfo
from compdoc.model.types import ANY_TYPE, normalize_type

# ###############
# Public Interface
# ###############

MethodsResult = MatchResult[dict[str, Method]]
ComputedResult = MatchResult[dict[str, Computed]]


def extract_setup_methods(source: ScriptSource) -> MethodsResult:
    """Recognize top-level setup functions that are documented or exposed.

    Names starting with ``_`` are private and never reported.
    """
    text = source.setup
    masked = mask(text)
    exposed = _exposed_names(text, masked)
    methods: dict[str, Method] = {}
    for declaration in _function_declarations(text, masked):
        name = declaration.name
        if name.startswith("_") or name in methods:
            continue
        doc = doc_comment_before(text, declaration.start)
        if doc is None and name not in exposed:
            continue
        methods[name] = _method(name, declaration.params, declaration.return_type, doc)
    if not methods:
        return NoMatch("setup")
    return Matched(methods, "setup")


def extract_legacy_methods(source: ScriptSource) -> MethodsResult:
    """Recognize the options-API ``methods`` key."""
    text = source.combined
    block = find_keyed_block(text, "methods", "{")
    if block is None:
        return NoMatch("legacy")
    methods: dict[str, Method] = {}
    for entry in parse_object_entries(block.body):
        if entry.name.startswith("_") or not _is_function_entry(entry):
            continue
        doc = entry.doc or find_doc_comment(text, entry.name)
        methods[entry.name] = _method(entry.name, entry.params, entry.return_type, doc)
    return Matched(methods, "legacy")


METHOD_RECOGNIZERS = (extract_setup_methods, extract_legacy_methods)


def extract_methods(source: ScriptSource) -> MethodsResult:
    """Run the method recognizers in priority order; the first match wins."""
    return first_match(METHOD_RECOGNIZERS, source)


def extract_setup_computed(source: ScriptSource) -> ComputedResult:
    """Recognize ``const name = computed(...)`` bindings."""
    text = source.setup
    masked = mask(text)
    computed: dict[str, Computed] = {}
    for match in _COMPUTED_RE.finditer(masked):
        name = match.group("name")
        doc = doc_comment_before(text, match.start())
        call = next(iter(find_calls(text[match.start("call") :], "computed")), None)
        candidates = [
            call.type_argument if call is not None else None,
            _getter_return_type(call.arguments[0]) if call is not None and call.arguments else None,
            _computed_ref_argument(match.group("annotation")),
        ]
        computed[name] = _computed(name, candidates, doc)
    if not computed:
        return NoMatch("setup")
    return Matched(computed, "setup")


def extract_legacy_computed(source: ScriptSource) -> ComputedResult:
    """Recognize the options-API ``computed`` key.

    Entries are getter methods (``label() { ... }``), function values or
    ``{ get() { ... }, set(v) { ... } }`` objects.
    """
    text = source.combined
    block = find_keyed_block(text, "computed", "{")
    if block is None:
        return NoMatch("legacy")
    computed: dict[str, Computed] = {}
    for entry in parse_object_entries(block.body):
        if entry.kind == "shorthand":
            continue
        doc = entry.doc or find_doc_comment(text, entry.name)
        return_type = entry.return_type
        if entry.kind == "value" and entry.value.startswith("{"):
            getter = next((e for e in parse_object_entries(entry.value[1:-1]) if e.name == "get"), None)
            return_type = getter.return_type if getter is not None else None
        elif entry.kind == "value":
            return_type = _getter_return_type(entry.value)
        computed[entry.name] = _computed(entry.name, [return_type], doc)
    return Matched(computed, "legacy")


COMPUTED_RECOGNIZERS = (extract_setup_computed, extract_legacy_computed)


def extract_computed(source: ScriptSource) -> ComputedResult:
    """Run the computed recognizers in priority order; the first match wins."""
    return first_match(COMPUTED_RECOGNIZERS, source)


# ################
# Implementation
# ################

_FUNCTION_RE = re.compile(
    r"(?<![\w$.])(?:export\s+)?(?:async\s+)?function\s*\*?\s*(?P<name>[\w$]+)\s*(?:<[^>(]*>\s*)?(?=\()"
)
_ARROW_RE = re.compile(
    r"(?<![\w$.])(?:export\s+)?(?:const|let)\s+(?P<name>[\w$]+)\s*(?::[^=]+)?=\s*(?:async\s+)?(?=\()"
)
_ARROW_TAIL_RE = re.compile(r"\s*(?::\s*(?P<type>[^=]+?))?\s*=>")
_FUNCTION_TAIL_RE = re.compile(r"\s*(?::\s*(?P<type>[^{]+?))?\s*\{")
_COMPUTED_RE = re.compile(
    r"(?<![\w$.])(?:export\s+)?(?:const|let)\s+(?P<name>[\w$]+)\s*"
    r"(?::\s*(?P<annotation>[^=]+?))?\s*=\s*(?P<call>computed)\s*(?=[<(])"
)
_COMPUTED_REF_RE = re.compile(r"^(?:Computed|WritableComputed)Ref\s*<(?P<inner>.*)>$", re.DOTALL)
_GETTER_RE = re.compile(r"^(?:async\s+)?(?:function\b\s*[\w$]*\s*)?(?=\()")
_FUNCTION_VALUE_RE = re.compile(r"^(?:async\s+)?(?:function\b|\([^)]*\)\s*(?::[^=]+)?=>|[\w$]+\s*=>)")


@dataclass(frozen=True)
class _Declaration:
    """A top-level function found in setup code."""

    name: str
    start: int
    params: list[SignatureParam]
    return_type: str | None


def _depth(masked: str, index: int) -> int:
    prefix = masked[:index]
    return prefix.count("{") - prefix.count("}")


def _function_declarations(text: str, masked: str) -> list[_Declaration]:
    """Return top-level function and arrow-function declarations in source order."""
    found: list[_Declaration] = []
    for pattern, tail in ((_FUNCTION_RE, _FUNCTION_TAIL_RE), (_ARROW_RE, _ARROW_TAIL_RE)):
        for match in pattern.finditer(masked):
            if _depth(masked, match.start()) != 0:
                continue
            paren = block_at(text, match.end())
            if paren is None:
                continue
            after = tail.match(masked, paren.end + 1)
            if after is None:
                continue
            return_type = after.group("type")
            if return_type:
                return_type = text[after.start("type") : after.end("type")].strip()
            found.append(
                _Declaration(
                    name=match.group("name"),
                    start=match.start(),
                    params=parse_signature_params(paren.body),
                    return_type=return_type or None,
                )
            )
    found.sort(key=lambda d: d.start)
    return found


def _exposed_names(text: str, masked: str) -> set[str]:
    names: set[str] = set()
    for call in find_calls(text, "defineExpose", masked):
        if call.arguments and call.arguments[0].startswith("{"):
            names.update(entry.name for entry in parse_object_entries(call.arguments[0][1:-1]))
    return names


def _is_function_entry(entry: ObjectEntry) -> bool:
    if entry.kind == "method":
        return True
    return entry.kind == "value" and bool(_FUNCTION_VALUE_RE.match(entry.value))


def _method(
    name: str,
    signature: list[SignatureParam],
    return_type: str | None,
    doc: DocComment | None,
) -> Method:
    params: list[MethodParam] = []
    seen: set[str] = set()
    for entry in signature:
        documented = doc.param(entry.name) if doc is not None else None
        if entry.type:
            type_name = normalize_type(entry.type)
        elif documented is not None:
            type_name = documented.type
        else:
            type_name = ANY_TYPE
        required = not entry.optional and (documented is None or documented.required)
        params.append(
            MethodParam(
                name=entry.name,
                type=type_name,
                description=documented.description if documented is not None else "",
                required=required,
            )
        )
        seen.add(entry.name)
    if doc is not None:
        for documented in doc.params:
            if documented.name not in seen:
                params.append(
                    MethodParam(
                        name=documented.name,
                        type=documented.type,
                        description=documented.description,
                        required=documented.required,
                    )
                )

    returns: ReturnInfo | None = None
    if doc is not None and doc.returns is not None:
        documented_type = doc.returns.type
        if not doc.returns.raw_type and return_type:
            documented_type = normalize_type(return_type)
        returns = ReturnInfo(type=documented_type, description=doc.returns.description)
    elif return_type and return_type.strip() != "void":
        returns = ReturnInfo(type=normalize_type(return_type))

    description = doc.description if doc is not None and doc.description else placeholder_description("method", name)
    return Method(name=name, description=description, params=params, returns=returns)


def _computed(name: str, type_candidates: list[str | None], doc: DocComment | None) -> Computed:
    """Build a Computed record; documented types win over inferred ones."""
    type_name = ANY_TYPE
    if doc is not None and doc.returns is not None and doc.returns.raw_type:
        type_name = doc.returns.type
    elif doc is not None and doc.tags.get("type"):
        type_name = normalize_type(doc.tags["type"])
    else:
        for candidate in type_candidates:
            if candidate:
                type_name = normalize_type(candidate)
                break
    description = doc.description if doc is not None and doc.description else placeholder_description("computed", name)
    return Computed(name=name, type=type_name, description=description)


def _computed_ref_argument(annotation: str | None) -> str | None:
    if not annotation:
        return None
    match = _COMPUTED_REF_RE.match(annotation.strip())
    return match.group("inner") if match is not None else annotation.strip()


def _getter_return_type(expression: str) -> str | None:
    """Return the annotated return type of ``(): T => ...`` or ``function (): T { ... }``."""
    text = expression.strip()
    start = _GETTER_RE.match(text)
    if start is None:
        return None
    close = find_closing(text, start.end())
    if close == -1:
        return None
    rest = text[close + 1 :].lstrip()
    if not rest.startswith(":"):
        return None
    type_text = re.split(r"=>|\{", rest[1:], maxsplit=1)[0].strip()
    return type_text or None
