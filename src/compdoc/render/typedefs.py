# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-definition snippets for component props and events."""

from __future__ import annotations

import re

from compdoc.model.entities import ComponentAPI, Prop

# ###############
# Public Interface
# ###############


def render_type_definitions(api: ComponentAPI) -> str:
    """Render ``<Name>Props`` and ``<Name>Events`` interfaces for *api*.

    Optional props are marked with ``?``; enumerated props are typed as the
    union of their literal values. An interface without members is omitted,
    so a component without props or events renders as an empty string.
    """
    blocks: list[str] = []
    if api.props:
        lines = [f"interface {api.name}Props {{"]
        for prop in api.props.values():
            optional = "" if prop.required else "?"
            lines.append(f"  {_member_name(prop.name)}{optional}: {_prop_type(prop)};")
        lines.append("}")
        blocks.append("\n".join(lines))

    if api.events:
        lines = [f"interface {api.name}Events {{"]
        for event in api.events.values():
            params = ", ".join(f"{param.name}: {param.type}" for param in event.params)
            lines.append(f"  {_member_name(event.name)}: ({params}) => void;")
        lines.append("}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks) + "\n" if blocks else ""


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")
_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_TYPE_SYNTAX_RE = re.compile(r"[<>\[\]{}()]|=>")
_TYPE_KEYWORDS = frozenset(
    {"string", "number", "boolean", "bigint", "symbol", "object", "any", "unknown", "never", "void", "true", "false"}
)


def _member_name(name: str) -> str:
    return name if _IDENTIFIER_RE.fullmatch(name) else f"'{name}'"


def _prop_type(prop: Prop) -> str:
    if prop.values:
        return " | ".join(_union_member(value) for value in prop.values)
    return prop.type


def _union_member(value: str) -> str:
    """Quote *value* unless it is a number, a keyword type or a type expression."""
    if value in _TYPE_KEYWORDS or _NUMBER_RE.fullmatch(value) or _TYPE_SYNTAX_RE.search(value):
        return value
    return f"'{value}'"
