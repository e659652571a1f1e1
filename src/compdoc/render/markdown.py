# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Markdown reference pages for component API records.

One page per component: a title and description followed by a table per
non-empty section (props, events, methods, computed values and design
tokens) and the component's usage examples.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from compdoc.model.entities import ComponentAPI, MethodParam, Param, TokenUsage

# ###############
# Public Interface
# ###############


def render_markdown(api: ComponentAPI) -> str:
    """Render *api* as a Markdown page.

    Sections without entries are omitted. Table cells escape ``|`` so
    union types and literal values cannot break the table layout.

    Args:
        api: The component record to render.

    Returns:
        The page text, ending with a newline.
    """
    lines: list[str] = [f"# {api.prefixed_name or api.name}", ""]
    if api.description:
        lines += [api.description, ""]

    if api.props:
        enumerated = any(prop.values for prop in api.props.values())
        header = ["Name", "Type", "Default", "Required", "Description"]
        if enumerated:
            header.append("Values")
        rows = []
        for prop in api.props.values():
            row = [
                _code(prop.name),
                _code(prop.type),
                _format_default(prop.default),
                "Yes" if prop.required else "No",
                _escape(prop.description),
            ]
            if enumerated:
                row.append(", ".join(_code(value) for value in prop.values or []) or "-")
            rows.append(row)
        lines += _section("Props", header, rows)

    if api.events:
        rows = [
            [_code(event.name), _format_params(event.params), _escape(event.description)]
            for event in api.events.values()
        ]
        lines += _section("Events", ["Name", "Parameters", "Description"], rows)

    if api.methods:
        rows = [
            [
                _code(method.name),
                _format_params(method.params),
                _code(method.returns.type) if method.returns else "-",
                _escape(method.description),
            ]
            for method in api.methods.values()
        ]
        lines += _section("Methods", ["Name", "Parameters", "Returns", "Description"], rows)

    if api.computed:
        rows = [[_code(item.name), _code(item.type), _escape(item.description)] for item in api.computed.values()]
        lines += _section("Computed Properties", ["Name", "Type", "Description"], rows)

    if not api.tokens.is_empty():
        lines += ["## Design Tokens", ""]
        for title, usages in (
            ("Colors", api.tokens.colors),
            ("Dimensions", api.tokens.dimensions),
            ("Strings", api.tokens.strings),
        ):
            if usages:
                lines += _table(f"### {title}", ["Name", "Value", "Description"], _token_rows(usages))

    if api.examples:
        lines += ["## Examples", ""]
        for example in api.examples:
            lines += ["```vue", example.rstrip(), "```", ""]

    return "\n".join(lines).rstrip() + "\n"


# ################
# Implementation
# ################


def _escape(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")


def _code(text: str) -> str:
    return f"`{_escape(text)}`"


def _format_default(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return _code("true" if value else "false")
    if isinstance(value, str):
        return _code(f"'{value}'")
    return _code(str(value))


def _format_params(params: Sequence[Param]) -> str:
    if not params:
        return "-"
    parts = []
    for param in params:
        optional = "?" if isinstance(param, MethodParam) and not param.required else ""
        parts.append(_code(f"{param.name}{optional}: {param.type}"))
    return ", ".join(parts)


def _token_rows(usages: list[TokenUsage]) -> list[list[str]]:
    return [[_code(usage.name), _code(usage.value), _escape(usage.description)] for usage in usages]


def _section(title: str, header: list[str], rows: list[list[str]]) -> list[str]:
    return _table(f"## {title}", header, rows)


def _table(heading: str, header: list[str], rows: list[list[str]]) -> list[str]:
    lines = [heading, "", "| " + " | ".join(header) + " |", "|" + "|".join(" --- " for _ in header) + "|"]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    lines.append("")
    return lines
