# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grouping resolved variables into the token document and catalog."""

from __future__ import annotations

from collections.abc import Mapping

from compdoc.logging import get_logger
from compdoc.model.tokens import THEMES, ResolvedValue, ThemeValue, ThemeValues, TokenDocument, TokenRecord
from compdoc.tokens.resolver import resolve_value
from compdoc.tokens.tables import VariableTable

# ###############
# Public Interface
# ###############

DEFAULT_THEME_DIRECTORIES: dict[str, str] = {
    "base": "base",
    "light": "light-mode",
    "dark": "dark-mode",
}

DEFAULT_TOKEN_FILES: dict[str, str] = {
    "colors": "color.css",
    "dimensions": "dimension.css",
    "shadows": "shadow.css",
    "strings": "string.css",
    "typography": "typography.css",
}


def build_token_document(tables: Mapping[str, Mapping[str, VariableTable]]) -> TokenDocument:
    """Resolve and group every variable of every category.

    Each category receives one record per distinct variable name found in
    any theme, in discovery order (base, then light, then dark). A theme that
    does not declare the name gets ``None``. Record ids count up from 1 in
    category-then-discovery order.

    References are resolved against the union of all category tables of the
    same theme; the light and dark tables are layered over the base table so
    a theme can refer to variables only the base declares.

    Args:
        tables: ``tables[category][theme]`` as returned by
            :func:`~compdoc.tokens.tables.load_theme_tables`.

    Returns:
        The grouped :class:`TokenDocument`.
    """
    lookups = _theme_lookups(tables)
    variables: dict[str, list[TokenRecord]] = {}
    next_id = 1
    for category, theme_tables in tables.items():
        names: dict[str, None] = {}
        for theme in THEMES:
            names.update(dict.fromkeys(theme_tables.get(theme, {})))

        records: list[TokenRecord] = []
        for name in names:
            values: dict[str, ThemeValue] = {}
            for theme in THEMES:
                raw = theme_tables.get(theme, {}).get(name)
                values[theme] = _theme_value(name, raw, lookups[theme])
            records.append(TokenRecord(id=next_id, name=name, value=ThemeValues(**values)))
            next_id += 1
        variables[category] = records
        _LOGGER.debug("Category %s: %d variables", category, len(records))
    return TokenDocument(variables=variables)


def build_token_catalog(document: TokenDocument) -> dict[str, str]:
    """Map each variable name to its resolved value.

    The base value is used when present, otherwise the light value, then
    the dark value.
    """
    catalog: dict[str, str] = {}
    for record in document.records():
        for theme in THEMES:
            value = record.value.get(theme)
            if value is not None:
                catalog.setdefault(record.name, value.resolved if isinstance(value, ResolvedValue) else value)
                break
    return catalog


# ################
# Implementation
# ################

_LOGGER = get_logger("tokens")


def _theme_lookups(tables: Mapping[str, Mapping[str, VariableTable]]) -> dict[str, VariableTable]:
    merged: dict[str, VariableTable] = {theme: {} for theme in THEMES}
    for theme_tables in tables.values():
        for theme in THEMES:
            merged[theme].update(theme_tables.get(theme, {}))
    base = merged["base"]
    return {theme: merged[theme] if theme == "base" else {**base, **merged[theme]} for theme in THEMES}


def _theme_value(name: str, raw: str | None, lookup: VariableTable) -> ThemeValue:
    if raw is None:
        return None
    resolved = resolve_value(raw, lookup, frozenset({name}))
    if resolved == raw:
        return raw
    return ResolvedValue(raw=raw, resolved=resolved)
