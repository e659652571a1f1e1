# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Design-token tables, reference resolution and grouping by theme."""

from compdoc.tokens.catalog import (
    DEFAULT_THEME_DIRECTORIES,
    DEFAULT_TOKEN_FILES,
    build_token_catalog,
    build_token_document,
)
from compdoc.tokens.resolver import resolve_value, resolve_variable
from compdoc.tokens.tables import VariableTable, load_theme_tables, parse_variable_table, read_variable_table

__all__ = [
    "DEFAULT_THEME_DIRECTORIES",
    "DEFAULT_TOKEN_FILES",
    "VariableTable",
    "build_token_catalog",
    "build_token_document",
    "load_theme_tables",
    "parse_variable_table",
    "read_variable_table",
    "resolve_value",
    "resolve_variable",
]
