# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading theme-scoped variable tables from stylesheet files.

A table maps custom property names (``--glim-color-primary``) to the raw
value text declared for them. Tables are read per token category file and
per theme directory.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

from compdoc.logging import get_logger

# ###############
# Public Interface
# ###############

VariableTable = dict[str, str]


def parse_variable_table(text: str) -> VariableTable:
    """Parse every ``--name: value;`` declaration of a stylesheet.

    Comments are ignored. When a name is declared more than once the last
    value wins while the name keeps the position of its first declaration.
    """
    table: VariableTable = {}
    for match in _DECLARATION_RE.finditer(_COMMENT_RE.sub("", text)):
        table[f"--{match.group('name').strip()}"] = match.group("value").strip()
    return table


def read_variable_table(path: Path) -> VariableTable:
    """Read and parse the variable table stored at *path*.

    A missing file is an empty table.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _LOGGER.debug("No variable table at %s", path)
        return {}
    return parse_variable_table(text)


def load_theme_tables(
    styles_dir: Path,
    themes: Mapping[str, str],
    categories: Mapping[str, str],
) -> dict[str, dict[str, VariableTable]]:
    """Read the table of every (category, theme) pair.

    Args:
        styles_dir: Directory holding one sub-directory per theme.
        themes: Theme name (``base``, ``light``, ``dark``) to sub-directory name.
        categories: Token category (``colors``, ...) to stylesheet file name.

    Returns:
        ``tables[category][theme]``, in the iteration order of *categories*
        and *themes*.
    """
    return {
        category: {theme: read_variable_table(styles_dir / directory / filename) for theme, directory in themes.items()}
        for category, filename in categories.items()
    }


# ################
# Implementation
# ################

_LOGGER = get_logger("tokens")

_DECLARATION_RE = re.compile(r"--(?P<name>[^:;{}\s][^:;{}]*):\s*(?P<value>[^;]+);")
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
