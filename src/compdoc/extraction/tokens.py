# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Collect the design tokens a component references through ``var(--name)``."""

from __future__ import annotations

import re
from collections.abc import Mapping

from compdoc.model.entities import TokenSet, TokenUsage

# ###############
# Public Interface
# ###############

COLOR_KEYWORDS = ("color", "bg", "border")
DIMENSION_KEYWORDS = (
    "dimension",
    "space",
    "spacing",
    "width",
    "height",
    "size",
    "gap",
    "margin",
    "padding",
    "radius",
)


def classify_token(name: str) -> str:
    """Return ``"colors"``, ``"dimensions"`` or ``"strings"`` for a token name.

    A name containing a color keyword is a color even when it also contains a
    dimension keyword (``--glim-border-width``).
    """
    lowered = name.lower()
    if any(keyword in lowered for keyword in COLOR_KEYWORDS):
        return "colors"
    if any(keyword in lowered for keyword in DIMENSION_KEYWORDS):
        return "dimensions"
    return "strings"


def scan_token_usage(text: str, catalog: Mapping[str, str] | None = None) -> TokenSet:
    """Collect ``var(--name)`` references from component text.

    Args:
        text: The complete component file (template, script and styles).
        catalog: Optional mapping from token name (with the ``--`` prefix)
            to its resolved value.

    Returns:
        A TokenSet with one entry per distinct name in first-occurrence
        order. Without a catalog entry the value is the reference itself.
    """
    catalog = catalog or {}
    tokens = TokenSet()
    seen: set[str] = set()
    for match in _VAR_RE.finditer(text):
        name = match.group("name")
        if name in seen:
            continue
        seen.add(name)
        kind = classify_token(name)
        value = catalog.get(name, f"var({name})")
        description = f"{_KIND_LABELS[kind]} token used in {name}"
        getattr(tokens, kind).append(TokenUsage(name=name, value=value, description=description))
    return tokens


# ################
# Implementation
# ################

_VAR_RE = re.compile(r"var\(\s*(?P<name>--[\w-]+)")
_KIND_LABELS = {"colors": "Color", "dimensions": "Dimension", "strings": "String"}
