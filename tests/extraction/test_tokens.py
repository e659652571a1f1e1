# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for design-token usage scanning."""

import pytest

from compdoc.extraction.tokens import classify_token, scan_token_usage


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("--glim-color-primary", "colors"),
        ("--glim-bg-surface", "colors"),
        ("--glim-border-width", "colors"),
        ("--glim-spacing-md", "dimensions"),
        ("--glim-radius-sm", "dimensions"),
        ("--glim-font-size-lg", "dimensions"),
        ("--glim-font-family", "strings"),
    ],
)
def test_classify_token(name: str, category: str) -> None:
    """Names are classified by keyword; color keywords take precedence."""
    assert classify_token(name) == category


def test_scan_groups_and_dedupes() -> None:
    """Each referenced token appears once, in first-occurrence order."""
    text = """
.button {
  color: var(--glim-color-primary);
  padding: var( --glim-spacing-md ) var(--glim-spacing-lg);
  font-family: var(--glim-font-family, sans-serif);
  border-color: var(--glim-color-primary);
}
"""
    tokens = scan_token_usage(text)
    assert [t.name for t in tokens.colors] == ["--glim-color-primary"]
    assert [t.name for t in tokens.dimensions] == ["--glim-spacing-md", "--glim-spacing-lg"]
    assert [t.name for t in tokens.strings] == ["--glim-font-family"]
    assert tokens.colors[0].value == "var(--glim-color-primary)"
    assert tokens.colors[0].description == "Color token used in --glim-color-primary"
    assert tokens.strings[0].description == "String token used in --glim-font-family"


def test_scan_uses_catalog_values() -> None:
    """Resolved values from the catalog replace the reference text."""
    tokens = scan_token_usage("gap: var(--glim-gap-sm);", {"--glim-gap-sm": "4px"})
    assert tokens.dimensions[0].value == "4px"
    assert tokens.dimensions[0].description == "Dimension token used in --glim-gap-sm"


def test_scan_without_references() -> None:
    """Text without var() references yields an empty set."""
    assert scan_token_usage("color: red;").is_empty()
