# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Records produced by the design-token pipeline."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

THEMES: tuple[str, ...] = ("base", "light", "dark")


class ResolvedValue(BaseModel):
    """A token value whose references were substituted during resolution."""

    raw: str
    resolved: str


# A per-theme value: the literal text when resolution left it unchanged, the
# raw/resolved pair when it did not, or None when the theme does not define it.
ThemeValue = str | ResolvedValue | None


class ThemeValues(BaseModel):
    """The value of one token in each theme."""

    base: ThemeValue = None
    light: ThemeValue = None
    dark: ThemeValue = None

    def get(self, theme: str) -> ThemeValue:
        """Return the value for *theme* (one of :data:`THEMES`)."""
        return getattr(self, theme)


class TokenRecord(BaseModel):
    """One design variable of a category, with its value in every theme."""

    id: int
    name: str
    value: ThemeValues = _Field(default_factory=ThemeValues)


class TokenDocument(BaseModel):
    """All token records of one generation run, grouped by category."""

    variables: dict[str, list[TokenRecord]] = _Field(default_factory=dict)

    def records(self) -> list[TokenRecord]:
        """Return every record in category-then-discovery order."""
        return [record for category in self.variables.values() for record in category]
