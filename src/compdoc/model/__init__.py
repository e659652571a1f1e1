# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for component API records and design tokens."""

from compdoc.model.entities import (
    DEFAULT_COMPONENT_PREFIX,
    ComponentAPI,
    ComponentPatch,
    Computed,
    Event,
    Method,
    MethodParam,
    Param,
    Prop,
    ReturnInfo,
    TokenSet,
    TokenUsage,
    create_component_api,
)
from compdoc.model.tokens import (
    THEMES,
    ResolvedValue,
    ThemeValue,
    ThemeValues,
    TokenDocument,
    TokenRecord,
)
from compdoc.model.types import (
    ANY_TYPE,
    CanonicalType,
    extract_union_values,
    normalize_type,
)

__all__ = [
    # Type system
    "ANY_TYPE",
    "CanonicalType",
    "normalize_type",
    "extract_union_values",
    # Component records
    "DEFAULT_COMPONENT_PREFIX",
    "Param",
    "MethodParam",
    "ReturnInfo",
    "Prop",
    "Event",
    "Method",
    "Computed",
    "TokenUsage",
    "TokenSet",
    "ComponentAPI",
    "ComponentPatch",
    "create_component_api",
    # Token pipeline
    "THEMES",
    "ResolvedValue",
    "ThemeValue",
    "ThemeValues",
    "TokenRecord",
    "TokenDocument",
]
