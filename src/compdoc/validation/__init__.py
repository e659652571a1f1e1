# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Completeness checks for component API records."""

from compdoc.validation.checks import ValidationResult, validate_component_api

__all__ = [
    "ValidationResult",
    "validate_component_api",
]
