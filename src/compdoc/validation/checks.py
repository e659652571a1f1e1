# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Completeness checks for extracted component API records.

A record is complete when every element a reader of the generated
documentation relies on is present: the component's name and description,
a type and description for each prop and computed value, and a name and type
for every event and method parameter.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from compdoc.model.entities import ComponentAPI, Param

# ###############
# Public Interface
# ###############


@dataclass
class ValidationResult:
    """Result of validating one ComponentAPI.

    Attributes:
        errors: Human-readable messages, one per missing element, in check
            order.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if no validation errors were found."""
        return len(self.errors) == 0


def validate_component_api(api: ComponentAPI) -> ValidationResult:
    """Check a ComponentAPI for missing documentation.

    Checks performed, in order:

    1. The component name and description are non-empty.
    2. Every prop has a type and a description.
    3. Every event has a description, and each of its parameters a name and
       a type.
    4. Every method has a description, and each of its parameters a name and
       a type.
    5. Every computed value has a type and a description.

    The record is never modified.

    Args:
        api: The record to check.

    Returns:
        A :class:`ValidationResult`; ``is_valid`` is True when no error was found.
    """
    errors: list[str] = []
    if not api.name:
        errors.append("Component name is required")
    if not api.description:
        errors.append("Component description is required")

    for name, prop in api.props.items():
        if not prop.type:
            errors.append(f'Prop "{name}" is missing type')
        if not prop.description:
            errors.append(f'Prop "{name}" is missing description')

    for name, event in api.events.items():
        if not event.description:
            errors.append(f'Event "{name}" is missing description')
        errors.extend(_check_params("Event", name, event.params))

    for name, method in api.methods.items():
        if not method.description:
            errors.append(f'Method "{name}" is missing description')
        errors.extend(_check_params("Method", name, method.params))

    for name, computed in api.computed.items():
        if not computed.type:
            errors.append(f'Computed property "{name}" is missing type')
        if not computed.description:
            errors.append(f'Computed property "{name}" is missing description')

    return ValidationResult(errors=errors)


# ################
# Implementation
# ################


def _check_params(kind: str, owner: str, params: Sequence[Param]) -> list[str]:
    errors: list[str] = []
    for param in params:
        if not param.name:
            errors.append(f'{kind} "{owner}" has a parameter missing name')
        if not param.type:
            errors.append(f'{kind} "{owner}" has a parameter missing type')
    return errors
