# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component API records: props, events, methods, computed values and token usage."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from compdoc.model.types import ANY_TYPE

# ###############
# Public Interface
# ###############

DEFAULT_COMPONENT_PREFIX = "Glim"


class Param(BaseModel):
    """A documented event parameter."""

    name: str
    type: str = ANY_TYPE
    description: str = ""


class MethodParam(Param):
    """A documented method parameter; optional parameters are not required."""

    required: bool = True


class ReturnInfo(BaseModel):
    """The documented return value of a method."""

    type: str = ANY_TYPE
    description: str = ""


class Prop(BaseModel):
    """A component input property.

    ``values`` lists the allowed literal choices when the declared type is a
    union of literals; ``default`` is ``None`` when no default is declared.
    """

    name: str
    type: str = ANY_TYPE
    required: bool = False
    default: Any = None
    description: str = ""
    values: list[str] | None = None


class Event(BaseModel):
    """An event the component emits."""

    name: str
    description: str = ""
    params: list[Param] = _Field(default_factory=list)


class Method(BaseModel):
    """A public method exposed by the component."""

    name: str
    description: str = ""
    params: list[MethodParam] = _Field(default_factory=list)
    returns: ReturnInfo | None = None


class Computed(BaseModel):
    """A derived, read-only value of the component."""

    name: str
    type: str = ANY_TYPE
    description: str = ""


class TokenUsage(BaseModel):
    """A design token referenced by a component."""

    name: str
    value: str
    description: str = ""


class TokenSet(BaseModel):
    """Design tokens used by a component, grouped by kind."""

    colors: list[TokenUsage] = _Field(default_factory=list)
    dimensions: list[TokenUsage] = _Field(default_factory=list)
    strings: list[TokenUsage] = _Field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if no token of any kind is recorded."""
        return not (self.colors or self.dimensions or self.strings)


class ComponentAPI(BaseModel):
    """Top-level record describing the public surface of one component."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    prefixed_name: str = _Field(default="", alias="prefixedName")
    description: str = ""
    examples: list[str] = _Field(default_factory=list)
    props: dict[str, Prop] = _Field(default_factory=dict)
    events: dict[str, Event] = _Field(default_factory=dict)
    methods: dict[str, Method] = _Field(default_factory=dict)
    computed: dict[str, Computed] = _Field(default_factory=dict)
    tokens: TokenSet = _Field(default_factory=TokenSet)


class ComponentPatch(BaseModel):
    """A partial ComponentAPI used as the override side of a merge.

    Every field is optional; ``None`` means "not present" and leaves the base
    value untouched.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    prefixed_name: str | None = _Field(default=None, alias="prefixedName")
    description: str | None = None
    examples: list[str] | None = None
    props: dict[str, Prop] | None = None
    events: dict[str, Event] | None = None
    methods: dict[str, Method] | None = None
    computed: dict[str, Computed] | None = None
    tokens: TokenSet | None = None


def create_component_api(
    name: str,
    description: str = "",
    prefix: str = DEFAULT_COMPONENT_PREFIX,
) -> ComponentAPI:
    """Create an empty ComponentAPI for *name*.

    The component prefix is removed to get the base name (``GlimButton``
    becomes ``Button``) and prepended again for ``prefixed_name``.
    """
    base_name = name[len(prefix) :] if prefix and name.startswith(prefix) and len(name) > len(prefix) else name
    prefixed_name = base_name if base_name.startswith(prefix) else f"{prefix}{base_name}"
    return ComponentAPI(name=base_name, prefixed_name=prefixed_name, description=description)
