# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assemble one ComponentAPI record from the category extractors.

Each category (props, events, methods, computed) is extracted independently
and attached through :func:`merge_component_apis`, the same operation callers
use to overlay hand-written documentation onto extracted records.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from compdoc.extraction.comments import DocComment, doc_comment_before, parse_doc_comment, placeholder_description
from compdoc.extraction.events import extract_events
from compdoc.extraction.matching import Matched
from compdoc.extraction.members import extract_computed, extract_methods
from compdoc.extraction.props import extract_props
from compdoc.extraction.scanner import mask
from compdoc.extraction.sfc import ScriptSource, split_component_source
from compdoc.extraction.tokens import scan_token_usage
from compdoc.logging import get_logger
from compdoc.model.entities import (
    DEFAULT_COMPONENT_PREFIX,
    ComponentAPI,
    ComponentPatch,
    TokenSet,
    create_component_api,
)

# ###############
# Public Interface
# ###############

CATEGORY_EXTRACTORS = (
    ("props", extract_props),
    ("events", extract_events),
    ("methods", extract_methods),
    ("computed", extract_computed),
)


def extract_component(
    source_text: str,
    name: str,
    *,
    prefix: str = DEFAULT_COMPONENT_PREFIX,
    catalog: Mapping[str, str] | None = None,
    single_file_component: bool | None = None,
) -> ComponentAPI:
    """Build the ComponentAPI record for one component source file.

    Args:
        source_text: The complete file content.
        name: Component name, usually the file stem (``GlimButton``).
        prefix: Component prefix removed from *name* for the base name.
        catalog: Resolved design tokens (name to value) used to fill in the
            values of referenced tokens.
        single_file_component: Force or disable ``<script>`` block splitting;
            detected from the text when ``None``.

    Returns:
        The assembled record. Categories without a recognized declaration are
        empty; undocumented members carry placeholder descriptions.
    """
    source = split_component_source(source_text, single_file_component=single_file_component)
    api = create_component_api(name, prefix=prefix)

    doc = component_doc_comment(source)
    description = (doc.tags.get("description") or doc.description or doc.tags.get("component")) if doc else ""
    api = merge_component_apis(
        api,
        ComponentPatch(
            description=description or placeholder_description("component", api.name),
            examples=list(doc.examples) if doc else [],
        ),
    )

    for category, extractor in CATEGORY_EXTRACTORS:
        result = extractor(source)
        if isinstance(result, Matched):
            _LOGGER.debug("%s: %d %s via %s", api.name, len(result.value), category, result.idiom)
            api = merge_component_apis(api, ComponentPatch(**{category: result.value}))

    tokens = scan_token_usage(source.text or source_text, catalog)
    if not tokens.is_empty():
        api = merge_component_apis(api, ComponentPatch(tokens=tokens))
    return api


def component_doc_comment(source: ScriptSource) -> DocComment | None:
    """Return the structured comment describing the component as a whole.

    A block carrying ``@component`` or ``@description`` wins; otherwise the
    block immediately preceding the component declaration (``export default``,
    ``defineComponent(``, ``defineOptions(`` or ``defineProps``) is used, and
    failing that a block opening the script.
    """
    text = source.combined
    for match in _DOC_BLOCK_RE.finditer(text):
        if _COMPONENT_TAG_RE.search(match.group(0)):
            return parse_doc_comment(match.group(0))

    anchor = _ANCHOR_RE.search(mask(text))
    doc = doc_comment_before(text, anchor.start()) if anchor is not None else None
    if doc is None and text.lstrip().startswith("/**"):
        leading = _DOC_BLOCK_RE.match(text.lstrip())
        doc = parse_doc_comment(leading.group(0)) if leading is not None else None
    return doc


def merge_component_apis(
    base: ComponentAPI,
    override: ComponentAPI | ComponentPatch | Mapping[str, Any],
) -> ComponentAPI:
    """Overlay *override* onto *base* and return a new record.

    Scalar fields and lists other than tokens take the override value when it
    is present. Member mappings are merged key-wise with the override winning.
    Token lists are concatenated. Neither argument is modified, and merging an
    empty override returns a record equal to *base*.

    Args:
        base: The record to start from.
        override: A complete record, a :class:`ComponentPatch`, or a mapping
            validated as one (``prefixedName`` and ``prefixed_name`` both work).
    """
    if isinstance(override, ComponentAPI):
        patch = ComponentPatch.model_validate(override.model_dump())
    elif isinstance(override, ComponentPatch):
        patch = override
    else:
        patch = ComponentPatch.model_validate(dict(override))

    merged = base.model_copy(deep=True)
    for field in _SCALAR_FIELDS:
        value = getattr(patch, field)
        if value is not None:
            setattr(merged, field, value if field != "examples" else list(value))
    for field in _MAPPING_FIELDS:
        value = getattr(patch, field)
        if value:
            setattr(merged, field, {**getattr(merged, field), **{k: v.model_copy(deep=True) for k, v in value.items()}})
    if patch.tokens is not None:
        merged.tokens = TokenSet(
            colors=[*merged.tokens.colors, *patch.tokens.colors],
            dimensions=[*merged.tokens.dimensions, *patch.tokens.dimensions],
            strings=[*merged.tokens.strings, *patch.tokens.strings],
        )
    return merged


# ################
# Implementation
# ################

_LOGGER = get_logger("extraction")

_SCALAR_FIELDS = ("name", "prefixed_name", "description", "examples")
_MAPPING_FIELDS = ("props", "events", "methods", "computed")

_DOC_BLOCK_RE = re.compile(r"/\*\*(?:(?!\*/).)*\*/", re.DOTALL)
_COMPONENT_TAG_RE = re.compile(r"@(?:component|description)\b")
_ANCHOR_RE = re.compile(
    r"(?:(?:export\s+)?(?:const|let|var)\s+[\w$]+\s*=\s*)?(?:withDefaults\s*\(\s*)?"
    r"(?:export\s+default\b|defineComponent\s*\(|defineOptions\s*\(|defineProps\b)"
)
