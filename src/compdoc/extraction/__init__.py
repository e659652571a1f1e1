# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of component APIs from component source text."""

from compdoc.extraction.assembler import component_doc_comment, extract_component, merge_component_apis
from compdoc.extraction.comments import DocComment, DocParam, DocReturn, find_doc_comment, parse_doc_comment
from compdoc.extraction.events import extract_events
from compdoc.extraction.matching import Matched, MatchResult, NoMatch, first_match
from compdoc.extraction.members import extract_computed, extract_methods
from compdoc.extraction.props import extract_props
from compdoc.extraction.sfc import ScriptSource, split_component_source
from compdoc.extraction.tokens import classify_token, scan_token_usage

__all__ = [
    # Assembly
    "extract_component",
    "merge_component_apis",
    "component_doc_comment",
    # Structured comments
    "DocComment",
    "DocParam",
    "DocReturn",
    "parse_doc_comment",
    "find_doc_comment",
    # Pattern extractors
    "Matched",
    "NoMatch",
    "MatchResult",
    "first_match",
    "extract_props",
    "extract_events",
    "extract_methods",
    "extract_computed",
    # Sources and tokens
    "ScriptSource",
    "split_component_source",
    "classify_token",
    "scan_token_usage",
]
