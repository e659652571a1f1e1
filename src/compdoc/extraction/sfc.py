# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Split single-file component text into its script and style blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ScriptSource:
    """The parts of a component file the extractors look at.

    Attributes:
        script: Content of the classic ``<script>`` block (options API).
        setup: Content of the ``<script setup>`` block (composition API).
        style: Concatenated content of all ``<style>`` blocks.
        text: The complete original file text.
    """

    script: str = ""
    setup: str = ""
    style: str = ""
    text: str = ""

    @property
    def combined(self) -> str:
        """Both script blocks joined, classic block first."""
        return f"{self.script}\n{self.setup}" if self.script and self.setup else self.script or self.setup

    @property
    def has_script(self) -> bool:
        """Return True if the source carries any script content."""
        return bool(self.script.strip() or self.setup.strip())


def split_component_source(text: str, *, single_file_component: bool | None = None) -> ScriptSource:
    """Split component file text into a :class:`ScriptSource`.

    Args:
        text: The full file content.
        single_file_component: Whether *text* uses ``<script>`` / ``<style>``
            blocks. When ``None`` the format is detected from the presence of
            a ``<script`` or ``<template`` tag. A plain script module is
            treated as a single setup block.

    Returns:
        The extracted blocks.
    """
    if single_file_component is None:
        single_file_component = bool(_SFC_MARKER_RE.search(text))
    if not single_file_component:
        return ScriptSource(setup=text, text=text)

    script_parts: list[str] = []
    setup_parts: list[str] = []
    for match in _SCRIPT_RE.finditer(text):
        attrs = match.group("attrs") or ""
        target = setup_parts if _SETUP_ATTR_RE.search(attrs) else script_parts
        target.append(match.group("body"))
    style = "\n".join(m.group("body") for m in _STYLE_RE.finditer(text))
    return ScriptSource(script="\n".join(script_parts), setup="\n".join(setup_parts), style=style, text=text)


# ################
# Implementation
# ################

_SFC_MARKER_RE = re.compile(r"<(script|template)[\s>]", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"<script(?P<attrs>\s[^>]*)?>(?P<body>.*?)</script\s*>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style(?:\s[^>]*)?>(?P<body>.*?)</style\s*>", re.IGNORECASE | re.DOTALL)
_SETUP_ATTR_RE = re.compile(r"(?<![\w-])setup(?![\w-])")
