# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Renderers turning component API records into documentation text."""

from compdoc.render.markdown import render_markdown
from compdoc.render.typedefs import render_type_definitions

__all__ = [
    "render_markdown",
    "render_type_definitions",
]
