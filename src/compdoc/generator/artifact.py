# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of the generated JSON documents.

Two documents are produced: the component documentation (a JSON list of
ComponentAPI records, optional fields omitted when absent) and the token
document (``{"variables": {<category>: [TokenRecord, ...]}}``, where a theme
that does not define a variable is an explicit ``null``).
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from compdoc.model.entities import ComponentAPI
from compdoc.model.tokens import TokenDocument

# ###############
# Public Interface
# ###############

DEFAULT_DOCS_FILENAME = "component-docs.json"
DEFAULT_TOKENS_FILENAME = "css-vars.json"


def serialize_component_docs(apis: list[ComponentAPI]) -> str:
    """Serialize component records to an indented JSON list."""
    data = [api.model_dump(by_alias=True, exclude_none=True) for api in apis]
    return json.dumps(data, indent=2, ensure_ascii=False)


def deserialize_component_docs(data: str) -> list[ComponentAPI]:
    """Deserialize component records from JSON produced by :func:`serialize_component_docs`.

    Raises:
        ValueError: If the text is not valid JSON or does not match the schema.
    """
    return _COMPONENT_LIST.validate_json(data)


def write_component_docs(apis: list[ComponentAPI], path: Path) -> None:
    """Write component records to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_component_docs(apis) + "\n", encoding="utf-8")


def read_component_docs(path: Path) -> list[ComponentAPI]:
    """Read and deserialize component records from *path*."""
    return deserialize_component_docs(path.read_text(encoding="utf-8"))


def serialize_token_document(document: TokenDocument) -> str:
    """Serialize a token document; absent theme values stay as ``null``."""
    return json.dumps(document.model_dump(), indent=2, ensure_ascii=False)


def deserialize_token_document(data: str) -> TokenDocument:
    """Deserialize a token document.

    Raises:
        ValueError: If the text is not valid JSON or does not match the schema.
    """
    return TokenDocument.model_validate_json(data)


def write_token_document(document: TokenDocument, path: Path) -> None:
    """Write a token document to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_token_document(document) + "\n", encoding="utf-8")


def read_token_document(path: Path) -> TokenDocument:
    """Read and deserialize a token document from *path*."""
    return deserialize_token_document(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

_COMPONENT_LIST = TypeAdapter(list[ComponentAPI])
