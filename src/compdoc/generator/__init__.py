# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation pipeline: component documentation and token data documents."""

from compdoc.generator.artifact import (
    DEFAULT_DOCS_FILENAME,
    DEFAULT_TOKENS_FILENAME,
    deserialize_component_docs,
    deserialize_token_document,
    read_component_docs,
    read_token_document,
    serialize_component_docs,
    serialize_token_document,
    write_component_docs,
    write_token_document,
)
from compdoc.generator.build import (
    GenerationError,
    GenerationReport,
    find_component_files,
    generate_component_docs,
    generate_token_data,
    process_component_file,
)

__all__ = [
    "DEFAULT_DOCS_FILENAME",
    "DEFAULT_TOKENS_FILENAME",
    "serialize_component_docs",
    "deserialize_component_docs",
    "write_component_docs",
    "read_component_docs",
    "serialize_token_document",
    "deserialize_token_document",
    "write_token_document",
    "read_token_document",
    "GenerationError",
    "GenerationReport",
    "find_component_files",
    "process_component_file",
    "generate_component_docs",
    "generate_token_data",
]
