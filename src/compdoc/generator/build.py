# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Batch generation of component documentation and token data.

Component files are processed one at a time and independently. In tolerant
mode (the default) a file that cannot be read is logged, recorded in the
:class:`GenerationReport` and skipped; in strict mode the first such failure
aborts the run. Failing to write an output document always aborts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from compdoc.extraction.assembler import extract_component
from compdoc.extraction.sfc import split_component_source
from compdoc.generator.artifact import (
    DEFAULT_DOCS_FILENAME,
    write_component_docs,
    write_token_document,
)
from compdoc.logging import get_logger
from compdoc.model.entities import DEFAULT_COMPONENT_PREFIX, ComponentAPI
from compdoc.model.tokens import TokenDocument
from compdoc.render.markdown import render_markdown
from compdoc.render.typedefs import render_type_definitions
from compdoc.tokens.catalog import DEFAULT_THEME_DIRECTORIES, DEFAULT_TOKEN_FILES, build_token_document
from compdoc.tokens.tables import load_theme_tables
from compdoc.validation.checks import ValidationResult, validate_component_api

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Raised when generation cannot continue.

    Covers unreadable component files in strict mode, a missing components
    directory, and output documents that cannot be written.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass
class GenerationReport:
    """Outcome of one documentation run.

    Attributes:
        components: Records of every processed component, in file order.
        validation: Validation result per component source file.
        failures: Error message per source file that could not be processed.
        skipped: Files without any script content.
        written: Every file written by the run.
    """

    components: list[ComponentAPI] = field(default_factory=list)
    validation: dict[Path, ValidationResult] = field(default_factory=dict)
    failures: dict[Path, str] = field(default_factory=dict)
    skipped: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)

    @property
    def invalid_components(self) -> list[Path]:
        """Return the source files of components that failed validation."""
        return [path for path, result in self.validation.items() if not result.is_valid]


def find_component_files(directory: Path, extensions: Iterable[str] = (".vue",)) -> list[Path]:
    """Return every component source file below *directory*, sorted by path.

    Raises:
        GenerationError: If *directory* does not exist.
    """
    if not directory.is_dir():
        raise GenerationError(f"Components directory not found: {directory}")
    suffixes = tuple(extensions)
    return sorted(p for p in directory.rglob("*") if p.is_file() and p.name.endswith(suffixes))


def process_component_file(
    path: Path,
    *,
    prefix: str = DEFAULT_COMPONENT_PREFIX,
    catalog: Mapping[str, str] | None = None,
) -> ComponentAPI | None:
    """Extract the record of the component stored at *path*.

    The component name is the file name without its suffix.

    Returns:
        The record, or ``None`` when the file has no script content.

    Raises:
        GenerationError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GenerationError(f"Cannot read component file '{path}': {exc}") from exc

    if not split_component_source(text).has_script:
        return None
    name = path.name.split(".", 1)[0]
    return extract_component(text, name, prefix=prefix, catalog=catalog)


def generate_component_docs(
    components_dir: Path,
    output_dir: Path,
    *,
    filename: str = DEFAULT_DOCS_FILENAME,
    extensions: Iterable[str] = (".vue",),
    prefix: str = DEFAULT_COMPONENT_PREFIX,
    catalog: Mapping[str, str] | None = None,
    strict: bool = False,
    markdown_dir: Path | None = None,
    typedefs_dir: Path | None = None,
) -> GenerationReport:
    """Extract, validate and write the documentation of every component.

    Args:
        components_dir: Directory searched recursively for component files.
        output_dir: Directory receiving the JSON document.
        filename: Name of the JSON document.
        extensions: Suffixes of component source files.
        prefix: Component prefix stripped from names.
        catalog: Resolved design tokens used for token values.
        strict: Abort on the first unreadable file instead of skipping it.
        markdown_dir: When set, write ``<Name>.md`` per component there.
        typedefs_dir: When set, write ``<Name>.d.ts`` per component there.
            Pages are named after the component; when two components share
            a name, the later one is named after its source file instead.

    Returns:
        A :class:`GenerationReport` describing the run.

    Raises:
        GenerationError: On a missing components directory, on an unreadable
            file or a page name clash in strict mode, or when an output file
            cannot be written.
    """
    report = GenerationReport()
    sources: list[Path] = []
    for path in find_component_files(components_dir, extensions):
        try:
            api = process_component_file(path, prefix=prefix, catalog=catalog)
        except GenerationError as exc:
            if strict:
                raise
            _LOGGER.warning("%s", exc)
            report.failures[path] = str(exc)
            continue
        if api is None:
            _LOGGER.debug("Skipping %s: no script block", path)
            report.skipped.append(path)
            continue

        result = validate_component_api(api)
        for error in result.errors:
            _LOGGER.warning("%s: %s", api.name, error)
        report.validation[path] = result
        report.components.append(api)
        sources.append(path)

    pages = _page_names(sources, report.components, strict) if markdown_dir or typedefs_dir else {}
    docs_path = output_dir / filename
    _write(lambda: write_component_docs(report.components, docs_path), docs_path)
    report.written.append(docs_path)

    for stem, api in pages.items():
        if markdown_dir is not None:
            report.written.append(_write_text(markdown_dir / f"{stem}.md", render_markdown(api)))
        if typedefs_dir is not None:
            report.written.append(_write_text(typedefs_dir / f"{stem}.d.ts", render_type_definitions(api)))

    _LOGGER.info("Documented %d components into %s", len(report.components), docs_path)
    return report


def generate_token_data(
    styles_dir: Path,
    output_path: Path | None = None,
    *,
    themes: Mapping[str, str] = DEFAULT_THEME_DIRECTORIES,
    token_files: Mapping[str, str] = DEFAULT_TOKEN_FILES,
) -> TokenDocument:
    """Build the token document from the theme tables below *styles_dir*.

    Missing stylesheet files count as empty tables.

    Args:
        styles_dir: Directory holding one sub-directory per theme.
        output_path: When set, the document is written there.
        themes: Theme name to sub-directory name.
        token_files: Token category to stylesheet file name.

    Returns:
        The resolved and grouped :class:`TokenDocument`.

    Raises:
        GenerationError: If a stylesheet exists but cannot be read, or the
            document cannot be written.
    """
    try:
        tables = load_theme_tables(styles_dir, themes, token_files)
    except OSError as exc:
        raise GenerationError(f"Cannot read variable table: {exc}") from exc

    document = build_token_document(tables)
    if output_path is not None:
        _write(lambda: write_token_document(document, output_path), output_path)
        _LOGGER.info("Wrote %d variables to %s", len(document.records()), output_path)
    return document


# ################
# Implementation
# ################

_LOGGER = get_logger("generator")


def _write(writer: Callable[[], None], path: Path) -> None:
    """Run *writer*, converting an OS error into a GenerationError."""
    try:
        writer()
    except OSError as exc:
        raise GenerationError(f"Cannot write '{path}': {exc}") from exc


def _write_text(path: Path, text: str) -> Path:
    def writer() -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    _write(writer, path)
    return path


def _page_names(sources: list[Path], apis: list[ComponentAPI], strict: bool) -> dict[str, ComponentAPI]:
    """Assign each component the file stem of its Markdown and type-definition pages."""
    pages: dict[str, ComponentAPI] = {}
    for path, api in zip(sources, apis):
        if api.name not in pages:
            pages[api.name] = api
            continue
        message = f"Component name '{api.name}' of '{path}' is already taken"
        if strict:
            raise GenerationError(message)
        stem = path.name.split(".", 1)[0]
        if stem in pages:
            _LOGGER.warning("%s; no pages written for it", message)
            continue
        _LOGGER.warning("%s; pages are named '%s' instead", message, stem)
        pages[stem] = api
    return pages
