# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the compdoc project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from compdoc.generator.artifact import DEFAULT_DOCS_FILENAME, DEFAULT_TOKENS_FILENAME
from compdoc.model.entities import DEFAULT_COMPONENT_PREFIX
from compdoc.model.tokens import THEMES
from compdoc.tokens.catalog import DEFAULT_THEME_DIRECTORIES, DEFAULT_TOKEN_FILES

# ###############
# Public Interface
# ###############

CONFIG_FILENAME = ".compdoc.yaml"


class WorkspaceConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration of a compdoc project.

    Directory settings are relative to the project root.

    Attributes:
        components_directory: Where component source files are searched.
        output_directory: Where generated documents are written.
        docs_filename: File name of the component documentation JSON.
        component_prefix: Prefix stripped from component names (``Glim``).
        file_extensions: Suffixes of component source files.
        styles_directory: Directory holding one sub-directory per theme.
        tokens_filename: File name of the token document JSON.
        themes: Theme name (base/light/dark) to theme sub-directory.
        token_files: Token category to stylesheet file name.
        strict: Abort generation on the first unreadable component.
    """

    components_directory: str = "src/components"
    output_directory: str = "docs"
    docs_filename: str = DEFAULT_DOCS_FILENAME
    component_prefix: str = DEFAULT_COMPONENT_PREFIX
    file_extensions: list[str] = field(default_factory=lambda: [".vue"])
    styles_directory: str = "src/styles"
    tokens_filename: str = DEFAULT_TOKENS_FILENAME
    themes: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_THEME_DIRECTORIES))
    token_files: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TOKEN_FILES))
    strict: bool = False


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a compdoc configuration file.

    A missing file yields the default configuration.

    Args:
        path: Path to the ``.compdoc.yaml`` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return WorkspaceConfig()
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def render_default_config() -> str:
    """Return the YAML text of the default configuration."""
    data = {f.name.replace("_", "-"): getattr(WorkspaceConfig(), f.name) for f in fields(WorkspaceConfig)}
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


# ################
# Implementation
# ################

_STRING_FIELDS = (
    "components-directory",
    "output-directory",
    "docs-filename",
    "component-prefix",
    "styles-directory",
    "tokens-filename",
)


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse configuration YAML text into a WorkspaceConfig.

    Keys that are absent keep their default value.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return WorkspaceConfig()
    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: config must be a YAML mapping")

    config = WorkspaceConfig()
    for key in _STRING_FIELDS:
        if key in data:
            setattr(config, key.replace("-", "_"), _require_string(data, key, source_label))

    if "file-extensions" in data:
        raw = data["file-extensions"]
        if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
            raise WorkspaceConfigError(f"{source_label}: 'file-extensions' must be a list of strings")
        config.file_extensions = [item if item.startswith(".") else f".{item}" for item in raw]

    if "themes" in data:
        themes = _require_string_mapping(data, "themes", source_label)
        unknown = sorted(set(themes) - set(THEMES))
        if unknown:
            raise WorkspaceConfigError(
                f"{source_label}: unknown theme(s) {', '.join(unknown)}; expected {', '.join(THEMES)}"
            )
        config.themes = {**config.themes, **themes}

    if "token-files" in data:
        config.token_files = _require_string_mapping(data, "token-files", source_label)

    if "strict" in data:
        if not isinstance(data["strict"], bool):
            raise WorkspaceConfigError(f"{source_label}: 'strict' must be true or false")
        config.strict = data["strict"]

    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising WorkspaceConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_string_mapping(mapping: dict[str, object], key: str, source_label: str) -> dict[str, str]:
    value = mapping[key]
    if not isinstance(value, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a mapping of strings")
    return dict(value)
