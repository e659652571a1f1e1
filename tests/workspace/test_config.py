# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the workspace configuration module."""

from pathlib import Path

import pytest
import yaml

from compdoc.workspace import (
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)


# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / ".compdoc.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    """Without a config file every setting has its default."""
    config = load_workspace_config(tmp_path / ".compdoc.yaml")
    assert config == WorkspaceConfig()
    assert config.components_directory == "src/components"
    assert config.file_extensions == [".vue"]
    assert config.themes == {"base": "base", "light": "light-mode", "dark": "dark-mode"}


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """An empty file is the default configuration."""
    assert load_workspace_config(_write_config(tmp_path, "")) == WorkspaceConfig()


def test_full_config(tmp_path: Path) -> None:
    """Every key is read into the matching field."""
    content = """\
components-directory: lib/components
output-directory: build/docs
docs-filename: api.json
component-prefix: Acme
file-extensions: [vue, .tsx]
styles-directory: lib/styles
tokens-filename: tokens.json
themes:
  dark: night
token-files:
  colors: colors.css
strict: true
"""
    config = load_workspace_config(_write_config(tmp_path, content))

    assert config.components_directory == "lib/components"
    assert config.output_directory == "build/docs"
    assert config.docs_filename == "api.json"
    assert config.component_prefix == "Acme"
    assert config.file_extensions == [".vue", ".tsx"]
    assert config.styles_directory == "lib/styles"
    assert config.tokens_filename == "tokens.json"
    assert config.themes == {"base": "base", "light": "light-mode", "dark": "night"}
    assert config.token_files == {"colors": "colors.css"}
    assert config.strict is True


def test_default_config_round_trips(tmp_path: Path) -> None:
    """The rendered default configuration parses back to the defaults."""
    text = render_default_config()
    assert "components-directory: src/components" in text
    assert load_workspace_config(_write_config(tmp_path, text)) == WorkspaceConfig()


# ###############
# Error Cases
# ###############


@pytest.mark.parametrize(
    ("content", "fragment"),
    [
        ("components-directory: [a, b]\n", "'components-directory' must be a string"),
        ("file-extensions: .vue\n", "'file-extensions' must be a list of strings"),
        ("themes:\n  sepia: sepia\n", "unknown theme(s) sepia"),
        ("token-files: [a]\n", "'token-files' must be a mapping of strings"),
        ("strict: yes please\n", "'strict' must be true or false"),
        ("- a\n- b\n", "config must be a YAML mapping"),
    ],
)
def test_invalid_fields(tmp_path: Path, content: str, fragment: str) -> None:
    """Fields with the wrong shape are rejected with a pointed message."""
    with pytest.raises(WorkspaceConfigError) as exc_info:
        load_workspace_config(_write_config(tmp_path, content))
    assert fragment in str(exc_info.value)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Unparseable YAML is reported as a config error."""
    with pytest.raises(WorkspaceConfigError, match="Invalid YAML"):
        load_workspace_config(_write_config(tmp_path, "key: [unclosed\n"))


def test_unreadable_path(tmp_path: Path) -> None:
    """A path that cannot be read is a config error."""
    with pytest.raises(WorkspaceConfigError, match="Cannot read"):
        load_workspace_config(tmp_path)


def test_rendered_default_is_yaml_mapping() -> None:
    """The default configuration is a plain YAML mapping with hyphenated keys."""
    data = yaml.safe_load(render_default_config())
    assert data["strict"] is False
    assert data["token-files"]["colors"] == "color.css"
