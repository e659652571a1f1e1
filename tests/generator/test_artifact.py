# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for JSON serialization of component and token documents."""

import json
from pathlib import Path

import pytest

from compdoc.generator.artifact import (
    deserialize_component_docs,
    read_component_docs,
    read_token_document,
    serialize_component_docs,
    serialize_token_document,
    write_component_docs,
    write_token_document,
)
from compdoc.model.entities import Event, Method, MethodParam, Param, Prop, create_component_api
from compdoc.model.tokens import ResolvedValue, ThemeValues, TokenDocument, TokenRecord

# ###############
# Helpers
# ###############


def _button():
    api = create_component_api("GlimButton", description="A button")
    return api.model_copy(
        update={
            "props": {"size": Prop(name="size", values=["small", "large"], default="small", description="Size")},
            "events": {"close": Event(name="close", description="Closed", params=[Param(name="r", type="String")])},
            "methods": {
                "focus": Method(
                    name="focus",
                    description="Focuses",
                    params=[MethodParam(name="x", type="Boolean", required=False)],
                )
            },
        }
    )


# ###############
# Component documents
# ###############


def test_component_json_uses_alias_and_drops_nulls() -> None:
    """prefixedName is the JSON key; unset optional fields are omitted."""
    data = json.loads(serialize_component_docs([_button()]))
    [entry] = data
    assert entry["prefixedName"] == "GlimButton"
    assert "prefixed_name" not in entry
    assert "returns" not in entry["methods"]["focus"]
    assert entry["props"]["size"]["values"] == ["small", "large"]
    assert entry["methods"]["focus"]["params"][0]["required"] is False


def test_component_documents_round_trip(tmp_path: Path) -> None:
    """Written documents read back as equal records."""
    path = tmp_path / "nested" / "component-docs.json"
    write_component_docs([_button()], path)
    assert path.read_text(encoding="utf-8").endswith("]\n")
    assert read_component_docs(path) == [_button()]


def test_invalid_component_json_raises() -> None:
    """Malformed input is rejected."""
    with pytest.raises(ValueError):
        deserialize_component_docs('[{"description": "no name"}]')


# ###############
# Token documents
# ###############


def test_token_json_keeps_absent_values() -> None:
    """Absent theme values are serialized as null."""
    document = TokenDocument(
        variables={
            "colors": [
                TokenRecord(
                    id=1,
                    name="--glim-color-primary",
                    value=ThemeValues(base=ResolvedValue(raw="var(--blue)", resolved="#00f"), dark="#fff"),
                )
            ]
        }
    )
    data = json.loads(serialize_token_document(document))
    value = data["variables"]["colors"][0]["value"]
    assert value == {"base": {"raw": "var(--blue)", "resolved": "#00f"}, "light": None, "dark": "#fff"}


def test_token_document_round_trip(tmp_path: Path) -> None:
    """A token document reads back with resolved pairs intact."""
    document = TokenDocument(
        variables={
            "dimensions": [
                TokenRecord(id=1, name="--a", value=ThemeValues(base=ResolvedValue(raw="var(--b)", resolved="4px"))),
                TokenRecord(id=2, name="--b", value=ThemeValues(base="4px")),
            ]
        }
    )
    path = tmp_path / "css-vars.json"
    write_token_document(document, path)
    loaded = read_token_document(path)
    assert loaded == document
    assert isinstance(loaded.variables["dimensions"][0].value.base, ResolvedValue)
