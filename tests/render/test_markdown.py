# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Markdown renderer."""

from compdoc.model.entities import (
    ComponentAPI,
    Computed,
    Event,
    Method,
    MethodParam,
    Param,
    Prop,
    ReturnInfo,
    TokenSet,
    TokenUsage,
    create_component_api,
)
from compdoc.render.markdown import render_markdown

# ###############
# Helpers
# ###############


def _api(**fields: object) -> ComponentAPI:
    api = create_component_api("GlimButton", description="A clickable button.")
    return api.model_copy(update=fields)


# ###############
# Normal Cases
# ###############


def test_minimal_page() -> None:
    """A record without members renders a title and its description only."""
    assert render_markdown(_api()) == "# GlimButton\n\nA clickable button.\n"


def test_props_table() -> None:
    """Props render with type, default, required flag and values."""
    page = render_markdown(
        _api(
            props={
                "size": Prop(
                    name="size",
                    type="any",
                    default="medium",
                    description="Visual size",
                    values=["small", "medium"],
                ),
                "disabled": Prop(name="disabled", type="Boolean", default=False, description="Disables it"),
                "label": Prop(name="label", type="String", required=True, description="Text"),
            }
        )
    )
    assert "## Props" in page
    assert "| Name | Type | Default | Required | Description | Values |" in page
    assert "| `size` | `any` | `'medium'` | No | Visual size | `small`, `medium` |" in page
    assert "| `disabled` | `Boolean` | `false` | No | Disables it | - |" in page
    assert "| `label` | `String` | - | Yes | Text | - |" in page


def test_props_table_without_values_column() -> None:
    """The values column only appears when a prop is enumerated."""
    page = render_markdown(_api(props={"count": Prop(name="count", type="Number", default=3, description="Count")}))
    assert "| Name | Type | Default | Required | Description |\n" in page
    assert "| `count` | `Number` | `3` | No | Count |" in page


def test_events_methods_and_computed_tables() -> None:
    """Each member category gets its own table."""
    page = render_markdown(
        _api(
            events={"close": Event(name="close", description="Closed", params=[Param(name="reason", type="String")])},
            methods={
                "focus": Method(
                    name="focus",
                    description="Focuses",
                    params=[MethodParam(name="preventScroll", type="Boolean", required=False)],
                    returns=ReturnInfo(type="Boolean"),
                ),
                "reset": Method(name="reset", description="Resets"),
            },
            computed={"label": Computed(name="label", type="String", description="Shown text")},
        )
    )
    assert "## Events" in page
    assert "| `close` | `reason: String` | Closed |" in page
    assert "## Methods" in page
    assert "| `focus` | `preventScroll?: Boolean` | `Boolean` | Focuses |" in page
    assert "| `reset` | - | - | Resets |" in page
    assert "## Computed Properties" in page
    assert "| `label` | `String` | Shown text |" in page
    assert "## Props" not in page


def test_pipes_are_escaped() -> None:
    """Pipes in cell text do not break the table."""
    page = render_markdown(_api(props={"mode": Prop(name="mode", type="any", description="a | b")}))
    assert "a \\| b" in page


def test_tokens_and_examples() -> None:
    """Token tables are grouped by category; examples are fenced."""
    tokens = TokenSet(
        colors=[TokenUsage(name="--glim-color-primary", value="#0055ff", description="Color token")],
        strings=[TokenUsage(name="--glim-font", value="Inter", description="String token")],
    )
    page = render_markdown(_api(tokens=tokens, examples=["<GlimButton>Save</GlimButton>"]))
    assert "## Design Tokens" in page
    assert "### Colors" in page
    assert "| `--glim-color-primary` | `#0055ff` | Color token |" in page
    assert "### Dimensions" not in page
    assert "### Strings" in page
    assert "## Examples\n\n```vue\n<GlimButton>Save</GlimButton>\n```\n" in page
    assert page.endswith("```\n")
