# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the event recognizers."""

from compdoc.extraction.comments import parse_doc_comment
from compdoc.extraction.entries import SignatureParam
from compdoc.extraction.events import extract_events, params_from_signature
from compdoc.extraction.matching import Matched, NoMatch
from compdoc.extraction.sfc import ScriptSource, split_component_source
from compdoc.model.entities import Event

# ###############
# Helpers
# ###############


def _source(script: str) -> ScriptSource:
    return split_component_source(script, single_file_component=False)


def _events(script: str) -> dict[str, Event]:
    result = extract_events(_source(script))
    assert isinstance(result, Matched), f"Expected events to be recognized in {script!r}"
    return result.value


# ###############
# Interface-based
# ###############


def test_call_signature_members() -> None:
    """Call signatures name the event in their first parameter."""
    script = """
interface Emits {
  /**
   * Fired on click
   * @param event - The native event
   */
  (e: 'click', event: MouseEvent): void
  /** Fired when focus changes */
  (e: 'focus-change', focused: boolean): void
}
const emit = defineEmits<Emits>()
"""
    result = extract_events(_source(script))
    assert isinstance(result, Matched)
    assert result.idiom == "interface"
    click, focus = result.value["click"], result.value["focus-change"]

    assert click.description == "Fired on click"
    assert [(p.name, p.type, p.description) for p in click.params] == [("event", "any", "The native event")]
    assert focus.description == "Fired when focus changes"
    assert [(p.name, p.type) for p in focus.params] == [("focused", "Boolean")]


def test_named_tuple_members() -> None:
    """Inline named-tuple members map labels to parameters."""
    script = "const emit = defineEmits<{ 'update:open': [value: boolean]; close: [] }>()"
    events = _events(script)
    assert list(events) == ["update:open", "close"]
    assert [(p.name, p.type) for p in events["update:open"].params] == [("value", "Boolean")]
    assert events["close"].params == []
    assert events["close"].description == "The close event"


def test_unlabeled_tuple_elements() -> None:
    """Unlabeled tuple elements get positional names."""
    events = _events("defineEmits<{ select: [string, number] }>()")
    assert [(p.name, p.type) for p in events["select"].params] == [("arg0", "String"), ("arg1", "Number")]


def test_emits_interface_without_type_argument() -> None:
    """An ``Emits`` interface is used even when defineEmits names no type."""
    script = "interface Emits { (e: 'close'): void }\nconst emit = defineEmits()"
    assert list(_events(script)) == ["close"]


# ###############
# Call-with-object
# ###############


def test_array_of_names() -> None:
    """defineEmits([...]) lists event names."""
    result = extract_events(_source("const emit = defineEmits(['update:modelValue', 'close'])"))
    assert isinstance(result, Matched)
    assert result.idiom == "call-object"
    assert list(result.value) == ["update:modelValue", "close"]
    assert result.value["close"].description == "The close event"


def test_validator_object_with_docs() -> None:
    """Validator functions provide parameter names; comments provide docs."""
    script = """
defineEmits({
  /**
   * Value submitted
   * @param {string} value - The submitted text
   */
  submit: (value) => typeof value === 'string',
  reset: null,
})
"""
    events = _events(script)
    submit = events["submit"]
    assert submit.description == "Value submitted"
    assert [(p.name, p.type, p.description) for p in submit.params] == [("value", "String", "The submitted text")]
    assert events["reset"].params == []


# ###############
# Legacy
# ###############


def test_legacy_emits_key() -> None:
    """The options-API ``emits`` key is the last resort."""
    script = "export default {\n  emits: ['close', 'open'],\n}"
    result = extract_events(_source(script))
    assert isinstance(result, Matched)
    assert result.idiom == "legacy"
    assert list(result.value) == ["close", "open"]


def test_no_events() -> None:
    """A script without event declarations is no match."""
    assert isinstance(extract_events(_source("const a = 1")), NoMatch)


# ###############
# params_from_signature
# ###############


def test_documented_params_are_appended() -> None:
    """Parameters documented but missing from the signature are added."""
    doc = parse_doc_comment("/**\n * @param {number} index - Position\n * @param {string} label - Text\n */")
    params = params_from_signature([SignatureParam(name="index")], doc)
    assert [(p.name, p.type, p.description) for p in params] == [
        ("index", "Number", "Position"),
        ("label", "String", "Text"),
    ]


def test_signature_type_wins_over_doc_type() -> None:
    """An annotated parameter keeps its own type."""
    doc = parse_doc_comment("/** @param {string} index */")
    [param] = params_from_signature([SignatureParam(name="index", type="number")], doc)
    assert param.type == "Number"
