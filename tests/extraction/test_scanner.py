# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the bracket-aware script scanner."""

from compdoc.extraction.scanner import (
    find_calls,
    find_closing,
    find_keyed_block,
    mask,
    split_top_level,
    strip_comments,
    strip_leading_comments,
)

# ###############
# mask / find_closing
# ###############


def test_mask_preserves_length_and_blanks_content() -> None:
    """Strings and comments are blanked without shifting offsets."""
    text = "a('x{') // b{\nc"
    masked = mask(text)
    assert len(masked) == len(text)
    assert "{" not in masked
    assert masked.endswith("\nc")


def test_find_closing_skips_strings_and_comments() -> None:
    """Brackets inside strings or comments do not count."""
    text = "{ a: '}', /* } */ b: { c: 1 } }"
    assert find_closing(text, 0) == len(text) - 1


def test_find_closing_angle_ignores_arrow() -> None:
    """The ``>`` of ``=>`` does not close a type argument."""
    text = "<{ cb: () => void }>()"
    assert find_closing(text, 0) == text.index(">(")


def test_find_closing_unterminated() -> None:
    """A missing closer yields -1."""
    assert find_closing("{ a: 1", 0) == -1


# ###############
# split_top_level
# ###############


def test_split_ignores_nested_separators() -> None:
    """Commas inside brackets do not split."""
    segments = split_top_level("a: [1, 2], b: { c: 3, d: 4 }, e")
    assert [s.text for s in segments] == ["a: [1, 2]", "b: { c: 3, d: 4 }", "e"]


def test_split_keeps_comment_with_following_entry() -> None:
    """A leading documentation block travels with its entry."""
    segments = split_top_level("/** first */ a: 1,\n/** second */ b: 2,")
    assert [s.text for s in segments] == ["/** first */ a: 1", "/** second */ b: 2"]


def test_split_type_members_on_newlines() -> None:
    """In a type literal a newline ends a member."""
    body = "\n  size?: string\n  count: number\n"
    segments = split_top_level(body, ";,", type_members=True)
    assert [s.text for s in segments] == ["size?: string", "count: number"]


def test_split_type_members_multiline_union() -> None:
    """A union continued on the next line stays one member."""
    body = "\n  size?:\n    | 'sm'\n    | 'md'\n  label: string\n"
    segments = split_top_level(body, ";,", type_members=True)
    assert len(segments) == 2
    assert segments[0].text.startswith("size?:")
    assert "'md'" in segments[0].text


def test_split_type_members_generic_commas() -> None:
    """Commas inside generic arguments do not split type members."""
    segments = split_top_level("a: Map<string, number>; b: string", ";,", type_members=True)
    assert [s.text for s in segments] == ["a: Map<string, number>", "b: string"]


# ###############
# Comments
# ###############


def test_strip_leading_comments_returns_doc_block() -> None:
    """The documentation block is split from the code."""
    doc, code = strip_leading_comments("// note\n/** Size */ size: string")
    assert doc == "/** Size */"
    assert code == "size: string"


def test_strip_comments_collapses_whitespace() -> None:
    """All comments are removed and whitespace collapsed."""
    assert strip_comments("a /* x */  b // y\n c") == "a b c"


# ###############
# find_calls / find_keyed_block
# ###############


def test_find_calls_with_type_argument() -> None:
    """Generic calls report the type argument and the call arguments."""
    text = "const p = withDefaults(defineProps<Props>(), { size: 'md' })"
    [call] = find_calls(text, "defineProps")
    assert call.type_argument == "Props"
    assert call.arguments == []

    [outer] = find_calls(text, "withDefaults")
    assert outer.type_argument is None
    assert outer.arguments == ["defineProps<Props>()", "{ size: 'md' }"]


def test_find_calls_ignores_comments_and_members() -> None:
    """Calls inside comments or on other objects are not matched."""
    text = "// defineEmits(['x'])\nthis.defineEmits(['y'])\ndefineEmits(['z'])"
    calls = find_calls(text, "defineEmits")
    assert [c.arguments for c in calls] == [["['z']"]]


def test_find_keyed_block() -> None:
    """The value block of an object key is located."""
    text = "export default { name: 'X', props: { size: String } }"
    block = find_keyed_block(text, "props")
    assert block is not None
    assert block.body.strip() == "size: String"
    assert find_keyed_block(text, "emits", "{[") is None
