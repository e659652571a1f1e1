# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizer results and the priority-ordered recognizer runner."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from compdoc.extraction.sfc import ScriptSource

# ###############
# Public Interface
# ###############

T = TypeVar("T")


@dataclass(frozen=True)
class Matched(Generic[T]):
    """A recognizer found its idiom.

    Attributes:
        value: The extracted fragment.
        idiom: Name of the recognizer that produced it.
    """

    value: T
    idiom: str


@dataclass(frozen=True)
class NoMatch:
    """A recognizer did not find its idiom in the source."""

    idiom: str = ""


MatchResult = Matched[T] | NoMatch

Recognizer = Callable[[ScriptSource], MatchResult[T]]


def first_match(recognizers: Sequence[Recognizer[T]], source: ScriptSource) -> MatchResult[T]:
    """Run *recognizers* in order and return the first :class:`Matched` result.

    Later recognizers are not invoked once one matches.
    """
    for recognizer in recognizers:
        result = recognizer(source)
        if isinstance(result, Matched):
            return result
    return NoMatch()
