"""Internal short-circuit signal for fold-driven combinators.

find/any/all stop a fold early with a payload. That is control flow, not a
failure, so it gets its own type instead of borrowing Result's Err channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class Continue(Generic[A]):
    """Keep folding with `value` as the new accumulator."""

    value: A


@dataclass(frozen=True, slots=True)
class Break(Generic[B]):
    """Stop folding and hand `value` back to the caller."""

    value: B


ControlFlow = Continue[A] | Break[B]

# Payload-free signals, shared to avoid an allocation per pulled element
CONTINUE: Continue[None] = Continue(None)
BREAK: Break[None] = Break(None)
