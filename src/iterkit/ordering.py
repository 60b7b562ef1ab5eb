"""Ordering capability and comparators used by Iter's comparison family."""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeAlias, TypeVar

from .option import NOTHING, Option, Some

A = TypeVar("A")
B = TypeVar("B")


class SupportsOrdering(Protocol):
    """Element types usable with natural ordering (max, min, cmp, ...)."""

    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


O = TypeVar("O", bound=SupportsOrdering)  # noqa: E741

# Three-way comparator: negative, zero, positive
Comparator: TypeAlias = Callable[[A, B], int]
# Comparator that may report the pair as incomparable
PartialComparator: TypeAlias = Callable[[A, B], Option[int]]


def natural_cmp(lhs: Any, rhs: Any) -> int:
    """-1, 0 or 1 using the operands' own < and >."""
    return (lhs > rhs) - (lhs < rhs)


def natural_partial_cmp(lhs: Any, rhs: Any) -> Option[int]:
    """Like natural_cmp, but Nothing when neither <, > nor == holds (e.g. NaN)."""
    if lhs < rhs:
        return Some(-1)
    if lhs > rhs:
        return Some(1)
    if lhs == rhs:
        return Some(0)
    return NOTHING
