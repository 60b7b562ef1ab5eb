"""Iter: chainable combinators over a single-pass cursor.

Iter wraps exactly one Python iterator and layers lazy adapters (enumerate,
map, filter, filter_map) and consuming operations (fold, try_fold, find,
max, cmp, ...) on top of a single primitive: pulling the next element.

Quick Start:
    >>> from iterkit import Iter, Ok, Err
    >>> Iter([1, 2, 3, 4]).filter(lambda n: n > 2).fold(0, lambda a, b: a + b)
    7
    >>> Iter(["1", "2", "a"]).try_fold(0, lambda acc, s: Ok(acc + int(s)) if s.isdigit() else Err(s))
    Err('a')

Consumption model:
    - An Iter is single-pass and forward-only. Consuming operations leave the
      cursor wherever their pulls stopped; calling another operation resumes
      from there and never rewinds.
    - iter(it) returns the Iter itself, so for-loops, list(), unpacking and
      other Iters all pull from the same cursor.
    - Once the cursor reports end the Iter never pulls it again.
    - Sharing one Iter between two consumers interleaves their pulls.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ._control import BREAK, CONTINUE, Break, Continue, ControlFlow
from .adapters import Enumerate, Filter, FilterMap, Map
from .option import NOTHING, Option, Some
from .ordering import O, Comparator, PartialComparator, natural_cmp, natural_partial_cmp
from .result import Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")  # Accumulator type
B = TypeVar("B")  # Break payload / other element type
E = TypeVar("E")  # Error type
K = TypeVar("K")  # Key type

# Private end marker for single pulls; never escapes this module
_END: Any = object()


class Iter(Generic[T]):
    """Lazy, single-pass sequence wrapper.

    Construct from any iterable. Iter obtains one cursor from it immediately
    and commits to it for its whole lifetime. Passing an iterator commits to
    that iterator, since iter(iterator) is the iterator itself.

    Example:
        >>> it = Iter(range(10))
        >>> it.any(lambda n: n == 3)
        True
        >>> it.next()  # any() stopped right after 3
        Some(4)
    """

    __slots__ = ("_it", "_done")

    def __init__(self, source: Iterable[T]) -> None:
        self._it: Iterator[T] = iter(source)
        self._done = False

    @classmethod
    def from_iterator(cls, iterator: Iterator[T]) -> Iter[T]:
        """Wrap a cursor directly without going through iter()."""
        wrapped = cls.__new__(cls)
        wrapped._it, wrapped._done = iterator, False
        return wrapped

    # ─────────────────────────────────────────────────────────────────
    # Primitive
    # ─────────────────────────────────────────────────────────────────

    def __iter__(self) -> Iter[T]:
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        try:
            return next(self._it)
        except StopIteration:
            self._done = True
            raise

    def next(self) -> Option[T]:
        """Pull one element: Some(value), or Nothing once the sequence has ended."""
        if self._done:
            return NOTHING
        if (value := next(self._it, _END)) is _END:
            self._done = True
            return NOTHING
        return Some(value)

    def __repr__(self) -> str:
        state = "exhausted" if self._done else "live"
        return f"Iter({type(self._it).__name__}, {state})"

    # ─────────────────────────────────────────────────────────────────
    # Lazy Adapters
    # ─────────────────────────────────────────────────────────────────

    def enumerate(self) -> Iter[tuple[int, T]]:
        """Pair elements with a zero-based position counter.

        The counter belongs to the new Iter: it starts at 0 regardless of how
        far this Iter has been consumed.
        """
        return Iter.from_iterator(Enumerate(self))

    def map(self, f: Callable[[T], U]) -> Iter[U]:
        return Iter.from_iterator(Map(self, f))

    def filter(self, pred: Callable[[T], bool]) -> Iter[T]:
        """Keep elements satisfying pred. Rejected elements are consumed, not peeked."""
        return Iter.from_iterator(Filter(self, pred))

    def filter_map(self, f: Callable[[T], Option[U]]) -> Iter[U]:
        """Map through f and keep only the present results, unwrapped.

        Example:
            >>> Iter(["0", "2", "a"]).filter_map(parse_integral).fold(0, operator.add)
            2
        """
        return Iter.from_iterator(FilterMap(self, f))

    # ─────────────────────────────────────────────────────────────────
    # Folds
    # ─────────────────────────────────────────────────────────────────

    def fold(self, init: A, f: Callable[[A, T], A]) -> A:
        """Pull to the end, threading the accumulator through f."""
        acc = init
        for value in self:
            acc = f(acc, value)
        return acc

    def fold1(self, f: Callable[[T, T], T]) -> Option[T]:
        """Fold seeded with the first element. Nothing if empty."""
        return self.next().map(lambda first: self.fold(first, f))

    def count(self) -> int:
        return self.fold(0, lambda n, _: n + 1)

    def for_each(self, f: Callable[[T], object]) -> None:
        """Call f on every element, in pull order, for its side effects."""
        for value in self:
            f(value)

    def last(self) -> Option[T]:
        return self.fold(NOTHING, lambda _, value: Some(value))

    def _fold_while(self, init: A, f: Callable[[A, T], ControlFlow[A, B]]) -> ControlFlow[A, B]:
        """Fold until f says Break. Returns the Break, or Continue(final acc)."""
        acc = init
        for value in self:
            match f(acc, value):
                case Continue(acc):
                    pass
                case flow:
                    return flow
        return Continue(acc)

    def try_fold(self, init: A, f: Callable[[A, T], Result[A, E]]) -> Result[A, E]:
        """Fold with a step that can fail.

        The first Err is returned as-is and the cursor stays just after the
        element that produced it. Ok(final accumulator) on exhaustion.
        """
        def step(acc: A, value: T) -> ControlFlow[A, Result[A, E]]:
            result = f(acc, value)
            return Continue(result.unwrap()) if result.is_ok() else Break(result)

        flow = self._fold_while(init, step)
        return flow.value if isinstance(flow, Break) else Ok(flow.value)

    def try_for_each(self, f: Callable[[T], Result[object, E]]) -> Result[None, E]:
        """Call f on each element until it fails. Ok(None) if none did."""
        return self.try_fold(None, lambda _, value: f(value).map(lambda _: None))

    # ─────────────────────────────────────────────────────────────────
    # Searching (short-circuiting)
    # ─────────────────────────────────────────────────────────────────

    def find(self, pred: Callable[[T], bool]) -> Option[T]:
        """First element satisfying pred; earlier elements are discarded."""
        flow = self._fold_while(None, lambda _, value: Break(value) if pred(value) else CONTINUE)
        return Some(flow.value) if isinstance(flow, Break) else NOTHING

    def find_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """First present f(element)."""
        def step(_: None, value: T) -> ControlFlow[None, Option[U]]:
            mapped = f(value)
            return Break(mapped) if mapped.is_some() else CONTINUE

        flow = self._fold_while(None, step)
        return flow.value if isinstance(flow, Break) else NOTHING

    def all(self, pred: Callable[[T], bool]) -> bool:
        """True if every element satisfies pred. Stops at the first that doesn't."""
        return isinstance(self._fold_while(None, lambda _, value: CONTINUE if pred(value) else BREAK), Continue)

    def any(self, pred: Callable[[T], bool]) -> bool:
        """True if some element satisfies pred. Stops at the first that does."""
        return isinstance(self._fold_while(None, lambda _, value: BREAK if pred(value) else CONTINUE), Break)

    # ─────────────────────────────────────────────────────────────────
    # Extrema
    # ─────────────────────────────────────────────────────────────────

    def max_by(self, cmp: Comparator[T, T]) -> Option[T]:
        """Greatest element per cmp(candidate, best). Ties keep the earliest."""
        return self.fold1(lambda best, candidate: candidate if cmp(candidate, best) > 0 else best)

    def min_by(self, cmp: Comparator[T, T]) -> Option[T]:
        """Least element per cmp(candidate, best). Ties keep the earliest."""
        return self.fold1(lambda best, candidate: candidate if cmp(candidate, best) < 0 else best)

    def max(self: Iter[O]) -> Option[O]:
        return self.max_by(natural_cmp)

    def min(self: Iter[O]) -> Option[O]:
        return self.min_by(natural_cmp)

    def max_by_key(self, f: Callable[[T], K], cmp: Comparator[K, K] = natural_cmp) -> Option[T]:
        """Element whose projection f(element) is greatest. f runs once per element.

        Example:
            >>> Iter([1, 2, 3, 4]).max_by_key(lambda v: -v)
            Some(1)
        """
        keyed = self.map(lambda value: (f(value), value))
        return keyed.max_by(lambda a, b: cmp(a[0], b[0])).map(operator.itemgetter(1))

    def min_by_key(self, f: Callable[[T], K], cmp: Comparator[K, K] = natural_cmp) -> Option[T]:
        """Element whose projection f(element) is least. f runs once per element."""
        keyed = self.map(lambda value: (f(value), value))
        return keyed.min_by(lambda a, b: cmp(a[0], b[0])).map(operator.itemgetter(1))

    # ─────────────────────────────────────────────────────────────────
    # Lexicographic Comparison
    # ─────────────────────────────────────────────────────────────────

    def cmp_by(self, other: Iterable[B], cmp: Comparator[T, B]) -> int:
        """Three-way lexicographic comparison against another iterable.

        Both sides are pulled in lockstep. The first nonzero cmp result is
        returned; otherwise the shorter side is less, and equal lengths give 0.
        """
        rhs = Iter(other)
        while True:
            lhs_value = self.next()
            if lhs_value.is_none():
                return 0 if rhs.next().is_none() else -1
            if (rhs_value := rhs.next()).is_none():
                return 1
            if (order := cmp(lhs_value.unwrap(), rhs_value.unwrap())) != 0:
                return order

    def cmp(self: Iter[O], other: Iterable[O]) -> int:
        return self.cmp_by(other, natural_cmp)

    def partial_cmp_by(self, other: Iterable[B], cmp: PartialComparator[T, B]) -> Option[int]:
        """cmp_by with a comparator that may report a pair as incomparable.

        Returns immediately on the first Nothing or nonzero comparison.

        Example:
            >>> Iter([1.4, 2.6]).partial_cmp_by([1.4, float("nan")], cmp_numbers)
            Nothing
        """
        rhs = Iter(other)
        while True:
            lhs_value = self.next()
            if lhs_value.is_none():
                return Some(0 if rhs.next().is_none() else -1)
            if (rhs_value := rhs.next()).is_none():
                return Some(1)
            order = cmp(lhs_value.unwrap(), rhs_value.unwrap())
            if order.is_none() or order.unwrap() != 0:
                return order

    def partial_cmp(self, other: Iterable[Any]) -> Option[int]:
        """partial_cmp_by using the elements' own <, > and ==."""
        return self.partial_cmp_by(other, natural_partial_cmp)

    def eq_by(self, other: Iterable[B], eq: Callable[[T, B], bool]) -> bool:
        """Lockstep pairwise equality. Different lengths are never equal."""
        rhs = Iter(other)
        while True:
            lhs_value = self.next()
            if lhs_value.is_none():
                return rhs.next().is_none()
            if (rhs_value := rhs.next()).is_none():
                return False
            if not eq(lhs_value.unwrap(), rhs_value.unwrap()):
                return False

    def eq(self, other: Iterable[Any]) -> bool:
        return self.eq_by(other, operator.eq)

    def ne(self, other: Iterable[Any]) -> bool:
        return not self.eq(other)

    def lt(self: Iter[O], other: Iterable[O]) -> bool:
        return self.cmp(other) < 0

    def le(self: Iter[O], other: Iterable[O]) -> bool:
        return self.cmp(other) <= 0

    def gt(self: Iter[O], other: Iterable[O]) -> bool:
        return self.cmp(other) > 0

    def ge(self: Iter[O], other: Iterable[O]) -> bool:
        return self.cmp(other) >= 0
