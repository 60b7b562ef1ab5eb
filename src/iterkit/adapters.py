"""Lazy iterator adapters behind Iter.enumerate/map/filter/filter_map.

Each adapter holds a reference to its parent cursor plus its own state and
exposes the iterator protocol. Building one pulls nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .option import Option

T = TypeVar("T")
U = TypeVar("U")


class Enumerate(Generic[T]):
    """Pairs each element with a zero-based index local to this adapter."""

    __slots__ = ("_parent", "_index")

    def __init__(self, parent: Iterator[T]) -> None:
        self._parent = parent
        self._index = 0

    def __iter__(self) -> Enumerate[T]:
        return self

    def __next__(self) -> tuple[int, T]:
        value = next(self._parent)
        index, self._index = self._index, self._index + 1
        return index, value


class Map(Generic[T, U]):
    """Applies f to each element. f is never called once the parent ends."""

    __slots__ = ("_parent", "_f")

    def __init__(self, parent: Iterator[T], f: Callable[[T], U]) -> None:
        self._parent, self._f = parent, f

    def __iter__(self) -> Map[T, U]:
        return self

    def __next__(self) -> U:
        return self._f(next(self._parent))


class Filter(Generic[T]):
    """Yields elements satisfying pred; non-matching elements are consumed."""

    __slots__ = ("_parent", "_pred")

    def __init__(self, parent: Iterator[T], pred: Callable[[T], bool]) -> None:
        self._parent, self._pred = parent, pred

    def __iter__(self) -> Filter[T]:
        return self

    def __next__(self) -> T:
        for value in self._parent:
            if self._pred(value):
                return value
        raise StopIteration


class FilterMap(Generic[T, U]):
    """Yields the unwrapped value of each present f(element)."""

    __slots__ = ("_parent", "_f")

    def __init__(self, parent: Iterator[T], f: Callable[[T], Option[U]]) -> None:
        self._parent, self._f = parent, f

    def __iter__(self) -> FilterMap[T, U]:
        return self

    def __next__(self) -> U:
        for value in self._parent:
            if (mapped := self._f(value)).is_some():
                return mapped.unwrap()
        raise StopIteration
