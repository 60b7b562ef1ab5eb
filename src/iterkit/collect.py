"""Collect an iterable into a container kind.

extender(kind) hands back an empty container plus the operation that adds
one element to it, so any fold can build the container:

    >>> empty, extend = extender(set)
    >>> Iter([1, 2, 2]).fold(empty, extend)
    {1, 2}

Iter itself does not depend on this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .errors import UnsupportedCollectionError
from .iter import Iter
from .observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

C = TypeVar("C")

Extend = Callable[[C, Any], C]


def _extend_list(c: list[Any], v: Any) -> list[Any]:
    c.append(v)
    return c


def _extend_set(c: set[Any], v: Any) -> set[Any]:
    c.add(v)
    return c


def _extend_dict(c: dict[Any, Any], v: tuple[Any, Any]) -> dict[Any, Any]:
    key, value = v
    c[key] = value
    return c


def _extend_str(c: str, v: Any) -> str:
    return c + str(v)


_EXTENDERS: dict[type, Extend[Any]] = {
    list: _extend_list,
    set: _extend_set,
    dict: _extend_dict,
    str: _extend_str,
}


def extender(kind: type[C]) -> tuple[C, Extend[C]]:
    """Empty instance of kind and its add-one-element operation.

    Supported kinds: list, set, dict (elements are (key, value) pairs) and
    str (elements are concatenated).

    Raises:
        UnsupportedCollectionError: For any other kind
    """
    if (extend := _EXTENDERS.get(kind)) is None:
        get_logger("iterkit.collect").error("unsupported collection", kind=getattr(kind, "__name__", repr(kind)))
        raise UnsupportedCollectionError(kind)
    return kind(), extend


def collect(source: Iterable[Any], kind: type[C] = list) -> C:  # type: ignore[assignment]
    """Pull source to the end into a fresh container of the given kind.

    Example:
        >>> collect(Iter(["a", "b"]).enumerate(), dict)
        {0: 'a', 1: 'b'}
        >>> collect(["x", "y"], str)
        'xy'
    """
    empty, extend = extender(kind)
    return Iter(source).fold(empty, extend)
