"""Option type: a value that may or may not be present.

A proper two-variant tagged union rather than a nullable value, so every
element type (including None itself) can be carried without ambiguity:

    >>> Some(None) == NOTHING
    False
    >>> Some(3).map(lambda x: x + 1)
    Some(4)
    >>> NOTHING.unwrap_or(0)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from .errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Discriminated union of Some(value) and Nothing.

    Use the Some() constructor and the NOTHING singleton, never the class
    directly. Instances are immutable.

    Example:
        >>> match Some(21).filter(lambda x: x > 0).map(lambda x: x * 2):
        ...     case Option(True, value): print(value)
        ...     case Option(False, _): print("absent")
        42
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_is_some", "_value")

    def __init__(self, value: T | None, is_some: bool) -> None:
        """Private constructor. Use Some() or NOTHING instead."""
        self._value = value
        self._is_some = is_some

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the value.

        Raises:
            UnwrapError: If Nothing
        """
        if self._is_some:
            return cast(T, self._value)
        raise UnwrapError("Called unwrap() on Nothing")

    def expect(self, msg: str) -> T:
        """Extract the value, raising UnwrapError(msg) if Nothing."""
        if self._is_some:
            return cast(T, self._value)
        raise UnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_some else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return cast(T, self._value) if self._is_some else f()

    # ─────────────────────────────────────────────────────────────────
    # Combinators
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the value if present."""
        return Some(f(cast(T, self._value))) if self._is_some else NOTHING

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that may itself be absent."""
        return f(cast(T, self._value)) if self._is_some else NOTHING

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def filter(self, pred: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if it satisfies pred."""
        return self if self._is_some and pred(cast(T, self._value)) else NOTHING

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if present, otherwise other."""
        return self if self._is_some else other

    def ok_or(self, error: E) -> Result[T, E]:
        """Convert to Result: Ok(value) if present, Err(error) otherwise."""
        from .result import Err, Ok
        return Ok(cast(T, self._value)) if self._is_some else Err(error)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if present (regardless of the carried value's truthiness)."""
        return self._is_some

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_some, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the value once if present."""
        if self._is_some:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors & Predicates
# ═════════════════════════════════════════════════════════════════════════════


NOTHING: Option[Any] = Option(None, is_some=False)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option."""
    return Option(value, is_some=True)


def Nothing() -> Option[Any]:  # noqa: N802
    """Return the absent Option singleton."""
    return NOTHING


def from_nullable(value: T | None) -> Option[T]:
    """Bridge from nullable Python APIs: None becomes Nothing."""
    return NOTHING if value is None else Some(value)


def is_present(opt: Option[T]) -> bool:
    """True iff opt carries a value."""
    return opt._is_some


def is_absent(opt: Option[T]) -> bool:
    """True iff opt is Nothing."""
    return not opt._is_some
