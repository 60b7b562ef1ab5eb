"""Result type for failure-carrying computations.

Used by Iter.try_fold / Iter.try_for_each: a step either succeeds with a new
accumulator or fails with an error value, and the first failure stops the
fold. Failure is local data propagated by value, never an exception.

Example:
    >>> def parse(acc: int, s: str) -> Result[int, str]:
    ...     return Ok(acc + int(s)) if s.isdigit() else Err(s)
    >>> Iter(["1", "2", "x"]).try_fold(0, parse)
    Err('x')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from .errors import UnwrapError
from .option import NOTHING, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Exactly one payload is held and the tag always agrees with it; the only
    way to build a Result is through Ok() or Err().

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_is_ok", "_value")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            UnwrapError: If Result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"Called unwrap() on Err value: {self._value!r}")

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(f"Called unwrap_err() on Ok value: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute one from the error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def expect(self, msg: str) -> T:
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"{msg}: {self._value!r}")

    # ─────────────────────────────────────────────────────────────────
    # Combinators
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the Ok value, pass Err through unchanged."""
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return cast("Result[U, E]", self)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the Err value, pass Ok through unchanged."""
        if not self._is_ok:
            return Err(f(cast(E, self._value)))
        return cast("Result[T, F]", self)

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that can fail. Err short-circuits.

        Example:
            >>> Ok("7").flat_map(lambda s: Ok(int(s)) if s.isdigit() else Err(s))
            Ok(7)
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast("Result[U, E]", self)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err. Ok passes through."""
        if not self._is_ok:
            return f(cast(E, self._value))
        return cast("Result[T, F]", self)

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def ok(self) -> Option[T]:
        """Some(value) if Ok, Nothing if Err."""
        return Some(cast(T, self._value)) if self._is_ok else NOTHING

    def err(self) -> Option[E]:
        """Some(error) if Err, Nothing if Ok."""
        return Some(cast(E, self._value)) if not self._is_ok else NOTHING

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Ok."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Ok value once, nothing for Err."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors & Predicates
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct the success variant."""
    return Result(value, is_ok=True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct the failure variant."""
    return Result(error, is_ok=False)


def is_success(result: Result[T, E]) -> bool:
    """True iff result is Ok."""
    return result._is_ok


def is_failure(result: Result[T, E]) -> bool:
    """True iff result is Err."""
    return not result._is_ok
