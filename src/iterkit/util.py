"""Producers and comparators that feed Iter.

- int_range: eager-validated, lazily-produced integer ranges
- parse_integral: str -> Option[int]
- cmp_numbers: NaN-aware numeric comparator for Iter.partial_cmp_by
"""

from __future__ import annotations

import math
import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .errors import InvalidRangeError
from .iter import Iter
from .observability import get_logger
from .option import NOTHING, Option, Some

_INTEGRAL = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


class RangeBounds(BaseModel):
    """Validated arguments of int_range, after inclusive adjustment."""

    model_config = ConfigDict(frozen=True, strict=True)

    begin: int = 0
    end: int
    step: Annotated[PositiveInt, Field(description="Distance between consecutive elements")] = 1

    @classmethod
    def resolve(cls, begin: int, end: int | None, *, step: int, inclusive: bool) -> RangeBounds:
        """Apply the one-argument form and inclusivity, then validate ordering.

        Raises:
            InvalidRangeError: begin is greater than the adjusted end
            pydantic.ValidationError: non-integer bounds or a step below 1
        """
        if end is None:
            begin, end = 0, begin
        bounds = cls(begin=begin, end=end, step=step)
        if inclusive:
            bounds = bounds.model_copy(update={"end": bounds.end + 1})
        if bounds.begin > bounds.end:
            raise InvalidRangeError(bounds.begin, bounds.end)
        return bounds

    def to_range(self) -> range:
        return range(self.begin, self.end, self.step)


def int_range(begin: int, end: int | None = None, *, step: int = 1, inclusive: bool = False) -> Iter[int]:
    """Forward integer sequence from begin up to end.

    With one argument it counts from 0 up to that bound. The end bound is
    exclusive unless inclusive=True. Bounds are checked immediately, so a bad
    range fails at the call site rather than on first pull.

    Example:
        >>> list(int_range(5))
        [0, 1, 2, 3, 4]
        >>> list(int_range(3, 7))
        [3, 4, 5, 6]
        >>> list(int_range(2, inclusive=True))
        [0, 1, 2]

    Raises:
        InvalidRangeError: int_range(-1) -> "Invalid range: begin 0 is greater than end -1"
    """
    try:
        bounds = RangeBounds.resolve(begin, end, step=step, inclusive=inclusive)
    except InvalidRangeError as e:
        get_logger("iterkit.util").error("invalid range", **e.info.details)
        raise
    return Iter(bounds.to_range())


def parse_integral(text: str) -> Option[int]:
    """Parse a base-10 integer, Nothing if text isn't one.

    Accepts ASCII digits with an optional sign and surrounding whitespace.
    Digit-group underscores and non-ASCII digits are rejected.

    Example:
        >>> parse_integral(" 42 ")
        Some(42)
        >>> parse_integral("sarmale")
        Nothing
    """
    if not _INTEGRAL.fullmatch(text):
        return NOTHING
    try:
        return Some(int(text))
    except ValueError:  # past the interpreter's int digit limit
        return NOTHING


def cmp_numbers(lhs: float, rhs: float) -> Option[float]:
    """Some(lhs - rhs), or Nothing if either operand is NaN."""
    if math.isnan(lhs) or math.isnan(rhs):
        return NOTHING
    return Some(lhs - rhs)
