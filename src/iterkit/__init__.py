"""iterkit - lazy, chainable combinators over single-pass iterators.

Wrap any iterable in Iter and chain adapters and consuming operations.
Absence and failure are values: Option (Some/NOTHING) and Result (Ok/Err).

Quick Start:
    >>> from iterkit import Iter, parse_integral
    >>> Iter(["0", "2", "a", "4", "b"]).filter_map(parse_integral).max()
    Some(4)
    >>> Iter([1, 2, 3, 4]).enumerate().last()
    Some((3, 4))

Short-circuiting:
    >>> it = Iter([1, 2, 3, 4])
    >>> it.all(lambda n: n < 3)
    False
    >>> it.next()
    Some(4)

Fallible accumulation:
    >>> from iterkit import Ok, Err
    >>> def add_parsed(acc: int, s: str):
    ...     return parse_integral(s).map(lambda n: acc + n).ok_or(s)
    >>> Iter(["1", "2", "3", "4"]).try_fold(0, add_parsed)
    Ok(10)
    >>> Iter(["1", "2", "a", "b"]).try_fold(0, add_parsed)
    Err('a')
"""

from .collect import collect, extender
from .config import IterkitSettings, clear_settings_cache, get_settings
from .errors import (
    ErrorCode,
    ErrorInfo,
    InvalidRangeError,
    IterkitError,
    UnsupportedCollectionError,
    UnwrapError,
)
from .iter import Iter
from .observability import configure_from_settings, configure_logging, get_logger
from .option import NOTHING, Nothing, Option, Some, from_nullable, is_absent, is_present
from .ordering import Comparator, PartialComparator, SupportsOrdering, natural_cmp, natural_partial_cmp
from .result import Err, Ok, Result, is_failure, is_success
from .util import RangeBounds, cmp_numbers, int_range, parse_integral

__version__ = "0.3.0"

__all__ = [
    # Core
    "Iter",
    # Option
    "Option", "Some", "Nothing", "NOTHING", "from_nullable", "is_present", "is_absent",
    # Result
    "Result", "Ok", "Err", "is_success", "is_failure",
    # Ordering
    "SupportsOrdering", "Comparator", "PartialComparator", "natural_cmp", "natural_partial_cmp",
    # Producers & helpers
    "int_range", "RangeBounds", "parse_integral", "cmp_numbers", "collect", "extender",
    # Errors
    "ErrorCode", "ErrorInfo", "IterkitError", "InvalidRangeError", "UnsupportedCollectionError", "UnwrapError",
    # Config & logging
    "IterkitSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "configure_from_settings", "get_logger",
]
