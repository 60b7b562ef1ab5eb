"""Tests for int_range, parse_integral and cmp_numbers."""

from __future__ import annotations

import io
import math

import orjson
import pytest
from pydantic import ValidationError

from iterkit import NOTHING, ErrorCode, InvalidRangeError, Iter, RangeBounds, Some, cmp_numbers, int_range, parse_integral
from iterkit.observability import configure_logging


# ═════════════════════════════════════════════════════════════════════════════
# int_range
# ═════════════════════════════════════════════════════════════════════════════


def test_range_forms() -> None:
    assert list(int_range(5)) == [0, 1, 2, 3, 4]
    assert list(int_range(3, 7)) == [3, 4, 5, 6]
    assert list(int_range(2, inclusive=True)) == [0, 1, 2]
    assert list(int_range(0, 10, step=3)) == [0, 3, 6, 9]
    assert list(int_range(4, 4)) == []


def test_range_returns_iter() -> None:
    assert int_range(10).filter(lambda n: n % 2 == 0).count() == 5
    assert isinstance(int_range(1), Iter)


def test_invalid_range_raises_at_call_site() -> None:
    with pytest.raises(InvalidRangeError) as exc_info:
        int_range(-1)

    err = exc_info.value
    assert str(err) == "Invalid range: begin 0 is greater than end -1"
    assert (err.begin, err.end) == (0, -1)
    assert err.info.code is ErrorCode.INVALID_RANGE
    assert err.info.is_usage_error
    assert isinstance(err, ValueError)


def test_invalid_range_reports_adjusted_end() -> None:
    with pytest.raises(InvalidRangeError, match="begin 0 is greater than end -1"):
        int_range(-2, inclusive=True)
    with pytest.raises(InvalidRangeError, match="begin 5 is greater than end 3"):
        int_range(5, 3)


def test_invalid_step_rejected() -> None:
    with pytest.raises(ValidationError):
        int_range(0, 5, step=0)


def test_range_bounds_model() -> None:
    bounds = RangeBounds.resolve(2, None, step=1, inclusive=True)
    assert (bounds.begin, bounds.end) == (0, 3)
    assert bounds.to_range() == range(0, 3)


def test_invalid_range_is_logged() -> None:
    buf = io.StringIO()
    configure_logging("json", "DEBUG", output=buf)

    with pytest.raises(InvalidRangeError):
        int_range(-1)

    entry = orjson.loads(buf.getvalue().splitlines()[-1])
    assert entry["event"] == "invalid range"
    assert entry["level"] == "error"
    assert (entry["begin"], entry["end"]) == (0, -1)


# ═════════════════════════════════════════════════════════════════════════════
# parse_integral / cmp_numbers
# ═════════════════════════════════════════════════════════════════════════════


def test_parse_integral() -> None:
    assert parse_integral("12345") == Some(12345)
    assert parse_integral("-7") == Some(-7)
    assert parse_integral("sarmale") is NOTHING
    assert parse_integral("1.5") is NOTHING
    assert parse_integral("") is NOTHING
    assert parse_integral("+3") == Some(3)
    assert parse_integral("1_000") is NOTHING
    assert parse_integral("\uff11\uff12") is NOTHING
    assert parse_integral("0x1f") is NOTHING


def test_cmp_numbers() -> None:
    assert cmp_numbers(3, 1) == Some(2)
    assert cmp_numbers(1.5, 1.5) == Some(0.0)
    assert cmp_numbers(math.nan, 1) is NOTHING
    assert cmp_numbers(1, math.nan) is NOTHING
