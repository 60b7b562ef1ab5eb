"""Tests for the Option type."""

from __future__ import annotations

import pytest

from iterkit import NOTHING, Err, Nothing, Ok, Option, Some, UnwrapError, from_nullable, is_absent, is_present


# ═════════════════════════════════════════════════════════════════════════════
# Predicates
# ═════════════════════════════════════════════════════════════════════════════


def test_present_and_absent_are_exclusive() -> None:
    """is_present/is_absent partition every Option."""
    for opt in (Some(1), Some(None), Some(0), NOTHING):
        assert is_present(opt) != is_absent(opt)
        assert opt.is_some() == is_present(opt)
        assert opt.is_none() == is_absent(opt)


def test_some_none_is_not_nothing() -> None:
    """A present None is distinguishable from absence."""
    assert is_present(Some(None))
    assert Some(None) != NOTHING
    assert Nothing() is NOTHING


def test_truthiness_follows_presence() -> None:
    """bool() reports presence, not the carried value's truthiness."""
    assert Some(0)
    assert Some("")
    assert not NOTHING


def test_from_nullable() -> None:
    assert from_nullable(None) is NOTHING
    assert from_nullable(0) == Some(0)


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap() -> None:
    assert Some(5).unwrap() == 5
    with pytest.raises(UnwrapError):
        NOTHING.unwrap()


def test_expect_uses_message() -> None:
    with pytest.raises(UnwrapError, match="need a value"):
        NOTHING.expect("need a value")


@pytest.mark.parametrize("msg", ["", "   "])
def test_expect_with_blank_message_still_raises_unwrap_error(msg: str) -> None:
    with pytest.raises(UnwrapError) as exc_info:
        NOTHING.expect(msg)
    assert exc_info.value.message == UnwrapError.default_message


def test_unwrap_error_is_runtime_error() -> None:
    """UnwrapError keeps RuntimeError semantics for callers catching broadly."""
    with pytest.raises(RuntimeError):
        NOTHING.unwrap()


def test_unwrap_or_variants() -> None:
    assert Some(1).unwrap_or(9) == 1
    assert NOTHING.unwrap_or(9) == 9
    assert NOTHING.unwrap_or_else(lambda: 7) == 7


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_map_skips_nothing() -> None:
    calls: list[int] = []
    assert NOTHING.map(calls.append) is NOTHING
    assert calls == []
    assert Some(2).map(lambda x: x * 3) == Some(6)


def test_flat_map_and_filter() -> None:
    half = lambda x: Some(x // 2) if x % 2 == 0 else NOTHING  # noqa: E731
    assert Some(4).flat_map(half) == Some(2)
    assert Some(3).and_then(half) is NOTHING
    assert Some(3).filter(lambda x: x > 2) == Some(3)
    assert Some(1).filter(lambda x: x > 2) is NOTHING


def test_or_and_ok_or() -> None:
    assert NOTHING.or_(Some(1)) == Some(1)
    assert Some(2).or_(Some(1)) == Some(2)
    assert Some(2).ok_or("missing") == Ok(2)
    assert NOTHING.ok_or("missing") == Err("missing")


def test_iteration_and_matching() -> None:
    """Option yields 0 or 1 elements and supports structural matching."""
    assert list(Some(3)) == [3]
    assert list(NOTHING) == []

    match Some(8):
        case Option(True, value) if value > 5:
            matched = value
        case _:
            matched = None
    assert matched == 8


def test_matching_separates_absent_from_present_none() -> None:
    """Matching on the tag keeps Some(None) and NOTHING apart."""

    def describe(opt: Option[object]) -> str:
        match opt:
            case Option(True, None):
                return "some-none"
            case Option(False, _):
                return "nothing"
            case _:
                return "other"

    assert describe(Some(None)) == "some-none"
    assert describe(NOTHING) == "nothing"
    assert describe(Some(1)) == "other"


def test_repr_and_hash() -> None:
    assert repr(Some("x")) == "Some('x')"
    assert repr(NOTHING) == "Nothing"
    assert len({Some(1), Some(1), NOTHING}) == 2
