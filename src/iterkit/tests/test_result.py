"""Tests for the Result type.

Validates:
- Functor and monad laws
- Variant predicates and extraction
- Conversion to Option
"""

from __future__ import annotations

from typing import Callable

import pytest

from iterkit import NOTHING, Err, Ok, Result, Some, UnwrapError, is_failure, is_success


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    result: Result[int, str] = Ok(5)

    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).flat_map(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)
    assert m.flat_map(lambda x: Ok(x)) == m


# ═════════════════════════════════════════════════════════════════════════════
# Predicates & Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert is_success(result)
    assert not is_failure(result)
    assert result.is_ok()
    assert result.unwrap() == 42
    assert result.ok() == Some(42)
    assert result.err() is NOTHING


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert is_failure(result)
    assert not is_success(result)
    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() is NOTHING
    assert result.err() == Some("failed")


def test_unwrap_wrong_variant_raises() -> None:
    with pytest.raises(UnwrapError, match="Err value: 'boom'"):
        Err("boom").unwrap()
    with pytest.raises(UnwrapError, match="Ok value: 1"):
        Ok(1).unwrap_err()
    with pytest.raises(UnwrapError, match="parsing: 'x'"):
        Err("x").expect("parsing")


def test_unwrap_or() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert Err("fail").unwrap_or_else(len) == 4


def test_ok_holding_falsy_value_is_still_ok() -> None:
    assert Ok(None).is_ok()
    assert Ok(0)
    assert not Err(1)


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_map_err() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert Ok(42).map_err(lambda e: f"Error: {e}") == Ok(42)


def test_flat_map_short_circuits() -> None:
    calls: list[int] = []

    def step(x: int) -> Result[int, str]:
        calls.append(x)
        return Ok(x * 2)

    assert Err("fail").flat_map(step) == Err("fail")
    assert calls == []
    assert Ok(5).and_then(step) == Ok(10)


def test_or_else() -> None:
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_match() -> None:
    describe = lambda r: r.match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")  # noqa: E731
    assert describe(Ok(42)) == "success: 42"
    assert describe(Err("fail")) == "failed: fail"


def test_structural_match_uses_tag() -> None:
    """Ok(x) and Err(x) with the same payload land in different cases."""

    def variant(r: Result[int, int]) -> str:
        match r:
            case Result(True, v):
                return f"ok {v}"
            case Result(False, e):
                return f"err {e}"
        return "unreachable"

    assert variant(Ok(1)) == "ok 1"
    assert variant(Err(1)) == "err 1"


def test_repr_and_equality() -> None:
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("a")) == "Err('a')"
    assert Ok(1) != Err(1)
    assert hash(Ok(1)) == hash(Ok(1))
    assert list(Ok(3)) == [3]
    assert list(Err(3)) == []
