"""Property tests: BigNumber vs native Python ints.

Uses Hypothesis to fuzz operands well past 64-bit range and checks every
operator against Python's own arbitrary-precision ints as the oracle.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from bignum import BigNumber, parse
from bignum.invariants import check_all

BIG = 10**60

ints = st.integers(min_value=-BIG, max_value=BIG)
decimal_text = st.from_regex(r"(-?[1-9][0-9]{0,80}|0)", fullmatch=True)


def _canonical(n: BigNumber) -> bool:
    return check_all(n.digits, n.negative) == []


# ---------------------------------------------------------------------------
# Agreement with the int oracle
# ---------------------------------------------------------------------------

@settings(max_examples=300, deadline=None)
@given(ints, ints)
def test_arithmetic_matches_int(a: int, b: int) -> None:
    x, y = BigNumber(a), BigNumber(b)
    for result, expected in ((x + y, a + b), (x - y, a - b), (x * y, a * b)):
        assert int(result) == expected
        assert str(result) == str(expected)
        assert _canonical(result)


@settings(max_examples=300, deadline=None)
@given(ints, ints)
def test_ordering_matches_int(a: int, b: int) -> None:
    x, y = BigNumber(a), BigNumber(b)
    assert (x < y) == (a < b)
    assert (x > y) == (a > b)
    assert (x <= y) == (a <= b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)
    assert (x != y) == (a != b)
    # Exactly one of <, ==, > holds.
    assert [x < y, x == y, x > y].count(True) == 1


# ---------------------------------------------------------------------------
# Algebraic laws
# ---------------------------------------------------------------------------

@settings(max_examples=200, deadline=None)
@given(ints)
def test_identities_and_inverse(a: int) -> None:
    x, zero, one = BigNumber(a), BigNumber(), BigNumber(1)
    assert x + zero == x
    assert zero + x == x
    assert x * one == x
    product = x * zero
    assert product == zero
    assert product.negative is False
    total = x + (-x)
    assert total == zero
    assert total.negative is False


@settings(max_examples=200, deadline=None)
@given(ints, ints, ints)
def test_commutative_associative(a: int, b: int, c: int) -> None:
    x, y, z = BigNumber(a), BigNumber(b), BigNumber(c)
    assert x + y == y + x
    assert (x + y) + z == x + (y + z)
    assert x * y == y * x


@settings(max_examples=200, deadline=None)
@given(ints, ints)
def test_subtraction_consistency(a: int, b: int) -> None:
    x, y = BigNumber(a), BigNumber(b)
    assert (x - y) + y == x


@settings(max_examples=200, deadline=None)
@given(ints)
def test_increment_decrement_inverse(a: int) -> None:
    x = BigNumber(a)
    x.increment()
    x.decrement()
    assert x == a

    snap = x.post_increment()
    assert snap == a
    assert x == a + 1
    snap = x.post_decrement()
    assert snap == a + 1
    assert x == a


# ---------------------------------------------------------------------------
# Text round-trip
# ---------------------------------------------------------------------------

@settings(max_examples=300, deadline=None)
@given(decimal_text)
def test_format_round_trip(text: str) -> None:
    result = parse(text)
    assert result.ok
    assert str(result.value) == text


@settings(max_examples=200, deadline=None)
@given(st.integers(min_value=0, max_value=10**40), st.integers(min_value=0, max_value=5), st.booleans())
def test_leading_zeros_canonicalize(n: int, pad: int, neg: bool) -> None:
    text = ("-" if neg else "") + "0" * pad + str(n)
    value = BigNumber(text)
    expected = -n if neg else n
    assert value == expected
    assert _canonical(value)
