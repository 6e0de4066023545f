# tests/test_modular.py
"""
Tests for mod_multiply / mod_exponentiate and the widened-product helpers.

Run: pytest -v
"""

from __future__ import annotations

import random

import pytest

from numkernel.errors import DivisionByZeroError, InvalidArgumentError
from numkernel.modular import mod_exponentiate, mod_multiply
from numkernel.wide import INT64_MAX, INT64_MIN, UINT64_MAX, mul_mod, require_fixed_width, widened_product

MODULI = [1, 2, 3, 97, 1_000_000_007, 2**31 - 1, 2**61 - 1, INT64_MAX, UINT64_MAX - 58]


@pytest.mark.parametrize("m", MODULI, ids=[str(m) for m in MODULI])
def test_trivial_exponents(m):
    for x in (0, 1, 2, 12345, INT64_MAX, -5):
        assert mod_exponentiate(x, 0, m) == 1 % m
        assert mod_exponentiate(x, 1, m) == x % m


def test_randomized_against_exact_products():
    rng = random.Random(2026)
    for _ in range(1500):
        m = rng.randint(1, INT64_MAX)
        x = rng.randint(0, INT64_MAX)
        y = rng.randint(0, INT64_MAX)
        assert mod_multiply(x, y, m) == (x * y) % m
        assert mod_exponentiate(x, y, m) == pow(x, y, m)


def test_unsigned_range_operands():
    m = UINT64_MAX - 58  # largest 64-bit prime
    x, y = UINT64_MAX, UINT64_MAX - 1
    assert mod_multiply(x, y, m) == (x * y) % m
    assert mod_exponentiate(x, y, m) == pow(x, y, m)


def test_negative_base_and_modulus_follow_python_modulo():
    assert mod_multiply(-3, 5, 7) == (-15) % 7
    assert mod_multiply(3, 5, -7) == 15 % -7
    assert mod_exponentiate(-2, 5, 13) == pow(-2, 5, 13)
    assert mod_exponentiate(3, 5, -7) == pow(3, 5, -7)


@pytest.mark.parametrize("fn", [mod_multiply, mod_exponentiate])
def test_zero_modulus(fn):
    with pytest.raises(DivisionByZeroError):
        fn(3, 4, 0)


@pytest.mark.parametrize("fn", [mod_multiply, mod_exponentiate])
def test_negative_multiplier_or_exponent(fn):
    with pytest.raises(InvalidArgumentError):
        fn(3, -1, 7)


@pytest.mark.parametrize("fn", [mod_multiply, mod_exponentiate])
@pytest.mark.parametrize("args", [(2**64, 1, 7), (1, 2**64, 7), (1, 1, 2**64), (INT64_MIN - 1, 1, 7)])
def test_operands_outside_64_bits(fn, args):
    with pytest.raises(InvalidArgumentError):
        fn(*args)


def test_widened_product_is_exact():
    p = widened_product(UINT64_MAX, UINT64_MAX)
    assert int(p) == UINT64_MAX * UINT64_MAX
    assert mul_mod(INT64_MIN, INT64_MIN, INT64_MAX) == (INT64_MIN * INT64_MIN) % INT64_MAX


def test_require_fixed_width():
    assert require_fixed_width(INT64_MIN) == INT64_MIN
    assert require_fixed_width(UINT64_MAX) == UINT64_MAX
    with pytest.raises(InvalidArgumentError):
        require_fixed_width(True)
    with pytest.raises(InvalidArgumentError):
        require_fixed_width(1.5)
