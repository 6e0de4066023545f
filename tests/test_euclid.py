# tests/test_euclid.py
"""
Tests for extended_gcd, binary gcd and binary_expansion.

Run: pytest -v
"""

from __future__ import annotations

import math
import random

import pytest

from numkernel.euclid import BezoutResult, binary_expansion, extended_gcd, gcd

PAIRS = [
    (35, 15),
    (15, 35),
    (240, 46),
    (46, 240),
    (-35, 15),
    (35, -15),
    (-35, -15),
    (1, 1),
    (17, 1),
    (1, 17),
    (12, 12),
    (-12, 12),
    (2**61 - 1, 2**31 - 1),
    (9223372036854775807, 9223372036854775783),
    (1071, 462),
    (3, 7),
]


@pytest.mark.parametrize("a,b", PAIRS, ids=[f"{a},{b}" for a, b in PAIRS])
def test_bezout_identity_and_canonical_coefficient(a, b):
    res = extended_gcd(a, b)
    assert res.gcd == math.gcd(a, b)
    assert a * res.coeff_a + b * res.coeff_b == res.gcd
    assert res.holds_for(a, b)
    assert 0 <= res.coeff_a < abs(b) // res.gcd or (abs(b) == res.gcd and res.coeff_a == 0)


def test_concrete_35_15():
    g, x, y = extended_gcd(35, 15)
    assert g == 5
    assert 0 <= x < 3
    assert 35 * x + 15 * y == 5


def test_random_pairs():
    rng = random.Random(7)
    for _ in range(2000):
        a = rng.randint(-(2**63), 2**63 - 1)
        b = rng.randint(-(2**63), 2**63 - 1)
        if a == 0 or b == 0:
            continue
        res = extended_gcd(a, b)
        assert res.gcd == math.gcd(a, b)
        assert res.holds_for(a, b)
        assert 0 <= res.coeff_a < abs(b) // res.gcd or res.coeff_a == 0


@pytest.mark.parametrize("a,b,expected", [
    (0, 0, (0, 0, 0)),
    (7, 0, (7, 1, 0)),
    (-7, 0, (7, -1, 0)),
    (0, 4, (4, 0, 1)),
    (0, -4, (4, 0, -1)),
])
def test_zero_inputs(a, b, expected):
    res = extended_gcd(a, b)
    assert tuple(res) == expected
    assert res.holds_for(a, b)


def test_result_is_immutable():
    res = extended_gcd(10, 4)
    assert isinstance(res, BezoutResult)
    with pytest.raises(AttributeError):
        res.gcd = 3


def test_binary_gcd_matches_math_gcd():
    rng = random.Random(11)
    cases = [(0, 0), (0, 9), (9, 0), (-12, 18), (2**40, 2**35 * 3), (1, 2**64 - 1)]
    cases += [(rng.randint(-10**20, 10**20), rng.randint(-10**20, 10**20)) for _ in range(500)]
    for a, b in cases:
        assert gcd(a, b) == math.gcd(a, b), (a, b)


@pytest.mark.parametrize("n,expected", [
    (0, (0, 0)),
    (1, (1, 0)),
    (7, (7, 0)),
    (96, (3, 5)),
    (2**40, (1, 40)),
    (4759123140, (1189780785, 2)),
])
def test_binary_expansion(n, expected):
    d, s = binary_expansion(n)
    assert (d, s) == expected
    assert d * 2**s == n
