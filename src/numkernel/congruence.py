# -----------------------------------------------------------------------------
#  congruence.py
#  Modular inverse and linear congruences a*x = b (mod m)
# -----------------------------------------------------------------------------

from __future__ import annotations

from numkernel.errors import DivisionByZeroError, InvalidArgumentError, NoSolutionError
from numkernel.euclid import extended_gcd


def mod_inverse(a: int, m: int) -> int:
    """Return the x in [0, |m|) with a*x = 1 (mod m)."""
    if m == 0:
        raise DivisionByZeroError("modulo value must not be zero.")
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise NoSolutionError(f"{a} has no inverse modulo {m}: gcd is {g}.")
    return x % abs(m)


def solve_linear_congruence(a: int, b: int, m: int) -> list[int]:
    """
    All x in [0, m) with a*x = b (mod m), ascending.

    With g = gcd(a, m) there are either none (g does not divide b) or exactly
    g of them, spaced m/g apart.
    """
    if m == 0:
        raise DivisionByZeroError("modulo value must not be zero.")
    if m < 0:
        raise InvalidArgumentError(f"modulus must be positive, got {m}.")

    a %= m
    b %= m
    if a == 0:
        if b != 0:
            raise NoSolutionError(f"0*x = {b} (mod {m}) has no solution.")
        return list(range(m))

    g, u, _ = extended_gcd(a, m)
    if b % g:
        raise NoSolutionError(f"{a}*x = {b} (mod {m}) has no solution: {g} does not divide {b}.")

    step = m // g
    x0 = (u * (b // g)) % step
    return [(x0 + k * step) % m for k in range(g)]
