# -----------------------------------------------------------------------------
#  euclid.py
#  gcd, Bezout coefficients and the n = d * 2^s decomposition
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BezoutResult:
    """gcd >= 0 together with coefficients satisfying a*coeff_a + b*coeff_b == gcd."""
    gcd: int
    coeff_a: int
    coeff_b: int

    def __iter__(self):
        # allows: g, x, y = extended_gcd(a, b)
        return iter((self.gcd, self.coeff_a, self.coeff_b))

    def holds_for(self, a: int, b: int) -> bool:
        return a * self.coeff_a + b * self.coeff_b == self.gcd


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def extended_gcd(a: int, b: int) -> BezoutResult:
    """
    Iterative extended Euclid.

    The loop runs on |a|, |b|; the coefficients are then signed back for
    negative inputs and coeff_a is moved into [0, |b|/g) along the solution
    family (x + k*b/g, y - k*a/g). With one zero input the other one is the
    gcd; gcd(0, 0) is reported as (0, 0, 0). Never raises for ints.
    """
    if a == 0 and b == 0:
        return BezoutResult(0, 0, 0)
    if b == 0:
        return BezoutResult(abs(a), _sign(a), 0)
    if a == 0:
        return BezoutResult(abs(b), 0, _sign(b))

    abs_a, abs_b = abs(a), abs(b)

    x, x1 = 1, 0
    y, y1 = 0, 1
    a1, b1 = abs_a, abs_b

    while b1:
        q = a1 // b1
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a1, b1 = b1, a1 - q * b1

    g = a1
    if a < 0:
        x = -x
    if b < 0:
        y = -y

    # make a's coefficient the least non-negative one
    step = abs_b // g
    k, x = divmod(x, step)
    y += k * (a // g) * _sign(b)

    return BezoutResult(g, x, y)


def gcd(a: int, b: int) -> int:
    """Binary (Stein) gcd of |a| and |b|; gcd(0, b) == |b|."""
    a, b = abs(a), abs(b)
    if a == 0:
        return b
    if b == 0:
        return a

    # common powers of two
    shift = ((a | b) & -(a | b)).bit_length() - 1
    a >>= (a & -a).bit_length() - 1

    while b:
        b >>= (b & -b).bit_length() - 1
        if a > b:
            a, b = b, a
        b -= a
    return a << shift


def binary_expansion(n: int) -> tuple[int, int]:
    """Return (d, s) with n == d * 2**s and d odd; (0, 0) for n == 0."""
    if n == 0:
        return 0, 0
    s = 0
    while n % 2 == 0:
        n //= 2
        s += 1
    return n, s
