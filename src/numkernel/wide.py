# -----------------------------------------------------------------------------
#  wide.py
#  Widened (>= 128-bit) intermediates for 64-bit modular arithmetic
# -----------------------------------------------------------------------------

"""
Every modular operation in the kernel multiplies two fixed-width operands and
reduces the product modulo m. The product of two 64-bit values needs up to
128 bits, so it is formed as a gmpy2 mpz and only the reduced residue is
handed back as a plain int.

Fixed-width means the union of the signed and unsigned 64-bit ranges:
[-2**63, 2**64 - 1].
"""

from __future__ import annotations

import gmpy2

from numkernel.errors import DivisionByZeroError, InvalidArgumentError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def fits_fixed_width(value: int) -> bool:
    return INT64_MIN <= value <= UINT64_MAX


def require_fixed_width(value: int, name: str = "value") -> int:
    """Return value unchanged, or raise InvalidArgumentError outside the 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if not fits_fixed_width(value):
        raise InvalidArgumentError(f"{name}={value} does not fit in 64 bits")
    return value


def widened_product(a: int, b: int) -> gmpy2.mpz:
    """Exact product of two fixed-width integers as an mpz."""
    # |a|, |b| <= 2**64 so |a*b| < 2**128
    return gmpy2.mpz(a) * gmpy2.mpz(b)


def mul_mod(a: int, b: int, m: int) -> int:
    """(a * b) mod m through a widened intermediate. Floored: the result carries the sign of m."""
    if m == 0:
        raise DivisionByZeroError("modulus must not be zero.")
    return int(gmpy2.f_mod(widened_product(a, b), m))


def add_mod(a: int, b: int, m: int) -> int:
    """(a + b) mod m; the sum is formed as an mpz so it never wraps."""
    if m == 0:
        raise DivisionByZeroError("modulus must not be zero.")
    return int(gmpy2.f_mod(gmpy2.mpz(a) + b, m))
