# -----------------------------------------------------------------------------
#  modular.py
#  Modular multiply / exponentiate for 64-bit operands
# -----------------------------------------------------------------------------

from __future__ import annotations

from numkernel.errors import DivisionByZeroError, InvalidArgumentError
from numkernel.wide import add_mod, mul_mod, require_fixed_width


def _check_operands(x: int, y: int, m: int) -> None:
    require_fixed_width(x, "x")
    require_fixed_width(y, "y")
    require_fixed_width(m, "m")
    if m == 0:
        raise DivisionByZeroError("modulo value must not be zero.")
    if y < 0:
        raise InvalidArgumentError(f"y must be non-negative, got {y}.")


def mod_multiply(x: int, y: int, m: int) -> int:
    """
    x * y mod m by doubling x over the bits of y.

    Each doubling and accumulation goes through a widened intermediate, so
    nothing wraps for m up to 2**64 - 1. Result has the sign of m (floored).
    """
    _check_operands(x, y, m)

    ret = 0
    x = mul_mod(x, 1, m)
    while y:
        if y & 1:
            ret = add_mod(ret, x, m)
        x = mul_mod(x, 2, m)
        y >>= 1
    return mul_mod(ret, 1, m)


def mod_exponentiate(x: int, y: int, m: int) -> int:
    """
    x ** y mod m by binary exponentiation; matches pow(x, y, m).

    x is reduced modulo m first, so mod_exponentiate(x, 0, m) == 1 % m.
    """
    _check_operands(x, y, m)

    ret = mul_mod(1, 1, m)
    x = mul_mod(x, 1, m)
    while y:
        if y & 1:
            ret = mul_mod(ret, x, m)
        x = mul_mod(x, x, m)
        y >>= 1
    return ret
