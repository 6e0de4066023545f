# -----------------------------------------------------------------------------
#  primes.py
#  Deterministic Miller-Rabin for 64-bit integers
# -----------------------------------------------------------------------------

from __future__ import annotations

from numkernel.euclid import binary_expansion
from numkernel.modular import mod_exponentiate
from numkernel.wide import mul_mod, require_fixed_width

# Witness sets are deterministic for their ranges:
#   (2, 7, 61)           all n < 4_759_123_141
#   first twelve primes  all n < 2**64 (in fact below 3.18e23)

WITNESS_THRESHOLD = 4_759_123_141
SMALL_WITNESSES: tuple[int, ...] = (2, 7, 61)
LARGE_WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def select_witnesses(n: int) -> tuple[int, ...]:
    return SMALL_WITNESSES if n < WITNESS_THRESHOLD else LARGE_WITNESSES


def witness_passes(n: int, a: int, d: int, s: int) -> bool:
    """
    One Miller-Rabin round for odd n with n - 1 == d * 2**s.

    start:       x = a^d mod n; x in {1, n-1} passes
    squaring(r): x = x^2 mod n for r < s - 1; x == n-1 passes
    otherwise the witness proves n composite.
    """
    x = mod_exponentiate(a, d, n)
    if x == 1 or x == n - 1:
        return True

    for _ in range(s - 1):
        x = mul_mod(x, x, n)
        if x == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """
    Deterministic primality for n up to 2**64 - 1.

    Raises InvalidArgumentError for larger n.
    """
    if n <= 1:
        return False
    require_fixed_width(n, "n")
    if n == 2:
        return True

    d, s = binary_expansion(n - 1)

    for a in select_witnesses(n):
        if n == a:
            return True
        if not witness_passes(n, a, d, s):
            return False
    return True
