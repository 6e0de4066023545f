# -----------------------------------------------------------------------------
#  cipher.py
#  Textbook RSA over integer blocks (toy: no padding)
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable

from numkernel.congruence import mod_inverse
from numkernel.errors import InvalidArgumentError, NoSolutionError
from numkernel.modular import mod_exponentiate


def rsa_modulus(p: int, q: int) -> int:
    if p < 2 or q < 2:
        raise InvalidArgumentError(f"p and q must be primes, got {p} and {q}.")
    return p * q


def private_exponent(e: int, p: int, q: int) -> int:
    """d with e*d = 1 (mod (p-1)(q-1)); NoSolutionError when gcd(e, phi) != 1."""
    phi = (p - 1) * (q - 1)
    try:
        return mod_inverse(e, phi)
    except NoSolutionError:
        raise NoSolutionError(
            f"public exponent {e} is not invertible modulo phi={phi}."
        ) from None


def _apply(blocks: Iterable[int], k: int, n: int) -> list[int]:
    out = []
    for b in blocks:
        if not 0 <= b < n:
            raise InvalidArgumentError(f"block {b} is outside [0, {n}).")
        out.append(mod_exponentiate(b, k, n))
    return out


def rsa_encrypt(blocks: Iterable[int], e: int, p: int, q: int) -> list[int]:
    return _apply(blocks, e, rsa_modulus(p, q))


def rsa_decrypt(blocks: Iterable[int], e: int, p: int, q: int) -> list[int]:
    n = rsa_modulus(p, q)
    return _apply(blocks, private_exponent(e, p, q), n)
