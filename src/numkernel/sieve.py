# -----------------------------------------------------------------------------
#  sieve.py
#  Linear (Euler) sieve with multiplicative-function tables
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

from numkernel.errors import InvalidArgumentError
from numkernel.runtime import CFG


@dataclass(frozen=True)
class SieveTable:
    """
    Read-only result of build(n). Arrays are indexed 0..n.

      spf[k]     smallest prime factor (0 for k < 2)
      phi[k]     Euler's totient (phi[1] == 1, phi[0] == 0)
      ppow[k]    largest power of spf[k] dividing k (0 for k < 2)
      mob[k]     Moebius function (mob[1] == 1, mob[0] == 0)
      primes     all primes <= n, ascending
    """
    size: int
    primes: tuple[int, ...]
    spf: tuple[int, ...]
    phi_values: tuple[int, ...]
    ppow: tuple[int, ...]
    mob: tuple[int, ...]

    def _check(self, k: int) -> int:
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgumentError(f"index must be an integer, got {type(k).__name__}")
        if not 0 <= k <= self.size:
            raise InvalidArgumentError(f"{k} is outside the sieve range [0, {self.size}]")
        return k

    def __len__(self) -> int:
        return self.size + 1

    def __contains__(self, k: object) -> bool:
        return isinstance(k, int) and 1 < k <= self.size and self.spf[k] == k

    def is_prime(self, k: int) -> bool:
        self._check(k)
        return k > 1 and self.spf[k] == k

    def smallest_prime_factor(self, k: int) -> int:
        return self.spf[self._check(k)]

    def phi(self, k: int) -> int:
        return self.phi_values[self._check(k)]

    def mobius(self, k: int) -> int:
        return self.mob[self._check(k)]

    def prime_power(self, k: int) -> int:
        """p**e where p = spf(k) and p**e exactly divides k."""
        return self.ppow[self._check(k)]

    def exponent(self, k: int) -> int:
        """Multiplicity of spf(k) in k; 0 for k < 2."""
        pp = self.ppow[self._check(k)]
        if pp == 0:
            return 0
        p = self.spf[k]
        e = 0
        while pp > 1:
            pp //= p
            e += 1
        return e

    def nth_prime(self, i: int) -> int:
        """The i-th prime, 1-based."""
        if not 1 <= i <= len(self.primes):
            raise InvalidArgumentError(
                f"only {len(self.primes)} primes up to {self.size}, asked for #{i}"
            )
        return self.primes[i - 1]

    def factorize(self, k: int) -> dict[int, int]:
        """{p: e} by repeatedly stripping the smallest prime power; {} for k < 2."""
        self._check(k)
        fac: dict[int, int] = {}
        while k > 1:
            p, pp = self.spf[k], self.ppow[k]
            fac[p] = self.exponent(k)
            k //= pp
        return fac


def build(n: int) -> SieveTable:
    """
    Single forward pass over 2..n. Each composite i*p is written exactly once,
    from its smallest prime factor p, because the inner loop stops at the
    first prime dividing i. O(n) total.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"sieve bound must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgumentError(f"sieve bound must be at least 1, got {n}")
    limit = int(CFG("SIEVE.MAX_LIMIT", 10_000_000))
    if n > limit:
        raise InvalidArgumentError(
            f"sieve bound {n} exceeds SIEVE.MAX_LIMIT={limit}. "
            "Increase the limit in the profile or pass a smaller value."
        )

    spf = [0] * (n + 1)
    phi = [0] * (n + 1)
    ppow = [0] * (n + 1)
    mob = [0] * (n + 1)
    primes: list[int] = []

    phi[1] = 1
    mob[1] = 1

    for i in range(2, n + 1):
        if spf[i] == 0:
            spf[i] = i
            phi[i] = i - 1
            ppow[i] = i
            mob[i] = -1
            primes.append(i)

        for p in primes:
            pos = i * p
            if pos > n:
                break
            spf[pos] = p
            if i % p == 0:
                phi[pos] = phi[i] * p
                ppow[pos] = ppow[i] * p
                mob[pos] = 0
                break
            phi[pos] = phi[i] * (p - 1)
            ppow[pos] = p
            mob[pos] = -mob[i]

    return SieveTable(
        size=n,
        primes=tuple(primes),
        spf=tuple(spf),
        phi_values=tuple(phi),
        ppow=tuple(ppow),
        mob=tuple(mob),
    )
