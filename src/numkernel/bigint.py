# -----------------------------------------------------------------------------
#  bigint.py
#  Sign/magnitude arbitrary-precision integers, base 10**9 limbs
# -----------------------------------------------------------------------------

"""
BigInteger keeps a sign in {-1, 0, +1} and a magnitude: a list of limbs in
[0, BASE), least-significant limb first.

Invariants, restored after every mutation:
  - sign == 0  <=>  magnitude == [0]  (never empty)
  - no most-significant zero limbs while the value is nonzero
  - every limb lies in [0, BASE)

Division and modulo truncate toward zero, as in C:
    sign(a // b) = sign(a) * sign(b),   sign(a % b) = sign(a)
which differs from Python's floored int division for mixed signs.
"""

from __future__ import annotations

import re
from functools import total_ordering

from numkernel.errors import DivisionByZeroError, FormatError
from numkernel.runtime import CFG

BASE = 1_000_000_000
BASE_DIGITS = 9

_NUMERAL = re.compile(r"-?[0-9]+")


# --- Magnitude helpers (lists of limbs, least-significant first) -------------


def _trim(mag: list[int]) -> list[int]:
    while len(mag) > 1 and mag[-1] == 0:
        mag.pop()
    return mag


def _cmp_mag(a: list[int], b: list[int]) -> int:
    """Three-way compare of trimmed magnitudes: length first, then limbs from the top."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_mag(a: list[int], b: list[int]) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    out: list[int] = []
    carry = 0
    for i, x in enumerate(a):
        s = x + carry + (b[i] if i < len(b) else 0)
        if s >= BASE:
            out.append(s - BASE)
            carry = 1
        else:
            out.append(s)
            carry = 0
    if carry:
        out.append(carry)
    return out


def _sub_mag(a: list[int], b: list[int]) -> list[int]:
    """a - b for magnitudes with a >= b."""
    out: list[int] = []
    borrow = 0
    for i, x in enumerate(a):
        d = x - borrow - (b[i] if i < len(b) else 0)
        if d < 0:
            d += BASE
            borrow = 1
        else:
            borrow = 0
        out.append(d)
    return _trim(out)


def _mul_small(a: list[int], k: int) -> list[int]:
    """a * k for 0 <= k < BASE."""
    if k == 0 or a == [0]:
        return [0]
    out: list[int] = []
    carry = 0
    for x in a:
        carry, limb = divmod(x * k + carry, BASE)
        out.append(limb)
    while carry:
        carry, limb = divmod(carry, BASE)
        out.append(limb)
    return out


def _mul_mag(a: list[int], b: list[int]) -> list[int]:
    """Schoolbook O(len(a) * len(b)) product."""
    if a == [0] or b == [0]:
        return [0]
    out = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, out[i + j] = divmod(out[i + j] + x * y + carry, BASE)
        k = i + len(b)
        while carry:
            carry, out[k] = divmod(out[k] + carry, BASE)
            k += 1
    return _trim(out)


def _divmod_small(a: list[int], k: int) -> tuple[list[int], int]:
    """Short division by a single limb 0 < k < BASE."""
    q = [0] * len(a)
    rem = 0
    for i in range(len(a) - 1, -1, -1):
        q[i], rem = divmod(rem * BASE + a[i], k)
    return _trim(q), rem


def _leading(mag: list[int], start: int) -> int:
    """Value of the limbs at positions >= start (at most three of them here)."""
    v = 0
    for limb in reversed(mag[start:]):
        v = v * BASE + limb
    return v


def _divmod_mag(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    """
    Long division of magnitudes, b != [0].

    One quotient limb per dividend limb. Each limb is estimated from the two
    leading limbs of b against the matching leading limbs of the running
    remainder, then corrected: the estimate is off by at most a couple of
    units in either direction.
    """
    if _cmp_mag(a, b) < 0:
        return [0], list(a)
    if len(b) == 1:
        q, r = _divmod_small(a, b[0])
        return q, [r]

    n = len(b)
    top = b[-1] * BASE + b[-2]
    q = [0] * len(a)
    rem = [0]
    for i in range(len(a) - 1, -1, -1):
        rem.insert(0, a[i])
        _trim(rem)
        if _cmp_mag(rem, b) < 0:
            continue
        qhat = min(_leading(rem, n - 2) // top, BASE - 1)
        prod = _mul_small(b, qhat)
        while _cmp_mag(prod, rem) > 0:
            qhat -= 1
            prod = _sub_mag(prod, b)
        rem = _sub_mag(rem, prod)
        while _cmp_mag(rem, b) >= 0:
            qhat += 1
            rem = _sub_mag(rem, b)
        q[i] = qhat
    return _trim(q), rem


def _signed_add(s1: int, m1: list[int], s2: int, m2: list[int]) -> tuple[int, list[int]]:
    if s1 == 0:
        return s2, list(m2)
    if s2 == 0:
        return s1, list(m1)
    if s1 == s2:
        return s1, _add_mag(m1, m2)
    c = _cmp_mag(m1, m2)
    if c == 0:
        return 0, [0]
    if c > 0:
        return s1, _sub_mag(m1, m2)
    return s2, _sub_mag(m2, m1)


def _mag_from_int(n: int) -> list[int]:
    n = abs(n)
    if n == 0:
        return [0]
    mag: list[int] = []
    while n:
        n, limb = divmod(n, BASE)
        mag.append(limb)
    return mag


# --- Parsing -----------------------------------------------------------------


def parse(text: str) -> BigInteger:
    """
    Parse a decimal numeral with an optional single leading '-'.

    Raises FormatError for empty text, a lone '-', or any other character.
    Leading zeros are dropped and "-0" parses to zero.
    """
    if not isinstance(text, str):
        raise FormatError(f"expected a decimal string, got {type(text).__name__}")
    if not _NUMERAL.fullmatch(text):
        shown = text if len(text) <= 40 else text[:37] + "..."
        raise FormatError(f"not a decimal integer: {shown!r}")

    max_digits = CFG("BIGINT.MAX_DIGITS", 1_000_000)
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if max_digits is not None and len(digits) > int(max_digits):
        raise FormatError(
            f"numeral has more than {max_digits} digits. "
            "Increase BIGINT.MAX_DIGITS in the profile or pass a smaller value."
        )

    digits = digits.lstrip("0") or "0"
    mag = [
        int(digits[max(0, end - BASE_DIGITS):end])
        for end in range(len(digits), 0, -BASE_DIGITS)
    ]
    if mag == [0]:
        return BigInteger._new(0, mag)
    return BigInteger._new(-1 if negative else 1, mag)


# --- BigInteger ----------------------------------------------------------------


@total_ordering
class BigInteger:
    __slots__ = ("_mag", "_sign")

    def __init__(self, value: int | str | BigInteger = 0):
        if isinstance(value, BigInteger):
            self._sign = value._sign
            self._mag = list(value._mag)
        elif isinstance(value, str):
            other = parse(value)
            self._sign = other._sign
            self._mag = other._mag
        elif isinstance(value, int):
            self._sign = (value > 0) - (value < 0)
            self._mag = _mag_from_int(value)
        else:
            raise TypeError(f"cannot build a BigInteger from {type(value).__name__}")

    @classmethod
    def _new(cls, sign: int, mag: list[int]) -> BigInteger:
        obj = cls.__new__(cls)
        obj._sign = sign
        obj._mag = mag
        return obj

    @classmethod
    def parse(cls, text: str) -> BigInteger:
        return parse(text)

    @staticmethod
    def _coerce(other) -> BigInteger | None:
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int):
            return BigInteger(other)
        return None

    def _assign(self, sign: int, mag: list[int]) -> BigInteger:
        self._sign = sign
        self._mag = mag
        return self

    # --- views ---------------------------------------------------------------

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def limbs(self) -> tuple[int, ...]:
        """Magnitude limbs, least-significant first."""
        return tuple(self._mag)

    def copy(self) -> BigInteger:
        return BigInteger._new(self._sign, list(self._mag))

    def to_string(self) -> str:
        if self._sign == 0:
            return "0"
        head = str(self._mag[-1])
        tail = "".join(f"{limb:0{BASE_DIGITS}d}" for limb in reversed(self._mag[:-1]))
        return ("-" if self._sign < 0 else "") + head + tail

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        v = 0
        for limb in reversed(self._mag):
            v = v * BASE + limb
        return -v if self._sign < 0 else v

    def __bool__(self) -> bool:
        return self._sign != 0

    # mutated in place by the compound operators
    __hash__ = None

    # --- comparison ----------------------------------------------------------

    def _compare(self, other: BigInteger) -> int:
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        c = _cmp_mag(self._mag, other._mag)
        return -c if self._sign < 0 else c

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._sign == o._sign and self._mag == o._mag

    def __lt__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._compare(o) < 0

    # --- unary ---------------------------------------------------------------

    def __neg__(self) -> BigInteger:
        return BigInteger._new(-self._sign, list(self._mag))

    def __pos__(self) -> BigInteger:
        return self.copy()

    def __abs__(self) -> BigInteger:
        return BigInteger._new(abs(self._sign), list(self._mag))

    # --- arithmetic kernels (return (sign, magnitude)) -------------------------

    def _add(self, o: BigInteger) -> tuple[int, list[int]]:
        return _signed_add(self._sign, self._mag, o._sign, o._mag)

    def _sub(self, o: BigInteger) -> tuple[int, list[int]]:
        return _signed_add(self._sign, self._mag, -o._sign, o._mag)

    def _mul(self, o: BigInteger) -> tuple[int, list[int]]:
        sign = self._sign * o._sign
        if sign == 0:
            return 0, [0]
        return sign, _mul_mag(self._mag, o._mag)

    def _divmod(self, o: BigInteger) -> tuple[BigInteger, BigInteger]:
        if o._sign == 0:
            raise DivisionByZeroError("division by zero.")
        q_mag, r_mag = _divmod_mag(self._mag, o._mag)
        q_sign = 0 if q_mag == [0] else self._sign * o._sign
        r_sign = 0 if r_mag == [0] else self._sign
        return BigInteger._new(q_sign, q_mag), BigInteger._new(r_sign, r_mag)

    # --- binary operators: new instance, operands untouched --------------------

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return BigInteger._new(*self._add(o))

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return BigInteger._new(*self._sub(o))

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return BigInteger._new(*o._sub(self))

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return BigInteger._new(*self._mul(o))

    __rmul__ = __mul__

    def __divmod__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._divmod(o)

    def __rdivmod__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o._divmod(self)

    def __floordiv__(self, other):
        """Quotient truncated toward zero."""
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._divmod(o)[0]

    def __rfloordiv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o._divmod(self)[0]

    def __mod__(self, other):
        """Remainder with the sign of the dividend."""
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._divmod(o)[1]

    def __rmod__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o._divmod(self)[1]

    # --- compound operators: mutate in place ------------------------------------

    def __iadd__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._assign(*self._add(o))

    def __isub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._assign(*self._sub(o))

    def __imul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._assign(*self._mul(o))

    def __ifloordiv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        q, _ = self._divmod(o)
        return self._assign(q._sign, q._mag)

    def __imod__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        _, r = self._divmod(o)
        return self._assign(r._sign, r._mag)

    # --- increment / decrement ----------------------------------------------------

    def increment(self) -> BigInteger:
        """Prefix ++: add one in place and return self."""
        self += 1
        return self

    def decrement(self) -> BigInteger:
        """Prefix --: subtract one in place and return self."""
        self -= 1
        return self

    def post_increment(self) -> BigInteger:
        """Postfix ++: add one in place, return the value from before."""
        snapshot = self.copy()
        self += 1
        return snapshot

    def post_decrement(self) -> BigInteger:
        """Postfix --: subtract one in place, return the value from before."""
        snapshot = self.copy()
        self -= 1
        return snapshot
