from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("numkernel")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .bigint import BigInteger, parse
from .cipher import rsa_decrypt, rsa_encrypt
from .config import load_settings
from .congruence import mod_inverse, solve_linear_congruence
from .errors import (
    ConfigError,
    DivisionByZeroError,
    FormatError,
    InvalidArgumentError,
    NoSolutionError,
    NumKernelError,
)
from .euclid import BezoutResult, binary_expansion, extended_gcd, gcd
from .modular import mod_exponentiate, mod_multiply
from .primes import is_prime
from .runtime import APPLY, CFG
from .sieve import SieveTable, build

__all__ = [
    "APPLY",
    "CFG",
    "BezoutResult",
    "BigInteger",
    "ConfigError",
    "DivisionByZeroError",
    "FormatError",
    "InvalidArgumentError",
    "NoSolutionError",
    "NumKernelError",
    "SieveTable",
    "__version__",
    "binary_expansion",
    "build",
    "extended_gcd",
    "gcd",
    "is_prime",
    "load_settings",
    "mod_exponentiate",
    "mod_inverse",
    "mod_multiply",
    "parse",
    "rsa_decrypt",
    "rsa_encrypt",
    "solve_linear_congruence",
]
