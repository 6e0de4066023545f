# -----------------------------------------------------------------------------
#  errors.py
#  Exception taxonomy shared by the kernel and its collaborators
# -----------------------------------------------------------------------------

from __future__ import annotations


class NumKernelError(Exception):
    pass


class FormatError(NumKernelError, ValueError):
    """Malformed numeral text."""


class DivisionByZeroError(NumKernelError, ZeroDivisionError):
    """Zero divisor or zero modulus."""


class InvalidArgumentError(NumKernelError, ValueError):
    """A precondition on an argument does not hold (negative exponent, out of range, ...)."""


class NoSolutionError(NumKernelError, ArithmeticError):
    """A modular inverse or congruence has no solution."""


class ConfigError(NumKernelError):
    pass
