# src/numkernel/cli.py

"""
numkernel - number-theory kernel on the command line

    numkernel isprime 97 100 4759123141
    numkernel gcd 35 15
    numkernel powmod 2 100 1000000007
    numkernel sieve 30 --limit 10
    numkernel calc 123456789012345678901234567890 / -987654321

usage: numkernel -h
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import textwrap
import time
import traceback

from colorama import Fore, Style
from colorama import init as colorama_init

from numkernel import __version__ as _ver
from numkernel.bigint import BigInteger
from numkernel.config import load_settings
from numkernel.congruence import mod_inverse, solve_linear_congruence
from numkernel.errors import NumKernelError
from numkernel.euclid import extended_gcd
from numkernel.modular import mod_exponentiate, mod_multiply
from numkernel.primes import is_prime
from numkernel.runtime import APPLY, ensure_runtime_deps
from numkernel.runtime import current as _rt_current
from numkernel.sieve import build


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    faulthandler.enable()

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not msg.startswith("Error:"):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _debug(msg: str) -> None:
    if _rt_current().debug:
        print(f"{Fore.CYAN}[debug]{Style.RESET_ALL} {msg}", file=sys.stderr)


def _int_arg(text: str) -> int:
    """argparse type: plain decimal integers only, underscores allowed."""
    try:
        return int(text.replace("_", ""), 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _count_arg(text: str) -> int:
    """argparse type: like _int_arg, but zero or positive."""
    n = _int_arg(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be zero or positive: {text!r}")
    return n


# ---- commands ----


def _cmd_isprime(args) -> int:
    for n in args.numbers:
        verdict = (
            f"{Fore.GREEN}prime{Style.RESET_ALL}" if is_prime(n)
            else f"{Fore.YELLOW}composite{Style.RESET_ALL}" if n > 1
            else "neither prime nor composite"
        )
        print(f"{n}: {verdict}")
    return 0


def _cmd_gcd(args) -> int:
    g, x, y = extended_gcd(args.a, args.b)
    print(f"gcd({args.a}, {args.b}) = {g}")
    print(f"{args.a}·({x}) + {args.b}·({y}) = {g}")
    return 0


def _cmd_mulmod(args) -> int:
    print(mod_multiply(args.x, args.y, args.m))
    return 0


def _cmd_powmod(args) -> int:
    print(mod_exponentiate(args.x, args.y, args.m))
    return 0


def _cmd_inverse(args) -> int:
    print(mod_inverse(args.a, args.m))
    return 0


def _cmd_solve(args) -> int:
    sols = solve_linear_congruence(args.a, args.b, args.m)
    print(f"{args.a}·x ≡ {args.b} (mod {args.m}): " + ", ".join(str(x) for x in sols))
    return 0


def _cmd_sieve(args) -> int:
    t0 = time.perf_counter()
    table = build(args.n)
    _debug(f"sieve up to {args.n} built in {time.perf_counter() - t0:.3f}s")

    primes = table.primes
    shown = primes[: args.limit] if args.limit else primes
    more = "" if len(shown) == len(primes) else f" … ({len(primes) - len(shown)} more)"
    print(f"{Style.BRIGHT}π({args.n}) = {len(primes)}{Style.RESET_ALL}")
    print(textwrap.fill(" ".join(map(str, shown)) + more, width=78))
    n = args.n
    if n >= 2:
        fac = " · ".join(f"{p}^{e}" if e > 1 else str(p) for p, e in table.factorize(n).items())
        print(f"{n} = {fac}   φ = {table.phi(n)}   μ = {table.mobius(n)}")
    return 0


_OPS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a // b,
    "%": lambda a, b: a % b,
}


def _cmd_calc(args) -> int:
    a = BigInteger(args.a)
    b = BigInteger(args.b)
    print(_OPS[args.op](a, b))
    return 0


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="numkernel",
        description="Number-theory kernel: primality, modular arithmetic, sieves and big integers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    p.add_argument("--profile", default=None, help="TOML profile from the workspace profiles folder")
    p.add_argument("--debug", action="store_true", help="Show timings and full tracebacks")

    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    c = sub.add_parser("isprime", help="deterministic Miller-Rabin for 64-bit integers")
    c.add_argument("numbers", nargs="+", type=_int_arg, metavar="N")
    c.set_defaults(func=_cmd_isprime)

    c = sub.add_parser("gcd", help="gcd and Bezout coefficients")
    c.add_argument("a", type=_int_arg)
    c.add_argument("b", type=_int_arg)
    c.set_defaults(func=_cmd_gcd)

    for name, fn, what in (
        ("mulmod", _cmd_mulmod, "x·y mod m"),
        ("powmod", _cmd_powmod, "x^y mod m"),
    ):
        c = sub.add_parser(name, help=what)
        c.add_argument("x", type=_int_arg)
        c.add_argument("y", type=_int_arg)
        c.add_argument("m", type=_int_arg)
        c.set_defaults(func=fn)

    c = sub.add_parser("inverse", help="modular inverse of a modulo m")
    c.add_argument("a", type=_int_arg)
    c.add_argument("m", type=_int_arg)
    c.set_defaults(func=_cmd_inverse)

    c = sub.add_parser("solve", help="all x with a·x ≡ b (mod m)")
    c.add_argument("a", type=_int_arg)
    c.add_argument("b", type=_int_arg)
    c.add_argument("m", type=_int_arg)
    c.set_defaults(func=_cmd_solve)

    c = sub.add_parser("sieve", help="primes, φ and μ up to N")
    c.add_argument("n", type=_int_arg, metavar="N")
    c.add_argument("--limit", type=_count_arg, default=50, help="primes to print (0 = all)")
    c.set_defaults(func=_cmd_sieve)

    # BigInteger operands stay strings: parsing is the BigInteger's job
    c = sub.add_parser("calc", help="big-integer arithmetic, truncating / and %%")
    c.add_argument("a")
    c.add_argument("op", choices=sorted(_OPS))
    c.add_argument("b")
    c.set_defaults(func=_cmd_calc)

    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except (NumKernelError, FileNotFoundError) as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = "--debug" in (argv if argv is not None else sys.argv)
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:
    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not ensure_runtime_deps(strict=True):
        return 1

    settings = load_settings(args.profile)
    APPLY(settings)
    rt = _rt_current()
    rt.debug = rt.debug or bool(args.debug)
    _install_loud_error_handlers(rt.debug)
    _debug(f"profile '{rt.profile_name}' ({settings.description})")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
