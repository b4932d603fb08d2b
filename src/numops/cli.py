"""Command-line entry point: built-in self-check, demo and usage text."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

from numops import __version__
from numops.exceptions import DivisionByZeroError, NumericError
from numops.number_theory import factorial, fibonacci, is_prime
from numops.operations import add, divide, multiply, power, subtract
from numops.stats import average, median

USAGE = """\
numops - validated scalar math

Commands:
  numops test    run the built-in self-check
  numops demo    print sample results
  import numops  use as a library
"""


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for console output on stderr.

    Call once per process, before the first log call.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _expect(actual: Any, expected: Any) -> None:
    if actual != expected:
        raise AssertionError(f"expected {expected!r}, got {actual!r}")


def _expect_raises(exc_type: type[Exception], func: Callable[..., Any], *args: Any) -> None:
    try:
        func(*args)
    except exc_type:
        return
    raise AssertionError(f"{func.__name__}{args} did not raise {exc_type.__name__}")


def _check_addition() -> None:
    _expect(add(2, 3), 5)
    _expect(add(-1, 1), 0)


def _check_subtraction() -> None:
    _expect(subtract(5, 3), 2)
    _expect(subtract(10, 10), 0)


def _check_multiplication() -> None:
    _expect(multiply(2, 3), 6)
    _expect(multiply(-2, 3), -6)


def _check_division() -> None:
    _expect(divide(6, 3), 2)
    _expect(divide(10, 2), 5)


def _check_division_by_zero() -> None:
    _expect_raises(DivisionByZeroError, divide, 5, 0)


def _check_factorial() -> None:
    _expect(factorial(5), 120)
    _expect(factorial(0), 1)


def _check_power() -> None:
    _expect(power(2, 3), 8)
    _expect(power(5, 2), 25)


def _check_primes() -> None:
    _expect(is_prime(7), True)
    _expect(is_prime(4), False)
    _expect(is_prime(2), True)


def _check_fibonacci() -> None:
    _expect(fibonacci(6), 8)
    _expect(fibonacci(0), 0)
    _expect(fibonacci(1), 1)


def _check_statistics() -> None:
    _expect(average([1, 2, 3, 4, 5]), 3)
    _expect(median([1, 3, 2]), 2)
    _expect(median([1, 2, 3, 4]), 2.5)


SELF_CHECKS: list[tuple[str, Callable[[], None]]] = [
    ("Addition", _check_addition),
    ("Subtraction", _check_subtraction),
    ("Multiplication", _check_multiplication),
    ("Division", _check_division),
    ("Division by zero", _check_division_by_zero),
    ("Factorial", _check_factorial),
    ("Power", _check_power),
    ("Prime numbers", _check_primes),
    ("Fibonacci", _check_fibonacci),
    ("Statistical functions", _check_statistics),
]


def run_self_check(checks: list[tuple[str, Callable[[], None]]] | None = None) -> bool:
    """Run the self-check battery, print a line per check and a summary.

    Returns True when every check passed.
    """
    log = structlog.get_logger("numops.cli")
    checks = SELF_CHECKS if checks is None else checks
    passed = 0

    print("Running built-in checks...")
    for name, check in checks:
        try:
            check()
        except (AssertionError, NumericError) as e:
            print(f"  FAIL {name}: {e}")
            log.warning("check_failed", check=name, error=str(e), error_type=type(e).__name__)
            continue
        print(f"  PASS {name}")
        log.debug("check_passed", check=name)
        passed += 1

    print(f"\nResults: {passed}/{len(checks)} checks passed")
    if passed == len(checks):
        print("All checks passed")
        return True
    print("Some checks failed")
    return False


def demonstrate() -> None:
    """Print a handful of sample invocations."""
    print("numops demo")
    print("2 + 3 =", add(2, 3))
    print("5 * 4 =", multiply(5, 4))
    print("Factorial of 5 =", factorial(5))
    print("Is 17 prime?", is_prime(17))
    print("Fibonacci(7) =", fibonacci(7))
    print("Average of [1, 2, 3, 4, 5] =", average([1, 2, 3, 4, 5]))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numops",
        description="Validated scalar math: self-check and demo.",
    )
    parser.add_argument("command", nargs="?", choices=["test", "demo"], default=None)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log every check, not only failures",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    log = structlog.get_logger("numops.cli")

    if args.command == "test":
        log.debug("command_started", command="test")
        return 0 if run_self_check() else 1
    if args.command == "demo":
        log.debug("command_started", command="demo")
        demonstrate()
        return 0

    print(USAGE, end="")
    return 0
