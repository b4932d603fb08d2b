"""Integer sequences and primality."""

import math

from numops.exceptions import NegativeFactorialError, NegativeIndexError
from numops.validators import validate_integer


def factorial(n: int) -> int:
    """
    Return n! computed iteratively.

    ``n`` may be given as an integral float (``5.0``); the result is always an int.

    Raises:
        InvalidNumberError: If n is not a finite number
        NotAnIntegerError: If n has a fractional part
        NegativeFactorialError: If n is negative
    """
    validate_integer(n)

    if n < 0:
        raise NegativeFactorialError(n)
    if n in (0, 1):
        return 1

    result = 1
    for i in range(2, int(n) + 1):
        result *= i
    return result


def is_prime(n: int) -> bool:
    """
    Test n for primality by trial division.

    Only odd candidates up to the integer square root of n are tried, since
    a composite n always has a factor no larger than sqrt(n).

    Raises:
        InvalidNumberError: If n is not a finite number
        NotAnIntegerError: If n has a fractional part
    """
    validate_integer(n)

    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    n = int(n)
    for d in range(3, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def fibonacci(n: int) -> int:
    """
    Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1.

    Raises:
        InvalidNumberError: If n is not a finite number
        NotAnIntegerError: If n has a fractional part
        NegativeIndexError: If n is negative
    """
    validate_integer(n)

    if n < 0:
        raise NegativeIndexError(n)

    a, b = 0, 1
    for _ in range(int(n)):
        a, b = b, a + b
    return a
