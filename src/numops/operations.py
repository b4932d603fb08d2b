"""Core arithmetic operations, powers and roots."""

import math

from numops.exceptions import (
    DivisionByZeroError,
    InvalidNumberError,
    NegativeRadicandError,
    NumericOverflowError,
)
from numops.validators import validate_number, validate_numbers


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidNumberError: If inputs are invalid
    """
    validate_numbers(a, b)
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidNumberError: If inputs are invalid
    """
    validate_numbers(a, b)
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidNumberError: If inputs are invalid
    """
    validate_numbers(a, b)
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Inverse of multiply: divide(multiply(a, b), b) == a (for b != 0)
        - Identity: divide(a, 1) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidNumberError: If inputs are invalid
        DivisionByZeroError: If b is exactly zero
    """
    validate_numbers(a, b)

    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1
        - One base: power(1, n) == 1

    Args:
        base: The base number
        exponent: The exponent, may be negative or fractional

    Returns:
        base raised to the power of exponent

    Raises:
        InvalidNumberError: If inputs are invalid or the result is not a real number
        NumericOverflowError: If the result is too large for a float
    """
    validate_numbers(base, exponent)

    if base == 0 and exponent < 0:
        raise InvalidNumberError((base, exponent), "0 cannot be raised to negative power")

    if base < 0 and not float(exponent).is_integer():
        raise InvalidNumberError((base, exponent), "Negative base with non-integer exponent")

    try:
        return math.pow(base, exponent)
    except OverflowError as e:
        raise NumericOverflowError("exponentiation", base, exponent) from e
    except ValueError as e:
        raise InvalidNumberError((base, exponent), str(e)) from e


def square_root(n: float) -> float:
    """
    Return the non-negative square root of n.

    Raises:
        InvalidNumberError: If n is invalid
        NegativeRadicandError: If n is negative
    """
    validate_number(n)

    if n < 0:
        raise NegativeRadicandError(n)

    return math.sqrt(n)
