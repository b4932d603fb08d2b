"""Input validation functions with strict type checking."""

import math
from collections.abc import Sequence
from typing import Any, TypeVar

from numops.exceptions import EmptyOrInvalidInputError, InvalidNumberError, NotAnIntegerError

T = TypeVar("T", int, float)

# Sequence types that hold characters rather than numbers
_TEXT_TYPES = (str, bytes, bytearray)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidNumberError: If value is NaN, Inf, a bool, an int too large
            for a float, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidNumberError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidNumberError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidNumberError(value, "Infinity is not allowed")
    else:
        try:
            float(value)
        except OverflowError:
            raise InvalidNumberError(value, "Integer too large for a float") from None

    return value


def validate_numbers(*values: float) -> tuple[float, ...]:
    """
    Validate every argument with validate_number.

    Stops at the first invalid argument.

    Raises:
        InvalidNumberError: If any value is invalid
    """
    for value in values:
        validate_number(value)
    return values


def validate_integer(value: T) -> T:
    """
    Validate that a value is a finite number with no fractional part.

    Both ``5`` and ``5.0`` are accepted.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidNumberError: If value is not a finite number
        NotAnIntegerError: If value has a fractional part
    """
    validate_number(value)

    if isinstance(value, float) and not value.is_integer():
        raise NotAnIntegerError(value)

    return value


def validate_sequence(values: Any) -> list[float]:
    """
    Validate a non-empty sequence of finite numbers.

    Args:
        values: The sequence to validate

    Returns:
        A new list holding the validated elements

    Raises:
        EmptyOrInvalidInputError: If values is not a sequence, is text, or is empty
        InvalidNumberError: If any element is invalid
    """
    if not isinstance(values, Sequence) or isinstance(values, _TEXT_TYPES):
        raise EmptyOrInvalidInputError(values)

    if len(values) == 0:
        raise EmptyOrInvalidInputError(values)

    return [validate_number(value) for value in values]
