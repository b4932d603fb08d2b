"""Descriptive statistics over non-empty numeric sequences."""

import math
from collections.abc import Sequence

from numops.validators import validate_sequence


def average(values: Sequence[float]) -> float:
    """
    Return the arithmetic mean of values.

    Raises:
        EmptyOrInvalidInputError: If values is not a non-empty sequence
        InvalidNumberError: If any element is invalid
    """
    numbers = validate_sequence(values)
    count = len(numbers)
    try:
        return math.fsum(numbers) / count
    except OverflowError:
        # Partial sums left the float range; scale each term first
        return math.fsum(x / count for x in numbers)


def median(values: Sequence[float]) -> float:
    """
    Return the median of values.

    For an even count this is the mean of the two middle elements. The
    input sequence is left untouched.

    Raises:
        EmptyOrInvalidInputError: If values is not a non-empty sequence
        InvalidNumberError: If any element is invalid
    """
    ordered = sorted(validate_sequence(values))
    mid = len(ordered) // 2

    if len(ordered) % 2 == 0:
        low, high = ordered[mid - 1], ordered[mid]
        midpoint = (low + high) / 2
        if math.isinf(midpoint):
            return low / 2 + high / 2
        return midpoint
    return ordered[mid]
