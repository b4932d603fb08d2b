"""
Validated, exception-safe scalar math.

Every public function checks its inputs and raises a subclass of
:class:`NumericError` instead of returning NaN or a partial result:

- Arithmetic: add, subtract, multiply, divide
- Powers and roots: power, square_root
- Number theory: factorial, is_prime, fibonacci
- Statistics: average, median
"""

__version__ = "0.1.0"

from numops.exceptions import (
    DivisionByZeroError,
    EmptyOrInvalidInputError,
    InvalidNumberError,
    NegativeArgumentError,
    NegativeFactorialError,
    NegativeIndexError,
    NegativeRadicandError,
    NotAnIntegerError,
    NumericError,
    NumericOverflowError,
)
from numops.number_theory import factorial, fibonacci, is_prime
from numops.operations import add, divide, multiply, power, square_root, subtract
from numops.stats import average, median
from numops.validators import (
    validate_integer,
    validate_number,
    validate_numbers,
    validate_sequence,
)

__all__ = [
    "DivisionByZeroError",
    "EmptyOrInvalidInputError",
    "InvalidNumberError",
    "NegativeArgumentError",
    "NegativeFactorialError",
    "NegativeIndexError",
    "NegativeRadicandError",
    "NotAnIntegerError",
    "NumericError",
    "NumericOverflowError",
    "add",
    "average",
    "divide",
    "factorial",
    "fibonacci",
    "is_prime",
    "median",
    "multiply",
    "power",
    "square_root",
    "subtract",
    "validate_integer",
    "validate_number",
    "validate_numbers",
    "validate_sequence",
]
