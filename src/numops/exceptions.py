"""Custom exceptions for the numops package."""

from typing import Any


class NumericError(Exception):
    """Base exception for all numops errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class InvalidNumberError(NumericError):
    """Raised when a value is not a finite real number (NaN, Inf, wrong type)."""

    def __init__(self, value: Any, reason: str = "Invalid number") -> None:
        super().__init__(reason, value)
        self.reason = reason


class NotAnIntegerError(NumericError):
    """Raised when a number has a fractional part where an integer is required."""

    def __init__(self, value: float) -> None:
        super().__init__("Expected integer", value)


class DivisionByZeroError(NumericError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NegativeArgumentError(NumericError):
    """Base for operations that are undefined on negative arguments."""


class NegativeRadicandError(NegativeArgumentError):
    """Raised when taking the square root of a negative number."""

    def __init__(self, value: float) -> None:
        super().__init__("Square root of negative numbers is not supported", value)


class NegativeFactorialError(NegativeArgumentError):
    """Raised when computing the factorial of a negative number."""

    def __init__(self, value: float) -> None:
        super().__init__("Factorial of negative numbers is not defined", value)


class NegativeIndexError(NegativeArgumentError):
    """Raised when a Fibonacci index is negative."""

    def __init__(self, value: float) -> None:
        super().__init__("Fibonacci sequence index cannot be negative", value)


class EmptyOrInvalidInputError(NumericError):
    """Raised when a sequence argument is missing, empty, or not a sequence."""

    def __init__(self, value: Any) -> None:
        super().__init__("Input must be a non-empty sequence of numbers", value)


class NumericOverflowError(NumericError):
    """Raised when a result does not fit in a float."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands
