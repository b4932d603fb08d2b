"""Unit tests for arithmetic operations, powers and roots."""

import math

import pytest

from numops import (
    DivisionByZeroError,
    InvalidNumberError,
    NegativeRadicandError,
    NumericOverflowError,
    add,
    divide,
    multiply,
    power,
    square_root,
    subtract,
)


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert add(2, 3) == 5

    def test_add_negative_numbers(self):
        assert add(-2, -3) == -5

    def test_add_mixed_signs(self):
        assert add(-1, 1) == 0

    def test_add_with_zero(self):
        assert add(5, 0) == 5
        assert add(0, 5) == 5

    def test_add_floats(self):
        result = add(0.1, 0.2)
        assert abs(result - 0.3) < 1e-10

    def test_add_large_numbers(self):
        assert add(1e100, 1e100) == 2e100

    def test_add_overflow_follows_float_semantics(self):
        assert add(1e308, 1e308) == math.inf

    def test_add_rejects_nan(self):
        with pytest.raises(InvalidNumberError):
            add(float("nan"), 1)

    def test_add_rejects_int_beyond_float_range(self):
        with pytest.raises(InvalidNumberError):
            add(10**400, 0.5)

    def test_add_rejects_inf(self):
        with pytest.raises(InvalidNumberError):
            add(1, float("inf"))

    def test_add_rejects_every_invalid_operand(self, invalid_numbers):
        for value in invalid_numbers:
            with pytest.raises(InvalidNumberError):
                add(value, 1)


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_positive_numbers(self):
        assert subtract(5, 3) == 2

    def test_subtract_resulting_negative(self):
        assert subtract(3, 5) == -2

    def test_subtract_same_number(self):
        assert subtract(10, 10) == 0

    def test_subtract_rejects_string(self):
        with pytest.raises(InvalidNumberError):
            subtract(5, "3")  # type: ignore


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_positive_numbers(self):
        assert multiply(2, 3) == 6

    def test_multiply_with_negative(self):
        assert multiply(-2, 3) == -6
        assert multiply(3, -4) == -12

    def test_multiply_two_negatives(self):
        assert multiply(-3, -4) == 12

    def test_multiply_by_zero(self):
        assert multiply(1000, 0) == 0

    def test_multiply_rejects_none(self):
        with pytest.raises(InvalidNumberError):
            multiply(None, 2)  # type: ignore


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        assert divide(6, 3) == 2
        assert divide(10, 2) == 5

    def test_divide_with_remainder(self):
        assert divide(7, 2) == 3.5

    def test_divide_negative(self):
        assert divide(-10, 2) == -5
        assert divide(10, -2) == -5

    def test_divide_zero_by_number(self):
        assert divide(0, 5) == 0

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(5, 0)
        assert exc_info.value.numerator == 5

    def test_divide_by_float_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(5, 0.0)

    def test_divide_by_negative_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(5, -0.0)

    def test_divide_by_tiny_number_is_allowed(self):
        assert divide(1, 1e-300) == pytest.approx(1e300)

    def test_divide_validates_before_zero_check(self):
        with pytest.raises(InvalidNumberError):
            divide(float("nan"), 0)


class TestPower:
    """Tests for the power function."""

    def test_power_positive_exponent(self):
        assert power(2, 3) == 8
        assert power(5, 2) == 25

    def test_power_zero_exponent(self):
        assert power(5, 0) == 1

    def test_power_negative_exponent(self):
        assert power(2, -1) == 0.5

    def test_power_fractional_exponent(self):
        assert abs(power(4, 0.5) - 2) < 1e-10

    def test_power_negative_base_integer_exponent(self):
        assert power(-2, 3) == -8
        assert power(-2, 2.0) == 4

    def test_power_zero_base_positive_exp(self):
        assert power(0, 5) == 0

    def test_power_zero_base_negative_exp_raises(self):
        with pytest.raises(InvalidNumberError):
            power(0, -1)

    def test_power_negative_base_non_integer_raises(self):
        with pytest.raises(InvalidNumberError):
            power(-8, 1 / 3)

    def test_power_overflow_raises(self):
        with pytest.raises(NumericOverflowError) as exc_info:
            power(10, 400)
        assert exc_info.value.operation == "exponentiation"

    def test_power_rejects_inf(self):
        with pytest.raises(InvalidNumberError):
            power(float("inf"), 2)


class TestSquareRoot:
    """Tests for the square_root function."""

    def test_perfect_square(self):
        assert square_root(16) == 4

    def test_zero(self):
        assert square_root(0) == 0

    def test_fraction(self):
        assert square_root(0.25) == 0.5

    def test_irrational(self):
        assert square_root(2) == pytest.approx(1.41421356237)

    def test_negative_raises(self):
        with pytest.raises(NegativeRadicandError) as exc_info:
            square_root(-1)
        assert exc_info.value.value == -1

    def test_rejects_nan(self):
        with pytest.raises(InvalidNumberError):
            square_root(float("nan"))

    def test_rejects_int_beyond_float_range(self):
        with pytest.raises(InvalidNumberError):
            square_root(10**400)
