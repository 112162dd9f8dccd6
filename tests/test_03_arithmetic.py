"""Arithmetic operators, in-place forms, increment/decrement and powers."""
import itertools
import math
import numpy as np
import pytest
from fixedrational import Rational, DomainError

# =============================================================================
# Helpers
# =============================================================================


def is_canonical(value):
    return math.gcd(abs(int(value.numerator)), int(value.denominator)) == 1 and value.denominator > 0


def small_values(dtype, nonzero=False):
    values = [Rational(n, d, dtype=dtype) for n in range(-4, 5) for d in range(1, 5)]
    if nonzero:
        values = [v for v in values if v != 0]
    return values


# =============================================================================
# Rational with rational
# =============================================================================


def test_addition(dtype):
    """1/3 + 1/6 is stored as 1/2."""
    result = Rational(1, 3, dtype=dtype) + Rational(1, 6, dtype=dtype)
    assert (result.numerator, result.denominator) == (1, 2)
    assert result.dtype is dtype


def test_subtraction(dtype):
    result = Rational(1, 2, dtype=dtype) - Rational(1, 3, dtype=dtype)
    assert (result.numerator, result.denominator) == (1, 6)


def test_subtraction_to_negative(signed_dtype):
    result = Rational(1, 3, dtype=signed_dtype) - Rational(1, 2, dtype=signed_dtype)
    assert (result.numerator, result.denominator) == (-1, 6)


def test_multiplication(dtype):
    result = Rational(2, 3, dtype=dtype) * Rational(3, 4, dtype=dtype)
    assert (result.numerator, result.denominator) == (1, 2)


def test_division(dtype):
    result = Rational(1, 2, dtype=dtype) / Rational(1, 4, dtype=dtype)
    assert (result.numerator, result.denominator) == (2, 1)


def test_division_by_negative_keeps_denominator_positive(signed_dtype):
    result = Rational(1, 2, dtype=signed_dtype) / Rational(-3, 4, dtype=signed_dtype)
    assert (result.numerator, result.denominator) == (-2, 3)


def test_division_by_zero_raises():
    value = Rational(1, 2)
    with pytest.raises(DomainError):
        value / Rational(0)
    with pytest.raises(DomainError):
        value /= Rational(0)
    assert value == Rational(1, 2)


def test_operands_are_not_modified():
    a = Rational(1, 2)
    b = Rational(1, 3)
    a + b
    a * b
    assert a == Rational(1, 2)
    assert b == Rational(1, 3)


def test_mixed_base_types_raise():
    with pytest.raises(TypeError):
        Rational(1, dtype=np.int8) + Rational(1, dtype=np.int16)


def test_floats_are_not_operands():
    with pytest.raises(TypeError):
        Rational(1, 2) + 0.5
    with pytest.raises(TypeError):
        0.5 * Rational(1, 2)


# =============================================================================
# Rational with integer
# =============================================================================


def test_integer_operands(dtype):
    half = Rational(1, 2, dtype=dtype)
    assert half + 1 == Rational(3, 2, dtype=dtype)
    assert 1 + half == Rational(3, 2, dtype=dtype)
    assert Rational(3, 2, dtype=dtype) - 1 == half
    assert 3 * Rational(1, 6, dtype=dtype) == half
    assert Rational(1, 6, dtype=dtype) * 3 == half
    assert half / 2 == Rational(1, 4, dtype=dtype)
    assert 1 / Rational(2, 3, dtype=dtype) == Rational(3, 2, dtype=dtype)


def test_integer_minus_rational(signed_dtype):
    assert 1 - Rational(1, 4, dtype=signed_dtype) == Rational(3, 4, dtype=signed_dtype)
    assert 0 - Rational(1, 4, dtype=signed_dtype) == Rational(-1, 4, dtype=signed_dtype)


def test_integer_on_the_left_all_base_types(dtype):
    """Integer minus rational and integer over rational stay exact for every base type."""
    assert 1 - Rational(2, 3, dtype=dtype) == Rational(1, 3, dtype=dtype)
    assert 3 - Rational(1, 2, dtype=dtype) == Rational(5, 2, dtype=dtype)
    assert 2 / Rational(4, 3, dtype=dtype) == Rational(3, 2, dtype=dtype)
    result = 1 - Rational(2, 3, dtype=dtype)
    assert (result.numerator, result.denominator) == (1, 3)
    assert result.dtype is dtype


def test_integer_minus_rational_keeps_operand():
    value = Rational(1, 4)
    assert 2 - value == Rational(7, 4)
    assert value == Rational(1, 4)


def test_division_by_integer_zero_raises():
    value = Rational(1, 2)
    with pytest.raises(DomainError):
        value / 0
    with pytest.raises(DomainError):
        value /= 0
    with pytest.raises(DomainError):
        5 / Rational(0)
    assert value == Rational(1, 2)


def test_numpy_scalar_on_the_left():
    result = np.int32(1) + Rational(1, 2, dtype=np.int32)
    assert isinstance(result, Rational)
    assert result == Rational(3, 2, dtype=np.int32)


def test_overflow_is_inherited_from_base_type():
    """int8 arithmetic wraps around, nothing is masked."""
    with np.errstate(over='ignore'):
        result = Rational(100, dtype=np.int8) * 2
    assert result.numerator == -56


# =============================================================================
# In-place forms
# =============================================================================


def test_in_place_operators_mutate():
    value = Rational(1, 2)
    alias = value
    value += Rational(1, 2)
    assert value is alias
    assert value == 1
    value -= 3
    assert value == -2
    value *= Rational(1, 4)
    assert value == Rational(-1, 2)
    value /= Rational(-1, 4)
    assert value is alias
    assert value == 2


def test_in_place_operators_chain():
    value = Rational(1, 2)
    assert value.__iadd__(1).__imul__(2) is value
    assert value == 3


# =============================================================================
# Unary operators
# =============================================================================


def test_unary_plus_copies():
    value = Rational(1, 2)
    result = +value
    assert result == value
    assert result is not value


def test_negation(signed_dtype):
    assert -Rational(1, 2, dtype=signed_dtype) == Rational(-1, 2, dtype=signed_dtype)
    assert -Rational(-1, 2, dtype=signed_dtype) == Rational(1, 2, dtype=signed_dtype)


def test_invert(signed_dtype):
    assert ~Rational(2, 3, dtype=signed_dtype) == Rational(3, 2, dtype=signed_dtype)
    inverted = ~Rational(-2, 3, dtype=signed_dtype)
    assert (inverted.numerator, inverted.denominator) == (-3, 2)
    assert Rational(5, dtype=signed_dtype).invert() == Rational(1, 5, dtype=signed_dtype)


def test_invert_zero_raises():
    with pytest.raises(DomainError):
        ~Rational(0)
    with pytest.raises(DomainError):
        Rational(0, 5).invert()


def test_abs(signed_dtype):
    assert abs(Rational(-3, 4, dtype=signed_dtype)) == Rational(3, 4, dtype=signed_dtype)
    assert abs(Rational(3, 4, dtype=signed_dtype)) == Rational(3, 4, dtype=signed_dtype)


# =============================================================================
# Increment and decrement
# =============================================================================


def test_increment_and_decrement():
    value = Rational(1, 2)
    assert value.increment() is value
    assert value == Rational(3, 2)
    assert value.decrement().decrement() == Rational(-1, 2)


def test_post_increment_and_decrement():
    value = Rational(1, 3)
    previous = value.post_increment()
    assert previous == Rational(1, 3)
    assert value == Rational(4, 3)
    previous = value.post_decrement()
    assert previous == Rational(4, 3)
    assert value == Rational(1, 3)


def test_increment_keeps_canonical_form(signed_dtype):
    for value in small_values(signed_dtype):
        before = Rational(value)
        assert is_canonical(value.increment())
        assert value.denominator == before.denominator
        assert is_canonical(value.decrement())
        assert value == before


# =============================================================================
# Properties
# =============================================================================


def test_identities(signed_dtype):
    zero = Rational(0, dtype=signed_dtype)
    one = Rational(1, dtype=signed_dtype)
    for value in small_values(signed_dtype):
        assert value + zero == value
        assert value * one == value
        assert value - value == zero


def test_division_round_trip():
    """(a / b) * b == a for nonzero b."""
    for a, b in itertools.product(small_values(np.int64), small_values(np.int64, nonzero=True)):
        assert (a / b) * b == a


def test_results_are_canonical(signed_dtype):
    values = small_values(signed_dtype, nonzero=True)
    for a, b in itertools.product(values[::3], values[::2]):
        for result in (a + b, a - b, a * b, a / b):
            assert is_canonical(result)


# =============================================================================
# Powers
# =============================================================================


def test_power():
    assert Rational(2, 3) ** 3 == Rational(8, 27)
    assert Rational(-2, 3) ** 3 == Rational(-8, 27)
    assert Rational(2, 3) ** 0 == 1
    assert Rational(0) ** 0 == 1
    assert Rational(2, 3) ** -2 == Rational(9, 4)
    assert Rational(-2, 3) ** -1 == Rational(-3, 2)


def test_power_is_exact():
    result = Rational(3, 2, dtype=int) ** 40
    assert result.numerator == 3**40
    assert result.denominator == 2**40
    result = Rational(3, dtype=np.int64) ** 39
    assert result.numerator == 3**39


def test_power_of_zero_with_negative_exponent_raises():
    with pytest.raises(DomainError):
        Rational(0) ** -1


def test_power_requires_integral_exponent():
    with pytest.raises(TypeError):
        Rational(1, 4) ** 0.5


# =============================================================================
# Numeric protocol
# =============================================================================


def test_conversions():
    assert float(Rational(1, 4)) == 0.25
    assert int(Rational(-7, 2)) == -3
    assert math.trunc(Rational(7, 2)) == 3
    assert math.floor(Rational(-7, 2)) == -4
    assert math.ceil(Rational(-7, 2)) == -3
    assert math.ceil(Rational(7, 2)) == 4
    assert round(Rational(5, 2)) == 2
    assert round(Rational(7, 2)) == 4
    assert round(Rational(1, 3), 2) == Rational(33, 100)
    assert not Rational(0)
    assert Rational(1, 5)
