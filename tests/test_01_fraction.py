"""ExactFraction arithmetic, reduction and rendering."""
import math
import pytest
from fractions import Fraction
from matrixdet import ExactFraction


def test_construction_defaults_to_integer():
    x = ExactFraction(7)
    assert (x.numerator, x.denominator) == (7, 1)
    assert str(x) == "7"


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        ExactFraction(1, 0)


def test_multiply_does_not_reduce():
    x = ExactFraction(2, 3).multiply(ExactFraction(3, 4))
    assert (x.numerator, x.denominator) == (6, 12)
    assert x.reduce() == ExactFraction(1, 2)


def test_divide_keeps_denominator_positive():
    x = ExactFraction(3, 5).divide(ExactFraction(-2, 7))
    assert (x.numerator, x.denominator) == (-21, 10)
    y = ExactFraction(-3, 5).divide(ExactFraction(-3, 1))
    assert y.denominator > 0
    assert y.reduce() == ExactFraction(1, 5)


def test_divide_by_zero_fraction():
    with pytest.raises(ZeroDivisionError):
        ExactFraction(1, 2).divide(ExactFraction(0, 5))


def test_subtract_and_add():
    a, b = ExactFraction(1, 2), ExactFraction(1, 3)
    assert a.subtract(b).reduce() == ExactFraction(1, 6)
    assert a.add(b).reduce() == ExactFraction(5, 6)
    assert (a.subtract(a).numerator, a.subtract(a).reduce().denominator) == (0, 1)


@pytest.mark.parametrize("num,den", [(0, 7), (12, 18), (-12, 18), (12, -18), (-1, 5), (5, -1), (7, 1), (97, 89),
                                     (2**40, 2**20 * 3)])
def test_reduce_yields_lowest_terms(num, den):
    x = ExactFraction(num, den).reduce()
    assert x.denominator > 0
    assert math.gcd(abs(x.numerator), x.denominator) == 1
    assert Fraction(x.numerator, x.denominator) == Fraction(num, den)
    if num == 0:
        assert (x.numerator, x.denominator) == (0, 1)


def test_reduce_returns_same_object_when_already_minimal():
    x = ExactFraction(1, 9)
    assert x.reduce() is x


@pytest.mark.parametrize("num,den,expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (0, 5, 0)])
def test_to_integer_truncates_towards_zero(num, den, expected):
    assert ExactFraction(num, den).to_integer() == expected


def test_rendering():
    assert str(ExactFraction(0, 5)) == "0"
    assert str(ExactFraction(3, 1)) == "3"
    assert str(ExactFraction(-3, 4)) == "-3/4"
    assert repr(ExactFraction(-3, 4)) == "ExactFraction(-3, 4)"


def test_equality_and_hash_by_value():
    assert ExactFraction(2, 4) == ExactFraction(1, 2)
    assert ExactFraction(4, 2) == 2
    assert ExactFraction(1, 3) == Fraction(1, 3)
    assert hash(ExactFraction(2, 4)) == hash(ExactFraction(1, 2))
    assert ExactFraction(1, 2) != ExactFraction(1, 3)


def test_immutable_operands():
    a, b = ExactFraction(1, 2), ExactFraction(1, 4)
    a.multiply(b)
    a.subtract(b)
    assert (a.numerator, a.denominator, b.numerator, b.denominator) == (1, 2, 1, 4)


def test_operators_reduce():
    a, b = ExactFraction(1, 2), ExactFraction(1, 6)
    assert repr(a + b) == "ExactFraction(2, 3)"
    assert repr(a - b) == "ExactFraction(1, 3)"
    assert repr(a * b) == "ExactFraction(1, 12)"
    assert repr(a / b) == "ExactFraction(3, 1)"
    assert -a == ExactFraction(-1, 2)


def test_fraction_interop():
    x = ExactFraction.from_fraction(Fraction(-6, 8))
    assert (x.numerator, x.denominator) == (-3, 4)
    assert ExactFraction(6, -8).to_fraction() == Fraction(-3, 4)


def test_is_integer():
    assert ExactFraction(6, 3).is_integer()
    assert ExactFraction(-6, -3).is_integer()
    assert not ExactFraction(7, 3).is_integer()
    assert int(ExactFraction(-9, 3)) == -3
