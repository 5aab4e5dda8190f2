#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exact rational numbers for determinant computation

ExactFraction is a numerator/denominator pair of Python integers. Unlike
fractions.Fraction it is not reduced automatically: multiply, divide,
subtract and add return the raw result and the caller decides when to
call reduce(). The elimination in matrixdet.grid reduces after every
multiplication, division and subtraction to bound the growth of the terms.
"""

from fractions import Fraction
from typing import Union
import math

__all__ = ['ExactFraction']


class ExactFraction:
    """Immutable fraction of two integers

    The sign is carried by the numerator; reduce() normalizes the
    denominator to be positive.

    Example:
        >>> half = ExactFraction(1, 2)
        >>> third = ExactFraction(1, 3)
        >>> print(half.subtract(third))
        1/6
        >>> print(ExactFraction(6, -4).reduce())
        -3/2
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: Union[int, 'ExactFraction'], denominator: int = None):
        """Constructor

        Args:
            numerator (int or ExactFraction):
                Integer numerator, or an ExactFraction to copy.

            denominator (int):
                Optional denominator, 1 if omitted.
        """
        if isinstance(numerator, ExactFraction):
            if denominator is not None:
                raise TypeError("Cannot combine an ExactFraction with a denominator")
            numerator, denominator = numerator._numerator, numerator._denominator
        elif denominator is None:
            denominator = 1
        if denominator == 0:
            raise ZeroDivisionError("Denominator of a fraction must not be zero")
        self._numerator = int(numerator)
        self._denominator = int(denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def multiply(self, other: 'ExactFraction') -> 'ExactFraction':
        """Product, not reduced"""
        other = _as_fraction(other)
        return ExactFraction(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: 'ExactFraction') -> 'ExactFraction':
        """Quotient, not reduced

        A negative divisor flips the sign of both terms of the result, so that
        a positive denominator stays positive.

        Raises:
            ZeroDivisionError: if other is zero.
        """
        other = _as_fraction(other)
        if other.is_zero():
            raise ZeroDivisionError("Division by zero fraction")
        numerator = self._numerator * other._denominator
        denominator = self._denominator * other._numerator
        if other._numerator < 0:
            numerator, denominator = -numerator, -denominator
        return ExactFraction(numerator, denominator)

    def subtract(self, other: 'ExactFraction') -> 'ExactFraction':
        """Difference, not reduced"""
        other = _as_fraction(other)
        return ExactFraction(self._numerator * other._denominator - other._numerator * self._denominator,
                             self._denominator * other._denominator)

    def add(self, other: 'ExactFraction') -> 'ExactFraction':
        """Sum, not reduced"""
        other = _as_fraction(other)
        return ExactFraction(self._numerator * other._denominator + other._numerator * self._denominator,
                             self._denominator * other._denominator)

    def negate(self) -> 'ExactFraction':
        return ExactFraction(-self._numerator, self._denominator)

    def reduce(self) -> 'ExactFraction':
        """Lowest terms with a positive denominator

        Zero always reduces to 0/1.
        """
        if self._numerator == 0:
            return ExactFraction(0)
        numerator, denominator = self._numerator, self._denominator
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if abs(numerator) == 1 or denominator == 1:
            if denominator == self._denominator:
                return self
            return ExactFraction(numerator, denominator)
        gcd = math.gcd(abs(numerator), denominator)
        return ExactFraction(numerator // gcd, denominator // gcd)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._numerator % self._denominator == 0

    def signum(self) -> int:
        """Sign of the value: -1, 0 or 1"""
        if self._numerator == 0:
            return 0
        return 1 if (self._numerator > 0) == (self._denominator > 0) else -1

    def to_integer(self) -> int:
        """Integer part, truncated towards zero

        No check is made that the value is integral.
        """
        quotient = abs(self._numerator) // abs(self._denominator)
        return quotient if self.signum() >= 0 else -quotient

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    @staticmethod
    def from_fraction(value: Fraction) -> 'ExactFraction':
        return ExactFraction(value.numerator, value.denominator)

    def __eq__(self, other) -> bool:
        if isinstance(other, int):
            other = ExactFraction(other)
        elif isinstance(other, Fraction):
            other = ExactFraction.from_fraction(other)
        if isinstance(other, ExactFraction):
            return self._numerator * other._denominator == other._numerator * self._denominator
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_fraction())

    def __str__(self) -> str:
        if self._numerator == 0 or self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"ExactFraction({self._numerator}, {self._denominator})"

    # operators, reducing the result
    def __add__(self, other):
        return self.add(other).reduce()

    def __sub__(self, other):
        return self.subtract(other).reduce()

    def __mul__(self, other):
        return self.multiply(other).reduce()

    def __truediv__(self, other):
        return self.divide(other).reduce()

    def __neg__(self):
        return self.negate()

    def __int__(self):
        return self.to_integer()


def _as_fraction(value) -> ExactFraction:
    if isinstance(value, ExactFraction):
        return value
    if isinstance(value, Fraction):
        return ExactFraction.from_fraction(value)
    if isinstance(value, int):
        return ExactFraction(value)
    raise TypeError(f"Cannot use {type(value).__name__} as an exact fraction")
