# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Signed fractions over non-negative integers.

A `Fraction` holds its sign separately from numerator and denominator, both
of which are non-negative and kept in lowest terms. Three numerator /
denominator combinations are reserved:

    0/1     zero
    0/0     not a number
    1/0     infinity (signed)

Arithmetic never fails; undefined results are mapped onto these sentinels.
"""

from __future__ import annotations

import fractions
import math
import sys
from numbers import Integral, Rational, Real
from operator import index
from typing import Any, Tuple, Union

from .conversion import approximate


__all__ = ['Fraction']


Operand = Union['Fraction', Real]


def simplify(numerator: int, denominator: int) -> Tuple[int, int]:
    """Return `numerator` and `denominator` divided by their gcd."""
    if numerator == 0 and denominator == 0:
        return 0, 0
    div = math.gcd(numerator, denominator)
    return numerator // div, denominator // div


def lcm(a: int, b: int) -> int:
    """Return least common multiple of `a` and `b`."""
    return max(simplify(a, b)) * min(a, b)


def sign_sub(a: int, b: int) -> Tuple[int, bool]:
    """Return magnitude and sign of `a` - `b`."""
    if a >= b:
        return a - b, True
    return b - a, False


class Fraction:

    """Sign-magnitude rational number.

    Args:
        sign (bool): True for non-negative, False for negative numbers
        numerator (int): non-negative numerator
        denominator (int): non-negative denominator

    Numerator and denominator are reduced to lowest terms. Given no arguments,
    the fraction equals 0.

    Raises:
        TypeError: numerator or denominator is not an integer
        ValueError: numerator or denominator is negative
    """

    __slots__ = ('_sign', '_numerator', '_denominator')

    def __new__(cls, sign: bool = True, numerator: int = 0,
                denominator: int = 1) -> Fraction:
        numerator = cls._check_magnitude(numerator)
        denominator = cls._check_magnitude(denominator)
        return cls._from_parts(bool(sign), *simplify(numerator, denominator))

    @staticmethod
    def _check_magnitude(value: Any) -> int:
        if not isinstance(value, Integral) or isinstance(value, bool):
            raise TypeError(f"Integer expected, got {value!r}.")
        value = index(value)
        if value < 0:
            raise ValueError(f"Magnitude must not be negative: {value}.")
        return value

    @classmethod
    def _from_parts(cls, sign: bool, numerator: int,
                    denominator: int) -> Fraction:
        # parts must already be reduced
        frac = object.__new__(cls)
        frac._sign = sign
        frac._numerator = numerator
        frac._denominator = denominator
        return frac

    @classmethod
    def positive(cls, numerator: int, denominator: int) -> Fraction:
        """Return non-negative fraction `numerator` / `denominator`."""
        return cls(True, numerator, denominator)

    @classmethod
    def negative(cls, numerator: int, denominator: int) -> Fraction:
        """Return negative fraction -`numerator` / `denominator`."""
        return cls(False, numerator, denominator)

    @classmethod
    def from_decimal(cls, value: Real) -> Fraction:
        """Convert a floating point number to a fraction.

        Args:
            value (Real): number to be converted (int, float or other real
                number convertible to float)

        Returns:
            Fraction: exact ratio, if one with a denominator not exceeding
                the current default search limit exists (within `EPSILON`),
                otherwise the best approximation found.

        Raises:
            TypeError: `value` is not a real number
        """
        if not isinstance(value, Real):
            raise TypeError(f"Can't convert {value!r} to {cls.__name__}.")
        if isinstance(value, Integral):
            return cls(value >= 0, abs(index(value)), 1)
        return cls(*approximate(float(value)))

    @classmethod
    def _coerce(cls, value: Any) -> Fraction:
        if isinstance(value, Fraction):
            return value
        return cls.from_decimal(value)

    @property
    def sign(self) -> bool:
        """True if `self` is non-negative, False otherwise."""
        return self._sign

    @property
    def numerator(self) -> int:
        """Numerator of `self` (always non-negative)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (0 for NaN and infinity)."""
        return self._denominator

    def is_nan(self) -> bool:
        """Return True if `self` is not a number."""
        return self._numerator == 0 and self._denominator == 0

    def is_infinite(self) -> bool:
        """Return True if `self` is positive or negative infinity."""
        return self._numerator != 0 and self._denominator == 0

    def is_zero(self) -> bool:
        """Return True if `self` equals 0."""
        return self._numerator == 0 and self._denominator != 0

    def value(self) -> float:
        """Return `self` as float."""
        num, den = self._numerator, self._denominator
        if den == 0:
            mag = math.nan if num == 0 else math.inf
        else:
            mag = num / den
        return mag if self._sign else -mag

    def reciprocal(self) -> Fraction:
        """Return 1 / `self`."""
        return self._from_parts(self._sign, self._denominator,
                                self._numerator)

    def negate(self) -> Fraction:
        """Return -`self`."""
        return self._from_parts(not self._sign, self._numerator,
                                self._denominator)

    def add(self, other: Operand) -> Fraction:
        """Return `self` + `other`."""
        other = self._coerce(other)
        if self.is_nan() or other.is_nan():
            return Fraction._from_parts(True, 0, 0)
        if self.is_infinite():
            if other.is_infinite() and other._sign != self._sign:
                return Fraction._from_parts(True, 0, 0)
            return self
        if other.is_infinite():
            return other
        denom = lcm(self._denominator, other._denominator)
        left = self._numerator * (denom // self._denominator)
        right = other._numerator * (denom // other._denominator)
        if self._sign and other._sign:
            numer, sign = left + right, True
        elif self._sign:
            numer, sign = sign_sub(left, right)
        elif other._sign:
            numer, sign = sign_sub(right, left)
        else:
            numer, sign = left + right, False
        return Fraction(sign, numer, denom)

    def subtract(self, other: Operand) -> Fraction:
        """Return `self` - `other`."""
        return self.add(self._coerce(other).negate())

    def multiply(self, other: Operand) -> Fraction:
        """Return `self` * `other`."""
        other = self._coerce(other)
        return Fraction(self._sign == other._sign,
                        self._numerator * other._numerator,
                        self._denominator * other._denominator)

    def divide(self, other: Operand) -> Fraction:
        """Return `self` / `other`."""
        return self.multiply(self._coerce(other).reciprocal())

    def to_string(self) -> str:
        """Return canonical string representation of `self`."""
        num, den = self._numerator, self._denominator
        if num == 0:
            return "nan" if den == 0 else "0"
        sign = "" if self._sign else "-"
        if den == 0:
            return f"{sign}inf"
        if den == 1:
            return f"{sign}{num}"
        return f"{sign}{num}/{den}"

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of integers whose ratio is equal to `self`.

        The denominator is positive; the sign is carried by the numerator.

        Raises:
            OverflowError: `self` is infinite
            ValueError: `self` is not a number
        """
        if self.is_nan():
            raise ValueError("Cannot convert NaN to integer ratio.")
        if self.is_infinite():
            raise OverflowError("Cannot convert infinity to integer ratio.")
        num = self._numerator
        return (num if self._sign else -num), self._denominator

    def as_fraction(self) -> fractions.Fraction:
        """Return an instance of `fractions.Fraction` equal to `self`."""
        return fractions.Fraction(*self.as_integer_ratio())

    # operators

    def _binary_op(meth):
        def forward(self, other):
            if isinstance(other, (Fraction, Real)):
                return meth(self, other)
            return NotImplemented

        def reflected(self, other):
            if isinstance(other, Real):
                return meth(self.from_decimal(other), self)
            return NotImplemented

        return forward, reflected

    __add__, __radd__ = _binary_op(add)
    __sub__, __rsub__ = _binary_op(subtract)
    __mul__, __rmul__ = _binary_op(multiply)
    __truediv__, __rtruediv__ = _binary_op(divide)

    del _binary_op

    __neg__ = negate

    def __pos__(self) -> Fraction:
        """+self"""
        return self

    def __float__(self) -> float:
        """float(self)"""
        return self.value()

    def __bool__(self) -> bool:
        """bool(self)"""
        return not self.is_zero()

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if not isinstance(other, (Fraction, Rational, float)):
            return NotImplemented
        if self.is_nan():
            return False
        if isinstance(other, Fraction):
            if other.is_nan():
                return False
            if self.is_zero():
                return other.is_zero()
            return (self._sign == other._sign and
                    self._numerator == other._numerator and
                    self._denominator == other._denominator)
        if self.is_infinite():
            return self.value() == other
        return self.as_fraction() == other

    def __hash__(self) -> int:
        """hash(self)"""
        if self.is_nan():
            return sys.hash_info.nan
        if self.is_infinite():
            return hash(self.value())
        return hash(self.as_fraction())

    def __copy__(self) -> Fraction:
        """copy(self)"""
        return self

    def __deepcopy__(self, memo: Any) -> Fraction:
        """deepcopy(self)"""
        return self

    def __reduce__(self) -> Tuple[type, Tuple[bool, int, int]]:
        return (type(self),
                (self._sign, self._numerator, self._denominator))

    def __repr__(self) -> str:
        """repr(self)"""
        return (f"{type(self).__name__}({self._sign!r}, {self._numerator}, "
                f"{self._denominator})")

    def __str__(self) -> str:
        """str(self)"""
        return self.to_string()
