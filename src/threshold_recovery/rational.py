"""Exact rational numbers over Python's arbitrary-precision integers.

Every :class:`Rational` is kept in canonical form: the denominator is
strictly positive and shares no factor with the numerator. Two rationals
are therefore equal exactly when their numerators and denominators are.
"""
from __future__ import annotations

from math import gcd
from typing import Optional, Union

from .errors import InvalidFraction, NotAnInteger

IntoRational = Union["Rational", int]


class Rational:
    """Immutable fraction ``numerator / denominator``."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise InvalidFraction(f"Denominator zero in {numerator}/0")
        g = gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        self._num = numerator
        self._den = denominator

    @classmethod
    def try_new(cls, numerator: int, denominator: int = 1) -> Optional["Rational"]:
        """Return the reduced fraction, or ``None`` when *denominator* is zero."""

        if denominator == 0:
            return None
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    # Arithmetic -----------------------------------------------------------------
    def add(self, other: IntoRational) -> "Rational":
        other = _coerce(other)
        return Rational(self._num * other._den + other._num * self._den, self._den * other._den)

    def mul(self, other: IntoRational) -> "Rational":
        other = _coerce(other)
        return Rational(self._num * other._num, self._den * other._den)

    def neg(self) -> "Rational":
        return Rational(-self._num, self._den)

    def sub(self, other: IntoRational) -> "Rational":
        return self.add(_coerce(other).neg())

    def div(self, other: IntoRational) -> "Rational":
        other = _coerce(other)
        return Rational(self._num * other._den, self._den * other._num)

    __add__ = add
    __mul__ = mul
    __sub__ = sub
    __truediv__ = div
    __neg__ = neg

    def __radd__(self, other: int) -> "Rational":
        return _coerce(other).add(self)

    def __rmul__(self, other: int) -> "Rational":
        return _coerce(other).mul(self)

    def __rsub__(self, other: int) -> "Rational":
        return _coerce(other).sub(self)

    def __rtruediv__(self, other: int) -> "Rational":
        return _coerce(other).div(self)

    # Comparison and conversion --------------------------------------------------
    def equals(self, other: "Rational") -> bool:
        return self._num == other._num and self._den == other._den

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.equals(other)
        if isinstance(other, int):
            return self._den == 1 and self._num == other
        return NotImplemented

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def is_integer(self) -> bool:
        return self._den == 1

    def integer_value(self) -> int:
        """Return the numerator, or raise :class:`NotAnInteger` for a proper fraction."""

        if self._den != 1:
            raise NotAnInteger(f"{self} is not an integer")
        return self._num

    __int__ = integer_value

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: IntoRational) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a Rational")


__all__ = ["Rational", "ZERO", "ONE"]
