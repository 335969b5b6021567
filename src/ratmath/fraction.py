"""
###########################################
Unreduced fractions (:mod:`ratmath.fraction`)
###########################################

.. currentmodule:: ratmath.fraction

.. autosummary::
    :toctree: generated/

    Fraction

"""

import math
import re
from typing import Self

from ratmath.errors import DivisionError, DomainError, FormatError, ValidationError
from ratmath.rational import Rational

_PATTERN = re.compile(r"\s*(?P<num>[-+]?\d+)(?:/(?P<den>[-+]?\d+))?\s*")


class Fraction:
    """Fraction that keeps its numerator and denominator as given.

    Unlike :class:`~ratmath.Rational`, a fraction is never reduced implicitly, so
    ``Fraction(2, 4)`` and ``Fraction(1, 2)`` are different objects with the same
    value. Addition and subtraction are only defined for equal denominators, which
    keeps mediants meaningful.

    Parameters
    ----------
    numerator : int | str
        Numerator, or a string of the form ``"a"`` or ``"a/b"``.
    denominator : int, default=1
        Denominator. Ignored if `numerator` is a string with a denominator.

    Attributes
    ----------
    numerator : int
    denominator : int

    Raises
    ------
    DivisionError
        If the denominator is zero.
    FormatError
        If a string is malformed.

    Examples
    --------
    >>> a = Fraction(1, 2)
    >>> b = Fraction(2, 3)
    >>> print(Fraction.mediant(a, b))
    3/5
    >>> print(Fraction(6, 8).reduce())
    3/4
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int

    def __init__(self, numerator: int | str, denominator: int = 1):
        if isinstance(numerator, str):
            if (match := _PATTERN.fullmatch(numerator)) is None:
                raise FormatError(
                    f"Invalid fraction format '{numerator}'. Use 'a/b' or 'a'"
                )

            numerator = int(match["num"])

            if match["den"] is not None:
                denominator = int(match["den"])

        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError

        if denominator == 0:
            raise DivisionError("Denominator cannot be zero")

        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def fromrational(cls, value: Rational) -> Self:
        return cls(value.numerator, value.denominator)

    @classmethod
    def mediant(cls, lhs: "Fraction", rhs: "Fraction") -> Self:
        """Return ``(a + c) / (b + d)`` for ``a/b`` and ``c/d``, without reduction."""
        return cls(
            lhs._numerator + rhs._numerator, lhs._denominator + rhs._denominator
        )

    def compare(self, other: "Fraction") -> int:
        """Return -1, 0 or 1 by value."""
        lhs = self._numerator * other._denominator
        rhs = self._denominator * other._numerator

        if (self._denominator < 0) != (other._denominator < 0):
            lhs, rhs = rhs, lhs

        return (lhs > rhs) - (lhs < rhs)

    def pow(self, exponent: int) -> Self:
        """Raise numerator and denominator to an integer power.

        Raises
        ------
        DomainError
            If the fraction is zero and `exponent` is not positive.
        """
        if not isinstance(exponent, int):
            raise TypeError

        if exponent == 0:
            if self._numerator == 0:
                raise DomainError("Zero cannot be raised to the power of zero")

            return self.__class__(1, 1)

        if exponent < 0:
            if self._numerator == 0:
                raise DomainError("Zero cannot be raised to a negative power")

            return self.__class__(
                self._denominator**-exponent, self._numerator**-exponent
            )

        return self.__class__(self._numerator**exponent, self._denominator**exponent)

    def reduce(self) -> Self:
        """Return the equivalent fraction in lowest terms with a positive
        denominator."""
        if self._numerator == 0:
            return self.__class__(0, 1)

        gcd = math.gcd(self._numerator, self._denominator)
        num = self._numerator // gcd
        den = self._denominator // gcd

        if den < 0:
            num, den = -num, -den

        return self.__class__(num, den)

    def scale(self, factor: int) -> Self:
        """Multiply numerator and denominator by `factor`.

        Raises
        ------
        ValidationError
            If `factor` is zero.
        """
        if not isinstance(factor, int):
            raise TypeError

        if factor == 0:
            raise ValidationError("Scale factor must be nonzero")

        return self.__class__(self._numerator * factor, self._denominator * factor)

    def torational(self) -> Rational:
        return Rational(self._numerator, self._denominator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)

        return f"{self._numerator}/{self._denominator}"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented

        return self.compare(other) >= 0

    def __add__(self, rhs: "Fraction") -> Self:
        if not isinstance(rhs, Fraction):
            return NotImplemented

        if self._denominator != rhs._denominator:
            raise ValidationError("Addition only supported for equal denominators")

        return self.__class__(self._numerator + rhs._numerator, self._denominator)

    def __sub__(self, rhs: "Fraction") -> Self:
        if not isinstance(rhs, Fraction):
            return NotImplemented

        if self._denominator != rhs._denominator:
            raise ValidationError("Subtraction only supported for equal denominators")

        return self.__class__(self._numerator - rhs._numerator, self._denominator)

    def __mul__(self, rhs: "Fraction") -> Self:
        if not isinstance(rhs, Fraction):
            return NotImplemented

        return self.__class__(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    def __truediv__(self, rhs: "Fraction") -> Self:
        if not isinstance(rhs, Fraction):
            return NotImplemented

        if rhs._numerator == 0:
            raise DivisionError("Division by zero")

        return self.__class__(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __pow__(self, rhs: int) -> Self:
        if not isinstance(rhs, int):
            return NotImplemented

        return self.pow(rhs)
