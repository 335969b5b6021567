"""
#######################################
Exact rationals (:mod:`ratmath.rational`)
#######################################

.. currentmodule:: ratmath.rational

.. autosummary::
    :toctree: generated/

    Rational

"""

import math
import re
from typing import ClassVar, Self

import mpmath
import mpmath.libmp

from ratmath.context import getcontext
from ratmath.errors import DivisionError, DomainError, FormatError

_SIGNED_DIGITS = r"\s*(?P<sign>[-+]?)(?P<lead>\d+)"
_FRACTION_PATTERN = re.compile(_SIGNED_DIGITS + r"(?:/(?P<den>\d+))?\s*")
_MIXED_PATTERN = re.compile(_SIGNED_DIGITS + r"\.\.(?P<num>\d+)/(?P<den>\d+)\s*")


def _scan(pattern: re.Pattern[str], value: str, usage: str) -> re.Match[str]:
    if (match := pattern.fullmatch(value)) is None:
        raise FormatError(f"Invalid rational format '{value}'. Use {usage}")

    return match


class Rational:
    """Exact rational number.

    The value is stored as a reduced fraction with a positive denominator, and zero
    is always ``0/1``. Instances are immutable.

    Parameters
    ----------
    numerator : Rational | int | str | float | mpmath.mpf, default=0
        Numerator, or a value converted exactly. Strings may take the forms
        ``"a"``, ``"a/b"`` and ``"a..b/c"``.
    denominator : int, default=1
        Denominator. The converted `numerator` is divided by it.

    Attributes
    ----------
    numerator : int
    denominator : int

    Raises
    ------
    DivisionError
        If the denominator is zero.
    FormatError
        If a string is malformed or a float is not finite.

    Examples
    --------
    >>> Rational(4, -8)
    Rational(-1, 2)
    >>> print(Rational("-1..1/2"))
    -3/2
    >>> Rational(0.375).tomixedstr()
    '0..3/8'
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int
    ZERO: ClassVar["Rational"]
    ONE: ClassVar["Rational"]

    def __init__(
        self,
        numerator: "Rational | int | str | float | mpmath.mpf" = 0,
        denominator: int = 1,
    ):
        if not isinstance(denominator, int):
            raise TypeError

        match numerator:
            case int():
                num, den = numerator, denominator

            case Rational():
                num = numerator._numerator
                den = numerator._denominator * denominator

            case str():
                tmp = self.fromstr(numerator)
                num, den = tmp._numerator, tmp._denominator * denominator

            case float():
                if not math.isfinite(numerator):
                    raise FormatError(f"Cannot convert {numerator} to a rational")

                num, den = numerator.as_integer_ratio()
                den *= denominator

            case mpmath.mpf():
                if not mpmath.isfinite(numerator):
                    raise FormatError(f"Cannot convert {numerator} to a rational")

                num, den = mpmath.libmp.to_rational(numerator._mpf_)
                den *= denominator

            case _:
                raise TypeError

        if den == 0:
            raise DivisionError("Denominator cannot be zero")

        if den < 0:
            num, den = -num, -den

        gcd = math.gcd(num, den)
        self._numerator = num // gcd
        self._denominator = den // gcd

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def ensure(cls, value: "Rational | int | str | float | mpmath.mpf") -> Self:
        """Return `value` itself if it is a rational, or convert it otherwise."""
        return value if isinstance(value, cls) else cls(value)

    @classmethod
    def fromstr(cls, value: str) -> Self:
        """Convert a string of the form ``"a"``, ``"a/b"`` or ``"a..b/c"``.

        Raises
        ------
        FormatError
            If `value` does not represent a rational.
        """
        if ".." in value:
            return cls.frommixed(value)

        return cls.fromfraction(value)

    @classmethod
    def fromfraction(cls, value: str) -> Self:
        """Convert a string of the form ``"a"`` or ``"a/b"``."""
        match = _scan(_FRACTION_PATTERN, value, "'a/b' or 'a'")
        num = int(match["lead"])
        den = 1 if match["den"] is None else int(match["den"])
        return cls(-num if match["sign"] == "-" else num, den)

    @classmethod
    def frommixed(cls, value: str) -> Self:
        """Convert a mixed number of the form ``"a..b/c"``.

        The sign applies to the whole mixed value, so ``"-1..1/2"`` is ``-3/2`` and
        ``"-0..1/2"`` is ``-1/2``.
        """
        match = _scan(_MIXED_PATTERN, value, "'a..b/c'")
        den = int(match["den"])
        magnitude = int(match["lead"]) * den + int(match["num"])
        return cls(-magnitude if match["sign"] == "-" else magnitude, den)

    def compare(self, other: "Rational | int") -> int:
        """Return -1, 0 or 1 as the rational is less than, equal to or greater than
        `other`."""
        other = self.ensure(other)
        lhs = self._numerator * other._denominator
        rhs = self._denominator * other._numerator
        return (lhs > rhs) - (lhs < rhs)

    def isinteger(self) -> bool:
        return self._denominator == 1

    def pow(self, exponent: int) -> Self:
        """Raise the rational to an integer power.

        Raises
        ------
        DomainError
            If the rational is zero and `exponent` is not positive.
        """
        if not isinstance(exponent, int):
            raise TypeError

        if exponent == 0:
            if self._numerator == 0:
                raise DomainError("Zero cannot be raised to the power of zero")

            return self.__class__(1)

        if exponent < 0:
            if self._numerator == 0:
                raise DomainError("Zero cannot be raised to a negative power")

            return self.reciprocal().pow(-exponent)

        num = den = 1
        base_num = self._numerator
        base_den = self._denominator

        while exponent != 0:
            if exponent & 1:
                num *= base_num
                den *= base_den

            exponent >>= 1

            if exponent != 0:
                base_num *= base_num
                base_den *= base_den

        return self.__class__(num, den)

    def reciprocal(self) -> Self:
        """Return ``1 / self``.

        Raises
        ------
        DivisionError
            If the rational is zero.
        """
        if self._numerator == 0:
            raise DivisionError("Cannot take reciprocal of zero")

        return self.__class__(self._denominator, self._numerator)

    def tostr(self) -> str:
        """Return the canonical form ``"n"`` or ``"n/d"``."""
        if self._denominator == 1:
            return str(self._numerator)

        return f"{self._numerator}/{self._denominator}"

    def tomixedstr(self) -> str:
        """Return the mixed form ``"w..r/d"``, or ``"n"`` for integers."""
        if self._denominator == 1:
            return str(self._numerator)

        sign = "-" if self._numerator < 0 else ""
        whole, remainder = divmod(abs(self._numerator), self._denominator)
        return f"{sign}{whole}..{remainder}/{self._denominator}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if getcontext().display == "MIXED":
            return self.tomixedstr()

        return self.tostr()

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)

        return hash((self._numerator, self._denominator))

    def __eq__(self, other) -> bool:
        match other:
            case Rational():
                return (
                    self._numerator == other._numerator
                    and self._denominator == other._denominator
                )

            case int():
                return self._denominator == 1 and self._numerator == other

        return NotImplemented

    def __lt__(self, other: "Rational | int") -> bool:
        if not isinstance(other, Rational | int):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other: "Rational | int") -> bool:
        if not isinstance(other, Rational | int):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other: "Rational | int") -> bool:
        if not isinstance(other, Rational | int):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other: "Rational | int") -> bool:
        if not isinstance(other, Rational | int):
            return NotImplemented

        return self.compare(other) >= 0

    def __add__(self, rhs: "Rational | int") -> Self:
        match rhs:
            case Rational():
                num = self._numerator * rhs._denominator
                num += rhs._numerator * self._denominator
                return self.__class__(num, self._denominator * rhs._denominator)

            case int():
                num = self._numerator + rhs * self._denominator
                return self.__class__(num, self._denominator)

        return NotImplemented

    def __sub__(self, rhs: "Rational | int") -> Self:
        match rhs:
            case Rational():
                num = self._numerator * rhs._denominator
                num -= rhs._numerator * self._denominator
                return self.__class__(num, self._denominator * rhs._denominator)

            case int():
                num = self._numerator - rhs * self._denominator
                return self.__class__(num, self._denominator)

        return NotImplemented

    def __mul__(self, rhs: "Rational | int") -> Self:
        match rhs:
            case Rational():
                num = self._numerator * rhs._numerator
                return self.__class__(num, self._denominator * rhs._denominator)

            case int():
                return self.__class__(self._numerator * rhs, self._denominator)

        return NotImplemented

    def __truediv__(self, rhs: "Rational | int") -> Self:
        match rhs:
            case Rational():
                if rhs._numerator == 0:
                    raise DivisionError("Division by zero")

                num = self._numerator * rhs._denominator
                return self.__class__(num, self._denominator * rhs._numerator)

            case int():
                if rhs == 0:
                    raise DivisionError("Division by zero")

                return self.__class__(self._numerator, self._denominator * rhs)

        return NotImplemented

    def __pow__(self, rhs: int) -> Self:
        if not isinstance(rhs, int):
            return NotImplemented

        return self.pow(rhs)

    def __radd__(self, lhs: int) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: int) -> Self:
        return self.__neg__().__add__(lhs)

    def __rmul__(self, lhs: int) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: int) -> Self:
        if not isinstance(lhs, int):
            return NotImplemented

        return self.reciprocal().__mul__(lhs)

    def __neg__(self) -> Self:
        return self.__class__(-self._numerator, self._denominator)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return self.__neg__() if self._numerator < 0 else self


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
