from typing import Self, TypeAlias

from ratmath.context import getcontext
from ratmath.errors import DivisionError, DomainError, FormatError
from ratmath.rational import Rational

_Endpoint: TypeAlias = Rational | int | str | float


class RationalInterval:
    """Closed interval of exact rationals.

    Parameters
    ----------
    low : Rational | int | str | float | None, optional
        One endpoint of the interval.
    high : Rational | int | str | float | None, optional
        The other endpoint. If omitted, the interval is the point `low`.

    Attributes
    ----------
    low : Rational
        Lower endpoint.
    high : Rational
        Upper endpoint.

    Notes
    -----
    Endpoints given in decreasing order are swapped rather than rejected, so
    ``RationalInterval(5, 3)`` is ``[3, 5]``.

    Python's ``**`` operator is the closed-form :meth:`pow`. Repeated interval
    multiplication is the separate method :meth:`mpow`.

    Examples
    --------
    >>> x = RationalInterval(-1, 1)
    >>> print(x.pow(2), x.mpow(2))
    0:1 -1:1
    >>> print(RationalInterval("1/2", "3") / 2)
    1/4:3/2
    """

    __slots__ = ("_low", "_high")
    _low: Rational
    _high: Rational

    def __init__(self, low: _Endpoint | None = None, high: _Endpoint | None = None):
        if low is None:
            if high is None:
                self._low = self._high = Rational.ZERO
                return

            low = high

        low = Rational.ensure(low)
        high = low if high is None else Rational.ensure(high)

        if low <= high:
            self._low, self._high = low, high
        else:
            self._low, self._high = high, low

    @property
    def low(self) -> Rational:
        return self._low

    @property
    def high(self) -> Rational:
        return self._high

    @classmethod
    def point(cls, value: _Endpoint) -> Self:
        """Return the degenerate interval ``[value, value]``."""
        return cls(value)

    @classmethod
    def unit(cls) -> Self:
        """Return ``[0, 1]``."""
        return cls(Rational.ZERO, Rational.ONE)

    @classmethod
    def ensure(cls, value: Self | _Endpoint) -> Self:
        """Return `value` itself if it is an interval, or a point interval otherwise."""
        return value if isinstance(value, cls) else cls(value)

    @classmethod
    def fromstr(cls, value: str) -> Self:
        """Convert a string of the form ``"a:b"``.

        Each endpoint may take any form accepted by :meth:`Rational.fromstr`.

        Raises
        ------
        FormatError
            If `value` does not contain exactly one ``:`` or an endpoint is malformed.
            This includes the single-value string :meth:`tostr` gives for a point.
        """
        parts = value.split(":")

        if len(parts) != 2:
            raise FormatError(f"Invalid interval format '{value}'. Use 'a:b'")

        return cls(Rational.fromstr(parts[0]), Rational.fromstr(parts[1]))

    def copy(self) -> Self:
        return self.__class__(self._low, self._high)

    def containszero(self) -> bool:
        return self._low <= 0 <= self._high

    def diam(self) -> Rational:
        """Return the diameter ``high - low``."""
        return self._high - self._low

    def hull(self, *args: Self | _Endpoint) -> Self:
        """Return the smallest interval containing the interval and every argument."""
        low, high = self._low, self._high

        for arg in args:
            arg = self.ensure(arg)
            low = min(low, arg._low)
            high = max(high, arg._high)

        return self.__class__(low, high)

    def intersection(self, other: Self) -> Self | None:
        """Return the common part of both intervals, or ``None`` if they are
        disjoint."""
        if not self.overlaps(other):
            return None

        return self.__class__(max(self._low, other._low), min(self._high, other._high))

    def isdisjoint(self, other: Self | _Endpoint) -> bool:
        """Return ``True`` if the interval has no elements in common with `other`."""
        return not self.overlaps(self.ensure(other))

    def ispoint(self) -> bool:
        return self._low == self._high

    def issubset(self, other: Self) -> bool:
        """Test whether every element in the interval is in `other`."""
        return other._low <= self._low and self._high <= other._high

    def issuperset(self, other: Self) -> bool:
        """Test whether every element in `other` is in the interval."""
        return self._low <= other._low and other._high <= self._high

    def mag(self) -> Rational:
        """Return ``max(abs(low), abs(high))``."""
        return max(abs(self._low), abs(self._high))

    def mid(self) -> Rational:
        """Return the exact midpoint."""
        return (self._low + self._high) / 2

    def mig(self) -> Rational:
        """Return the smallest absolute value of the elements."""
        if self.containszero():
            return Rational.ZERO

        return min(abs(self._low), abs(self._high))

    def mpow(self, exponent: int) -> Self:
        """Multiply the interval by itself `exponent` times.

        Unlike :meth:`pow`, every factor varies independently, so the result is in
        general wider than the range of ``x**exponent``.

        Raises
        ------
        DomainError
            If `exponent` is zero.
        DivisionError
            If `exponent` is negative and the interval contains zero.

        Examples
        --------
        >>> print(RationalInterval(-1, 2).mpow(2))
        -2:4
        >>> print(RationalInterval(-1, 2).pow(2))
        0:4
        """
        if not isinstance(exponent, int):
            raise TypeError

        if exponent == 0:
            raise DomainError(
                "Multiplicative exponentiation requires at least one factor"
            )

        if exponent < 0:
            return self.reciprocate().mpow(-exponent)

        result = self

        for _ in range(exponent - 1):
            result = result * self

        return result

    def overlaps(self, other: Self) -> bool:
        return not (self._high < other._low or other._high < self._low)

    def pow(self, exponent: int) -> Self:
        """Return the tightest interval containing ``x**exponent`` for every `x`.

        Raises
        ------
        DomainError
            If `exponent` is zero and the interval contains zero, or if `exponent` is
            negative and the interval contains zero.
        """
        if not isinstance(exponent, int):
            raise TypeError

        if exponent == 0:
            if self._low == self._high == 0:
                raise DomainError("Zero cannot be raised to the power of zero")

            if self.containszero():
                raise DomainError(
                    "Cannot raise an interval containing zero to the power of zero"
                )

            return self.__class__(Rational.ONE)

        if exponent < 0:
            if self.containszero():
                raise DomainError(
                    "Cannot raise an interval containing zero to a negative power"
                )

            tmp = self.pow(-exponent)
            return self.__class__(tmp._high.reciprocal(), tmp._low.reciprocal())

        if exponent % 2 != 0:
            return self.__class__(self._low.pow(exponent), self._high.pow(exponent))

        if self.containszero():
            return self.__class__(Rational.ZERO, self.mag().pow(exponent))

        if self._high < 0:
            return self.__class__(self._high.pow(exponent), self._low.pow(exponent))

        return self.__class__(self._low.pow(exponent), self._high.pow(exponent))

    def reciprocate(self) -> Self:
        """Return ``[1/high, 1/low]``.

        Raises
        ------
        DivisionError
            If the interval contains zero.
        """
        if self.containszero():
            raise DivisionError("Cannot reciprocate an interval containing zero")

        return self.__class__(self._high.reciprocal(), self._low.reciprocal())

    def union(self, other: Self) -> Self | None:
        """Return the hull of both intervals if they overlap or are adjacent, or
        ``None`` otherwise.

        Two intervals are adjacent when one ends exactly one unit before the other
        starts, e.g. ``[1, 2]`` and ``[3, 4]``. The unit step is used for any
        rational endpoints, not only integers.
        """
        adjacent = self._high + 1 == other._low or other._high + 1 == self._low

        if not (adjacent or self.overlaps(other)):
            return None

        return self.__class__(min(self._low, other._low), max(self._high, other._high))

    def width(self) -> Rational:
        """Alias of :meth:`diam`."""
        return self.diam()

    def tostr(self) -> str:
        """Return ``"low:high"`` with canonical endpoints.

        A point interval is rendered as its single value. That string has no
        ``:``, so it is read back with :meth:`Rational.fromstr` and :meth:`point`
        rather than :meth:`fromstr`.
        """
        if self.ispoint():
            return self._low.tostr()

        return f"{self._low.tostr()}:{self._high.tostr()}"

    def tomixedstr(self) -> str:
        """Return ``"low:high"`` with mixed-number endpoints.

        A point interval is rendered as its single value.
        """
        if self.ispoint():
            return self._low.tomixedstr()

        return f"{self._low.tomixedstr()}:{self._high.tomixedstr()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(low={self._low!r}, high={self._high!r})"

    def __str__(self) -> str:
        if getcontext().display == "MIXED":
            return self.tomixedstr()

        return self.tostr()

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other._low == self._low and other._high == self._high

    def __hash__(self) -> int:
        return hash((self._low, self._high))

    def __contains__(self, item) -> bool:
        match item:
            case self.__class__():
                return self.issuperset(item)

            case Rational() | int() | float():
                item = Rational(item)
                return self._low <= item <= self._high

        raise TypeError

    def __add__(self, rhs: Self | Rational | int) -> Self:
        match rhs:
            case self.__class__():
                return self.__class__(self._low + rhs._low, self._high + rhs._high)

            case Rational() | int():
                return self.__class__(self._low + rhs, self._high + rhs)

        return NotImplemented

    def __sub__(self, rhs: Self | Rational | int) -> Self:
        match rhs:
            case self.__class__():
                return self.__class__(self._low - rhs._high, self._high - rhs._low)

            case Rational() | int():
                return self.__class__(self._low - rhs, self._high - rhs)

        return NotImplemented

    def __mul__(self, rhs: Self | Rational | int) -> Self:
        match rhs:
            case self.__class__():
                products = (
                    self._low * rhs._low,
                    self._low * rhs._high,
                    self._high * rhs._low,
                    self._high * rhs._high,
                )
                return self.__class__(min(products), max(products))

            case Rational() | int():
                return self.__class__(self._low * rhs, self._high * rhs)

        return NotImplemented

    def __truediv__(self, rhs: Self | Rational | int) -> Self:
        match rhs:
            case self.__class__():
                if rhs._low == rhs._high == 0:
                    raise DivisionError("Division by zero")

                if rhs.containszero():
                    raise DivisionError("Cannot divide by an interval containing zero")

                quotients = (
                    self._low / rhs._low,
                    self._low / rhs._high,
                    self._high / rhs._low,
                    self._high / rhs._high,
                )
                return self.__class__(min(quotients), max(quotients))

            case Rational() | int():
                return self.__truediv__(self.__class__(rhs))

        return NotImplemented

    def __pow__(self, rhs: int) -> Self:
        if not isinstance(rhs, int):
            return NotImplemented

        return self.pow(rhs)

    def __radd__(self, lhs: Rational | int) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: Rational | int) -> Self:
        return self.__neg__().__add__(lhs)

    def __rmul__(self, lhs: Rational | int) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: Rational | int) -> Self:
        match lhs:
            case Rational() | int():
                return self.__class__(lhs).__truediv__(self)

        return NotImplemented

    def __neg__(self) -> Self:
        return self.__class__(-self._high, -self._low)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        if self._low > 0:
            return self

        if self._high < 0:
            return self.__neg__()

        return self.__class__(Rational.ZERO, self.mag())
