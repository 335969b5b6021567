from collections.abc import Callable, Iterable
from typing import Self

from ratmath.errors import ValidationError
from ratmath.fraction import Fraction
from ratmath.interval.rationalinterval import RationalInterval


class FractionInterval:
    """Closed interval of unreduced fractions.

    The interval is the unit of Stern–Brocot style partitioning: splitting at the
    mediant of the endpoints keeps every piece an interval between two fractions
    whose representations are meaningful, not just their values.

    Parameters
    ----------
    low : Fraction
        One endpoint of the interval.
    high : Fraction
        The other endpoint. Endpoints are ordered by value.

    Attributes
    ----------
    low : Fraction
    high : Fraction

    Raises
    ------
    ValidationError
        If an endpoint is not a :class:`~ratmath.Fraction`.

    Examples
    --------
    >>> x = FractionInterval(Fraction(0, 1), Fraction(1, 1))
    >>> [str(y) for y in x.partition_with_mediants(2)]
    ['0:1/3', '1/3:1/2', '1/2:2/3', '2/3:1']
    """

    __slots__ = ("_low", "_high")
    _low: Fraction
    _high: Fraction

    def __init__(self, low: Fraction, high: Fraction):
        if not isinstance(low, Fraction) or not isinstance(high, Fraction):
            raise ValidationError("FractionInterval endpoints must be Fraction objects")

        if low <= high:
            self._low, self._high = low, high
        else:
            self._low, self._high = high, low

    @property
    def low(self) -> Fraction:
        return self._low

    @property
    def high(self) -> Fraction:
        return self._high

    @classmethod
    def fromrationalinterval(cls, value: RationalInterval) -> Self:
        return cls(Fraction.fromrational(value.low), Fraction.fromrational(value.high))

    def mediant_split(self) -> tuple[Self, Self]:
        """Split the interval at the unreduced mediant of its endpoints."""
        mediant = Fraction.mediant(self._low, self._high)
        return self.__class__(self._low, mediant), self.__class__(mediant, self._high)

    def partition_with_mediants(self, depth: int = 1) -> list[Self]:
        """Split every piece at its mediant, `depth` times over.

        Parameters
        ----------
        depth : int, default=1
            Number of rounds. The result has ``2**depth`` pieces.

        Raises
        ------
        ValidationError
            If `depth` is negative.
        """
        if depth < 0:
            raise ValidationError("Depth of mediant partitioning must be non-negative")

        pieces = [self]

        for _ in range(depth):
            pieces = [child for piece in pieces for child in piece.mediant_split()]

        return pieces

    def partition_with(
        self, fun: Callable[[Fraction, Fraction], Iterable[Fraction]]
    ) -> list[Self]:
        """Split the interval at the points chosen by `fun`.

        Parameters
        ----------
        fun : Callable
            Called as ``fun(low, high)``; returns the cut points. Points are sorted
            by value and points of equal value are merged.

        Raises
        ------
        ValidationError
            If a point is not a :class:`~ratmath.Fraction` or lies outside the
            interval.
        """
        points = list(fun(self._low, self._high))

        for point in points:
            if not isinstance(point, Fraction):
                raise ValidationError("Partition function must return Fraction objects")

            if not self._low <= point <= self._high:
                raise ValidationError("Partition points should be within the interval")

        cuts = [self._low]

        for point in sorted(points):
            if point.compare(cuts[-1]) != 0:
                cuts.append(point)

        if self._high.compare(cuts[-1]) != 0:
            cuts.append(self._high)
        elif len(cuts) > 1:
            cuts[-1] = self._high

        return [self.__class__(a, b) for a, b in zip(cuts, cuts[1:])]

    def torationalinterval(self) -> RationalInterval:
        return RationalInterval(self._low.torational(), self._high.torational())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(low={self._low!r}, high={self._high!r})"

    def __str__(self) -> str:
        return f"{self._low}:{self._high}"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other._low == self._low and other._high == self._high

    def __hash__(self) -> int:
        return hash((self._low, self._high))
