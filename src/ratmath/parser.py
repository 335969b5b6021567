"""
###################################
Expressions (:mod:`ratmath.parser`)
###################################

.. currentmodule:: ratmath.parser

This module evaluates textual expressions over rationals and intervals.

Grammar, from lowest to highest precedence::

    expr     := term (('+' | '-') term)*
    term     := factor (('*' | '/') factor)*
    factor   := '(' expr ')' [power] | '-' factor | interval [power]
    power    := '^' exponent | '**' exponent
    exponent := ['-'] digits
    interval := rational [':' rational]
    rational := ['-'] digits ['..' digits '/' digits | '/' digits]

``^`` is the closed-form power :meth:`RationalInterval.pow` and ``**`` is repeated
multiplication :meth:`RationalInterval.mpow`. Whitespace is ignored.

A leading ``-`` is always unary minus, so ``-1:2`` is ``[-2, -1]``; write
``2:-1`` for ``[-1, 2]``. A ``/`` inside a literal is a fraction bar only when a
digit follows it, otherwise it is division: ``1/(2)`` is one half.

.. autosummary::
    :toctree: generated/

    Parser
    evaluate
    parse

"""

import logging
import re

from ratmath.errors import DomainError, ExpressionSyntaxError
from ratmath.interval.rationalinterval import RationalInterval
from ratmath.rational import Rational

_logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]+")
_FRACTION_BAR = re.compile(r"/[0-9]")
_NEGATIVE_ONE = RationalInterval(-1)


class Parser:
    """Recursive-descent evaluator for a single expression.

    Each grammar rule is one method; the parser consumes its input through a cursor,
    so an instance is used for one expression only.

    Parameters
    ----------
    expression : str
        Expression to evaluate.

    Examples
    --------
    >>> print(Parser("(1:2 - 1/2) * 2").parse())
    1:3
    """

    __slots__ = ("_text", "_pos")
    _text: str
    _pos: int

    def __init__(self, expression: str):
        if not isinstance(expression, str):
            raise TypeError

        self._text = _WHITESPACE.sub("", expression)
        self._pos = 0

    @property
    def remainder(self) -> str:
        """Unconsumed part of the expression."""
        return self._text[self._pos :]

    def parse(self) -> RationalInterval:
        """Evaluate the whole expression.

        Raises
        ------
        ExpressionSyntaxError
            If the expression is empty or malformed, or has trailing input.
        DivisionError
            If a literal has a zero denominator or a divisor contains zero.
        DomainError
            If a power is undefined.
        """
        if not self._text:
            raise ExpressionSyntaxError("Expression cannot be empty")

        value = self._expression()

        if self._pos < len(self._text):
            remainder = self.remainder
            raise ExpressionSyntaxError(
                f"Unexpected token at end: {remainder}", remainder
            )

        return value

    def _error(self, message: str) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(message, self.remainder)

    def _peek(self, token: str) -> bool:
        return self._text.startswith(token, self._pos)

    def _digits(self) -> str | None:
        if (match := _DIGITS.match(self._text, self._pos)) is None:
            return None

        self._pos = match.end()
        return match[0]

    def _expression(self) -> RationalInterval:
        value = self._term()

        while self._peek("+") or self._peek("-"):
            op = self._text[self._pos]
            self._pos += 1
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs

        return value

    def _term(self) -> RationalInterval:
        value = self._factor()

        # "**" never reaches here: _factor consumes it as a power suffix
        while self._peek("*") or self._peek("/"):
            op = self._text[self._pos]
            self._pos += 1
            rhs = self._factor()
            value = value * rhs if op == "*" else value / rhs

        return value

    def _factor(self) -> RationalInterval:
        if self._pos >= len(self._text):
            raise self._error("Unexpected end of expression")

        if self._peek("("):
            self._pos += 1
            value = self._expression()

            if not self._peek(")"):
                raise self._error("Missing closing parenthesis")

            self._pos += 1
            return self._power(value)

        # "-1:2" is -(1:2); only the upper endpoint can carry its own sign
        if self._peek("-"):
            self._pos += 1
            return _NEGATIVE_ONE * self._factor()

        return self._power(self._interval())

    def _power(self, base: RationalInterval) -> RationalInterval:
        if self._peek("^"):
            self._pos += 1
            exponent = self._exponent()

            if exponent == 0 and base.low == base.high == 0:
                raise DomainError("Zero cannot be raised to the power of zero")

            return base.pow(exponent)

        if self._peek("**"):
            self._pos += 2
            return base.mpow(self._exponent())

        return base

    def _exponent(self) -> int:
        negative = self._peek("-")

        if negative:
            self._pos += 1

        if (digits := self._digits()) is None:
            raise self._error("Invalid exponent")

        return -int(digits) if negative else int(digits)

    def _interval(self) -> RationalInterval:
        low = self._rational()

        if not self._peek(":"):
            return RationalInterval.point(low)

        self._pos += 1
        return RationalInterval(low, self._rational())

    def _rational(self) -> Rational:
        if self._pos >= len(self._text):
            raise self._error("Unexpected end of expression")

        negative = self._peek("-")

        if negative:
            self._pos += 1

        if (lead := self._digits()) is None:
            raise self._error("Invalid rational number format")

        if self._peek(".."):
            self._pos += 2

            if (num := self._digits()) is None:
                raise self._error(
                    'Invalid mixed number format: missing numerator after ".."'
                )

            if not self._peek("/"):
                raise self._error("Invalid mixed number format: missing denominator")

            self._pos += 1

            if (den := self._digits()) is None:
                raise self._error("Invalid mixed number format: missing denominator")

            magnitude = int(lead) * int(den) + int(num)
            return Rational(-magnitude if negative else magnitude, int(den))

        num = -int(lead) if negative else int(lead)

        # a "/" not followed by digits is division, left to _term
        if not _FRACTION_BAR.match(self._text, self._pos):
            return Rational(num)

        self._pos += 1
        return Rational(num, int(self._digits()))


def parse(expression: str) -> RationalInterval:
    """Evaluate `expression` to an interval.

    A single exact number evaluates to a point interval.

    Examples
    --------
    >>> print(parse("3/4 + 1/4"))
    1
    >>> print(parse("1:2 * 1:2"))
    1:4
    >>> print(parse("(1:-1)^2"), parse("(1:-1)**2"))
    0:1 -1:1
    """
    try:
        result = Parser(expression).parse()
    except ExpressionSyntaxError as exc:
        _logger.debug("syntax error in %r: %s", expression, exc)
        raise

    _logger.debug("evaluated %r to %s", expression, result.tostr())
    return result


def evaluate(expression: str) -> Rational | RationalInterval:
    """Evaluate `expression`, returning a rational if the result is a point.

    Examples
    --------
    >>> evaluate("1..1/2")
    Rational(3, 2)
    >>> evaluate("5:3")
    RationalInterval(low=Rational(3, 1), high=Rational(5, 1))
    """
    result = parse(expression)
    return result.low if result.ispoint() else result
