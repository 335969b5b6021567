"""
#################################
Exceptions (:mod:`ratmath.errors`)
#################################

.. currentmodule:: ratmath.errors

Every exception derives from the builtin an ordinary caller would catch for the
same failure, so ``except ValueError`` or ``except ZeroDivisionError`` keeps
working.

.. autosummary::
    :toctree: generated/

    DivisionError
    DomainError
    ExpressionSyntaxError
    FormatError
    ValidationError

"""


class FormatError(ValueError):
    """Error raised when a numeric, mixed or interval literal is malformed."""


class DivisionError(ZeroDivisionError):
    """Error raised by a zero denominator, a zero divisor, or a divisor interval
    containing zero."""


class DomainError(ValueError):
    """Error raised by an undefined power, such as ``0 ** 0``."""


class ValidationError(ValueError):
    """Error raised when :class:`~ratmath.Fraction` or
    :class:`~ratmath.FractionInterval` arguments violate their preconditions."""


class ExpressionSyntaxError(ValueError):
    """Error raised by :mod:`ratmath.parser` on a malformed expression.

    Parameters
    ----------
    message : str
        Description of the failure.
    remainder : str, default=""
        Unconsumed part of the expression at the point of failure.

    Attributes
    ----------
    remainder : str
    """

    def __init__(self, message: str, remainder: str = ""):
        super().__init__(message)
        self.remainder = remainder
