from .context import Context, getcontext, localcontext, setcontext
from .errors import (
    DivisionError,
    DomainError,
    ExpressionSyntaxError,
    FormatError,
    ValidationError,
)
from .fraction import Fraction
from .interval import FractionInterval, RationalInterval
from .parser import Parser, evaluate, parse
from .rational import Rational

__all__ = [
    "Context",
    "DivisionError",
    "DomainError",
    "ExpressionSyntaxError",
    "FormatError",
    "Fraction",
    "FractionInterval",
    "Parser",
    "Rational",
    "RationalInterval",
    "ValidationError",
    "evaluate",
    "getcontext",
    "localcontext",
    "parse",
    "setcontext",
]
