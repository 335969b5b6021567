"""
################################
Context (:mod:`ratmath.context`)
################################

.. currentmodule:: ratmath.context

This module controls how :func:`str` renders exact values. The explicit
``tostr`` and ``tomixedstr`` methods are not affected.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Literal, Self, TypeAlias

DisplayMode: TypeAlias = Literal["CANONICAL", "MIXED"]

_DISPLAY_MODES: frozenset[str] = frozenset(("CANONICAL", "MIXED"))


class Context:
    """Create a new context.

    Parameters
    ----------
    display : Literal["CANONICAL", "MIXED"], default="CANONICAL"
        String form used by :func:`str`. ``"CANONICAL"`` renders ``3/2`` and
        ``"MIXED"`` renders ``1..1/2``.

    Examples
    --------
    >>> from ratmath import Rational
    >>> with localcontext(display="MIXED"):
    ...     print(Rational(-7, 2))
    -3..1/2
    """

    __slots__ = ("_display",)
    _display: DisplayMode

    def __init__(self, display: DisplayMode = "CANONICAL"):
        if display not in _DISPLAY_MODES:
            raise ValueError(f"unknown display mode: {display!r}")

        self._display = display

    @property
    def display(self) -> DisplayMode:
        return self._display

    def copy(self) -> Self:
        return self.__class__(self._display)

    def __str__(self):
        return f"{type(self).__name__}({self._display!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("ratmath")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(ctx: Context | None = None, *, display: DisplayMode | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement."""
    if ctx is None:
        ctx = getcontext()

    if display is None:
        display = ctx.display

    ctx = Context(display)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
