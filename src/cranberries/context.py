"""
#############################################
Configuration (:mod:`cranberries.context`)
#############################################

.. currentmodule:: cranberries.context

This module provides the configuration of interval operations.

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Literal, Self

type PolePolicy = Literal["RAISE", "EXTEND"]

_POLICIES: tuple[PolePolicy, ...] = ("RAISE", "EXTEND")


class Context:
    """Create a new context.

    Parameters
    ----------
    poles : Literal["RAISE", "EXTEND"], default="RAISE"
        Behavior of operations whose argument contains a pole of the function, such as
        the reciprocal of an interval straddling zero or the tangent across an odd
        multiple of pi/2. If `poles` is ``"RAISE"``, an exception is raised. If
        `poles` is ``"EXTEND"``, the whole real line is returned instead.

    Examples
    --------
    >>> from cranberries import Interval
    >>> with localcontext(poles="EXTEND"):
    ...     print(Interval(-1, 2).inverse())
    [-inf, inf]
    """

    __slots__ = ("_poles",)
    _poles: PolePolicy

    def __init__(self, poles: PolePolicy = "RAISE"):
        if poles not in _POLICIES:
            raise ValueError(f"poles must be one of {_POLICIES}, not {poles!r}")

        self._poles = poles

    @property
    def poles(self) -> PolePolicy:
        return self._poles

    def copy(self) -> Self:
        return self.__class__(self._poles)

    def __repr__(self):
        return f"{type(self).__name__}(poles={self._poles!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("cranberries")


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
def localcontext(ctx: Context | None = None, *, poles: PolePolicy | None = None):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Keyword arguments override the corresponding settings of the copy; `ctx` itself is
    left unchanged.

    Examples
    --------
    >>> ctx = Context(poles="EXTEND")
    >>> with localcontext(ctx, poles="RAISE") as local:
    ...     print(local.poles, ctx.poles)
    RAISE EXTEND
    >>> with localcontext(ctx) as local:
    ...     print(local.poles, local is ctx)
    EXTEND False
    """
    if ctx is None:
        ctx = getcontext()

    if poles is None:
        poles = ctx.poles

    ctx = Context(poles)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
