"""
####################################################
Mathematical functions (:mod:`cranberries.function`)
####################################################

.. currentmodule:: cranberries.function

This module provides mathematical functions that accept intervals, :mod:`mpmath`
numbers, and built-in real numbers alike.

An argument whose type defines ``_cranberries_overload_`` is handed over to that hook;
:class:`~cranberries.Interval` uses it to return an enclosure. :mod:`mpmath` numbers
are evaluated by :mod:`mpmath`, and floats and integers by :mod:`math`.

Constant functions
==================

.. autosummary::
    :toctree: generated/

    e
    pi

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    sin
    cos
    tan
    sec
    csc
    cot
    asin
    acos
    atan
    asec
    acsc
    acot

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    sinh
    cosh
    tanh
    asinh
    acosh
    atanh

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    pow
    sqrt
    cbrt

"""

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, overload

import mpmath
import mpmath.ctx_mp_python

if TYPE_CHECKING:
    from cranberries.interval.interval import Interval


def _dispatch(fun, x, scalar: Callable[[float], float], mp: Callable[[Any], Any]):
    if hook := getattr(type(x), "_cranberries_overload_", None):
        if (res := hook(x, fun, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mp(x)

        case float() | int():
            return scalar(x)

        case _:
            raise TypeError


@overload
def e[T: Interval](x: T, /) -> T: ...


@overload
def e(x: float | int, /) -> float: ...


@overload
def e(x: Any, /) -> Any: ...


def e(x, /):
    """Napier's constant in the type of `x`.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(e(1.0), ".6f"))
    2.718282
    >>> print(format(e(Interval()), ".6f"))
    [2.718282, 2.718282]
    """
    return _dispatch(e, x, lambda _: math.e, lambda _: +mpmath.e)


@overload
def pi[T: Interval](x: T, /) -> T: ...


@overload
def pi(x: float | int, /) -> float: ...


@overload
def pi(x: Any, /) -> Any: ...


def pi(x, /):
    """Pi in the type of `x`.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(pi(1.0), ".6f"))
    3.141593
    >>> print(format(pi(Interval()), ".6f"))
    [3.141593, 3.141593]
    """
    return _dispatch(pi, x, lambda _: math.pi, lambda _: +mpmath.pi)


@overload
def sin[T: Interval](x: T, /) -> T: ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


def sin(x, /):
    """Sine.

    Examples
    --------
    >>> import math
    >>> from cranberries import Interval
    >>> print(sin(Interval(0, math.pi / 2)))
    [0, 1]
    """
    return _dispatch(sin, x, math.sin, mpmath.sin)


@overload
def cos[T: Interval](x: T, /) -> T: ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(cos(Interval(0)))
    [1, 1]
    """
    return _dispatch(cos, x, math.cos, mpmath.cos)


@overload
def tan[T: Interval](x: T, /) -> T: ...


@overload
def tan(x: float | int, /) -> float: ...


@overload
def tan(x: Any, /) -> Any: ...


def tan(x, /):
    """Tangent."""
    return _dispatch(tan, x, math.tan, mpmath.tan)


@overload
def sec[T: Interval](x: T, /) -> T: ...


@overload
def sec(x: float | int, /) -> float: ...


@overload
def sec(x: Any, /) -> Any: ...


def sec(x, /):
    """Secant."""
    return _dispatch(sec, x, lambda t: 1.0 / math.cos(t), mpmath.sec)


@overload
def csc[T: Interval](x: T, /) -> T: ...


@overload
def csc(x: float | int, /) -> float: ...


@overload
def csc(x: Any, /) -> Any: ...


def csc(x, /):
    """Cosecant."""
    return _dispatch(csc, x, lambda t: 1.0 / math.sin(t), mpmath.csc)


@overload
def cot[T: Interval](x: T, /) -> T: ...


@overload
def cot(x: float | int, /) -> float: ...


@overload
def cot(x: Any, /) -> Any: ...


def cot(x, /):
    """Cotangent."""
    return _dispatch(cot, x, lambda t: 1.0 / math.tan(t), mpmath.cot)


@overload
def asin[T: Interval](x: T, /) -> T: ...


@overload
def asin(x: float | int, /) -> float: ...


@overload
def asin(x: Any, /) -> Any: ...


def asin(x, /):
    """Inverse sine."""
    return _dispatch(asin, x, math.asin, mpmath.asin)


@overload
def acos[T: Interval](x: T, /) -> T: ...


@overload
def acos(x: float | int, /) -> float: ...


@overload
def acos(x: Any, /) -> Any: ...


def acos(x, /):
    """Inverse cosine."""
    return _dispatch(acos, x, math.acos, mpmath.acos)


@overload
def atan[T: Interval](x: T, /) -> T: ...


@overload
def atan(x: float | int, /) -> float: ...


@overload
def atan(x: Any, /) -> Any: ...


def atan(x, /):
    """Inverse tangent."""
    return _dispatch(atan, x, math.atan, mpmath.atan)


@overload
def asec[T: Interval](x: T, /) -> T: ...


@overload
def asec(x: float | int, /) -> float: ...


@overload
def asec(x: Any, /) -> Any: ...


def asec(x, /):
    """Inverse secant."""
    return _dispatch(asec, x, lambda t: math.acos(1.0 / t), mpmath.asec)


@overload
def acsc[T: Interval](x: T, /) -> T: ...


@overload
def acsc(x: float | int, /) -> float: ...


@overload
def acsc(x: Any, /) -> Any: ...


def acsc(x, /):
    """Inverse cosecant."""
    return _dispatch(acsc, x, lambda t: math.asin(1.0 / t), mpmath.acsc)


@overload
def acot[T: Interval](x: T, /) -> T: ...


@overload
def acot(x: float | int, /) -> float: ...


@overload
def acot(x: Any, /) -> Any: ...


def acot(x, /):
    """Inverse cotangent.

    The branch agrees with ``atan(1 / x)``, so the result is negative for negative `x`.
    """
    return _dispatch(acot, x, lambda t: math.atan(1.0 / t), mpmath.acot)


@overload
def sinh[T: Interval](x: T, /) -> T: ...


@overload
def sinh(x: float | int, /) -> float: ...


@overload
def sinh(x: Any, /) -> Any: ...


def sinh(x, /):
    """Hyperbolic sine."""
    return _dispatch(sinh, x, math.sinh, mpmath.sinh)


@overload
def cosh[T: Interval](x: T, /) -> T: ...


@overload
def cosh(x: float | int, /) -> float: ...


@overload
def cosh(x: Any, /) -> Any: ...


def cosh(x, /):
    """Hyperbolic cosine."""
    return _dispatch(cosh, x, math.cosh, mpmath.cosh)


@overload
def tanh[T: Interval](x: T, /) -> T: ...


@overload
def tanh(x: float | int, /) -> float: ...


@overload
def tanh(x: Any, /) -> Any: ...


def tanh(x, /):
    """Hyperbolic tangent."""
    return _dispatch(tanh, x, math.tanh, mpmath.tanh)


@overload
def asinh[T: Interval](x: T, /) -> T: ...


@overload
def asinh(x: float | int, /) -> float: ...


@overload
def asinh(x: Any, /) -> Any: ...


def asinh(x, /):
    """Inverse hyperbolic sine."""
    return _dispatch(asinh, x, math.asinh, mpmath.asinh)


@overload
def acosh[T: Interval](x: T, /) -> T: ...


@overload
def acosh(x: float | int, /) -> float: ...


@overload
def acosh(x: Any, /) -> Any: ...


def acosh(x, /):
    """Inverse hyperbolic cosine."""
    return _dispatch(acosh, x, math.acosh, mpmath.acosh)


@overload
def atanh[T: Interval](x: T, /) -> T: ...


@overload
def atanh(x: float | int, /) -> float: ...


@overload
def atanh(x: Any, /) -> Any: ...


def atanh(x, /):
    """Inverse hyperbolic tangent."""
    return _dispatch(atanh, x, math.atanh, mpmath.atanh)


@overload
def exp[T: Interval](x: T, /) -> T: ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> print(exp(Interval(0)))
    [1, 1]
    """
    return _dispatch(exp, x, math.exp, mpmath.exp)


@overload
def log[T: Interval](x: T, /) -> T: ...


@overload
def log(x: float | int, /) -> float: ...


@overload
def log(x: Any, /) -> Any: ...


def log(x, /):
    """Natural logarithm."""
    return _dispatch(log, x, math.log, mpmath.log)


@overload
def sqrt[T: Interval](x: T, /) -> T: ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> print(sqrt(Interval(4, 9)))
    [2, 3]
    """
    return _dispatch(sqrt, x, math.sqrt, mpmath.sqrt)


@overload
def cbrt[T: Interval](x: T, /) -> T: ...


@overload
def cbrt(x: float | int, /) -> float: ...


@overload
def cbrt(x: Any, /) -> Any: ...


def cbrt(x, /):
    """Real cube root.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(cbrt(Interval(-8, 27)), ".6f"))
    [-2.000000, 3.000000]
    """
    return _dispatch(cbrt, x, math.cbrt, mpmath.cbrt)


@overload
def pow[T: Interval](x: T | float | int, y: T, /) -> T: ...


@overload
def pow[T: Interval](x: T, y: float | int, /) -> T: ...


@overload
def pow(x: float | int, y: float | int, /) -> float: ...


@overload
def pow(x: Any, y: Any, /) -> Any: ...


def pow(x, y, /):
    """`x` raised to the power `y`.

    Examples
    --------
    >>> from cranberries import Interval
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    >>> print(pow(Interval(-2, 3), 2))
    [0, 9]
    """
    linearized = (x, y)

    if type(x) is not type(y) and issubclass(type(y), type(x)):
        linearized = (y, x)

    for z in linearized:
        if hook := getattr(type(z), "_cranberries_overload_", None):
            if (res := hook(z, pow, x, y)) is not NotImplemented:
                return res

    mpnumeric = mpmath.ctx_mp_python.mpnumeric

    match x, y:
        case (mpnumeric(), _) | (_, mpnumeric()):
            return mpmath.power(x, y)

        case (float() | int(), float() | int()):
            return math.pow(x, y)

        case _:
            raise TypeError
