import math

import numpy as np
import pytest

from cranberries import Interval
from cranberries.interval import (
    IntervalDomainError,
    IntervalPoleError,
    IntervalZeroDivisionError,
)

DOMAINS = [
    (-0.3, 0.4),
    (0.0, 0.0),
    (0.5, 1.0),
    (-1.0, -0.2),
    (0.2, 3.0),
    (-2.5, -1.1),
    (1.0, 2.0),
    (-6.0, 1.2),
    (1.3, 7.0),
    (3.0, 4.5),
    (-20.0, 20.0),
    (100.0, 103.0),
]

FUNCTIONS = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "sec": lambda t: 1.0 / math.cos(t),
    "csc": lambda t: 1.0 / math.sin(t),
    "cot": lambda t: 1.0 / math.tan(t),
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "asec": lambda t: math.acos(1.0 / t),
    "acsc": lambda t: math.asin(1.0 / t),
    "acot": lambda t: math.atan(1.0 / t),
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "asinh": math.asinh,
    "acosh": math.acosh,
    "atanh": math.atanh,
    "exp": math.exp,
    "log": math.log,
    "sqrt": math.sqrt,
    "cbrt": math.cbrt,
}

ERRORS = (IntervalDomainError, IntervalPoleError, IntervalZeroDivisionError)


def encloses(y: Interval, value: float) -> bool:
    eps = 1e-12 * max(1.0, abs(value))
    return y.lower - eps <= value <= y.upper + eps


@pytest.mark.parametrize("name", FUNCTIONS)
@pytest.mark.parametrize("bounds", DOMAINS)
def test_soundness(name, bounds):
    x = Interval(*bounds)

    try:
        y = getattr(x, name)()
    except ERRORS:
        return

    for t in np.linspace(x.lower, x.upper, 2001):
        try:
            value = FUNCTIONS[name](float(t))
        except (ValueError, ZeroDivisionError):
            continue

        assert encloses(y, value), f"{name}({t}) = {value} not in {y}"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 0.5, 1.5, 2.0, -1, -2, -3])
@pytest.mark.parametrize("bounds", DOMAINS)
def test_pow_soundness(n, bounds):
    x = Interval(*bounds)

    try:
        y = x.pow(n)
    except ERRORS:
        return

    for t in np.linspace(x.lower, x.upper, 2001):
        try:
            value = math.pow(float(t), n)
        except (ValueError, ZeroDivisionError):
            continue

        assert encloses(y, value), f"{t}**{n} = {value} not in {y}"


def test_sin():
    assert Interval(0).sin() == Interval(0)
    assert Interval(0, math.pi).sin().lower == 0.0
    assert Interval(0, math.pi).sin().upper == 1.0
    assert Interval(4, 5).sin().lower == -1.0
    assert Interval(1, 7.5).sin() == Interval(-1, 1)
    assert Interval(0, 2 * math.pi).sin() == Interval(-1, 1)

    y = Interval(2, 3).sin()
    assert y == Interval(math.sin(3), math.sin(2))


def test_cos():
    assert Interval(0).cos() == Interval(1)
    assert Interval(-1, 1).cos() == Interval(math.cos(1), 1)
    assert Interval(3, 3.5).cos().lower == -1.0
    assert Interval(0.5, 1).cos() == Interval(math.cos(1), math.cos(0.5))
    assert Interval.whole().cos() == Interval(-1, 1)


def test_tan():
    assert Interval(0).tan() == Interval(0)
    assert Interval(0, 1).tan() == Interval(0, math.tan(1))
    assert Interval(2, 4).tan() == Interval(math.tan(2), math.tan(4))

    with pytest.raises(IntervalPoleError):
        Interval(0, math.pi).tan()

    with pytest.raises(IntervalPoleError):
        Interval(-2, -1).tan()

    with pytest.raises(OverflowError):
        Interval(0, math.inf).tan()


def test_inverse_trigonometric():
    assert Interval(-1, 1).asin() == Interval(-math.pi / 2, math.pi / 2)
    assert Interval(-1, 1).acos() == Interval(0, math.pi)
    assert Interval.whole().atan() == Interval(-math.pi / 2, math.pi / 2)

    with pytest.raises(IntervalDomainError):
        Interval(-2, 0.5).asin()

    with pytest.raises(IntervalDomainError):
        Interval(0.5, 1.5).acos()


def test_reciprocal_trigonometric():
    assert Interval(0.5, 1).sec() == Interval(0.5, 1).cos().inverse()
    assert Interval(0.5, 1).csc() == Interval(0.5, 1).sin().inverse()
    assert Interval(0.5, 1).cot() == Interval(0.5, 1).tan().inverse()
    assert Interval(1, 2).asec() == Interval(1, 2).inverse().acos()
    assert Interval(-3, -1).acsc() == Interval(-3, -1).inverse().asin()
    assert Interval(1, 2).acot() == Interval(1, 2).inverse().atan()

    with pytest.raises(IntervalZeroDivisionError):
        Interval(-1, 1).csc()

    with pytest.raises(IntervalZeroDivisionError):
        Interval(-1, 1).acot()

    with pytest.raises(IntervalDomainError):
        Interval(0.5, 2).asec()

    with pytest.raises(IntervalDomainError):
        Interval(-2, 2).acsc()


def test_hyperbolic():
    assert Interval(-1, 2).cosh() == Interval(1, math.cosh(2))
    assert Interval(-2, -1).cosh() == Interval(math.cosh(-1), math.cosh(-2))
    assert Interval(-2, 0).cosh() == Interval(1, math.cosh(-2))
    assert Interval(1, 2).cosh() == Interval(math.cosh(1), math.cosh(2))
    assert Interval(-1, 1).sinh() == Interval(math.sinh(-1), math.sinh(1))
    assert Interval(-1, 1).tanh() == Interval(math.tanh(-1), math.tanh(1))
    assert Interval(0, 1000).cosh().upper == math.inf
    assert Interval(-1000, 0).sinh().lower == -math.inf


def test_inverse_hyperbolic():
    assert Interval(-1, 1).asinh() == Interval(math.asinh(-1), math.asinh(1))
    assert Interval(1, 2).acosh() == Interval(0, math.acosh(2))
    assert Interval(-1, 1).atanh() == Interval.whole()
    assert Interval(0, 0.5).atanh() == Interval(0, math.atanh(0.5))

    with pytest.raises(IntervalDomainError):
        Interval(0.5, 2).acosh()

    with pytest.raises(IntervalDomainError):
        Interval(-0.5, 1.5).atanh()


def test_pow():
    assert Interval(-2, 3).pow(0) == Interval(1)
    assert Interval(-2, 3).pow(2) == Interval(0, 9)
    assert Interval(-2, 3).pow(3) == Interval(-8, 27)
    assert Interval(-3, -2).pow(2) == Interval(4, 9)
    assert Interval(-3, -2).pow(3) == Interval(-27, -8)
    assert Interval(1, 4).pow(0.5) == Interval(1, 2)
    assert Interval(0, 4).pow(1.5) == Interval(0, 8)
    assert Interval(1, 2).pow(-2) == Interval(0.25, 1)
    assert Interval(-2, 3) ** 2 == Interval(0, 9)

    with pytest.raises(IntervalDomainError):
        Interval(-1, 4).pow(0.5)

    with pytest.raises(IntervalZeroDivisionError):
        Interval(-1, 4).pow(-2)


def test_roots():
    assert Interval(4, 9).sqrt() == Interval(2, 3)
    assert Interval(0, 1).sqrt() == Interval(0, 1)
    assert Interval(-8, 8).cbrt() == Interval(math.cbrt(-8), math.cbrt(8))
    assert Interval(-8, 8).cbrt().lower < 0.0

    with pytest.raises(IntervalDomainError):
        Interval(-1, 4).sqrt()


def test_exp_log():
    assert Interval(0, 1).exp() == Interval(1, math.exp(1))
    assert Interval(0, 1000).exp().upper == math.inf
    assert Interval(1, math.e).log() == Interval(0, math.log(math.e))
    assert Interval(0, 1).log() == Interval(-math.inf, 0)

    with pytest.raises(IntervalDomainError):
        Interval(-1, 1).log()

    with pytest.raises(IntervalDomainError):
        Interval(0).log()


def test_overflowing_endpoints():
    assert Interval(1000, 1001).exp() == Interval(math.inf)
    assert Interval(800, 900).cosh() == Interval(math.inf)
    assert Interval(-900, -800).cosh() == Interval(math.inf)
    assert Interval(1e200, 1e201).pow(2) == Interval(math.inf)
    assert Interval(-1e201, -1e200).pow(3) == Interval(-math.inf)
    assert Interval(math.inf).sin() == Interval(-1, 1)
    assert Interval(-math.inf).cos() == Interval(-1, 1)

    with pytest.raises(IntervalPoleError):
        Interval(math.inf).tan()


def test_sinh_keeps_sign():
    y = Interval(1000, 1001).sinh()
    assert y.lower > 0.0
    assert y == Interval(math.inf)

    y = Interval(-1001, -1000).sinh()
    assert y.upper < 0.0
    assert y == Interval(-math.inf)

    y = Interval(-1000, 1000).sinh()
    assert y == Interval.whole()


def test_atanh_endpoints():
    assert Interval(1, 1).atanh() == Interval(math.inf)
    assert Interval(-1, -1).atanh() == Interval(-math.inf)
    assert Interval(-1, 0).atanh() == Interval(-math.inf, 0)
    assert Interval(0.5, 1).atanh() == Interval(math.atanh(0.5), math.inf)
