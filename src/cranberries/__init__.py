from .context import getcontext, localcontext, setcontext
from .function import cbrt, cos, exp, log, pow, sin, sqrt, tan
from .interval import (
    Interval,
    IntervalDomainError,
    IntervalPoleError,
    IntervalZeroDivisionError,
    InvalidBoundsError,
)

__all__ = [
    "cbrt",
    "cos",
    "exp",
    "getcontext",
    "localcontext",
    "log",
    "pow",
    "setcontext",
    "sin",
    "sqrt",
    "tan",
    "Interval",
    "IntervalDomainError",
    "IntervalPoleError",
    "IntervalZeroDivisionError",
    "InvalidBoundsError",
]
