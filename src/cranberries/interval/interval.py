import logging
import math
from collections.abc import Iterator
from typing import Final, Self

from cranberries import function as crf
from cranberries.context import getcontext

logger = logging.getLogger(__name__)

PI_INF: Final = float.fromhex("0x1.921fb54442d18p+1")
PI_SUP: Final = float.fromhex("0x1.921fb54442d19p+1")
E_INF: Final = float.fromhex("0x1.5bf0a8b145769p+1")
E_SUP: Final = float.fromhex("0x1.5bf0a8b14576ap+1")
TWO_PI: Final = 2.0 * math.pi


class InvalidBoundsError(ValueError):
    """Error raised when the lower bound of an interval exceeds the upper bound."""


class IntervalZeroDivisionError(ZeroDivisionError):
    """Error raised when the divisor of an interval division contains zero."""


class IntervalDomainError(ValueError):
    """Error raised when an interval leaves the domain of a function."""


class IntervalPoleError(OverflowError):
    """Error raised when an interval contains a pole of a function."""


def _mul(lhs: float, rhs: float) -> float:
    # 0 * inf is taken to be 0
    if lhs == 0.0 or rhs == 0.0:
        return 0.0

    return lhs * rhs


def _fmt(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))

    return str(value)


class Interval:
    """Closed real interval of double-precision numbers.

    Parameters
    ----------
    lower : float | int | None, optional
        Lower bound of the interval.
    upper : float | int | None, optional
        Upper bound of the interval. If omitted, the interval is the singleton
        ``[lower, lower]``; if both are omitted, it is ``[0, 0]``.

    Attributes
    ----------
    lower : float
        Lower bound of the interval.
    upper : float
        Upper bound of the interval.

    Raises
    ------
    InvalidBoundsError
        If `upper` is less than `lower` or if a bound is NaN.

    Notes
    -----
    Intervals are immutable. Endpoints are computed with the ordinary
    round-to-nearest arithmetic of the platform, so an enclosure may miss the exact
    range by the rounding error of the endpoint evaluation.

    Examples
    --------
    >>> x = Interval(1, 2)
    >>> y = Interval(3, 4)
    >>> print(x + y)
    [4, 6]
    >>> print(x * -1)
    [-2, -1]
    >>> x < y
    True
    """

    __slots__ = ("_lower", "_upper")
    _lower: float
    _upper: float

    def __init__(
        self, lower: float | int | None = None, upper: float | int | None = None
    ):
        if lower is None:
            if upper is None:
                self._lower = self._upper = 0.0
                return

            lower = upper

        if upper is None:
            upper = lower

        match lower, upper:
            case (float() | int(), float() | int()):
                lower = float(lower)
                upper = float(upper)

            case _:
                raise TypeError

        if not lower <= upper:
            raise InvalidBoundsError(f"invalid interval bounds: [{lower}, {upper}]")

        self._lower = lower
        self._upper = upper

    @property
    def lower(self) -> float:
        return self._lower

    @property
    def upper(self) -> float:
        return self._upper

    @classmethod
    def ensure(cls, value: Self | float | int) -> Self:
        """Convert `value` to an interval.

        Intervals are returned as they are since they are immutable.
        """
        return value if isinstance(value, cls) else cls(value)

    @classmethod
    def e(cls) -> Self:
        """Return the tightest enclosure of Napier's constant."""
        return cls(E_INF, E_SUP)

    @classmethod
    def pi(cls) -> Self:
        """Return the tightest enclosure of pi.

        Examples
        --------
        >>> import math
        >>> x = Interval.pi()
        >>> math.pi in x
        True
        >>> x.issingleton()
        False
        """
        return cls(PI_INF, PI_SUP)

    @classmethod
    def whole(cls) -> Self:
        """Return the whole real line ``[-inf, inf]``."""
        return cls(-math.inf, math.inf)

    def replace(
        self, *, lower: float | int | None = None, upper: float | int | None = None
    ) -> Self:
        """Return a new interval with one or both bounds replaced.

        The result is checked against the bound that is kept, in the same way as the
        constructor.

        Raises
        ------
        InvalidBoundsError
            If the new lower bound exceeds the upper bound.

        Examples
        --------
        >>> x = Interval(1, 2)
        >>> print(x.replace(upper=5))
        [1, 5]
        >>> x.replace(lower=3)
        Traceback (most recent call last):
            ...
        cranberries.interval.interval.InvalidBoundsError: invalid interval bounds: [3.0, 2.0]
        """
        return self.__class__(
            self._lower if lower is None else lower,
            self._upper if upper is None else upper,
        )

    def width(self) -> float:
        """Return the width ``upper - lower``.

        Examples
        --------
        >>> Interval(-1, 1).width()
        2.0
        >>> Interval.whole().width()
        inf
        """
        return self._upper - self._lower

    def middle(self) -> float:
        """Return the midpoint of the interval.

        For an unbounded interval, this differs from ``(lower + upper) / 2``: the
        finite bound is returned if there is one, and ``0.0`` for the whole line.

        Examples
        --------
        >>> Interval(1, 4).middle()
        2.5
        >>> Interval(1, math.inf).middle()
        1.0
        """
        if self._lower == -math.inf:
            return 0.0 if self._upper == math.inf else self._upper

        if self._upper == math.inf:
            return self._lower

        if abs(self._lower) >= 1 and abs(self._upper) >= 1:
            return self._lower / 2 + self._upper / 2

        return (self._lower + self._upper) / 2

    def rad(self) -> float:
        """Return the radius (half of the width)."""
        return (self._upper - self._lower) / 2

    def issingleton(self) -> bool:
        """Return ``True`` if the interval consists of a single number."""
        return self._lower == self._upper

    def isbounded(self) -> bool:
        """Return ``True`` if both bounds are finite."""
        return self.mag() < math.inf

    def mag(self) -> float:
        """Return a magnitude of the interval.

        The magnitude of `x` is defined as ``max(abs(x.lower), abs(x.upper))``.
        """
        return max(abs(self._lower), abs(self._upper))

    def mig(self) -> float:
        """Return a mignitude of the interval.

        The mignitude of `x` is defined as the smallest absolute value of its
        elements; it is ``0.0`` if `x` contains zero.
        """
        if self._lower <= 0.0 <= self._upper:
            return 0.0

        return min(abs(self._lower), abs(self._upper))

    def hull(self, *args: Self | float | int) -> Self:
        """Return the smallest interval containing the interval and all `args`."""
        result = self

        for arg in args:
            result |= arg

        return result

    def interiorcontains(self, other: Self | float | int) -> bool:
        """Return ``True`` if the interior of the interval contains `other`."""
        match other:
            case Interval():
                return self._lower < other._lower and other._upper < self._upper

            case float() | int():
                return self._lower < other < self._upper

        raise TypeError

    def isdisjoint(self, other: Self | float | int) -> bool:
        """Return ``True`` if the interval has no elements in common with `other`."""
        match other:
            case Interval():
                return self._lower > other._upper or self._upper < other._lower

            case float() | int():
                return self._lower > other or self._upper < other

        raise TypeError

    def issubset(self, other: Self) -> bool:
        """Test whether every element in the interval is in `other`."""
        if not isinstance(other, Interval):
            return False

        return self._lower >= other._lower and self._upper <= other._upper

    def issuperset(self, other: Self) -> bool:
        """Test whether every element in `other` is in the interval."""
        if not isinstance(other, Interval):
            return False

        return self._lower <= other._lower and self._upper >= other._upper

    def inverse(self) -> Self:
        """Return the reciprocal ``1 / x``.

        Raises
        ------
        IntervalZeroDivisionError
            If the interval is ``[0, 0]``, or if it straddles zero and the pole policy
            of the current context is ``"RAISE"``.

        Examples
        --------
        >>> print(Interval(1, 2).inverse())
        [0.5, 1]
        >>> print(Interval(0, 4).inverse())
        [0.25, inf]
        """
        if self._lower == self._upper == 0.0:
            raise IntervalZeroDivisionError("division by zero")

        if self._lower < 0.0 < self._upper:
            return self.__pole("inverse", IntervalZeroDivisionError("division by zero"))

        if self._lower == 0.0:
            return self.__class__(1.0 / self._upper, math.inf)

        if self._upper == 0.0:
            return self.__class__(-math.inf, 1.0 / self._lower)

        return self.__class__(1.0 / self._upper, 1.0 / self._lower)

    def sin(self) -> Self:
        """Return an enclosure of the sine.

        Examples
        --------
        >>> print(Interval(0).sin())
        [0, 0]
        >>> print(Interval(0, 4).sin().upper)
        1.0
        """
        return self.__periodic(math.sin, 0.25, 0.75)

    def cos(self) -> Self:
        """Return an enclosure of the cosine.

        Examples
        --------
        >>> print(Interval(0).cos())
        [1, 1]
        >>> print(Interval(3, 10).cos())
        [-1, 1]
        """
        return self.__periodic(math.cos, 0.0, 0.5)

    def tan(self) -> Self:
        """Return an enclosure of the tangent.

        Raises
        ------
        IntervalPoleError
            If the interval contains an odd multiple of pi/2 and the pole policy of the
            current context is ``"RAISE"``.
        """
        if not self.isbounded():
            return self.__pole("tan", IntervalPoleError("math range error"))

        # first pole at or above the lower bound is (k + 1/2) * pi
        k = math.ceil(self._lower / math.pi - 0.5)

        if k <= self._upper / math.pi - 0.5:
            return self.__pole("tan", IntervalPoleError("math range error"))

        return self.__class__(math.tan(self._lower), math.tan(self._upper))

    def sec(self) -> Self:
        """Return an enclosure of the secant, ``1 / cos(x)``."""
        return self.cos().inverse()

    def csc(self) -> Self:
        """Return an enclosure of the cosecant, ``1 / sin(x)``."""
        return self.sin().inverse()

    def cot(self) -> Self:
        """Return an enclosure of the cotangent, ``1 / tan(x)``."""
        return self.tan().inverse()

    def asin(self) -> Self:
        """Return an enclosure of the inverse sine.

        Raises
        ------
        IntervalDomainError
            If the interval is not contained in ``[-1, 1]``.
        """
        if self._lower < -1.0 or self._upper > 1.0:
            raise IntervalDomainError("math domain error")

        return self.__class__(math.asin(self._lower), math.asin(self._upper))

    def acos(self) -> Self:
        """Return an enclosure of the inverse cosine.

        Raises
        ------
        IntervalDomainError
            If the interval is not contained in ``[-1, 1]``.
        """
        if self._lower < -1.0 or self._upper > 1.0:
            raise IntervalDomainError("math domain error")

        return self.__class__(math.acos(self._upper), math.acos(self._lower))

    def atan(self) -> Self:
        """Return an enclosure of the inverse tangent."""
        return self.__class__(math.atan(self._lower), math.atan(self._upper))

    def asec(self) -> Self:
        """Return an enclosure of the inverse secant, ``acos(1 / x)``.

        Raises
        ------
        IntervalDomainError
            If the interval is not contained in ``[-inf, -1]`` or ``[1, inf]``.
        """
        if not (self._upper <= -1.0 or self._lower >= 1.0):
            raise IntervalDomainError("math domain error")

        return self.inverse().acos()

    def acsc(self) -> Self:
        """Return an enclosure of the inverse cosecant, ``asin(1 / x)``.

        Raises
        ------
        IntervalDomainError
            If the interval is not contained in ``[-inf, -1]`` or ``[1, inf]``.
        """
        if not (self._upper <= -1.0 or self._lower >= 1.0):
            raise IntervalDomainError("math domain error")

        return self.inverse().asin()

    def acot(self) -> Self:
        """Return an enclosure of the inverse cotangent, ``atan(1 / x)``."""
        return self.inverse().atan()

    def sinh(self) -> Self:
        """Return an enclosure of the hyperbolic sine."""
        inf = _saturate(math.sinh, self._lower, math.copysign(math.inf, self._lower))
        sup = _saturate(math.sinh, self._upper, math.copysign(math.inf, self._upper))
        return self.__class__(inf, sup)

    def cosh(self) -> Self:
        """Return an enclosure of the hyperbolic cosine.

        Examples
        --------
        >>> print(Interval(-1, 1).cosh().lower)
        1.0
        """
        lower = _saturate(math.cosh, self._lower, math.inf)
        upper = _saturate(math.cosh, self._upper, math.inf)

        if self._lower < 0.0 < self._upper:
            return self.__class__(1.0, max(lower, upper))

        if self._upper <= 0.0:
            return self.__class__(upper, lower)

        return self.__class__(lower, upper)

    def tanh(self) -> Self:
        """Return an enclosure of the hyperbolic tangent."""
        return self.__class__(math.tanh(self._lower), math.tanh(self._upper))

    def asinh(self) -> Self:
        """Return an enclosure of the inverse hyperbolic sine."""
        return self.__class__(math.asinh(self._lower), math.asinh(self._upper))

    def acosh(self) -> Self:
        """Return an enclosure of the inverse hyperbolic cosine.

        Raises
        ------
        IntervalDomainError
            If the lower bound is less than 1.
        """
        if self._lower < 1.0:
            raise IntervalDomainError("math domain error")

        return self.__class__(math.acosh(self._lower), math.acosh(self._upper))

    def atanh(self) -> Self:
        """Return an enclosure of the inverse hyperbolic tangent.

        Raises
        ------
        IntervalDomainError
            If the interval is not contained in ``[-1, 1]``.
        """
        if self._lower < -1.0 or self._upper > 1.0:
            raise IntervalDomainError("math domain error")

        return self.__class__(_atanhpoint(self._lower), _atanhpoint(self._upper))

    def exp(self) -> Self:
        """Return an enclosure of the exponential."""
        inf = _saturate(math.exp, self._lower, math.inf)
        sup = _saturate(math.exp, self._upper, math.inf)
        return self.__class__(inf, sup)

    def log(self) -> Self:
        """Return an enclosure of the natural logarithm.

        Raises
        ------
        IntervalDomainError
            If the lower bound is negative.
        """
        if self._lower < 0.0 or self._upper == 0.0:
            raise IntervalDomainError("math domain error")

        inf = math.log(self._lower) if self._lower != 0.0 else -math.inf
        sup = _saturate(math.log, self._upper, math.inf)
        return self.__class__(inf, sup)

    def pow(self, n: float | int) -> Self:
        """Return an enclosure of the interval raised to the power `n`.

        A negative `n` is evaluated as ``x.inverse().pow(-n)``.

        Raises
        ------
        IntervalDomainError
            If `n` is not an integer and the lower bound is negative.
        IntervalZeroDivisionError
            If `n` is negative and the interval straddles zero.

        Examples
        --------
        >>> print(Interval(-2, 3).pow(2))
        [0, 9]
        >>> print(Interval(-2, 3).pow(3))
        [-8, 27]
        >>> print(Interval(1, 4).pow(-1))
        [0.25, 1]
        """
        match n:
            case float() | int():
                pass

            case _:
                raise TypeError

        if math.isnan(n):
            raise IntervalDomainError("math domain error")

        if n < 0:
            return self.inverse().pow(-n)

        if float(n).is_integer():
            if n == 0:
                return self.__class__(1.0)

            lower = self.__powpoint(self._lower, n)
            upper = self.__powpoint(self._upper, n)

            if self._lower <= 0.0 <= self._upper and n % 2 == 0:
                return self.__class__(0.0, max(lower, upper))

            return self.__class__(min(lower, upper), max(lower, upper))

        if self._lower < 0.0:
            raise IntervalDomainError("math domain error")

        lower = self.__powpoint(self._lower, n)
        upper = self.__powpoint(self._upper, n)
        return self.__class__(lower, upper)

    def sqrt(self) -> Self:
        """Return an enclosure of the square root.

        Raises
        ------
        IntervalDomainError
            If the lower bound is negative.
        """
        if self._lower < 0.0:
            raise IntervalDomainError("math domain error")

        return self.__class__(math.sqrt(self._lower), math.sqrt(self._upper))

    def cbrt(self) -> Self:
        """Return an enclosure of the real cube root."""
        return self.__class__(math.cbrt(self._lower), math.cbrt(self._upper))

    def _cranberries_overload_(self, fun, *args, **kwargs):
        if fun is crf.pow:
            base, exponent = args

            if isinstance(exponent, Interval):
                return crf.exp(crf.log(self.ensure(base)) * exponent)

            if isinstance(base, Interval):
                return base.pow(exponent)

            return NotImplemented

        if (name := _OVERLOADS.get(fun)) is not None:
            return getattr(self, name)()

        return NotImplemented

    def __pole(self, name: str, error: ArithmeticError) -> Self:
        if getcontext().poles == "EXTEND":
            logger.debug("%s of %s crosses a pole; using the whole line", name, self)
            return self.whole()

        raise error

    def __periodic(self, fun, maxphase: float, minphase: float) -> Self:
        if not self.isbounded() or self._upper - self._lower >= TWO_PI:
            return self.__class__(-1.0, 1.0)

        lower = fun(self._lower)
        upper = fun(self._upper)
        inf = min(lower, upper)
        sup = max(lower, upper)

        if self.__crosses(maxphase):
            sup = 1.0

        if self.__crosses(minphase):
            inf = -1.0

        return self.__class__(inf, sup)

    def __crosses(self, phase: float) -> bool:
        # width is below one period, so only the first candidate can lie inside
        x1 = self._lower / TWO_PI - phase
        x2 = self._upper / TWO_PI - phase
        base = math.ceil(x1)
        return x1 < base < x2

    @staticmethod
    def __powpoint(x: float, n: float | int) -> float:
        try:
            return math.pow(x, n)
        except OverflowError:
            if x < 0.0 and float(n).is_integer() and n % 2 == 1:
                return -math.inf

            return math.inf

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lower={self._lower!r}, upper={self._upper!r})"

    def __str__(self) -> str:
        return f"[{_fmt(self._lower)}, {_fmt(self._upper)}]"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.__str__()

        inf = format(self._lower, format_spec)
        sup = format(self._upper, format_spec)
        return f"[{inf}, {sup}]"

    def __iter__(self) -> Iterator[float]:
        yield self._lower
        yield self._upper

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented

        return other._lower == self._lower and other._upper == self._upper

    def __lt__(self, other: Self | float | int) -> bool:
        match other:
            case Interval():
                return self._upper < other._lower

            case float() | int():
                return self._upper < other

        return NotImplemented

    def __le__(self, other: Self | float | int) -> bool:
        match other:
            case Interval():
                return self._upper <= other._lower

            case float() | int():
                return self._upper <= other

        return NotImplemented

    def __gt__(self, other: Self | float | int) -> bool:
        match other:
            case Interval():
                return other._upper < self._lower

            case float() | int():
                return other < self._lower

        return NotImplemented

    def __ge__(self, other: Self | float | int) -> bool:
        match other:
            case Interval():
                return other._upper <= self._lower

            case float() | int():
                return other <= self._lower

        return NotImplemented

    def __contains__(self, item) -> bool:
        match item:
            case Interval():
                return item.issubset(self)

            case float() | int():
                return self._lower <= item <= self._upper

        raise TypeError

    def __add__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                inf = self._lower + rhs._lower
                sup = self._upper + rhs._upper
                return self.__class__(inf, sup)

            case float() | int():
                return self.__class__(self._lower + rhs, self._upper + rhs)

        return NotImplemented

    def __sub__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                inf = self._lower - rhs._upper
                sup = self._upper - rhs._lower
                return self.__class__(inf, sup)

            case float() | int():
                return self.__class__(self._lower - rhs, self._upper - rhs)

        return NotImplemented

    def __mul__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                products = (
                    _mul(self._lower, rhs._lower),
                    _mul(self._lower, rhs._upper),
                    _mul(self._upper, rhs._lower),
                    _mul(self._upper, rhs._upper),
                )
                return self.__class__(min(products), max(products))

            case float() | int():
                if rhs < 0:
                    inf = _mul(self._upper, rhs)
                    sup = _mul(self._lower, rhs)
                    return self.__class__(inf, sup)

                return self.__class__(_mul(self._lower, rhs), _mul(self._upper, rhs))

        return NotImplemented

    def __truediv__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.__mul__(rhs.inverse())

            case float() | int():
                if rhs == 0:
                    raise IntervalZeroDivisionError("division by zero")

                if rhs < 0:
                    return self.__class__(self._upper / rhs, self._lower / rhs)

                return self.__class__(self._lower / rhs, self._upper / rhs)

        return NotImplemented

    def __pow__(self, rhs: float | int) -> Self:
        match rhs:
            case float() | int():
                return self.pow(rhs)

        return NotImplemented

    def __and__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                inf = max(self._lower, rhs._lower)
                sup = min(self._upper, rhs._upper)

                if inf > sup:
                    raise ValueError("intersection is empty")

                return self.__class__(inf, sup)

            case float() | int():
                if rhs not in self:
                    raise ValueError("intersection is empty")

                return self.__class__(rhs)

        return NotImplemented

    def __or__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                inf = min(self._lower, rhs._lower)
                sup = max(self._upper, rhs._upper)
                return self.__class__(inf, sup)

            case float() | int():
                return self.__class__(min(self._lower, rhs), max(self._upper, rhs))

        return NotImplemented

    def __radd__(self, lhs: float | int) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: float | int) -> Self:
        match lhs:
            case float() | int():
                return self.__class__(lhs - self._upper, lhs - self._lower)

        return NotImplemented

    def __rmul__(self, lhs: float | int) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: float | int) -> Self:
        match lhs:
            case float() | int():
                return self.inverse().__mul__(lhs)

        return NotImplemented

    def __rand__(self, lhs: float | int) -> Self:
        return self.__and__(lhs)

    def __ror__(self, lhs: float | int) -> Self:
        return self.__or__(lhs)

    def __neg__(self) -> Self:
        return self.__class__(-self._upper, -self._lower)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        if self._lower >= 0.0:
            return self

        if self._upper <= 0.0:
            return self.__class__(-self._upper, -self._lower)

        return self.__class__(0.0, max(-self._lower, self._upper))

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    def __replace__(self, **changes: float | int) -> Self:
        return self.replace(**changes)


def _saturate(fun, x: float, overflow: float) -> float:
    try:
        return fun(x)
    except OverflowError:
        return overflow


def _atanhpoint(x: float) -> float:
    if abs(x) == 1.0:
        return math.copysign(math.inf, x)

    return math.atanh(x)


_OVERLOADS = {
    crf.e: "e",
    crf.pi: "pi",
    crf.sin: "sin",
    crf.cos: "cos",
    crf.tan: "tan",
    crf.sec: "sec",
    crf.csc: "csc",
    crf.cot: "cot",
    crf.asin: "asin",
    crf.acos: "acos",
    crf.atan: "atan",
    crf.asec: "asec",
    crf.acsc: "acsc",
    crf.acot: "acot",
    crf.sinh: "sinh",
    crf.cosh: "cosh",
    crf.tanh: "tanh",
    crf.asinh: "asinh",
    crf.acosh: "acosh",
    crf.atanh: "atanh",
    crf.exp: "exp",
    crf.log: "log",
    crf.sqrt: "sqrt",
    crf.cbrt: "cbrt",
}
