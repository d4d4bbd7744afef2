"""Trigonometric functions working with the `Angle` type.

Wraps the `math` module. Direct functions take an `Angle`, make sure it carries radians
and return the angle with its radians cached together with the result. Inverse functions
take real values, check the mathematical domain first and wrap the radian result in a
`Result` holding a new `Angle`.

`math` relies on the platform libc, whose approximations may differ in the last digits
between systems; compare results with a tolerance.

Examples:
    >>> from py_angle.unit import Degree
    >>> cos(Degree.init(180))
    (<Angle: 180°>, -1.0)
    >>> acos(-1).value
    <Angle: 3.141592653589793㎭>
    >>> acos(2).error
    'Invalid function domain'
    >>> atan2(1, 2).value
    <Angle: 0.4636476090008061㎭>
"""
from __future__ import annotations

import math
from typing import Any, Callable, Tuple

from py_angle.exceptions import AngleDomainError
from py_angle.unit import Radian
from py_angle.utils import Result
from py_angle.value import Angle

__all__ = (
    'DOMAIN_ERROR',
    'TrigResult',
    'cos', 'cosh', 'sin', 'sinh', 'tan', 'tanh',
    'acos', 'acosh', 'asin', 'asinh', 'atan', 'atan2',
)

DOMAIN_ERROR = "Invalid function domain"


class TrigResult(Result):
    """`Result` of an inverse function; `unwrap` raises `AngleDomainError`."""

    def unwrap(self, exc_type=AngleDomainError) -> Angle:
        return super().unwrap(exc_type)


def _is_real(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _apply(func: Callable[[float], float], angle: Angle) -> Tuple[Angle, float]:
    angle, r = Radian.to_radians(angle)
    return angle, func(r)


def _invert(func: Callable[..., float], *args: Any, domain: Callable[..., bool] = lambda *_: True) -> TrigResult:
    if not all(_is_real(x) for x in args) or not domain(*args):
        return TrigResult.failure(DOMAIN_ERROR)
    return TrigResult.success(Radian.init(func(*args)))


def cos(angle: Angle) -> Tuple[Angle, float]:
    """Cosine of `angle`, between -1.0 and 1.0."""
    return _apply(math.cos, angle)


def cosh(angle: Angle) -> Tuple[Angle, float]:
    """Hyperbolic cosine of `angle`, between 1.0 and +∞.

    Examples:
        >>> from py_angle.value import Angle
        >>> cosh(Angle.zero())
        (<Angle: 0>, 1.0)
    """
    return _apply(math.cosh, angle)


def sin(angle: Angle) -> Tuple[Angle, float]:
    """Sine of `angle`, between -1.0 and 1.0.

    Examples:
        >>> from py_angle.unit import Degree
        >>> sin(Degree.init(90))
        (<Angle: 90°>, 1.0)
    """
    return _apply(math.sin, angle)


def sinh(angle: Angle) -> Tuple[Angle, float]:
    """Hyperbolic sine of `angle`."""
    return _apply(math.sinh, angle)


def tan(angle: Angle) -> Tuple[Angle, float]:
    """Tangent of `angle`."""
    return _apply(math.tan, angle)


def tanh(angle: Angle) -> Tuple[Angle, float]:
    """Hyperbolic tangent of `angle`, between -1.0 and 1.0."""
    return _apply(math.tanh, angle)


def acos(x: float) -> TrigResult:
    """Arccosine of a real value `x` between -1 and 1.

    Examples:
        >>> acos(1).value
        <Angle: 0.0㎭>
    """
    return _invert(math.acos, x, domain=lambda v: -1 <= v <= 1)


def acosh(x: float) -> TrigResult:
    """Inverse hyperbolic cosine of a real value `x` from 1 to +∞.

    Examples:
        >>> acosh(2).value
        <Angle: 1.3169578969248166㎭>
        >>> acosh(0.5).ok
        False
    """
    return _invert(math.acosh, x, domain=lambda v: v >= 1)


def asin(x: float) -> TrigResult:
    """Arcsine of a real value `x` between -1 and 1.

    Examples:
        >>> asin(1).value
        <Angle: 1.5707963267948966㎭>
    """
    return _invert(math.asin, x, domain=lambda v: -1 <= v <= 1)


def asinh(x: float) -> TrigResult:
    """Inverse hyperbolic sine of any real value `x`.

    Examples:
        >>> asinh(1).value
        <Angle: 0.881373587019543㎭>
    """
    return _invert(math.asinh, x)


def atan(x: float) -> TrigResult:
    """Arctangent of any real value `x`.

    Examples:
        >>> atan(-1).value
        <Angle: -0.7853981633974483㎭>
    """
    return _invert(math.atan, x)


def atan2(y: float, x: float) -> TrigResult:
    """Angle between the positive x-axis and the point (`x`, `y`).

    Examples:
        >>> atan2(-1, -2).value
        <Angle: -2.677945044588987㎭>
    """
    return _invert(math.atan2, y, x)
