"""The `Angle` value record.

An `Angle` holds up to four representations of the same angle: decimal degrees `d`,
radians `r`, gradians `g` and a degrees/minutes/seconds triple `dms`. Unit constructors
populate exactly one of them; the conversion classes in `py_angle.unit` fill in the
others on demand and hand back a new record carrying the cached value.

Examples:
    >>> Angle(d=13.2)
    <Angle: 13.2°>
    >>> Angle(dms=(90, 30, 50))
    <Angle: 90° 30′ 50″>
    >>> Angle.zero()
    <Angle: 0>
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from typing_extensions import Final, TypeAlias

__all__ = (
    'Number',
    'DMSTriple',
    'Angle',
    'format_angle',
    'is_exact_zero',
    'DEGREES_SYMBOL',
    'RADIANS_SYMBOL',
    'GRADIANS_SYMBOL',
    'PRIME_SYMBOL',
    'DOUBLE_PRIME_SYMBOL',
)

Number: TypeAlias = Union[float, int]
DMSTriple: TypeAlias = Tuple[int, int, Number]

DEGREES_SYMBOL: Final[str] = "°"
RADIANS_SYMBOL: Final[str] = "㎭"
GRADIANS_SYMBOL: Final[str] = "ᵍ"
PRIME_SYMBOL: Final[str] = "′"
DOUBLE_PRIME_SYMBOL: Final[str] = "″"


def is_exact_zero(value: object) -> bool:
    """True only for the integer 0; `0.0` is an ordinary computed value."""
    return type(value) is int and value == 0


@dataclass(frozen=True)
class Angle:
    """Multi-representation angle value.

    Attributes:
        d: Decimal degrees.
        r: Radians.
        g: Gradians.
        dms: Degrees, minutes and seconds.

    Note:
        Records are never mutated. Conversions return a copy made with `dataclasses.replace`,
        so callers have to keep the returned angle to benefit from the cached representation.
    """

    d: Optional[Number] = None
    r: Optional[Number] = None
    g: Optional[Number] = None
    dms: Optional[DMSTriple] = None

    @classmethod
    def zero(cls) -> Angle:
        """The unit independent zero angle, populated in degrees, radians and gradians."""
        return cls(d=0, r=0, g=0)

    @property
    def is_zero(self) -> bool:
        """True when any populated representation is the integer zero.

        Float zeros, such as the result of `acos(1)`, are not the zero angle.

        Examples:
            >>> Angle(r=0).is_zero
            True
            >>> Angle(r=0.0).is_zero
            False
            >>> Angle(dms=(0, 0, 0)).is_zero
            True
            >>> Angle(dms=(0, 0, 1)).is_zero
            False
        """
        return (is_exact_zero(self.d) or is_exact_zero(self.r) or is_exact_zero(self.g)
                or (self.dms is not None and all(is_exact_zero(each) for each in self.dms)))

    @property
    def is_empty(self) -> bool:
        """True when no representation is populated."""
        return self.d is None and self.r is None and self.g is None and self.dms is None

    def __str__(self) -> str:
        return format_angle(self)

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}: {format_angle(self)}>'


def _format_number(value: Number) -> str:
    return repr(value)


def format_angle(angle: Angle) -> str:
    """Render an angle for display.

    The zero angle renders as a bare `0`. Otherwise the first populated representation
    is shown, in the order degrees, radians, gradians, DMS. Trailing zero minutes and
    seconds of a DMS triple are dropped.

    Examples:
        >>> format_angle(Angle(r=0.25))
        '0.25㎭'
        >>> format_angle(Angle(g=40))
        '40ᵍ'
        >>> format_angle(Angle(dms=(13, 30, 0)))
        '13° 30′'
        >>> format_angle(Angle(d=28.5, r=0.4974188368183839))
        '28.5°'
    """
    if angle.is_zero:
        return "0"
    if angle.d is not None:
        return f"{_format_number(angle.d)}{DEGREES_SYMBOL}"
    if angle.r is not None:
        return f"{_format_number(angle.r)}{RADIANS_SYMBOL}"
    if angle.g is not None:
        return f"{_format_number(angle.g)}{GRADIANS_SYMBOL}"
    if angle.dms is not None:
        d, m, s = angle.dms
        parts = [f"{_format_number(d)}{DEGREES_SYMBOL}"]
        if m != 0 or s != 0:
            parts.append(f"{_format_number(m)}{PRIME_SYMBOL}")
        if s != 0:
            parts.append(f"{_format_number(s)}{DOUBLE_PRIME_SYMBOL}")
        return " ".join(parts)
    return "empty"
