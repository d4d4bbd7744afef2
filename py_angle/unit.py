"""Angle units and lazy conversion between them.

Every unit is served by a conversion class derived from `AngleUnit`:

* `Degree`: decimal degrees, one of the two pivot representations
* `Radian`: radians, the other pivot, used by the trigonometric functions
* `Gradian`: gradians, one hop away from degrees or radians
* `DMS`: degrees/minutes/seconds, one hop away from degrees

Each class constructs an `Angle` from its native unit (`init`), parses literal text
(`parse`), fills in its representation from whichever one is present (`ensure`),
extracts it (`to_degrees`, `to_radians`, ...) and folds it into the principal range (`abs`).
A representation is computed at most once: `ensure` returns a new `Angle` with the
derived value cached, and leaves already populated fields untouched.

Examples:
    >>> a = Degree.init(90)
    >>> a, r = Radian.to_radians(a)
    >>> r
    1.5707963267948966
    >>> a
    <Angle: 90°>
    >>> a.r
    1.5707963267948966
    >>> Unit.DMS(77, 50, 56)
    <Angle: 77° 50′ 56″>
    >>> Unit.parse_unit('rad')
    radian
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, fields, replace, MISSING
from enum import IntEnum
from math import pi
from typing import Any, ClassVar, Mapping, NamedTuple, Optional, Tuple, Type, Union

from typing_extensions import Final, TypeAlias, override

from py_angle.exceptions import AngleContractError, AngleTypeError, AngleValueError, UnitAliasError
from py_angle.logger import logger
from py_angle.utils import Result, string_to_integer, string_to_number
from py_angle.value import (Angle, DMSTriple, Number, is_exact_zero, DEGREES_SYMBOL, RADIANS_SYMBOL,
                            GRADIANS_SYMBOL, PRIME_SYMBOL, DOUBLE_PRIME_SYMBOL)

MAX_ITERATIONS: int = 1_000_000  # Prevent runaway abs() reductions

FULL_TURN_DEGREES: Final[int] = 360
FULL_TURN_RADIANS: Final[float] = 2. * pi
FULL_TURN_GRADIANS: Final[float] = 400.


class Unit(IntEnum):
    """Enumeration of the supported angle units.

    Each unit can be used as a callable constructor:

    Examples:
        >>> Unit.Degree(13.2)
        <Angle: 13.2°>
        >>> Unit.Radian(0.25)
        <Angle: 0.25㎭>
        >>> Unit.Gradian(40)
        <Angle: 40ᵍ>
        >>> Unit.DMS(90, 30)
        <Angle: 90° 30′>
    """

    Degree = 0
    Radian = 1
    Gradian = 2
    DMS = 3

    @property
    def key(self) -> str:
        """Readable name of the unit."""
        return UnitPropsDict[self].name

    @property
    def symbol(self) -> str:
        """Display symbol of the unit."""
        return UnitPropsDict[self].symbol

    @property
    def module(self) -> Type[AngleUnit]:
        """Conversion class serving this unit."""
        return _UNIT_MODULES[self]

    def __repr__(self) -> str:
        return UnitPropsDict[self].name

    def __call__(self, *values: Number) -> Angle:
        """Create a new `Angle` in this unit."""
        return self.module.init(*values)

    def parse(self, text: str) -> Result:
        """Parse literal `text` as an angle in this unit."""
        return self.module.parse(text)

    @staticmethod
    def _find_unit_by_alias(string_to_find: str, aliases: UnitAliasesType) -> Optional[Unit]:
        for aliases_tuple in aliases.keys():
            if string_to_find in (each.lower() for each in aliases_tuple):
                return aliases[aliases_tuple]
        return None

    @staticmethod
    def parse_unit(input_: Union[str, Unit]) -> Optional[Unit]:
        """Resolve a unit tag from its alias.

        Matching ignores case and whitespace and falls back to the singular form.

        Returns:
            Unit enum if a match is found, None otherwise.

        Raises:
            TypeError: If input is neither a string nor a Unit.

        Examples:
            >>> Unit.parse_unit(' Degrees ')
            degree
            >>> Unit.parse_unit('ᵍ')
            gradian
            >>> Unit.parse_unit('oops')
        """
        if isinstance(input_, Unit):
            return input_
        if not isinstance(input_, str):
            raise TypeError(f"String expected, got {type(input_)=}, {input_=}")
        input_ = re.sub(r"\s+", "", input_.strip().lower())
        if (unit := Unit._find_unit_by_alias(input_, UnitAliases)) is not None:
            return unit
        if input_.endswith('s'):
            return Unit._find_unit_by_alias(input_[:-1], UnitAliases)
        return None


class UnitProps(NamedTuple):
    """Display properties of a unit.

    Attributes:
        name: Human-readable name of the unit.
        symbol: Symbol appended to values of the unit.
    """

    name: str
    symbol: str


UnitPropsDict: Mapping[Unit, UnitProps] = {
    Unit.Degree: UnitProps('degree', DEGREES_SYMBOL),
    Unit.Radian: UnitProps('radian', RADIANS_SYMBOL),
    Unit.Gradian: UnitProps('gradian', GRADIANS_SYMBOL),
    Unit.DMS: UnitProps('dms', f"{DEGREES_SYMBOL}{PRIME_SYMBOL}{DOUBLE_PRIME_SYMBOL}"),
}

UnitAliasesType: TypeAlias = Mapping[Tuple[str, ...], Unit]

UnitAliases: UnitAliasesType = {
    ('degree', 'deg', 'd', DEGREES_SYMBOL): Unit.Degree,
    ('radian', 'rad', 'r', RADIANS_SYMBOL): Unit.Radian,
    ('gradian', 'grad', 'gon', 'grade', 'g', GRADIANS_SYMBOL): Unit.Gradian,
    ('dms', 'degreeminutesecond', 'd°m′s″'): Unit.DMS,
}


class AngleUnit:
    """Base class of the unit conversion classes.

    Subclasses name the `Angle` field they own and implement `_convert`, which derives
    that field from whichever other representation is already populated.
    """

    unit: ClassVar[Unit]
    _field: ClassVar[str]
    _parser: ClassVar[re.Pattern] = re.compile(r'^-?[0-9]+(?:\.[0-9]+)?')

    @classmethod
    def _validate_value(cls, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise AngleTypeError(f"{cls.__name__}: number expected, got {type(value).__name__} ({value!r})")

    @classmethod
    def init(cls, value: Number) -> Angle:
        """Initialize an `Angle` from a number of this unit. Integer zero yields `Angle.zero()`."""
        cls._validate_value(value)
        if is_exact_zero(value):
            return Angle.zero()
        return Angle(**{cls._field: value})

    @classmethod
    def parse(cls, text: str) -> Result:
        """Parse a leading, optionally signed, integer or decimal numeral."""
        error = f"Unable to parse value as {cls.unit.key}s"
        if (match := cls._parser.match(text)) is None:
            logger.debug(f"{cls.__name__}: no numeral in {text=}")
            return Result.failure(error)
        if not (number := string_to_number(match.group())).ok:
            return Result.failure(error)
        return Result.success(cls.init(number.value))

    @classmethod
    def has_value(cls, angle: Angle) -> bool:
        return getattr(angle, cls._field) is not None

    @classmethod
    def ensure(cls, angle: Angle) -> Angle:
        """Return `angle` with this unit's representation populated."""
        if cls.has_value(angle):
            return angle
        if angle.is_empty:
            logger.error(f"{cls.__name__}.ensure received an angle without representation")
            raise AngleContractError(angle, f"{cls.__name__}.ensure")
        return cls._convert(angle)

    @classmethod
    def _convert(cls, angle: Angle) -> Angle:
        raise NotImplementedError

    @classmethod
    def _to_value(cls, angle: Angle) -> Tuple[Angle, Any]:
        angle = cls.ensure(angle)
        return angle, getattr(angle, cls._field)

    @classmethod
    def abs(cls, angle: Angle) -> Angle:
        """Fold the angle into the principal range of this unit."""
        raise NotImplementedError(f"{cls.__name__} has no absolute value reduction")


def _drop_turns(value: Number, modulus: Number) -> Number:
    """Remove whole turns at once.

    Positive values land in [modulus, 2 * modulus), negative ones in [0, modulus),
    the same place the step-by-step reduction would reach them.
    """
    if value > 0:
        return value - modulus * (value // modulus - 1)
    return value - modulus * (value // modulus)


def _reduce(value: Number, modulus: Number, name: str) -> Number:
    """Bring `value` into [0, modulus] by repeatedly adding or subtracting `modulus`."""
    if not math.isfinite(value):
        raise AngleValueError(f"Can't reduce non-finite {name} value {value!r}")
    if abs(value) > modulus * MAX_ITERATIONS:
        value = _drop_turns(value, modulus)
    for _ in range(MAX_ITERATIONS):
        if 0 <= value <= modulus:
            return value
        if value > modulus:
            value -= modulus
        else:
            value += modulus
    raise AngleValueError(f"Reached reduction limit {MAX_ITERATIONS} for {name} value")


class Degree(AngleUnit):
    """Functions relating to dealing with angles in decimal degrees.

    Examples:
        >>> Degree.ensure(Radian.init(0.5)).d
        28.64788975654116
        >>> Degree.ensure(Gradian.init(76.3944)).d
        68.75496000000001
        >>> Degree.ensure(DMS.init(77, 50, 56)).d
        77.84888888888888
        >>> Degree.abs(Degree.init(-270))
        <Angle: 90°>
        >>> Degree.abs(Degree.init(1170))
        <Angle: 90°>
    """

    unit = Unit.Degree
    _field = 'd'

    @override
    @classmethod
    def _convert(cls, angle: Angle) -> Angle:
        if angle.r is not None:
            return replace(angle, d=angle.r * 180. / pi)
        if angle.g is not None:
            return replace(angle, d=angle.g / FULL_TURN_GRADIANS * FULL_TURN_DEGREES)
        assert angle.dms is not None
        d, m, s = angle.dms
        return replace(angle, d=d + (m / 60.) + (s / 3600.))

    @classmethod
    def to_degrees(cls, angle: Angle) -> Tuple[Angle, Number]:
        """Return the angle, with its degrees cached, and the degrees value."""
        return cls._to_value(angle)

    @override
    @classmethod
    def abs(cls, angle: Angle) -> Angle:
        """Discard complete revolutions and convert negatives, keeping degrees in [0, 360]."""
        return cls.init(_reduce(cls.ensure(angle).d, FULL_TURN_DEGREES, 'degree'))


class Radian(AngleUnit):
    """Functions relating to dealing with angles in radians.

    Examples:
        >>> Radian.ensure(Degree.init(90)).r
        1.5707963267948966
        >>> Radian.ensure(Gradian.init(76.3944)).r
        1.2000004290770006
        >>> Radian.ensure(DMS.init(90, 0, 0)).r
        1.5707963267948966
    """

    unit = Unit.Radian
    _field = 'r'

    @override
    @classmethod
    def _convert(cls, angle: Angle) -> Angle:
        if angle.d is not None:
            return replace(angle, r=angle.d / 180. * pi)
        if angle.g is not None:
            return replace(angle, r=angle.g * pi / 200.)
        return cls._convert(Degree.ensure(angle))

    @classmethod
    def to_radians(cls, angle: Angle) -> Tuple[Angle, Number]:
        """Return the angle, with its radians cached, and the radians value."""
        return cls._to_value(angle)

    @override
    @classmethod
    def abs(cls, angle: Angle) -> Angle:
        """Discard complete revolutions and convert negatives, keeping radians in [0, 2π]."""
        return cls.init(_reduce(cls.ensure(angle).r, FULL_TURN_RADIANS, 'radian'))


class Gradian(AngleUnit):
    """Functions relating to dealing with angles in gradians.

    Gradians have no reduction of their own; `absolute_value` folds a gradian-only
    angle through degrees.

    Examples:
        >>> Gradian.ensure(Degree.init(90)).g
        100.0
        >>> Gradian.ensure(Radian.init(1)).g
        63.66197723675813
        >>> Gradian.ensure(DMS.init(90, 0, 0)).g
        100.0
    """

    unit = Unit.Gradian
    _field = 'g'

    @override
    @classmethod
    def _convert(cls, angle: Angle) -> Angle:
        if angle.r is not None:
            return replace(angle, g=angle.r * 200. / pi)
        if angle.d is not None:
            return replace(angle, g=angle.d / FULL_TURN_DEGREES * FULL_TURN_GRADIANS)
        return cls._convert(Degree.ensure(angle))

    @classmethod
    def to_gradians(cls, angle: Angle) -> Tuple[Angle, Number]:
        """Return the angle, with its gradians cached, and the gradians value."""
        return cls._to_value(angle)


class DMS(AngleUnit):
    """Functions relating to dealing with angles in degrees, minutes and seconds.

    Examples:
        >>> DMS.ensure(Degree.init(90.5)).dms
        (90, 30, 0.0)
        >>> DMS.ensure(Radian.init(1.579522973054868)).dms
        (90, 30, 0.0)
        >>> DMS.abs(DMS.init(-270, 15, 45))
        <Angle: 90° 45′ 15″>
        >>> DMS.abs(DMS.init(1170, 0, 0))
        <Angle: 90°>
    """

    unit = Unit.DMS
    _field = 'dms'
    _parser = re.compile(r"""
        (-?[0-9]+)
        (?:[°,\ ]?\ *)
        ([0-9]+)
        (?:[′',\ ]?\ *)
        ([0-9]+(?:\.[0-9]+)?)
        [″"]?
    """, re.VERBOSE)

    @override
    @classmethod
    def init(cls, d: int, m: int = 0, s: Number = 0) -> Angle:  # type: ignore[override]
        """Initialize an `Angle` from integer degrees, integer minutes and seconds.

        Omitted minutes and seconds are zero. The triple is stored as given, without
        range checks, and an all-zero triple is not unified with `Angle.zero()`.
        """
        for name, value in (('degrees', d), ('minutes', m)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise AngleTypeError(f"DMS: integer {name} expected, got {type(value).__name__} ({value!r})")
        cls._validate_value(s)
        return Angle(dms=(d, m, s))

    @override
    @classmethod
    def parse(cls, text: str) -> Result:
        """Parse degrees, minutes and seconds separated by spaces, commas or °′″ marks.

        Examples:
            >>> DMS.parse("166° 45′ 58.46″").value
            <Angle: 166° 45′ 58.46″>
            >>> DMS.parse("166,45,58.46").value
            <Angle: 166° 45′ 58.46″>
            >>> DMS.parse("north").error
            'Unable to parse value as DMS'
        """
        error = "Unable to parse value as DMS"
        if (match := cls._parser.search(text)) is None:
            logger.debug(f"DMS: no degrees, minutes and seconds in {text=}")
            return Result.failure(error)
        d, m, s = match.groups()
        parsed = (string_to_integer(d), string_to_integer(m), string_to_number(s))
        for each in parsed:
            if not each.ok:
                return Result.failure(each.error)
        return Result.success(cls.init(*(each.value for each in parsed)))

    @override
    @classmethod
    def _convert(cls, angle: Angle) -> Angle:
        if angle.d is None:
            return cls._convert(Degree.ensure(angle))
        real_degrees = angle.d
        if not math.isfinite(real_degrees):
            raise AngleValueError(f"Can't split non-finite degree value {real_degrees!r}")
        d = int(real_degrees)
        real_minutes = (real_degrees - d) * 60
        m = int(real_minutes)
        s = (real_minutes - m) * 60
        return replace(angle, dms=(d, m, s))

    @classmethod
    def to_dms(cls, angle: Angle) -> Tuple[Angle, DMSTriple]:
        """Return the angle, with its DMS triple cached, and the triple."""
        return cls._to_value(angle)

    @override
    @classmethod
    def abs(cls, angle: Angle) -> Angle:
        """Discard complete revolutions of the degrees component.

        When the degrees turn positive from the last negative revolution, the minutes and
        seconds are replaced by their complements `60 - m` and `60 - s`. Earlier revolutions
        leave them unchanged, so the complement is applied at most once.
        """
        d, m, s = cls.ensure(angle).dms
        if d > FULL_TURN_DEGREES * MAX_ITERATIONS:
            d = _drop_turns(d, FULL_TURN_DEGREES)
        elif d < -FULL_TURN_DEGREES * MAX_ITERATIONS:
            # stop within the last negative revolution, the complement happens there
            d -= FULL_TURN_DEGREES * (d // FULL_TURN_DEGREES + 1)
        for _ in range(MAX_ITERATIONS):
            if 0 <= d <= 360:
                return cls.init(d, m, s)
            if d > 360:
                d -= 360
            elif d < -360:
                d += 360
            else:
                d, m, s = d + 360, 60 - m, 60 - s
        raise AngleValueError(f"Reached reduction limit {MAX_ITERATIONS} for DMS value")


_UNIT_MODULES: Mapping[Unit, Type[AngleUnit]] = {
    Unit.Degree: Degree,
    Unit.Radian: Radian,
    Unit.Gradian: Gradian,
    Unit.DMS: DMS,
}


def absolute_value(angle: Angle) -> Angle:
    """Fold an angle into its principal range.

    The representation to reduce is picked in the order radians, degrees, gradians, DMS.
    Gradians have no reduction of their own and are folded through degrees.

    Raises:
        AngleContractError: If the angle has no representation at all.

    Examples:
        >>> absolute_value(Angle(d=-90, r=1.0))
        <Angle: 1.0㎭>
        >>> absolute_value(Gradian.init(500))
        <Angle: 90.0°>
    """
    if angle.r is not None:
        return Radian.abs(angle)
    if angle.d is not None:
        return Degree.abs(angle)
    if angle.g is not None:
        return Degree.abs(Degree.ensure(angle))
    if angle.dms is not None:
        return DMS.abs(angle)
    logger.error("absolute_value received an angle without representation")
    raise AngleContractError(angle, "absolute_value")


def zero() -> Angle:
    """The unit independent zero angle."""
    return Angle.zero()


def degrees(n: Number) -> Angle:
    return Degree.init(n)


def radians(n: Number) -> Angle:
    return Radian.init(n)


def gradians(n: Number) -> Angle:
    return Gradian.init(n)


def dms(d: int, m: int = 0, s: Number = 0) -> Angle:
    return DMS.init(d, m, s)


def to_degrees(angle: Angle) -> Tuple[Angle, Number]:
    return Degree.to_degrees(angle)


def to_radians(angle: Angle) -> Tuple[Angle, Number]:
    return Radian.to_radians(angle)


def to_gradians(angle: Angle) -> Tuple[Angle, Number]:
    return Gradian.to_gradians(angle)


def to_dms(angle: Angle) -> Tuple[Angle, DMSTriple]:
    return DMS.to_dms(angle)


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):
    """Default unit used when an angle literal carries no unit modifier.

    Default Configuration:
        * angular: None (literals must name their unit)

    Examples:
        >>> PreferredUnits.set(angular='degree')
        >>> PreferredUnits.angular
        degree
        >>> PreferredUnits.restore_defaults()
        >>> PreferredUnits.angular is None
        True
    """

    angular: Optional[Unit] = None

    @classmethod
    def restore_defaults(cls):
        """Reset all preferred units to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def set(cls, **kwargs: Union[Unit, str, None]):
        """Set preferred units from keyword arguments.

        Values are Unit enums or unit aliases. Invalid attributes or values are logged
        as warnings but do not raise exceptions.
        """
        for attribute, value in kwargs.items():
            if not hasattr(PreferredUnits, attribute):
                logger.warning(f"{attribute=} not found in preferred_units")
            elif value is None or isinstance(value, Unit):
                setattr(PreferredUnits, attribute, value)
            elif isinstance(value, str):
                if (_unit := Unit.parse_unit(value)) is not None:
                    setattr(PreferredUnits, attribute, _unit)
                else:
                    logger.warning(f"{value=} not a member of Unit")
            else:
                logger.warning(f"type of {value=} have not been converted to a member of Unit")


def resolve_unit(modifier: Union[Unit, str]) -> Unit:
    """Resolve a unit modifier, raising `UnitAliasError` when it names no unit."""
    if (unit := Unit.parse_unit(modifier)) is None:
        raise UnitAliasError(f"Unsupported unit {modifier=}")
    return unit


__all__ = (
    'MAX_ITERATIONS',
    'Unit',
    'UnitProps',
    'UnitPropsDict',
    'UnitAliases',
    'AngleUnit',
    'Degree',
    'Radian',
    'Gradian',
    'DMS',
    'absolute_value',
    'zero',
    'degrees',
    'radians',
    'gradians',
    'dms',
    'to_degrees',
    'to_radians',
    'to_gradians',
    'to_dms',
    'resolve_unit',
    'PreferredUnits',
)
