"""Shorthand for writing angle literals.

`angle_literal` (also exported as `a`) turns literal text plus a unit modifier into an
`Angle`, raising `InvalidAngleError` when the text can't be parsed.

Examples:
    >>> a("13.2", "d")
    <Angle: 13.2°>
    >>> a("0.25", "r")
    <Angle: 0.25㎭>
    >>> a("40", "g")
    <Angle: 40ᵍ>
    >>> a("90,30,50", "dms")
    <Angle: 90° 30′ 50″>
    >>> a("0")
    <Angle: 0>
"""
from __future__ import annotations

from typing import Optional, Union

from py_angle.exceptions import InvalidAngleError
from py_angle.logger import logger
from py_angle.unit import PreferredUnits, Unit
from py_angle.value import Angle

__all__ = ('angle_literal', 'a')


def angle_literal(text: str, modifier: Optional[Union[Unit, str]] = None) -> Angle:
    """Create an `Angle` from literal text.

    Args:
        text: Literal such as `"13.2"`, `"-13.2°"` or `"166° 45′ 58.46″"`.
        modifier: Unit of the literal, a `Unit` or any unit alias (`'d'`, `'r'`, `'g'`, `'dms'`, ...).
            Falls back to `PreferredUnits.angular` when omitted. The literal `"0"` needs no unit.

    Returns:
        The parsed angle.

    Raises:
        InvalidAngleError: If the unit is missing or unknown, or the text can't be parsed.
    """
    if text == "0":
        return Angle.zero()

    if modifier is None:
        modifier = PreferredUnits.angular
    try:
        unit = Unit.parse_unit(modifier) if modifier is not None else None
    except TypeError as err:
        raise InvalidAngleError(f"Unable to parse angle, unsupported unit modifier {modifier!r}") from err
    if unit is None:
        logger.debug(f"No angle unit for {text=}, {modifier=}")
        raise InvalidAngleError("Unable to parse angle")

    result = unit.parse(text)
    if not result.ok:
        raise InvalidAngleError(result.error)
    return result.value


a = angle_literal
