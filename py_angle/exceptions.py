"""py_angle exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── AngleTypeError
├── ValueError
│   ├── AngleValueError
│   │   ├── AngleDomainError
│   │   └── InvalidAngleError
│   └── UnitAliasError
└── RuntimeError
    └── AngleContractError

Exception Types
---------------

- AngleTypeError: A unit constructor received a value of the wrong type, e.g. a float
  for the degrees component of a DMS triple.

- AngleValueError: A numeric value can't be handled, e.g. an infinite angle passed
  to an absolute value reduction.

- AngleDomainError: An inverse trigonometric function was asked for a value outside
  of its mathematical domain and the failed result was unwrapped.

- InvalidAngleError: Angle literal text could not be parsed.

- UnitAliasError: A unit tag string does not name a known angle unit.

- AngleContractError: An `Angle` without any populated representation reached an
  operation that requires one. This is a defect in the calling code.

Conversion functions report expected failures (bad literal text, domain violations)
as `Result` values; exceptions are raised by the literal shorthand and by `Result.unwrap`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from py_angle.value import Angle

__all__ = (
    'AngleTypeError',
    'AngleValueError',
    'AngleDomainError',
    'InvalidAngleError',
    'UnitAliasError',
    'AngleContractError',
)


class AngleTypeError(TypeError):
    """Angle type error."""


class AngleValueError(ValueError):
    """Angle value error."""


class AngleDomainError(AngleValueError):
    """Value outside of the domain of an inverse trigonometric function."""


class InvalidAngleError(AngleValueError):
    """Angle literal parsing error."""


class UnitAliasError(ValueError):
    """Unit alias error."""


class AngleContractError(RuntimeError):
    """Exception for angles that carry no representation at all.

    Contains:
    - The offending angle
    - The operation that received it
    """

    def __init__(self, angle: Angle, operation: str = ""):
        self.angle = angle
        self.operation = operation
        msg = f"No representation populated in {angle!r}"
        if operation:
            msg = f"{operation}: " + msg
        super().__init__(msg)
