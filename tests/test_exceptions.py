import pytest

from py_angle.exceptions import (AngleContractError, AngleDomainError, AngleTypeError, AngleValueError,
                                 InvalidAngleError, UnitAliasError)
from py_angle.value import Angle


@pytest.mark.parametrize(
    "exc_type, bases",
    [
        (AngleTypeError, (TypeError,)),
        (AngleValueError, (ValueError,)),
        (AngleDomainError, (AngleValueError, ValueError)),
        (InvalidAngleError, (AngleValueError, ValueError)),
        (UnitAliasError, (ValueError,)),
        (AngleContractError, (RuntimeError,)),
    ],
    ids=lambda c: getattr(c, "__name__", None)
)
def test_hierarchy(exc_type, bases):
    assert issubclass(exc_type, bases)


def test_contract_error_message_and_attrs():
    angle = Angle()
    err = AngleContractError(angle, "absolute_value")
    assert err.angle is angle
    assert err.operation == "absolute_value"
    assert str(err) == "absolute_value: No representation populated in <Angle: empty>"

    assert str(AngleContractError(angle)) == "No representation populated in <Angle: empty>"
