import pytest

from py_angle import a, angle_literal, loadDegreeUnits, PreferredUnits
from py_angle.exceptions import InvalidAngleError
from py_angle.unit import Unit
from py_angle.value import Angle


class TestAngleLiteral:

    @pytest.mark.parametrize(
        "text, modifier, expected",
        [
            ("13.2", "d", Angle(d=13.2)),
            ("13", "d", Angle(d=13)),
            ("-13.2°", "deg", Angle(d=-13.2)),
            ("0.25", "r", Angle(r=0.25)),
            ("13", "rad", Angle(r=13)),
            ("40", "g", Angle(g=40)),
            ("90,30,50", "dms", Angle(dms=(90, 30, 50))),
            ("166° 45′ 58.46″", Unit.DMS, Angle(dms=(166, 45, 58.46))),
        ]
    )
    def test_units(self, text, modifier, expected):
        assert angle_literal(text, modifier) == expected

    def test_alias(self):
        assert a is angle_literal

    @pytest.mark.parametrize("modifier", [None, "d", "r", "z"])
    def test_zero_needs_no_unit(self, modifier):
        assert a("0", modifier) == Angle.zero()

    def test_non_number_raises(self):
        with pytest.raises(InvalidAngleError, match="(?i)unable to parse"):
            a("WAT", "d")

    def test_no_representation_raises(self):
        with pytest.raises(InvalidAngleError, match="(?i)unable to parse"):
            a("13")

    def test_bogus_modifier_raises(self):
        with pytest.raises(InvalidAngleError, match="(?i)unable to parse"):
            a("13", "z")

    def test_bad_dms_raises(self):
        with pytest.raises(InvalidAngleError, match="DMS"):
            a("north", "dms")

    def test_invalid_angle_is_value_error(self):
        with pytest.raises(ValueError):
            a("WAT", "r")

    def test_preferred_unit(self):
        PreferredUnits.set(angular='gradian')
        assert a("13") == Angle(g=13)

    def test_explicit_modifier_beats_preferred_unit(self):
        loadDegreeUnits()
        assert PreferredUnits.angular == Unit.Degree
        assert a("13") == Angle(d=13)
        assert a("13", "r") == Angle(r=13)

    @pytest.mark.parametrize("modifier", [42, 1.5, ["d"]])
    def test_non_string_modifier_raises(self, modifier):
        with pytest.raises(InvalidAngleError, match="unsupported unit modifier"):
            a("13", modifier)
