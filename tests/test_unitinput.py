import pytest

from helmdash.conversion import convert_value
from helmdash.unitinput import to_database_units
from helmdash.units import UnitType, max_valid


@pytest.mark.parametrize("family", list(UnitType))
def test_database_units_pass_through(family):
    assert to_database_units(family, 0, 42.5) == 42.5


@pytest.mark.parametrize(
    "family",
    [
        UnitType.PRESSURE,
        UnitType.VOLUME,
        UnitType.DISTANCE,
        UnitType.FLOW_RATE,
        UnitType.SPEED,
        UnitType.TEMPERATURE,
        UnitType.DEPTH,
        UnitType.ANGLE,
        UnitType.TIME,
    ],
)
def test_round_trip_with_display_conversion(family):
    for units in range(1, max_valid(family) + 1):
        shown = convert_value(family, units, 1234.0)
        assert to_database_units(family, units, shown) == pytest.approx(1234.0, rel=1e-4)


def test_bearing_round_trip_uses_variation():
    shown = convert_value(UnitType.BEARING, 1, 90.0, variation=5.0)
    assert to_database_units(UnitType.BEARING, 1, shown, variation=5.0) == pytest.approx(90.0)


def test_boiling_point():
    assert to_database_units(UnitType.TEMPERATURE, 1, 212.0) == pytest.approx(100.0)


def test_hours_to_seconds():
    assert to_database_units(UnitType.TIME, 1, 1.0) == pytest.approx(3600.0)


def test_economy_units_one_and_two_differ():
    per_gal = to_database_units(UnitType.ECONOMY, 1, 10.0)
    per_igal = to_database_units(UnitType.ECONOMY, 2, 10.0)
    assert per_gal == pytest.approx(10.0 / 0.264172, rel=1e-5)
    assert per_igal == pytest.approx(10.0 / 0.2199, rel=1e-5)


def test_pressure_other_units_use_bar_divisor():
    assert to_database_units(UnitType.PRESSURE, 2, 1.5) == to_database_units(
        UnitType.PRESSURE, 7, 1.5
    )


@pytest.mark.parametrize(
    "family", [UnitType.PERCENT, UnitType.RPM, UnitType.NONE, UnitType.RESISTANCE]
)
def test_single_unit_families_reject_other_units(family):
    with pytest.raises(ValueError):
        to_database_units(family, 1, 3.0)


def test_bad_unit_type():
    with pytest.raises(ValueError):
        to_database_units(99, 1, 3.0)