import pytest

from helmdash.units import UnitType, max_valid, unit_text


@pytest.mark.parametrize(
    "unit_type, index, expected",
    [
        (UnitType.PRESSURE, 0, "kPa"),
        (UnitType.PRESSURE, 1, "PSI"),
        (UnitType.PRESSURE, 2, "Bar"),
        (UnitType.TEMPERATURE, 0, "\u00b0C"),
        (UnitType.TEMPERATURE, 1, "\u00b0F"),
        (UnitType.ECONOMY, 5, "M/I Gal"),
        (UnitType.SPEED, 2, "Km/h"),
        (UnitType.REVS, 0, "Revs"),
        (UnitType.RESISTANCE, 0, "Ohms"),
        (UnitType.BEARING, 1, "Mag"),
    ],
)
def test_known_labels(unit_type, index, expected):
    assert unit_text(unit_type, index) == expected


@pytest.mark.parametrize("unit_type", list(UnitType))
def test_index_past_max_is_empty(unit_type):
    assert unit_text(unit_type, max_valid(unit_type) + 1) == ""


@pytest.mark.parametrize("unit_type", list(UnitType))
def test_every_valid_index_has_label_except_unitless(unit_type):
    labels = [unit_text(unit_type, i) for i in range(max_valid(unit_type) + 1)]
    if unit_type in (UnitType.NONE, UnitType.COMMAND):
        assert labels == [""]
    else:
        assert all(labels)
        assert len(set(labels)) == len(labels)


def test_single_unit_families_have_max_zero():
    for kind in (UnitType.PERCENT, UnitType.MASS, UnitType.RPM, UnitType.REVS):
        assert max_valid(kind) == 0


def test_economy_labels_combine_distance_and_volume():
    distances = ("NM", "M", "Km")
    volumes = ("L", "Gal", "I Gal")
    expected = [f"{d}/{v}" for d in distances for v in volumes]
    assert [unit_text(UnitType.ECONOMY, i) for i in range(max_valid(UnitType.ECONOMY) + 1)] == expected


def test_accepts_plain_int():
    assert unit_text(int(UnitType.DEPTH), 1) == "ft"
    assert max_valid(int(UnitType.DEPTH)) == max_valid(UnitType.DEPTH)


def test_negative_index_is_empty():
    assert unit_text(UnitType.PRESSURE, -1) == ""


def test_bad_unit_type_raises():
    with pytest.raises(ValueError):
        max_valid(len(UnitType))
    with pytest.raises(ValueError):
        unit_text(len(UnitType), 0)