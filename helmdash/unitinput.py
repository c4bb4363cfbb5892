"""Conversion of values entered in display units back into database units."""

from __future__ import annotations

import struct

from helmdash.units import UnitType

__all__ = ["to_database_units"]

# Families that only ever have the database unit.
_SINGLE_UNIT = frozenset(
    {
        UnitType.PERCENT,
        UnitType.MASS,
        UnitType.RPM,
        UnitType.ELECTRICAL,
        UnitType.COMMAND,
        UnitType.CURRENT,
        UnitType.FREQUENCY,
        UnitType.REVS,
        UnitType.NONE,
        UnitType.RESISTANCE,
    }
)

# Divisors for families with two alternative units: (for units 1, for any other).
_DIVISORS: dict[UnitType, tuple[float, float]] = {
    UnitType.PRESSURE: (0.1450, 0.01),
    UnitType.VOLUME: (0.264172, 0.219969),
    UnitType.DISTANCE: (1.1507, 1.8520),
    UnitType.FLOW_RATE: (0.264172, 0.219969),
    UnitType.SPEED: (1.15077945, 1.85200),
    UnitType.ECONOMY: (0.264172, 0.2199),
}


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def to_database_units(
    unit_type: UnitType | int,
    source_units: int,
    value: float,
    variation: float = 0.0,
) -> float:
    """Convert ``value`` given in unit index ``source_units`` into database units.

    ``variation`` is the magnetic variation added back to magnetic bearings.
    Raises ValueError for an unknown family, or for a family that has only
    one unit when a non-zero unit index is given.
    """
    try:
        family = UnitType(unit_type)
    except ValueError:
        raise ValueError(f"bad unit type: {unit_type!r}") from None

    data = _f32(float(value))
    if source_units == 0:
        return data

    if family in _DIVISORS:
        first, other = _DIVISORS[family]
        divisor = first if source_units == 1 else other
        return _f32(data / _f32(divisor))
    if family is UnitType.TEMPERATURE:
        return _f32(_f32(data - 32.0) * _f32(5.0 / 9.0))
    if family is UnitType.DEPTH:
        return _f32(data / _f32(3.2808))
    if family is UnitType.BEARING:
        return _f32(data + _f32(variation))
    if family is UnitType.ANGLE:
        return _f32(data / _f32(0.0175))
    if family is UnitType.TIME:
        return _f32(data * 3600.0)
    if family in _SINGLE_UNIT:
        raise ValueError(
            f"{family.name.lower()} has a single unit; source units {source_units} is invalid"
        )
    raise ValueError(f"bad unit type: {unit_type!r}")