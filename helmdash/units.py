"""Unit families known to the parameter database and their display strings."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["UnitType", "max_valid", "unit_text"]


class UnitType(IntEnum):
    """Family of units a database parameter is measured in."""

    PRESSURE = 0
    TEMPERATURE = 1
    VOLUME = 2
    DISTANCE = 3
    PERCENT = 4
    FLOW_RATE = 5
    TIME = 6
    MASS = 7
    RPM = 8
    SPEED = 9
    ELECTRICAL = 10
    ECONOMY = 11
    COMMAND = 12
    DEPTH = 13
    BEARING = 14
    ANGLE = 15
    CURRENT = 16
    FREQUENCY = 17
    REVS = 18
    RESISTANCE = 19
    NONE = 20


# Index 0 of every family is the unit the database stores values in.
_UNIT_TEXT: dict[UnitType, tuple[str, ...]] = {
    UnitType.PRESSURE: ("kPa", "PSI", "Bar"),
    UnitType.TEMPERATURE: ("\u00b0C", "\u00b0F"),
    UnitType.VOLUME: ("L", "Gal", "I Gal"),
    UnitType.DISTANCE: ("NM", "M", "Km"),
    UnitType.PERCENT: ("%",),
    UnitType.FLOW_RATE: ("L/h", "Gal/h", "I Gal/h"),
    UnitType.TIME: ("s", "Hrs"),
    UnitType.MASS: ("Kg",),
    UnitType.RPM: ("RPM",),
    UnitType.SPEED: ("Kts", "M/h", "Km/h"),
    UnitType.ELECTRICAL: ("V",),
    UnitType.ECONOMY: (
        "NM/L",
        "NM/Gal",
        "NM/I Gal",
        "M/L",
        "M/Gal",
        "M/I Gal",
        "Km/L",
        "Km/Gal",
        "Km/I Gal",
    ),
    UnitType.COMMAND: ("",),
    UnitType.DEPTH: ("m", "ft"),
    UnitType.BEARING: ("True", "Mag"),
    UnitType.ANGLE: ("Deg", "Rad"),
    UnitType.CURRENT: ("A",),
    UnitType.FREQUENCY: ("Hz",),
    UnitType.REVS: ("Revs",),
    UnitType.RESISTANCE: ("Ohms",),
    UnitType.NONE: ("",),
}


def _coerce(unit_type: UnitType | int) -> UnitType:
    try:
        return UnitType(unit_type)
    except ValueError:
        raise ValueError(f"bad unit type: {unit_type!r}") from None


def max_valid(unit_type: UnitType | int) -> int:
    """Return the highest selectable unit index for a unit family."""
    return len(_UNIT_TEXT[_coerce(unit_type)]) - 1


def unit_text(unit_type: UnitType | int, index: int) -> str:
    """Return the short label for a unit, or "" when the index is out of range."""
    kind = _coerce(unit_type)
    labels = _UNIT_TEXT[kind]
    if 0 <= index < len(labels):
        return labels[index]
    return ""