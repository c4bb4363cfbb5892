"""Conversion of database values from database units into display units."""

from __future__ import annotations

import struct
from collections.abc import Callable
from enum import IntEnum

from helmdash.units import UnitType

__all__ = ["VarType", "convert_value"]


class VarType(IntEnum):
    """How a database value is stored."""

    UNSIGNED_CHAR_ARRAY_FOUR_ELEMENT = 0
    UNSIGNED_INT = 1
    INT = 2
    UNSIGNED_LONG = 3
    LONG = 4
    FLOAT = 5
    POINTER = 6


_Step = Callable[[float, float], float]


def _scale(factor: float) -> _Step:
    return lambda value, _variation: value * factor


_KPA_TO_PSI = _scale(0.1450)
_KPA_TO_BAR = _scale(0.01)
_L_TO_GAL = _scale(0.264172)
_L_TO_IMP_GAL = _scale(0.219969)
_NM_TO_MILES = _scale(1.1507)
_NM_TO_KM = _scale(1.8520)
_KNOTS_TO_MPH = _scale(1.15077945)
_KNOTS_TO_KMH = _scale(1.85200)
_M_TO_FEET = _scale(3.2808)
_DEG_TO_RAD = _scale(0.0175)


def _sec_to_hours(value: float, _variation: float) -> float:
    return value / 3600.0


def _c_to_f(value: float, _variation: float) -> float:
    return value * (9.0 / 5.0) + 32.0


def _true_to_magnetic(value: float, variation: float) -> float:
    return value - variation


# For each family: the conversion steps for each unit index. Index 0 is the
# database unit and needs no conversion.
_CONVERSIONS: dict[UnitType, tuple[tuple[_Step, ...], ...]] = {
    UnitType.PRESSURE: ((), (_KPA_TO_PSI,), (_KPA_TO_BAR,)),
    UnitType.TEMPERATURE: ((), (_c_to_f,)),
    UnitType.VOLUME: ((), (_L_TO_GAL,), (_L_TO_IMP_GAL,)),
    UnitType.DISTANCE: ((), (_NM_TO_MILES,), (_NM_TO_KM,)),
    UnitType.FLOW_RATE: ((), (_L_TO_GAL,), (_L_TO_IMP_GAL,)),
    UnitType.SPEED: ((), (_KNOTS_TO_MPH,), (_KNOTS_TO_KMH,)),
    UnitType.TIME: ((), (_sec_to_hours,)),
    UnitType.ECONOMY: (
        (),
        (_L_TO_GAL,),
        (_L_TO_IMP_GAL,),
        (_NM_TO_MILES,),
        (_L_TO_GAL, _NM_TO_MILES),
        (_L_TO_IMP_GAL, _NM_TO_MILES),
        (_NM_TO_KM,),
        (_L_TO_GAL, _NM_TO_KM),
        (_L_TO_IMP_GAL, _NM_TO_KM),
    ),
    UnitType.DEPTH: ((), (_M_TO_FEET,)),
    UnitType.BEARING: ((), (_true_to_magnetic,)),
    UnitType.ANGLE: ((), (_DEG_TO_RAD,)),
}


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _wrap_unsigned(value: int) -> int:
    return value & 0xFFFFFFFF


def _wrap_signed(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _apply(step: _Step, value: float | int, data_type: VarType, variation: float) -> float | int:
    result = _f32(step(_f32(float(value)), variation))
    if data_type is VarType.FLOAT:
        return result
    if data_type in (VarType.UNSIGNED_INT, VarType.UNSIGNED_LONG):
        return _wrap_unsigned(int(result))
    if data_type in (VarType.INT, VarType.LONG):
        return _wrap_signed(int(result))
    raise TypeError(f"values of type {data_type.name} cannot be converted")


def convert_value(
    unit_type: UnitType | int,
    units: int,
    value: float | int,
    data_type: VarType | int = VarType.FLOAT,
    variation: float = 0.0,
) -> float | int:
    """Convert ``value`` from database units into unit index ``units``.

    Integer types are truncated towards zero after each step, as they are
    stored. ``variation`` is the magnetic variation used for bearings.
    """
    try:
        family = UnitType(unit_type)
    except ValueError:
        raise ValueError(f"bad unit type: {unit_type!r}") from None
    table = _CONVERSIONS.get(family)
    if table is None:
        # Single-unit families never need converting.
        return value
    if not 0 <= units < len(table):
        raise ValueError(f"bad {family.name.lower()} units: {units}")
    steps = table[units]
    if not steps:
        return value
    kind = VarType(data_type)
    for step in steps:
        value = _apply(step, value, kind, variation)
    return value