"""Persistent user settings: language, key bleep, display units and CAN instances."""

from __future__ import annotations

import binascii
import os
import struct
from collections.abc import Callable
from pathlib import Path

from helmdash.units import UnitType, max_valid

__all__ = ["Settings", "CAN_PORTS", "CRC_START_VALUE"]

CRC_START_VALUE = 0x1D0F
CAN_PORTS = 2

# Families whose display unit the user can choose, in storage order.
_SELECTABLE: tuple[UnitType, ...] = (
    UnitType.PRESSURE,
    UnitType.TEMPERATURE,
    UnitType.VOLUME,
    UnitType.DISTANCE,
    UnitType.FLOW_RATE,
    UnitType.SPEED,
    UnitType.DEPTH,
    UnitType.ANGLE,
    UnitType.BEARING,
    UnitType.ECONOMY,
    UnitType.TIME,
)

# Families that only have the database unit.
_FIXED = frozenset(UnitType) - frozenset(_SELECTABLE)

_DEFAULT_UNITS: dict[UnitType, int] = {kind: 0 for kind in _SELECTABLE}
_DEFAULT_UNITS[UnitType.TIME] = 1

# CRC word, then the checksummed body.
_HEADER = struct.Struct("<I")
_BODY = struct.Struct(f"<IIi{len(_SELECTABLE)}b{CAN_PORTS}B{CAN_PORTS}B")
_RECORD_SIZE = _HEADER.size + _BODY.size


def _crc(body: bytes) -> int:
    return binascii.crc_hqx(body, CRC_START_VALUE)


class Settings:
    """User settings kept in a checksummed file.

    ``on_buzzer`` is called with the key-bleep mute state whenever it is applied.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        on_buzzer: Callable[[bool], None] | None = None,
    ) -> None:
        self.path = Path(path)
        self.on_buzzer = on_buzzer
        self.save_count = 0
        self._set_defaults()

    # -- persistence -------------------------------------------------------

    def _set_defaults(self) -> None:
        self.language = 0
        self.buzzer_muted = False
        self._units = dict(_DEFAULT_UNITS)
        self._system_instance = [0] * CAN_PORTS
        self._device_instance = [0] * CAN_PORTS

    def _apply_buzzer(self) -> None:
        if self.on_buzzer is not None:
            self.on_buzzer(self.buzzer_muted)

    def _body(self) -> bytes:
        return _BODY.pack(
            self.save_count,
            self.language,
            int(self.buzzer_muted),
            *(self._units[kind] for kind in _SELECTABLE),
            *self._system_instance,
            *self._device_instance,
        )

    def _read_record(self) -> tuple[int, bytes] | None:
        try:
            raw = self.path.read_bytes()
        except OSError:
            return None
        if len(raw) != _RECORD_SIZE:
            return None
        (crc,) = _HEADER.unpack_from(raw)
        return crc, raw[_HEADER.size:]

    def load(self) -> None:
        """Load the settings file, restoring defaults if it is missing or corrupt."""
        record = self._read_record()
        if record is None or record[0] != _crc(record[1]):
            self.save_count = 0
            self.restore_defaults()
        else:
            fields = _BODY.unpack(record[1])
            self.save_count, self.language, muted = fields[:3]
            self.buzzer_muted = bool(muted)
            rest = fields[3:]
            count = len(_SELECTABLE)
            self._units = dict(zip(_SELECTABLE, rest[:count]))
            self._system_instance = list(rest[count:count + CAN_PORTS])
            self._device_instance = list(rest[count + CAN_PORTS:])
        self._apply_buzzer()

    def save(self) -> bool:
        """Write the settings if they differ from the file; return True if written."""
        current = _crc(self._body())
        record = self._read_record()
        if record is not None and record[0] == current:
            return False
        self.save_count += 1
        body = self._body()
        self.path.write_bytes(_HEADER.pack(_crc(body)) + body)
        return True

    def restore_defaults(self) -> None:
        """Reset every setting to its default and save."""
        self._set_defaults()
        self._apply_buzzer()
        self.save()

    # -- language and buzzer -----------------------------------------------

    def set_language(self, index: int) -> None:
        """Select a language, saving only when it changes."""
        if not 0 <= index <= 0xFFFFFFFF:
            raise ValueError(f"bad language index: {index}")
        if index != self.language:
            self.language = index
            self.save()

    def toggle_bleep(self) -> None:
        """Switch the key bleep between muted and audible and save."""
        self.buzzer_muted = not self.buzzer_muted
        self._apply_buzzer()
        self.save()

    # -- units -------------------------------------------------------------

    @staticmethod
    def _family(unit_type: UnitType | int) -> UnitType:
        try:
            return UnitType(unit_type)
        except ValueError:
            raise ValueError(f"bad unit type: {unit_type!r}") from None

    def get_units(self, unit_type: UnitType | int) -> int:
        """Return the selected unit index for a family (0 for single-unit families)."""
        family = self._family(unit_type)
        if family in _FIXED:
            return 0
        return self._units[family] & 0xFF

    def set_units(self, unit_type: UnitType | int, value: int) -> bool:
        """Select a unit index and save; out-of-range indexes are ignored.

        Returns True if the selection was accepted.
        """
        family = self._family(unit_type)
        if family in _FIXED:
            raise ValueError(f"{family.name.lower()} units cannot be chosen")
        if not 0 <= value <= max_valid(family):
            return False
        self._units[family] = value
        self.save()
        return True

    def toggle_units(self, unit_type: UnitType | int) -> int:
        """Step to the next unit of a family, wrapping to 0; return the new index."""
        family = self._family(unit_type)
        current = self.get_units(family)
        self.set_units(family, 0 if current == max_valid(family) else current + 1)
        return self.get_units(family)

    # -- CAN instances -----------------------------------------------------

    @staticmethod
    def _check_port(port: int) -> None:
        if not 0 <= port < CAN_PORTS:
            raise IndexError(f"CAN port out of range: {port}")

    @staticmethod
    def _check_byte(value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"instance must fit in a byte: {value}")

    def can_system_instance(self, port: int) -> int:
        """Return the system instance for a CAN port, or 0 for an unknown port."""
        return self._system_instance[port] if 0 <= port < CAN_PORTS else 0

    def set_can_system_instance(self, port: int, value: int) -> None:
        """Set the system instance of a CAN port and save."""
        self._check_port(port)
        self._check_byte(value)
        self._system_instance[port] = value
        self.save()

    def can_device_instance(self, port: int) -> int:
        """Return the device instance for a CAN port, or 0 for an unknown port."""
        return self._device_instance[port] if 0 <= port < CAN_PORTS else 0

    def set_can_device_instance(self, port: int, value: int) -> None:
        """Set the device instance of a CAN port and save."""
        self._check_port(port)
        self._check_byte(value)
        self._device_instance[port] = value
        self.save()