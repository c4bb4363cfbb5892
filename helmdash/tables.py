"""Fault descriptions reported by the control board and configurable system options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

__all__ = [
    "FaultCode",
    "Fault",
    "SystemOption",
    "faults_for",
    "active_faults",
    "system_options",
]

FAULT_DESCRIPTION_MAX_LENGTH = 50


class FaultCode(IntEnum):
    """Group a reported fault word belongs to."""

    STA1 = 0
    STA2 = 1
    STA3 = 2
    NFE = 3
    SFE = 4
    CFE = 5
    GAL = 6


@dataclass(frozen=True)
class Fault:
    """One bit of a fault word and what it means."""

    code: FaultCode
    bit: int
    description: str


@dataclass
class SystemOption:
    """A two-state option with a label for each state."""

    name: str
    on: str
    off: str
    status: bool

    def label(self) -> str:
        """Return the label for the current state."""
        return self.on if self.status else self.off


_STATION_INPUTS = (
    "Idle Knob",
    "Helm / Tiller",
    "Roll command",
    "Trim command",
    "Joystick Y-axis",
    "Joystick X-axis",
)

_FAULTS: tuple[Fault, ...] = (
    *(Fault(code, bit, text)
      for code in (FaultCode.STA1, FaultCode.STA2, FaultCode.STA3)
      for bit, text in enumerate(_STATION_INPUTS)),
    Fault(FaultCode.NFE, 0, "Stbd Bucket NFU"),
    Fault(FaultCode.NFE, 1, "Port Bucket NFU"),
    Fault(FaultCode.NFE, 2, "Stbd Nozzle NFU"),
    Fault(FaultCode.NFE, 3, "Port Nozzle NFU"),
    Fault(FaultCode.NFE, 4, "Stbd Trim Tab / INT NFU"),
    Fault(FaultCode.NFE, 5, "Port Trim Tab / INT NFU"),
    Fault(FaultCode.SFE, 0, "Stbd Bucket feedback"),
    Fault(FaultCode.SFE, 1, "Port Bucket feedback"),
    Fault(FaultCode.SFE, 2, "Stbd Nozzle feedback"),
    Fault(FaultCode.SFE, 3, "Port Nozzle feedback"),
    Fault(FaultCode.SFE, 4, "Stbd Trim Tab / INT feedback"),
    Fault(FaultCode.SFE, 5, "Port Trim Tab / INT feedback"),
    Fault(FaultCode.CFE, 0, "Calibration Fault"),
    Fault(FaultCode.GAL, 0, "General Alarm"),
)

_SYSTEM_OPTIONS: tuple[SystemOption, ...] = (
    SystemOption("DatMode", "232", "GPSI", False),
    SystemOption("232 Xmit", "ON", "OFF", True),
    SystemOption("NozMap", "FLIP", "NORM", False),
    SystemOption("BktMap", "FLIP", "NORM", False),
    SystemOption("IntMap", "FLIP", "NORM", False),
    SystemOption("IntSteer", "ON", "OFF", True),
    SystemOption("StaType", "MAIN", "WING", True),
    SystemOption("Comm Mode", "4", "5", False),
)


def faults_for(code: FaultCode | int) -> tuple[Fault, ...]:
    """Return the faults of one group, ordered by bit."""
    group = FaultCode(code)
    return tuple(fault for fault in _FAULTS if fault.code is group)


def active_faults(code: FaultCode | int, mask: int) -> list[Fault]:
    """Return the faults of a group whose bits are set in ``mask``."""
    if mask < 0:
        raise ValueError(f"fault mask must not be negative: {mask}")
    return [fault for fault in faults_for(code) if (mask >> fault.bit) & 1]


def system_options() -> list[SystemOption]:
    """Return a fresh copy of the option table with its default states."""
    return [replace(option) for option in _SYSTEM_OPTIONS]