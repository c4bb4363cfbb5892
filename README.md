# helmdash

Building blocks for the data side of a boat's helm display:

- unit families (pressure, temperature, volume, distance, speed, flow rate,
  economy, depth, bearing, angle, time and several single-unit families) and
  their short labels;
- conversion of values from database units into the unit the user chose, and
  back again;
- user settings (language, key bleep, unit choices, CAN system and device
  instances) kept in a small file checked by a CRC;
- the fault descriptions reported by the controller board and the table of
  two-state system options;
- the command and reply files used to deliver external events;
- stepping the LCD backlight and keypad lighting through fixed levels;
- finding the unit's IPv4 address.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `helmdash.units` | `UnitType`; `unit_text(unit_type, index)` gives a unit's label, or `""` for an index out of range; `max_valid(unit_type)` gives the highest unit index of a family |
| `helmdash.conversion` | `VarType`; `convert_value(unit_type, units, value, data_type=VarType.FLOAT, variation=0.0)` converts from database units into unit index `units` |
| `helmdash.unitinput` | `to_database_units(unit_type, source_units, value, variation=0.0)` converts a value entered in display units back into database units |
| `helmdash.settings` | `Settings`: persistent user settings |
| `helmdash.tables` | `FaultCode`, `Fault`, `SystemOption`, `faults_for`, `active_faults`, `system_options` |
| `helmdash.eventhandler` | `EventId`, `EventHandler`: answers commands left in an event folder |
| `helmdash.lighting` | `BACKLIGHT_LEVELS`, `Rect`, `Lighting`: brightness steps and the bar drawn for them |
| `helmdash.netinfo` | `ip_address(interfaces=("eth0", "eth2"))`: the first interface address found, or `"N/A"` |

### Units and conversion

Unit index 0 of every family is the unit the database stores values in
(kPa, °C, litres, nautical miles, knots, L/h, NM/L, metres, true bearing,
degrees, seconds). `convert_value` returns the value unchanged for index 0 and
for families that have only one unit. Values are rounded to single precision
after each step; integer data types (`VarType.INT`, `VarType.UNSIGNED_INT` and
the long variants) are truncated towards zero and wrapped to 32 bits.
`VarType.UNSIGNED_CHAR_ARRAY_FOUR_ELEMENT` and `VarType.POINTER` cannot be
converted and raise `TypeError`. A unit index out of range for its family
raises `ValueError`. For bearings, `variation` is the magnetic variation that is
subtracted to give a magnetic bearing.

`to_database_units` is the reverse. It raises `ValueError` when a non-zero
unit index is given for a single-unit family.

### Settings

`Settings(path, on_buzzer=None)` starts with the defaults: language 0, key
bleep not muted, every unit choice 0 except time, which is 1 (hours), and all
CAN instances 0. `load()` reads the file and restores and saves the defaults
if the file is missing, the wrong size or fails its CRC (CRC-CCITT seeded with
`0x1D0F`). `save()` writes only when the stored CRC differs from the current
settings, increments `save_count`, and returns whether it wrote.
`on_buzzer`, if given, is called with the mute state whenever it is applied.

- `set_language(index)` saves only when the language changes.
- `toggle_bleep()` flips `buzzer_muted` and saves.
- `get_units(unit_type)` returns 0 for single-unit families.
- `set_units(unit_type, value)` returns `False` for an index out of range and
  raises `ValueError` for a single-unit family.
- `toggle_units(unit_type)` steps to the next unit, wrapping to 0, and returns
  the new index.
- `can_system_instance(port)` and `can_device_instance(port)` return 0 for an
  unknown port; the setters raise `IndexError` for a port other than 0 or 1
  and `ValueError` for a value that does not fit in a byte.

### Fault and option tables

`faults_for(code)` lists the faults of one group in bit order;
`active_faults(code, mask)` lists those whose bits are set in `mask`.
`system_options()` returns a fresh list of `SystemOption`s with their default
states; `label()` gives the text for the current state.

### Events

`EventHandler(folder)` keeps the latest event passed to `notify(event_id)`.
`process()` handles it: for `EventId.EVENT1` it deletes any old `reply` file,
reads `command` (at most 1023 bytes), writes `OK` to `reply` if the command
starts with `CANVIEWER_LOGROTATE` and `KO` otherwise, then deletes `command`.
It returns the reply written, or `None`. `EventId.EVENT2` does nothing.

### Lighting

`Lighting(lcd_level, keypad_level)` finds each saved level in
`BACKLIGHT_LEVELS` (320 to 10000); a level not in the table becomes full
brightness. `lcd_up`, `lcd_down`, `keypad_up` and `keypad_down` return whether
the level changed. `bar_rect(width, height, keypad=False)` returns the `Rect`
of the bar showing the current step on a screen of that size.

## Example

```python
from helmdash.conversion import convert_value
from helmdash.settings import Settings
from helmdash.tables import FaultCode, active_faults
from helmdash.units import UnitType, unit_text

settings = Settings("settings.bin")
settings.load()
settings.set_units(UnitType.PRESSURE, 1)

units = settings.get_units(UnitType.PRESSURE)
value = convert_value(UnitType.PRESSURE, units, 200.0)
print(f"{value:.1f} {unit_text(UnitType.PRESSURE, units)}")   # 29.0 PSI

for fault in active_faults(FaultCode.NFE, 0b101):
    print(fault.description)   # Stbd Bucket NFU, Stbd Nozzle NFU
```

## What the package does not do

It holds no live table of parameter values, decodes no CAN or J1939 frames,
formats no values for a screen and talks to no hardware. It has no command of
its own: the functions and classes above are meant to be called from the
program that reads the buses and draws the display.