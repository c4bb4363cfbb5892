"""Stepped brightness control for the LCD backlight and keypad lighting."""

from __future__ import annotations

from typing import NamedTuple

__all__ = ["BACKLIGHT_LEVELS", "Rect", "Lighting"]

# Backlight levels on a 0 - 10000 scale.
BACKLIGHT_LEVELS: tuple[int, ...] = (
    320, 450, 640, 900, 1280, 1800, 2560, 3620, 5120, 7160, 10000,
)


class Rect(NamedTuple):
    left: int
    top: int
    right: int
    bottom: int


def _index_of(level: int) -> int:
    try:
        return BACKLIGHT_LEVELS.index(level)
    except ValueError:
        # Unknown saved level: fall back to full brightness.
        return len(BACKLIGHT_LEVELS) - 1


class Lighting:
    """Current LCD and keypad brightness steps."""

    def __init__(self, lcd_level: int, keypad_level: int) -> None:
        self.lcd_index = _index_of(lcd_level)
        self.keypad_index = _index_of(keypad_level)

    @property
    def lcd_level(self) -> int:
        return BACKLIGHT_LEVELS[self.lcd_index]

    @property
    def keypad_level(self) -> int:
        return BACKLIGHT_LEVELS[self.keypad_index]

    def lcd_up(self) -> bool:
        """Raise the LCD one step; return True if it changed."""
        if self.lcd_index < len(BACKLIGHT_LEVELS) - 1:
            self.lcd_index += 1
            return True
        return False

    def lcd_down(self) -> bool:
        """Lower the LCD one step; return True if it changed."""
        if self.lcd_index > 0:
            self.lcd_index -= 1
            return True
        return False

    def keypad_up(self) -> bool:
        """Raise the keypad lighting one step; return True if it changed."""
        if self.keypad_index < len(BACKLIGHT_LEVELS) - 1:
            self.keypad_index += 1
            return True
        return False

    def keypad_down(self) -> bool:
        """Lower the keypad lighting one step; return True if it changed."""
        if self.keypad_index > 0:
            self.keypad_index -= 1
            return True
        return False

    def bar_rect(self, width: int, height: int, keypad: bool = False) -> Rect:
        """Return the filled bar showing a brightness on a screen of this size."""
        index = self.keypad_index if keypad else self.lcd_index
        mid_x = width // 2
        mid_y = height // 2
        left = mid_x - 97
        right = mid_x - 125 + 30 + (230 * index) // (len(BACKLIGHT_LEVELS) - 1)
        if keypad:
            return Rect(left, mid_y - 9, right, mid_y + 19)
        return Rect(left, mid_y - 50, right, mid_y - 21)