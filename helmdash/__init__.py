"""Unit conversion, persistent settings, fault tables, event files and backlight stepping for a helm display."""

__version__ = "0.1.0"