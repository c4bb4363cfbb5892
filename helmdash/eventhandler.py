"""Handling of external events delivered through command and reply files."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path

__all__ = [
    "EventId",
    "EventHandler",
    "COMMAND_FILENAME",
    "REPLY_FILENAME",
    "CMD_CANVIEWER_LOGROTATE",
    "REPLY_OK",
    "REPLY_NOT_OK",
]

COMMAND_FILENAME = "command"
REPLY_FILENAME = "reply"

CMD_CANVIEWER_LOGROTATE = "CANVIEWER_LOGROTATE"

REPLY_OK = "OK"
REPLY_NOT_OK = "KO"

# The command buffer holds 1024 bytes including its terminator.
_MAX_COMMAND_BYTES = 1023


class EventId(IntEnum):
    """Events the platform can raise."""

    EVENT1 = 0
    EVENT2 = 1


class EventHandler:
    """Remembers the latest event and processes it from the main loop."""

    def __init__(self, folder: str | os.PathLike[str]) -> None:
        self.folder = Path(folder)
        self.pending: EventId | None = None

    def notify(self, event_id: EventId | int) -> None:
        """Record an event for the next call to :meth:`process`."""
        try:
            self.pending = EventId(event_id)
        except ValueError:
            raise ValueError(f"invalid event code: {event_id!r}") from None

    def process(self) -> str | None:
        """Handle the pending event, if any; return the reply written, if any."""
        event, self.pending = self.pending, None
        if event is EventId.EVENT1:
            return self._process_command()
        return None

    def _remove(self, name: str) -> None:
        try:
            (self.folder / name).unlink()
        except FileNotFoundError:
            pass

    def _read_command(self) -> bytes | None:
        try:
            with open(self.folder / COMMAND_FILENAME, "rb") as handle:
                return handle.read(_MAX_COMMAND_BYTES)
        except OSError:
            return None

    def _send_reply(self, reply: str) -> None:
        try:
            (self.folder / REPLY_FILENAME).write_text(reply)
        except OSError:
            pass

    def _process_command(self) -> str | None:
        # Never leave a stale reply behind.
        self._remove(REPLY_FILENAME)
        reply = None
        command = self._read_command()
        if command is not None:
            if command.startswith(CMD_CANVIEWER_LOGROTATE.encode()):
                reply = REPLY_OK
            else:
                reply = REPLY_NOT_OK
            self._send_reply(reply)
        # The command goes only once it has been answered.
        self._remove(COMMAND_FILENAME)
        return reply