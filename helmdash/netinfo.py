"""Lookup of the unit's IPv4 address."""

from __future__ import annotations

import socket
import struct
from collections.abc import Iterable

try:
    import fcntl
except ImportError:  # not available on every platform
    fcntl = None

__all__ = ["ip_address", "UNAVAILABLE", "DEFAULT_INTERFACES"]

UNAVAILABLE = "N/A"
# Internal port first, then the USB adapter.
DEFAULT_INTERFACES = ("eth0", "eth2")

_SIOCGIFADDR = 0x8915
_IFNAMSIZ = 16


def _interface_address(sock: socket.socket, name: str) -> str:
    if fcntl is None:
        raise OSError("interface queries are not supported here")
    request = struct.pack("256s", name.encode()[: _IFNAMSIZ - 1])
    reply = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, request)
    return socket.inet_ntoa(reply[20:24])


def ip_address(interfaces: Iterable[str] = DEFAULT_INTERFACES) -> str:
    """Return the IPv4 address of the first interface that has one, else "N/A"."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        return UNAVAILABLE
    with sock:
        for name in interfaces:
            try:
                return _interface_address(sock, name)
            except OSError:
                continue
    return UNAVAILABLE