import socket
import struct
from unittest import mock

from helmdash.netinfo import ip_address


def _reply(name, address):
    packed = struct.pack("16sH2s4s", name.encode(), socket.AF_INET, b"\0\0", socket.inet_aton(address))
    return packed.ljust(256, b"\0")


def test_unknown_interfaces_give_na():
    assert ip_address(["nosuchif0", "nosuchif1"]) == "N/A"


def test_no_interfaces_give_na():
    assert ip_address([]) == "N/A"


def test_first_interface_with_address_wins():
    fake = mock.Mock()
    fake.ioctl.side_effect = lambda fd, req, buf: _reply("eth0", "10.1.2.3")
    with mock.patch("helmdash.netinfo.fcntl", fake):
        assert ip_address(["eth0", "eth2"]) == "10.1.2.3"
    assert fake.ioctl.call_count == 1


def test_falls_back_to_second_interface():
    fake = mock.Mock()
    calls = []

    def ioctl(fd, req, buf):
        name = buf.split(b"\0", 1)[0].decode()
        calls.append(name)
        if name == "eth0":
            raise OSError("no address")
        return _reply(name, "192.168.7.9")

    fake.ioctl.side_effect = ioctl
    with mock.patch("helmdash.netinfo.fcntl", fake):
        assert ip_address() == "192.168.7.9"
    assert calls == ["eth0", "eth2"]


def test_all_interfaces_failing_gives_na():
    fake = mock.Mock()
    fake.ioctl.side_effect = OSError("no address")
    with mock.patch("helmdash.netinfo.fcntl", fake):
        assert ip_address(["eth0", "eth2"]) == "N/A"


def test_socket_failure_gives_na():
    with mock.patch("socket.socket", side_effect=OSError("no socket")):
        assert ip_address(["eth0"]) == "N/A"


def test_without_ioctl_support_gives_na():
    with mock.patch("helmdash.netinfo.fcntl", None):
        assert ip_address(["eth0"]) == "N/A"