import os
from unittest import mock

import pytest

from oledi2c.i2c import I2C_SLAVE, I2CBus, I2CError

_real_open = os.open


@pytest.fixture
def fake_device(tmp_path):
    """Route the bus to a plain file and accept the address ioctl."""
    device = tmp_path / "device"
    device.write_bytes(b"")
    opened = []

    def fake_open(path, flags, *args):
        opened.append(path)
        return _real_open(str(device), os.O_RDWR)

    with mock.patch("oledi2c.i2c.os.open", side_effect=fake_open), mock.patch(
        "oledi2c.i2c.fcntl.ioctl", return_value=0
    ) as ioctl:
        yield device, opened, ioctl


def test_open_missing_bus_raises():
    bus = I2CBus(987654, 0x3C)
    with pytest.raises(I2CError):
        bus.open()
    assert bus.is_open is False


def test_context_manager_missing_bus_raises():
    with pytest.raises(I2CError):
        with I2CBus(987654, 0x3C):
            pass


def test_write_before_open_raises():
    with pytest.raises(I2CError):
        I2CBus(0, 0x3C).write(b"\x00")


def test_read_before_open_raises():
    with pytest.raises(I2CError):
        I2CBus(0, 0x3C).read(1)


def test_close_when_not_open_raises():
    with pytest.raises(I2CError):
        I2CBus(0, 0x3C).close()


def test_path_uses_bus_number():
    assert I2CBus(3, 0x3C).path == "/dev/i2c-3"


def test_open_selects_address(fake_device):
    _, opened, ioctl = fake_device
    bus = I2CBus(3, 0x3C)
    bus.open()
    assert opened == ["/dev/i2c-3"]
    ioctl.assert_called_once()
    assert ioctl.call_args.args[1:] == (I2C_SLAVE, 0x3C)
    bus.close()
    assert bus.is_open is False


def test_open_twice_is_noop(fake_device):
    _, opened, ioctl = fake_device
    bus = I2CBus(1, 0x3C)
    bus.open()
    bus.open()
    assert bus.is_open is True
    assert len(opened) == 1
    assert ioctl.call_count == 1
    bus.close()
    assert bus.is_open is False


def test_write_sends_bytes(fake_device):
    device, _, _ = fake_device
    with I2CBus(1, 0x3C) as bus:
        bus.write(b"\x00\xaf")
    assert device.read_bytes() == b"\x00\xaf"
    with I2CBus(1, 0x3C) as reader:
        assert reader.read(2) == b"\x00\xaf"


def test_write_empty_raises(fake_device):
    with I2CBus(1, 0x3C) as bus:
        with pytest.raises(I2CError):
            bus.write(b"")


def test_read_returns_data(fake_device):
    device, _, _ = fake_device
    device.write_bytes(b"\x43\x01")
    with I2CBus(1, 0x3C) as bus:
        assert bus.read(1) == b"\x43"


def test_read_invalid_length_raises(fake_device):
    with I2CBus(1, 0x3C) as bus:
        with pytest.raises(I2CError):
            bus.read(0)


def test_context_manager_closes(fake_device):
    with I2CBus(1, 0x3C) as bus:
        assert bus.is_open is True
    assert bus.is_open is False


def test_ioctl_failure_raises_and_stays_closed(tmp_path):
    device = tmp_path / "device"
    device.write_bytes(b"")
    with mock.patch(
        "oledi2c.i2c.os.open",
        side_effect=lambda path, flags, *a: _real_open(str(device), os.O_RDWR),
    ), mock.patch("oledi2c.i2c.fcntl.ioctl", side_effect=OSError("busy")):
        bus = I2CBus(1, 0x3C)
        with pytest.raises(I2CError):
            bus.open()
    assert bus.is_open is False