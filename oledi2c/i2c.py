"""Access to a device on a Linux I2C bus through /dev/i2c-N."""

from __future__ import annotations

import fcntl
import os

I2C_SLAVE = 0x0703


class I2CError(OSError):
    """Raised when the bus cannot be opened or used."""


class I2CBus:
    """One device on one I2C bus, addressed through the i2c-dev interface."""

    def __init__(self, bus: int, address: int) -> None:
        self.bus = bus
        self.address = address
        self._fd: int | None = None

    @property
    def path(self) -> str:
        return f"/dev/i2c-{self.bus}"

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self) -> None:
        """Open the bus and select the device; does nothing if already open."""
        if self._fd is not None:
            return
        try:
            fd = os.open(self.path, os.O_RDWR)
        except OSError as exc:
            raise I2CError(f"cannot open {self.path}: {exc}") from exc
        try:
            fcntl.ioctl(fd, I2C_SLAVE, self.address)
        except OSError as exc:
            os.close(fd)
            raise I2CError(
                f"cannot select device 0x{self.address:02x} on {self.path}: {exc}"
            ) from exc
        self._fd = fd

    def close(self) -> None:
        """Close the bus; raises I2CError if it was not open."""
        if self._fd is None:
            raise I2CError(f"{self.path} is not open")
        fd, self._fd = self._fd, None
        os.close(fd)

    def write(self, data: bytes) -> None:
        """Send bytes to the device."""
        if self._fd is None:
            raise I2CError(f"{self.path} is not open")
        if not data:
            raise I2CError("nothing to write")
        os.write(self._fd, bytes(data))

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes from the device."""
        if self._fd is None:
            raise I2CError(f"{self.path} is not open")
        if length <= 0:
            raise I2CError(f"invalid read length {length}")
        return os.read(self._fd, length)

    def __enter__(self) -> I2CBus:
        self.open()
        return self

    def __exit__(self, *args) -> None:
        if self._fd is not None:
            self.close()