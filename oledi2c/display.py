"""Driver for SSD1306 monochrome OLED controllers on an I2C bus."""

from __future__ import annotations

import re
from collections.abc import Sequence
from contextlib import suppress
from enum import IntEnum
from pathlib import Path
from typing import Protocol

from oledi2c.font import Font, render

I2C_ADDRESS = 0x3C
RESOLUTION_FILE = "/tmp/.ssd1306_oled_type"

MAX_WIDTH = 128
MAX_HEIGHT = 64
BUFFER_SIZE = 1024

COMMAND = 0x00
DATA = 0x40

DISPLAY_OFF = 0xAE
DISPLAY_ON = 0xAF
HORIZ_NORM = 0xA0
HORIZ_FLIP = 0xA1
RESUME_RAM = 0xA4
IGNORE_RAM = 0xA5
DISP_NORM = 0xA6
DISP_INVERSE = 0xA7
MULTIPLEX = 0xA8
VERT_OFFSET = 0xD3
CLK_SET = 0xD5
PRECHARGE = 0xD9
COM_PIN = 0xDA
DESELECT_LV = 0xDB
CONTRAST = 0x81
DISABLE_SCROLL = 0x2E
ENABLE_SCROLL = 0x2F
PAGE_NUMBER = 0xB0
LOW_COLUMN = 0x00
HIGH_COLUMN = 0x10
START_LINE = 0x40
CHARGE_PUMP = 0x8D
SCAN_NORM = 0xC0
SCAN_REVS = 0xC8
MEMORY_MODE = 0x20
SET_COL_ADDR = 0x21
SET_PAGE_ADDR = 0x22

SUPPORTED_LINES = (64, 32, 48)
SUPPORTED_COLUMNS = (128, 64)
DEFAULT_LINES = 64
DEFAULT_COLUMNS = 128

_RESOLUTION_RE = re.compile(r"\s*(\d+)x(\d+)")


class DisplayError(Exception):
    """Raised when a display operation is refused or fails."""


class MemoryMode(IntEnum):
    """Addressing modes of the display memory."""

    HORIZONTAL = 0x00
    VERTICAL = 0x01
    PAGE = 0x02


class _Bus(Protocol):
    def write(self, data: bytes) -> None: ...

    def read(self, length: int) -> bytes: ...

    def close(self) -> None: ...


class Display:
    """An SSD1306 display reached through an open I2C bus.

    The resolution is kept in a small file so that separate runs can
    share the configuration made by the first one.
    """

    def __init__(self, bus: _Bus, resolution_file: str | Path = RESOLUTION_FILE) -> None:
        self.bus = bus
        self.resolution_file = Path(resolution_file)
        self.lines = 0
        self.columns = 0
        self.x = 0
        self.y = 0

    @property
    def pages(self) -> int:
        """Number of 8-pixel pages on the configured display."""
        return self.lines // 8

    def _command(self, *values: int) -> None:
        self.bus.write(bytes([COMMAND, *(value & 0xFF for value in values)]))

    def check_connection(self) -> None:
        """Probe the controller; raise DisplayError if nothing answers."""
        self.bus.write(bytes([COMMAND]))
        answer = self.bus.read(1)
        if not answer or answer[0] == 0:
            raise DisplayError("no display answered on the bus")

    def close(self) -> None:
        """Close the underlying bus."""
        self.bus.close()

    def set_power(self, on: bool) -> None:
        self._command(DISPLAY_ON if on else DISPLAY_OFF)

    def set_horizontal_flip(self, flip: bool) -> None:
        self._command(HORIZ_FLIP if flip else HORIZ_NORM)

    def set_inverted(self, inverted: bool) -> None:
        self._command(DISP_INVERSE if inverted else DISP_NORM)

    def set_multiplex(self, rows: int) -> None:
        """Set the multiplex ratio: 32 for 128x32, 64 for 128x64."""
        self._command(MULTIPLEX, rows - 1)

    def set_vertical_shift(self, offset: int) -> None:
        """Shift the display vertically by 0x00 to 0x3f rows."""
        self._command(VERT_OFFSET, offset)

    def set_clock(self, clock: int) -> None:
        self._command(CLK_SET, clock)

    def set_precharge(self, precharge: int) -> None:
        self._command(PRECHARGE, precharge)

    def set_deselect(self, voltage: int) -> None:
        self._command(DESELECT_LV, voltage)

    def set_com_pin(self, value: int) -> None:
        self._command(COM_PIN, value)

    def set_memory_mode(self, mode: MemoryMode | int) -> None:
        self._command(MEMORY_MODE, MemoryMode(mode))

    def set_columns(self, start: int, end: int) -> None:
        self._command(SET_COL_ADDR, start, end)

    def set_pages(self, start: int, end: int) -> None:
        self._command(SET_PAGE_ADDR, start, end)

    def set_contrast(self, value: int) -> None:
        self._command(CONTRAST, value)

    def set_scrolling(self, on: bool) -> None:
        self._command(ENABLE_SCROLL if on else DISABLE_SCROLL)

    def _check_x(self, x: int) -> None:
        if not 0 <= x < self.columns:
            raise DisplayError(f"column {x} outside 0..{self.columns - 1}")

    def _check_y(self, y: int) -> None:
        if not 0 <= y < self.pages:
            raise DisplayError(f"page {y} outside 0..{self.pages - 1}")

    def set_x(self, x: int) -> None:
        """Move the cursor to column ``x``."""
        self._check_x(x)
        self.x = x
        self._command(LOW_COLUMN | (x & 0x0F), HIGH_COLUMN | ((x >> 4) & 0x0F))

    def set_y(self, y: int) -> None:
        """Move the cursor to page ``y``."""
        self._check_y(y)
        self.y = y
        self._command(PAGE_NUMBER | (y & 0x0F))

    def set_xy(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` of page ``y``."""
        self._check_x(x)
        self._check_y(y)
        self.x = x
        self.y = y
        self._command(
            PAGE_NUMBER | (y & 0x0F),
            LOW_COLUMN | (x & 0x0F),
            HIGH_COLUMN | ((x >> 4) & 0x0F),
        )

    def set_rotation(self, degree: int) -> None:
        """Orient the display; only 0 and 180 degrees are possible."""
        if degree == 0:
            self._command(HORIZ_FLIP, SCAN_REVS)
        elif degree == 180:
            self._command(HORIZ_NORM, SCAN_NORM)
        else:
            raise DisplayError(f"rotation must be 0 or 180, not {degree}")

    def default_config(self, lines: int, columns: int) -> None:
        """Configure the controller for the given size and remember it.

        Unsupported sizes fall back to 64 lines and 128 columns.
        """
        if lines not in SUPPORTED_LINES:
            lines = DEFAULT_LINES
        if columns not in SUPPORTED_COLUMNS:
            columns = DEFAULT_COLUMNS
        self.lines = lines
        self.columns = columns
        self.x = 0
        self.y = 0
        self.save_resolution()
        self._command(
            DISPLAY_OFF,
            DISP_NORM,
            CLK_SET, 0x80,
            MULTIPLEX, lines - 1,
            VERT_OFFSET, 0,
            START_LINE,
            CHARGE_PUMP, 0x14,
            MEMORY_MODE, MemoryMode.PAGE,
            HORIZ_NORM,
            SCAN_NORM,
            COM_PIN, 0x02 if lines == 32 else 0x12,
            CONTRAST, 0x7F,
            PRECHARGE, 0xF1,
            DESELECT_LV, 0x40,
            RESUME_RAM,
            DISP_NORM,
            DISPLAY_ON,
            DISABLE_SCROLL,
        )

    def write_line(self, text: str, font: Font | int = Font.NORMAL) -> None:
        """Draw one line of text at the cursor."""
        try:
            payload = render(text, font)
        except ValueError as exc:
            raise DisplayError(str(exc)) from exc
        if 1 + len(payload) > BUFFER_SIZE:
            raise DisplayError("text too long for one transfer")
        self.bus.write(bytes([DATA]) + payload)

    def write_string(self, text: str, font: Font | int = Font.NORMAL) -> None:
        """Draw text whose lines are separated by a literal backslash-n.

        Each line starts at the cursor; later lines begin at column 0 of
        the next page, wrapping to the first page. Every line is attempted
        even if an earlier one fails.
        """
        failures = []
        segments = text.split("\\n")
        for number, segment in enumerate(segments):
            with suppress(DisplayError):
                self.set_xy(self.x, self.y)
            try:
                self.write_line(segment, font)
            except DisplayError as exc:
                failures.append(str(exc))
            if number < len(segments) - 1:
                self.x = 0
                self.y += 1
                if self.y >= self.pages:
                    self.y = 0
        if failures:
            raise DisplayError("; ".join(failures))

    def clear_line(self, row: int) -> None:
        """Blank one page of the display."""
        self._check_y(row)
        with suppress(DisplayError):
            self.set_xy(0, row)
        self.bus.write(bytes([DATA]) + bytes(self.columns))

    def clear_screen(self) -> None:
        """Blank every page of the display."""
        for row in range(self.pages):
            self.clear_line(row)

    def save_resolution(self) -> None:
        """Store the current resolution as COLUMNSxLINES."""
        try:
            self.resolution_file.write_text(f"{self.columns}x{self.lines}")
        except OSError as exc:
            raise DisplayError(f"cannot save resolution: {exc}") from exc

    def load_resolution(self) -> None:
        """Read back a resolution stored by an earlier configuration."""
        try:
            content = self.resolution_file.read_text()
        except OSError as exc:
            raise DisplayError(f"cannot load resolution: {exc}") from exc
        match = _RESOLUTION_RE.match(content)
        if match is None:
            raise DisplayError(f"malformed resolution {content!r}")
        self.columns = int(match.group(1)) & 0xFF
        self.lines = int(match.group(2)) & 0xFF

    def draw_bitmap(self, bitmap: Sequence[Sequence[bool]]) -> None:
        """Draw a bitmap indexed as ``bitmap[row][column]``."""
        if self.lines == 0 or self.columns == 0:
            raise DisplayError("display resolution is not configured")
        for page in range(self.pages):
            with suppress(DisplayError):
                self.set_xy(0, page)
            rows = bitmap[page * 8:page * 8 + 8]
            line = bytes(
                sum(1 << bit for bit, row in enumerate(rows) if row[col])
                for col in range(self.columns)
            )
            self.bus.write(bytes([DATA]) + line)