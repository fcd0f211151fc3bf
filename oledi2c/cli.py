"""Command-line control of an SSD1306 OLED display."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from contextlib import suppress

from oledi2c.bmp import BitmapError, load_bitmap
from oledi2c.display import I2C_ADDRESS, Display, DisplayError
from oledi2c.i2c import I2CBus

_HELP = """help message

-I\t\tinit oled (128x32 or 128x64 or 64x48)
-c\t\tclear (line number or all)
-d\t\t0/display off 1/display on
-f\t\t0/small font 5x7 1/normal font 8x8 (default normal font)
-h\t\thelp message
-i\t\t0/normal oled 1/invert oled
-b\t\tread and display a bmp file (128x64 or 128x32 @ 1bpp)
-l\t\tput your line to display
-m\t\tput your strings to oled
-n\t\tI2C device node address (0,1,2..., default 0)
-r\t\t0/normal 180/rotate
-x\t\tx position
-y\t\ty position"""

_MISSING = {
    "-I": "missing oled type (128x64/128x32/64x48)",
    "-d": "missing 0 or 1 fields",
    "-f": "missing 0 or 1 fields",
    "-i": "missing 0 or 1 fields",
    "-l": "missing string",
    "-m": "missing string",
    "-n": "missing 0,1,2... I2C device node number",
    "-r": "missing 0 or 180 fields",
    "-x": "missing coordinate values",
    "-y": "missing coordinate values",
}

_SIZES = {"128x64": (64, 128), "128x32": (32, 128), "64x48": (48, 64)}

_LINE_LIMIT = 24
_MESSAGE_LIMIT = 199

_CLEAR_ALL = object()
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_ARGUMENT_RE = re.compile(r"argument (-\w)")


class _UsageError(Exception):
    """Raised by the parser instead of exiting."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _UsageError(message)


def _atoi(text: str) -> int:
    """Leading decimal integer of ``text``, or 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _optional_int(text: str | None) -> int:
    return -1 if text is None else _atoi(text)


def _attempt(action: Callable, *args) -> int:
    """Run a display action; return 1 if it failed, else 0."""
    try:
        action(*args)
    except (DisplayError, OSError):
        return 1
    return 0


def _usage_message(message: str, missing: dict[str, str]) -> str:
    match = _ARGUMENT_RE.match(message)
    if match and match.group(1) in missing:
        option = match.group(1)
        return f"param {option} {missing[option]}"
    return message


def _report_extras(extras: Sequence[str]) -> None:
    for extra in extras:
        if extra.startswith("-"):
            print(f"invalid option -- {extra!r}", file=sys.stderr)


def _connect(node: int) -> Display:
    """Open the bus and make sure a display answers on it."""
    bus = I2CBus(node, I2C_ADDRESS)
    bus.open()
    display = Display(bus)
    try:
        display.check_connection()
    except (DisplayError, OSError):
        bus.close()
        raise
    return display


def _configure(display: Display, oled_type: str | None) -> int:
    """Set up the display size; raise DisplayError if none is known."""
    if oled_type:
        size = _SIZES.get(oled_type)
        return 0 if size is None else _attempt(display.default_config, *size)
    display.load_resolution()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="oledi2c", add_help=False)
    parser.add_argument("-I", dest="oled_type")
    parser.add_argument("-c", dest="clear", nargs="?", const=_CLEAR_ALL)
    parser.add_argument("-d", dest="display")
    parser.add_argument("-f", dest="font", default="0")
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-i", dest="inverted")
    parser.add_argument("-l", dest="line", default="")
    parser.add_argument("-m", dest="message", default="")
    parser.add_argument("-n", dest="node", default="0")
    parser.add_argument("-r", dest="rotation")
    parser.add_argument("-x", dest="x")
    parser.add_argument("-y", dest="y")
    parser.add_argument("-b", dest="bitmap", default="")
    return parser


def _run(options: argparse.Namespace, display: Display) -> int:
    """Carry out the requested actions; return the number of failures."""
    try:
        failures = _configure(display, options.oled_type)
    except DisplayError:
        print("please do init oled module with correction resolution first!")
        return 1

    if options.clear is _CLEAR_ALL:
        failures += _attempt(display.clear_screen)
    elif options.clear is not None:
        row = _atoi(options.clear)
        if row > -1:
            failures += _attempt(display.clear_line, row)

    if options.rotation is not None:
        failures += _attempt(display.set_rotation, _atoi(options.rotation))

    inverted = _optional_int(options.inverted)
    if inverted > -1:
        failures += _attempt(display.set_inverted, inverted != 0)

    power = _optional_int(options.display)
    if power > -1:
        failures += _attempt(display.set_power, power != 0)

    if options.bitmap:
        try:
            bitmap = load_bitmap(options.bitmap)
        except BitmapError as exc:
            print(exc, file=sys.stderr)
            print(f"Failed to load or parse bitmap from {options.bitmap}", file=sys.stderr)
        else:
            failures += _attempt(display.draw_bitmap, bitmap)

    x = _optional_int(options.x)
    y = _optional_int(options.y)
    if x > -1 and y > -1:
        failures += _attempt(display.set_xy, x, y)
    elif x > -1:
        failures += _attempt(display.set_x, x)
    elif y > -1:
        failures += _attempt(display.set_y, y)

    font = _atoi(options.font)
    if options.message:
        failures += _attempt(display.write_string, options.message[:_MESSAGE_LIMIT], font)
    elif options.line:
        failures += _attempt(display.write_line, options.line[:_LINE_LIMIT], font)

    return failures


def main(argv: Sequence[str] | None = None) -> int:
    try:
        options, extras = build_parser().parse_known_args(argv)
    except _UsageError as exc:
        print(_usage_message(str(exc), _MISSING))
        return 1
    _report_extras(extras)

    if options.help:
        print(_HELP)
        return 0

    if options.rotation is not None and _atoi(options.rotation) not in (0, 180):
        print("orientation value must be 0 or 180")
        return 1

    node = _atoi(options.node) & 0xFF
    try:
        display = _connect(node)
    except (DisplayError, OSError):
        print(f"no oled attached to /dev/i2c-{node}")
        return 1

    try:
        return _run(options, display)
    finally:
        with suppress(OSError):
            display.close()


if __name__ == "__main__":
    sys.exit(main())