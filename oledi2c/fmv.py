"""Play an animation of concatenated BMP frames on an SSD1306 display."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import suppress
from typing import BinaryIO

from oledi2c.bmp import BitmapError, parse_bitmap
from oledi2c.cli import (
    _Parser,
    _UsageError,
    _atoi,
    _attempt,
    _configure,
    _connect,
    _report_extras,
    _usage_message,
)
from oledi2c.display import Display, DisplayError

FRAME_SIZE = 1086  # one 128x64 1bpp BMP

_HELP = """help message

oledi2c-fmv [-I 128x64] -n <device> -r <0/180> -a <animation file> -d <frame delay in ms>
-I\t\tinit oled (128x32 or 128x64 or 64x48)
-h\t\thelp message
-n\t\tI2C device node address (0,1,2..., default 1)
-r\t\t0/normal 180/rotate
-a\t\tanimation file
-d\t\tframe delay in ms"""

_MISSING = {
    "-I": "missing oled type (128x64/128x32/64x48)",
    "-n": "missing 0,1,2... I2C device node number",
    "-r": "missing 0 or 180 fields",
    "-d": "missing delay values",
    "-a": "missing file name",
}


def iter_frames(stream: BinaryIO) -> Iterator[bytes]:
    """Yield whole frames from ``stream``; a trailing partial frame is dropped."""
    while len(frame := stream.read(FRAME_SIZE)) == FRAME_SIZE:
        yield frame


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="oledi2c-fmv", add_help=False)
    parser.add_argument("-I", dest="oled_type")
    parser.add_argument("-n", dest="node", default="1")
    parser.add_argument("-r", dest="rotation")
    parser.add_argument("-a", dest="animation", default="")
    parser.add_argument("-d", dest="delay", default="0")
    parser.add_argument("-h", dest="help", action="store_true")
    return parser


def _play(
    display: Display,
    stream: BinaryIO,
    delay_ms: int,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Draw every frame, pacing them ``delay_ms`` apart; return failures."""
    failures = 0
    for number, frame in enumerate(iter_frames(stream)):
        started = time.monotonic()
        try:
            bitmap = parse_bitmap(frame)
        except BitmapError as exc:
            print(f"Failed to parse BMP frame {number}: {exc}", file=sys.stderr)
        else:
            failures += _attempt(display.draw_bitmap, bitmap)
        remaining = delay_ms / 1000 - (time.monotonic() - started)
        if remaining > 0:
            sleep(remaining)
    return failures


def _run(
    options: argparse.Namespace,
    display: Display,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    try:
        failures = _configure(display, options.oled_type)
    except DisplayError:
        print("please do init oled module with correction resolution first!")
        return 1

    failures += _attempt(display.clear_screen)

    if options.rotation is not None:
        failures += _attempt(display.set_rotation, _atoi(options.rotation))

    if options.animation:
        try:
            stream = open(options.animation, "rb")
        except OSError as exc:
            print(f"cannot open {options.animation}: {exc}", file=sys.stderr)
            return 1
        with stream:
            failures += _play(display, stream, _atoi(options.delay), sleep)

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