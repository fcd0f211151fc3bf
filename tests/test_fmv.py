import io
import struct

import pytest

from oledi2c.display import Display
from oledi2c.fmv import FRAME_SIZE, _play, _run, build_parser, iter_frames, main

DATA = 0x40


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, data):
        self.writes.append(bytes(data))

    def read(self, length):
        return b"\x01"

    def close(self):
        pass


def make_frame(pixel):
    body = bytearray()
    for row in reversed(range(64)):
        packed = bytearray(16)
        for col in range(128):
            if pixel(row, col):
                packed[col // 8] |= 0x80 >> (col % 8)
        body += packed
    header = struct.pack(
        "<2sIHHIIiiHHIIiiII",
        b"BM", 62 + len(body), 0, 0, 62,
        40, 128, 64, 1, 1, 0, len(body), 0, 0, 2, 0,
    )
    return header + bytes(8) + bytes(body)


@pytest.fixture
def bus():
    return FakeBus()


@pytest.fixture
def display(bus, tmp_path):
    (tmp_path / "resolution").write_text("128x64")
    shown = Display(bus, tmp_path / "resolution")
    shown.load_resolution()
    return shown


def data_writes(bus):
    return [w for w in bus.writes if w[0] == DATA]


def test_iter_frames_drops_partial_frame():
    stream = io.BytesIO(b"a" * FRAME_SIZE + b"b" * FRAME_SIZE + b"c" * 10)
    frames = list(iter_frames(stream))
    assert frames == [b"a" * FRAME_SIZE, b"b" * FRAME_SIZE]


def test_iter_frames_empty():
    assert list(iter_frames(io.BytesIO(b""))) == []


def test_frame_helper_matches_frame_size():
    assert len(list(iter_frames(io.BytesIO(make_frame(lambda r, c: False))))) == 1


def test_help(capsys):
    assert main(["-h"]) == 0
    assert "animation file" in capsys.readouterr().out


def test_bad_rotation(capsys):
    assert main(["-r", "45"]) == 1
    assert "orientation value must be 0 or 180" in capsys.readouterr().out


def test_missing_file_name(capsys):
    assert main(["-a"]) == 1
    assert "missing file name" in capsys.readouterr().out


def test_play_draws_every_frame(display, bus):
    stream = io.BytesIO(make_frame(lambda r, c: True) * 2)
    assert _play(display, stream, 0) == 0
    full = bytes([DATA]) + b"\xff" * display.columns
    assert data_writes(bus) == [full] * (2 * display.pages)


def test_play_reports_bad_frame(display, bus, capsys):
    assert _play(display, io.BytesIO(bytes(FRAME_SIZE)), 0) == 0
    assert "Failed to parse BMP frame 0" in capsys.readouterr().err
    assert data_writes(bus) == []


def test_play_waits_for_delay(display):
    pauses = []
    stream = io.BytesIO(make_frame(lambda r, c: False) * 3)
    _play(display, stream, 1000, pauses.append)
    assert len(pauses) == 3
    assert all(0 < pause <= 1 for pause in pauses)


def test_play_without_delay_never_sleeps(display):
    pauses = []
    _play(display, io.BytesIO(make_frame(lambda r, c: False)), 0, pauses.append)
    assert pauses == []


def test_run_clears_and_plays(bus, tmp_path):
    path = tmp_path / "anim.bin"
    path.write_bytes(make_frame(lambda r, c: r == 0))
    shown = Display(bus, tmp_path / "resolution")
    options = build_parser().parse_args(["-I", "128x64", "-a", str(path)])
    assert _run(options, shown, lambda seconds: None) == 0
    blank = bytes([DATA]) + bytes(shown.columns)
    writes = data_writes(bus)
    assert writes[:shown.pages] == [blank] * shown.pages
    assert len(writes) == 2 * shown.pages


def test_run_missing_animation(display, tmp_path):
    options = build_parser().parse_args(["-a", str(tmp_path / "none.bin")])
    assert _run(options, display) == 1


def test_run_without_resolution(bus, tmp_path, capsys):
    shown = Display(bus, tmp_path / "absent")
    assert _run(build_parser().parse_args([]), shown) == 1
    assert "please do init oled module" in capsys.readouterr().out