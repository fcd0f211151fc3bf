import pytest

from oledi2c.display import (
    BUFFER_SIZE,
    DISPLAY_OFF,
    DISPLAY_ON,
    DISP_INVERSE,
    DISP_NORM,
    Display,
    DisplayError,
    MemoryMode,
)
from oledi2c.font import Font, render


class FakeBus:
    def __init__(self, answer=b"\x01"):
        self.writes = []
        self.answer = answer
        self.closed = False

    def write(self, data):
        self.writes.append(bytes(data))

    def read(self, length):
        return self.answer[:length]

    def close(self):
        self.closed = True


def make(tmp_path, lines=64, columns=128, answer=b"\x01"):
    bus = FakeBus(answer)
    display = Display(bus, tmp_path / "resolution")
    display.default_config(lines, columns)
    bus.writes.clear()
    return display, bus


def test_check_connection_ok(tmp_path):
    bus = FakeBus(b"\x5a")
    Display(bus, tmp_path / "r").check_connection()
    assert bus.writes == [b"\x00"]


def test_check_connection_no_answer(tmp_path):
    with pytest.raises(DisplayError):
        Display(FakeBus(b"\x00"), tmp_path / "r").check_connection()


def test_close_closes_bus(tmp_path):
    bus = FakeBus()
    Display(bus, tmp_path / "r").close()
    assert bus.closed is True


def test_power_and_inversion_bytes(tmp_path):
    display, bus = make(tmp_path)
    display.set_power(True)
    display.set_power(False)
    display.set_inverted(True)
    display.set_inverted(False)
    assert bus.writes == [
        bytes([0, DISPLAY_ON]),
        bytes([0, DISPLAY_OFF]),
        bytes([0, DISP_INVERSE]),
        bytes([0, DISP_NORM]),
    ]


def test_multiplex_subtracts_one(tmp_path):
    display, bus = make(tmp_path)
    display.set_multiplex(32)
    assert bus.writes == [bytes([0x00, 0xA8, 31])]


def test_memory_mode(tmp_path):
    display, bus = make(tmp_path)
    display.set_memory_mode(MemoryMode.PAGE)
    assert bus.writes[-1] == bytes([0x00, 0x20, 0x02])
    with pytest.raises(ValueError):
        display.set_memory_mode(7)


def test_default_config_saves_and_sends(tmp_path):
    bus = FakeBus()
    display = Display(bus, tmp_path / "resolution")
    display.default_config(32, 128)
    assert (tmp_path / "resolution").read_text() == "128x32"
    sequence = bus.writes[-1]
    assert sequence[:3] == bytes([0x00, DISPLAY_OFF, DISP_NORM])
    assert sequence[sequence.index(0xA8) + 1] == 31
    assert sequence[sequence.index(0xDA) + 1] == 0x02
    assert sequence[-2:] == bytes([DISPLAY_ON, 0x2E])


def test_default_config_64x48(tmp_path):
    display, _ = make(tmp_path, 48, 64)
    assert (display.lines, display.columns) == (48, 64)


def test_default_config_falls_back(tmp_path):
    display, _ = make(tmp_path, 10, 99)
    assert (display.lines, display.columns) == (64, 128)


def test_resolution_round_trip(tmp_path):
    make(tmp_path, 32, 128)
    other = Display(FakeBus(), tmp_path / "resolution")
    other.load_resolution()
    assert (other.columns, other.lines) == (128, 32)


def test_load_resolution_missing(tmp_path):
    with pytest.raises(DisplayError):
        Display(FakeBus(), tmp_path / "absent").load_resolution()


def test_set_xy_bytes_and_state(tmp_path):
    display, bus = make(tmp_path)
    display.set_xy(0x25, 3)
    assert bus.writes == [bytes([0x00, 0xB3, 0x05, 0x12])]
    assert (display.x, display.y) == (0x25, 3)


def test_set_x_and_y_bounds(tmp_path):
    display, bus = make(tmp_path, 32, 128)
    with pytest.raises(DisplayError):
        display.set_x(128)
    with pytest.raises(DisplayError):
        display.set_y(4)
    display.set_y(3)
    assert bus.writes == [bytes([0x00, 0xB3])]


def test_rotation(tmp_path):
    display, bus = make(tmp_path)
    display.set_rotation(0)
    display.set_rotation(180)
    assert bus.writes == [bytes([0x00, 0xA1, 0xC8]), bytes([0x00, 0xA0, 0xC0])]
    with pytest.raises(DisplayError):
        display.set_rotation(90)


def test_write_line(tmp_path):
    display, bus = make(tmp_path)
    display.write_line("Hi", Font.SMALL)
    assert bus.writes == [b"\x40" + render("Hi", Font.SMALL)]


def test_write_line_rejects_bad_input(tmp_path):
    display, bus = make(tmp_path)
    with pytest.raises(DisplayError):
        display.write_line("tab\there", Font.NORMAL)
    with pytest.raises(DisplayError):
        display.write_line("x", 5)
    with pytest.raises(DisplayError):
        display.write_line("a" * (BUFFER_SIZE // 8), Font.NORMAL)
    assert bus.writes == []


def test_write_string_splits_lines(tmp_path):
    display, bus = make(tmp_path, 32, 128)
    display.write_string("ab\\ncd", Font.NORMAL)
    assert bus.writes == [
        bytes([0x00, 0xB0, 0x00, 0x10]),
        b"\x40" + render("ab", Font.NORMAL),
        bytes([0x00, 0xB1, 0x00, 0x10]),
        b"\x40" + render("cd", Font.NORMAL),
    ]
    assert display.y == 1


def test_write_string_wraps_pages(tmp_path):
    display, _ = make(tmp_path, 32, 128)
    display.set_y(3)
    display.write_string("a\\nb", Font.NORMAL)
    assert display.y == 0


def test_clear_line_and_screen(tmp_path):
    display, bus = make(tmp_path, 32, 128)
    display.clear_line(2)
    assert bus.writes[-1] == b"\x40" + bytes(128)
    with pytest.raises(DisplayError):
        display.clear_line(4)
    bus.writes.clear()
    display.clear_screen()
    data = [w for w in bus.writes if w[0] == 0x40]
    assert len(data) == display.pages


def test_draw_bitmap_packs_columns(tmp_path):
    display, bus = make(tmp_path, 32, 128)
    bitmap = [[False] * 128 for _ in range(64)]
    bitmap[0][0] = True
    bitmap[7][3] = True
    display.draw_bitmap(bitmap)
    data = [w for w in bus.writes if w[0] == 0x40]
    assert len(data) == 4
    assert all(len(line) == 129 for line in data)
    assert data[0][1] == 0x01
    assert data[0][4] == 0x80
    assert all(b == 0 for line in data[1:] for b in line[1:])


def test_draw_bitmap_needs_resolution(tmp_path):
    display = Display(FakeBus(), tmp_path / "r")
    with pytest.raises(DisplayError):
        display.draw_bitmap([[False] * 128 for _ in range(64)])