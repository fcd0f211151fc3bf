# oledi2c

Control SSD1306 OLED modules (128x64, 128x32 and 64x48) that are connected to
a Linux I2C bus (`/dev/i2c-N`, device address `0x3c`). You can print text in
a 5x7 or 8x8 font, show monochrome BMP images and play animations made of BMP
frames. The package uses only the standard library.

## Installation

```
pip install .
```

Your user needs read and write access to the I2C device node. Membership of
the `i2c` group usually gives this.

## Command line: `oledi2c`

To initialise a 128x64 display on `/dev/i2c-1`, clear it and write a
two-line message:

```
oledi2c -n 1 -I 128x64 -c -m "Hello\nWorld"
```

The chosen resolution is saved in `/tmp/.ssd1306_oled_type` as
`COLUMNSxLINES`. Later calls without `-I` read it back from that file, so
you need to pass `-I` only once. If there is no saved resolution, the command
prints a message and exits with status 1.

```
oledi2c -n 1 -x 0 -y 2 -l "Line on page 2"
oledi2c -n 1 -b picture.bmp
oledi2c -n 1 -r 180 -i 1
```

| Option | Meaning |
| --- | --- |
| `-I TYPE` | initialise the display: `128x64`, `128x32` or `64x48` |
| `-c [N]` | clear page N, or the whole screen when N is left out |
| `-d 0/1` | display off or on |
| `-f 0/1` | `0` small 5x7 font (the default), `1` normal 8x8 font |
| `-i 0/1` | normal or inverted display |
| `-b FILE` | show a 1 bpp BMP that is up to 128 pixels wide and 32 or 64 high |
| `-l TEXT` | write one line (at most 24 characters) at the cursor |
| `-m TEXT` | write a message (at most 199 characters); the two characters `\n` start a new line |
| `-n N` | I2C bus number (default 0) |
| `-r 0/180` | rotation; any other value is refused |
| `-x N`, `-y N` | cursor column and page |
| `-h` | print the help text |

The actions run in this order: initialise or load the resolution, clear,
rotate, invert, switch on or off, draw the bitmap, move the cursor, then
write text. If both `-m` and `-l` are given, only `-m` is used. Text must use
printable ASCII (space to `~`).

The exit status is 0 on success and otherwise counts the operations that
failed. If no display answers on the bus, the command prints
`no oled attached to /dev/i2c-N` and exits with status 1.

## Animations: `oledi2c-fmv`

`oledi2c-fmv` plays a file made of 1 bpp BMP frames placed one after another.
Each frame must be exactly 1086 bytes long, which is the size of one 128x64
image. A partial frame at the end of the file is ignored.

```
oledi2c-fmv -n 1 -I 128x64 -a movie.bin -d 40
```

| Option | Meaning |
| --- | --- |
| `-I TYPE` | initialise the display: `128x64`, `128x32` or `64x48` |
| `-n N` | I2C bus number (default 1) |
| `-r 0/180` | rotation |
| `-a FILE` | animation file |
| `-d MS` | time per frame in milliseconds (default 0) |
| `-h` | print the help text |

The screen is cleared before playback. If a frame cannot be decoded, a
message goes to standard error and playback continues with the next frame.

## Library use

```python
from oledi2c.i2c import I2CBus
from oledi2c.display import Display, MemoryMode
from oledi2c.font import Font, render
from oledi2c.bmp import load_bitmap

with I2CBus(1, 0x3C) as bus:
    display = Display(bus, "/tmp/.ssd1306_oled_type")
    display.check_connection()
    display.default_config(64, 128)
    display.clear_screen()
    display.set_xy(0, 0)
    display.write_string("Hello\\nWorld", Font.NORMAL)
    display.draw_bitmap(load_bitmap("picture.bmp"))
```

- `oledi2c.i2c.I2CBus`: opens `/dev/i2c-N`, selects the device, and provides
  `write(data)` and `read(length)`. You can use it as a context manager.
- `oledi2c.display.Display`: controller commands (`set_power`,
  `set_inverted`, `set_horizontal_flip`, `set_rotation`, `set_contrast`,
  `set_multiplex`, `set_vertical_shift`, `set_clock`, `set_precharge`,
  `set_deselect`, `set_com_pin`, `set_memory_mode`, `set_columns`,
  `set_pages`, `set_scrolling`), cursor moves (`set_x`, `set_y`, `set_xy`),
  text (`write_line`, `write_string`), clearing (`clear_line`,
  `clear_screen`), `draw_bitmap` for a grid indexed `[row][column]`, and
  `save_resolution` / `load_resolution`. `default_config` changes an
  unsupported size to 64 lines and 128 columns.
- `oledi2c.font`: `Font.SMALL` / `Font.NORMAL`. `glyph(font, char)` returns
  the column bytes for one character, and `render(text, font)` returns them
  for a whole line.
- `oledi2c.bmp`: `parse_bitmap(data)` and `load_bitmap(path)` return a
  64x128 grid of booleans.

A failed operation raises `I2CError`, `DisplayError` or `BitmapError`.

## Limitations

The package sends data straight to the controller and keeps no frame buffer,
so it cannot read back what is on the screen. Scrolling can only be switched
on or off; scroll parameters cannot be set. Only 1 bpp BMP images are
supported.

## Tests

```
pip install ".[test]"
pytest
```