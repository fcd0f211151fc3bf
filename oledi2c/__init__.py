"""Drive SSD1306 OLED displays over Linux I2C: text, BMP images and animations."""

__version__ = "0.1.0"