[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledi2c"
version = "0.1.0"
description = "Drive SSD1306 OLED displays over Linux I2C: text, bitmaps and BMP animations"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd1306", "oled", "i2c", "display", "linux", "bmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledi2c = "oledi2c.cli:main"
oledi2c-fmv = "oledi2c.fmv:main"

[tool.hatch.build.targets.wheel]
packages = ["oledi2c"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
