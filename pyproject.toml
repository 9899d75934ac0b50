[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobcsw"
version = "0.1.0"
description = "Building blocks for on-board computer software: little-endian serialization, CRC32/MPEG-2, system time conversion, and loopback communication and GPIO models"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "serialization", "crc32", "mpeg-2", "gpio", "uart", "spi", "satellite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cobcsw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
