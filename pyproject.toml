[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xcorelib"
version = "0.1.0"
description = "Low-level helpers: CRC checksums, UTF-8/UTF-16 conversion, bit tricks, saturating arithmetic, atomics, mutex and semaphore"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "crc",
    "crc7",
    "crc8",
    "crc16",
    "crc32",
    "utf-16",
    "unicode",
    "saturated arithmetic",
    "byte order",
    "atomic",
    "semaphore",
    "mutex",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xcorelib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
