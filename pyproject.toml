[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelscan"
version = "0.1.0"
description = "Bitmap and colour search, BMP image I/O, a deadbeef random generator and simulated mouse input"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "screen", "automation", "bmp", "color", "mouse", "base64"]
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
    "Topic :: Software Development :: Testing :: Acceptance",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
