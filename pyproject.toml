[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchboard"
version = "0.1.0"
description = "A small line-and-rectangle sketching tool with a plain-text drawing format"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "sketch", "vector", "shapes", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sketchboard = "sketchboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchboard"]

[tool.pytest.ini_options]
addopts = "-ra"
