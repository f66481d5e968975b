[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yegfinder"
version = "0.1.0"
description = "Browse a scrolling city map and find the nearest restaurants, sorted by Manhattan distance"
requires-python = ">=3.10"
keywords = ["map", "restaurants", "rgb565", "gis", "pygame", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yegfinder = "yegfinder.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yegfinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
