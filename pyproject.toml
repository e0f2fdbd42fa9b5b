[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2023"
version = "0.1.0"
description = "Solvers for a series of grid, parsing and search puzzles, exposed as plain Python functions."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "grids", "dynamic-programming", "shortest-path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2023"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
