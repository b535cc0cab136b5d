[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2018"
version = "0.1.0"
description = "Solvers for a selection of 2018 Advent of Code puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "simulation", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
advent2018-day07 = "advent2018.day07:main"
advent2018-day09 = "advent2018.day09:main"
advent2018-day13 = "advent2018.day13:main"
advent2018-day14 = "advent2018.day14:main"
advent2018-day15 = "advent2018.day15:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2018"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
