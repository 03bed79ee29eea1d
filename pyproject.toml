[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2015"
version = "0.1.0"
description = "Solutions to days 1 to 16 of the 2015 Advent of Code puzzles, with pure-Python MD5 and FNV-1a helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "md5", "fnv1a"]
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

[project.scripts]
aoc2015-day01 = "aoc2015.day01:main"
aoc2015-day02 = "aoc2015.day02:main"
aoc2015-day03 = "aoc2015.day03:main"
aoc2015-day04 = "aoc2015.day04:main"
aoc2015-day05 = "aoc2015.day05:main"
aoc2015-day06 = "aoc2015.day06:main"
aoc2015-day07 = "aoc2015.day07:main"
aoc2015-day08 = "aoc2015.day08:main"
aoc2015-day09 = "aoc2015.day09:main"
aoc2015-day10 = "aoc2015.day10:main"
aoc2015-day11 = "aoc2015.day11:main"
aoc2015-day12 = "aoc2015.day12:main"
aoc2015-day13 = "aoc2015.day13:main"
aoc2015-day14 = "aoc2015.day14:main"
aoc2015-day15 = "aoc2015.day15:main"
aoc2015-day16 = "aoc2015.day16:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2015"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
