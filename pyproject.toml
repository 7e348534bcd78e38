[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "1.0.0"
description = "Solvers for the first nine days of a December programming puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aoc-day01 = "aocdays.day01:main"
aoc-day02 = "aocdays.day02:main"
aoc-day03 = "aocdays.day03:main"
aoc-day04 = "aocdays.day04:main"
aoc-day05 = "aocdays.day05:main"
aoc-day06 = "aocdays.day06:main"
aoc-day07 = "aocdays.day07:main"
aoc-day08 = "aocdays.day08:main"
aoc-day09 = "aocdays.day09:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
