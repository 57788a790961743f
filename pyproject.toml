[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2025"
version = "0.1.0"
description = "Solvers for several puzzles of the 2025 puzzle calendar, as a library and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "graphs"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2025-day2 = "advent2025.day2:main"
advent2025-day3 = "advent2025.day3:main"
advent2025-day5 = "advent2025.day5:main"
advent2025-day9 = "advent2025.day9:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2025"]

[tool.hatch.build.targets.sdist]
include = ["advent2025", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["advent2025"]
