# advent2025

Solvers for puzzles of the 2025 puzzle calendar. Each solved day is a
module that can be used as a library and run from the command line. Each
command reads a puzzle input file and prints the answers.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command-line use

Every solved day has its own command. Give it the path to your puzzle input:

```
advent2025-day2 input.txt
advent2025-day3 input.txt
advent2025-day5 input.txt
advent2025-day9 input.txt
```

The path is optional; without it each command falls back to a default
relative path such as `2025/day2/real.txt`, which only exists if you keep
your inputs laid out that way.

## Library use

The input reader and the solvers are plain functions and small dataclasses:

```python
from advent2025.common import read_lines
from advent2025.day2 import detect_invalid_ids, parse_ranges
from advent2025.day3 import parse_banks, total_highest_joltage
from advent2025.day5 import available_valid_ids, count_all_valid_ids, parse_inventory
from advent2025.day9 import largest_rectangle, parse_tiles

report = detect_invalid_ids(parse_ranges(read_lines("day2.txt")))
print(report.count_part1, report.sum_part1, report.count_part2, report.sum_part2)

banks = parse_banks(read_lines("day3.txt"))
print(total_highest_joltage(banks, 2))
print(total_highest_joltage(banks, 12))

ranges, ids = parse_inventory(read_lines("day5.txt"))
print(len(available_valid_ids(ranges, ids)), count_all_valid_ids(ranges))

print(largest_rectangle(parse_tiles(read_lines("day9.txt"))))
```

`read_lines` splits a file on newlines and raises `ValueError` for an empty
file (and `OSError` for one that cannot be read). The parsers raise
`ValueError` on input they do not understand.

## What is inside

| Module | Puzzle |
| --- | --- |
| `advent2025.day2` | Identifiers made of a digit sequence repeated twice (`is_repeated_twice`) or at least twice (`is_repeated_at_least_twice`) within ranges; counts and sums in an `InvalidIdReport` |
| `advent2025.day3` | The largest number made by keeping 2 or 12 digits, in order, from each battery bank (`highest_joltage`, `total_highest_joltage`) |
| `advent2025.day5` | Ids that fall inside fresh ranges, and the number of ids covered once overlapping or touching ranges are merged (`merge_ranges`) |
| `advent2025.day9` | The largest rectangle whose opposite corners are two red tiles; also `rectangle_vertices`, `infer_direction` and `render_tiles` for drawing the tiles |

Shared pieces live in `advent2025.common` (`read_lines`) and
`advent2025.graph` (`Graph`, `GraphNode` and `Edge`, a small weighted
directed graph with `add_node`, `add_edge`, `add_bidirectional_edge` and
`find_node`).

## What this package does not do

- Only days 2, 3, 5 and 9 have solvers and commands. There is nothing for
  days 1, 4, 6, 7 or 8, and no union–find structure.
- For day 9 only the first part (the largest rectangle between any two
  tiles) is computed; the second part is not solved.