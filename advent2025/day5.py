"""Day 5: check ingredient ids against fresh id ranges."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from advent2025.common import read_lines

IdRange = tuple[int, int]
DEFAULT_INPUT = "2025/day5/example.txt"


def _parse_range(line: str) -> IdRange:
    parts = line.split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid ID format in line: {line}")
    return int(parts[0]), int(parts[1])


def parse_inventory(lines: Iterable[str]) -> tuple[list[IdRange], set[int]]:
    """Split input into the ranges before the blank line and the ids after it."""
    ranges: list[IdRange] = []
    ids: set[int] = set()
    reading_ranges = True
    for line in lines:
        if not line or line == "\n":
            reading_ranges = False
            continue
        if reading_ranges:
            ranges.append(_parse_range(line))
        else:
            ids.add(int(line))
    return ranges, ids


def available_valid_ids(ranges: Sequence[IdRange], ids: Iterable[int]) -> set[int]:
    """Ids that fall inside at least one range."""
    return {i for i in ids if any(start <= i <= end for start, end in ranges)}


def merge_ranges(ranges: Iterable[IdRange]) -> list[IdRange]:
    """Merge overlapping or touching ranges into disjoint sorted ones."""
    merged: list[IdRange] = []
    for start, end in sorted(ranges, key=lambda r: r[0]):
        if not merged or merged[-1][1] < start - 1:
            merged.append((start, end))
        else:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
    return merged


def count_all_valid_ids(ranges: Iterable[IdRange]) -> int:
    """Number of distinct ids covered by any range."""
    return sum(end - start + 1 for start, end in merge_ranges(ranges))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    ranges, ids = parse_inventory(read_lines(args.path))
    print(f"Part 1 - Number of available valid ids is {len(available_valid_ids(ranges, ids))}")
    print(f"Part 2 - Number of all valid ids is {count_all_valid_ids(ranges)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())