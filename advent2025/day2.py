"""Day 2: find product ids made of a repeated digit sequence."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from advent2025.common import read_lines

DEFAULT_INPUT = "2025/day2/real.txt"


@dataclass(frozen=True)
class IdRange:
    start: int
    end: int

    def __iter__(self):
        return iter(range(self.start, self.end + 1))


@dataclass(frozen=True)
class InvalidIdReport:
    count_part1: int = 0
    sum_part1: int = 0
    count_part2: int = 0
    sum_part2: int = 0


def parse_ranges(lines: Sequence[str]) -> list[IdRange]:
    """Parse the single input line of comma-separated ``start-end`` ranges."""
    if len(lines) != 1:
        raise ValueError("Expected exactly one line of input")
    ranges = []
    for item in lines[0].split(","):
        parts = item.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid range: {item}")
        ranges.append(IdRange(int(parts[0]), int(parts[1])))
    return ranges


def is_repeated_twice(number: int) -> bool:
    """True if the digits are one sequence written exactly twice."""
    digits = str(number)
    half = len(digits) // 2
    return digits[:half] == digits[half:]


def is_repeated_at_least_twice(number: int) -> bool:
    """True if the digits are one sequence written two or more times."""
    digits = str(number)
    length = len(digits)
    for repeats in range(2, length + 1):
        if length % repeats:
            continue
        part = length // repeats
        if digits == digits[:part] * repeats:
            return True
    return is_repeated_twice(number)


def detect_invalid_ids(ranges: Iterable[IdRange]) -> InvalidIdReport:
    count1 = sum1 = count2 = sum2 = 0
    for id_range in ranges:
        for number in id_range:
            if is_repeated_twice(number):
                count1 += 1
                sum1 += number
            if is_repeated_at_least_twice(number):
                count2 += 1
                sum2 += number
    return InvalidIdReport(count1, sum1, count2, sum2)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    report = detect_invalid_ids(parse_ranges(read_lines(args.path)))
    print(f"Part 1 - Invalid  {report.count_part1}, Sum {report.sum_part1}")
    print(f"Part 2 - Invalid  {report.count_part2}, Sum {report.sum_part2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())