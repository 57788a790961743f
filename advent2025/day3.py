"""Day 3: pick the largest number formed by keeping digits of each battery bank."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from advent2025.common import read_lines

PART1_DIGITS = 2
PART2_DIGITS = 12
DEFAULT_INPUT = "2025/day3/real.txt"


def parse_banks(lines: Iterable[str]) -> list[list[int]]:
    """Turn each non-empty line of digits into a bank of joltages."""
    banks = []
    for line in lines:
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"Invalid bank: {line}")
        banks.append([int(ch) for ch in line])
    return banks


def highest_joltage(bank: Sequence[int], num_digits: int) -> int:
    """Largest number made of ``num_digits`` digits of ``bank`` kept in order."""
    if num_digits < 1 or len(bank) < num_digits:
        raise ValueError(f"Bank of {len(bank)} digits cannot yield {num_digits} digits")
    digits = []
    start = 0
    for position in range(num_digits):
        end = len(bank) - num_digits + 1 + position
        window = bank[start:end]
        best = max(window)
        start += window.index(best) + 1
        digits.append(best)
    return int("".join(map(str, digits)))


def total_highest_joltage(banks: Iterable[Sequence[int]], num_digits: int) -> int:
    """Sum of the highest joltage of every bank."""
    return sum(highest_joltage(bank, num_digits) for bank in banks)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    banks = parse_banks(read_lines(args.path))
    print(f"Part 1 - Highest joltage counter is {total_highest_joltage(banks, PART1_DIGITS)}")
    print(f"Part 2 - Highest joltage counter is {total_highest_joltage(banks, PART2_DIGITS)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())