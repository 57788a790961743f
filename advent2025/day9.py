"""Day 9: find the largest rectangle spanned by two red tiles."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import combinations

from advent2025.common import read_lines

RED_TILE = "#"
FLOOR = "."
DEFAULT_INPUT = "2025/day9/example.txt"


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    NONE = "none"
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


def parse_tiles(lines: Iterable[str]) -> list[Position]:
    """Parse ``x,y`` lines into tile positions, skipping blank lines."""
    tiles = []
    for line in lines:
        if not line:
            continue
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid tile: {line}")
        tiles.append(Position(int(parts[0]), int(parts[1])))
    return tiles


def area_between(a: Position, b: Position) -> int:
    """Number of tiles in the rectangle with opposite corners ``a`` and ``b``."""
    return (abs(b.x - a.x) + 1) * (abs(b.y - a.y) + 1)


def infer_direction(source: Position, target: Position) -> Direction:
    """Direction of travel from ``source`` to ``target``; x movement wins."""
    if source.x < target.x:
        return Direction.RIGHT
    if source.x > target.x:
        return Direction.LEFT
    if source.y < target.y:
        return Direction.UP
    if source.y > target.y:
        return Direction.DOWN
    return Direction.NONE


def rectangle_vertices(a: Position, b: Position) -> tuple[Position, Position, Position, Position]:
    """Corners of the rectangle spanned by ``a`` and ``b``.

    Ordered down-left, down-right, up-left, up-right.
    """
    left, right = sorted((a.x, b.x))
    bottom, top = sorted((a.y, b.y))
    return (
        Position(left, bottom),
        Position(right, bottom),
        Position(left, top),
        Position(right, top),
    )


def largest_rectangle(tiles: Sequence[Position]) -> int:
    """Largest area of a rectangle whose opposite corners are two of ``tiles``."""
    if len(tiles) < 2:
        raise ValueError("At least two red tiles are needed")
    return max(area_between(a, b) for a, b in combinations(tiles, 2))


def render_tiles(tiles: Iterable[Position]) -> str:
    """Draw the tiles row by row from ``y = 0``, with a margin of floor."""
    occupied = set(tiles)
    if not occupied:
        raise ValueError("No tiles to render")
    width = max(tile.x for tile in occupied) + 3
    height = max(tile.y for tile in occupied) + 2
    return "".join(
        "".join(RED_TILE if Position(x, y) in occupied else FLOOR for x in range(width)) + "\n"
        for y in range(height)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    tiles = parse_tiles(read_lines(args.path))
    print(f"Part 1 - {largest_rectangle(tiles)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())