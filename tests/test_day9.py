from itertools import combinations

import pytest

from advent2025.day9 import (
    Direction,
    Position,
    area_between,
    infer_direction,
    largest_rectangle,
    main,
    parse_tiles,
    rectangle_vertices,
    render_tiles,
)

EXAMPLE = ["7,1", "11,1", "11,7", "9,7", "9,5", "2,5", "2,3", "7,3", ""]


def test_parse_tiles_reads_positions_and_skips_blank_lines():
    tiles = parse_tiles(["3,4", "", "10,2"])
    assert tiles == [Position(3, 4), Position(10, 2)]


@pytest.mark.parametrize("line", ["1", "1,2,3", "a,b"])
def test_parse_tiles_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_tiles([line])


def test_position_str():
    assert str(Position(3, -2)) == "(3, -2)"


def test_area_of_single_point_is_one():
    assert area_between(Position(5, 5), Position(5, 5)) == 1


def test_area_is_symmetric_and_matches_vertices():
    a, b = Position(2, 5), Position(11, 1)
    assert area_between(a, b) == area_between(b, a)
    down_left, down_right, up_left, up_right = rectangle_vertices(a, b)
    assert area_between(down_left, up_right) == area_between(a, b)
    assert area_between(down_right, up_left) == area_between(a, b)


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (Position(0, 0), Position(3, 0), Direction.RIGHT),
        (Position(3, 0), Position(0, 0), Direction.LEFT),
        (Position(0, 0), Position(0, 3), Direction.UP),
        (Position(0, 3), Position(0, 0), Direction.DOWN),
        (Position(1, 1), Position(1, 1), Direction.NONE),
        (Position(0, 0), Position(2, 9), Direction.RIGHT),
    ],
)
def test_infer_direction(source, target, expected):
    assert infer_direction(source, target) is expected


def test_rectangle_vertices_order():
    vertices = rectangle_vertices(Position(3, 1), Position(1, 4))
    assert vertices == (Position(1, 1), Position(3, 1), Position(1, 4), Position(3, 4))


def test_rectangle_vertices_independent_of_corner_order():
    a, b = Position(7, 3), Position(2, 9)
    assert rectangle_vertices(a, b) == rectangle_vertices(b, a)


def test_largest_rectangle_example():
    assert largest_rectangle(parse_tiles(EXAMPLE)) == 50


def test_largest_rectangle_is_maximum_over_pairs():
    tiles = parse_tiles(EXAMPLE)
    best = largest_rectangle(tiles)
    assert all(area_between(a, b) <= best for a, b in combinations(tiles, 2))
    assert any(area_between(a, b) == best for a, b in combinations(tiles, 2))


def test_largest_rectangle_needs_two_tiles():
    with pytest.raises(ValueError):
        largest_rectangle([Position(1, 1)])


def test_render_tiles_draws_grid_with_margin():
    assert render_tiles([Position(0, 0), Position(1, 1)]) == "#...\n.#..\n....\n"


def test_render_tiles_counts_every_tile():
    tiles = parse_tiles(EXAMPLE)
    picture = render_tiles(tiles)
    assert picture.count("#") == len(set(tiles))


def test_render_tiles_rejects_empty():
    with pytest.raises(ValueError):
        render_tiles([])


def test_main_prints_part1(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Part 1 - 50\n"