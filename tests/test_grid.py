import pytest

from wirefdf.colors import rgb_color
from wirefdf.grid import Grid, load_map, parse_int, parse_map


@pytest.mark.parametrize(
    "text,expected",
    [(" -42", -42), ("+7", 7), ("abc", 0), ("12ab", 12), ("\t\n 5", 5), ("", 0)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_map_dimensions_and_heights():
    grid = parse_map(["0 1 2\n", "3 4 5\n"])
    assert grid.width == 3
    assert grid.height == 2
    assert [node.z for node in grid] == [0, 1, 2, 3, 4, 5]
    assert [(node.x, node.y) for node in grid] == [
        (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)
    ]


def test_parse_map_links_node_above():
    grid = parse_map(["0 1\n", "2 3\n"])
    top_left, top_right, bottom_left, bottom_right = grid.nodes
    assert top_left.under is None
    assert bottom_left.under is top_left
    assert bottom_right.under is top_right


def test_parse_map_default_and_explicit_colours():
    grid = parse_map(["10,0xFF0000 -3\n"])
    first, second = grid.nodes
    assert first.z == 10
    assert first.color == rgb_color(255, 0, 0)
    assert second.z == -3
    assert second.color == rgb_color(255, 255, 255)


def test_parse_map_last_line_without_newline():
    grid = parse_map(["1 2\n", "3 4"])
    assert grid.height == 2
    assert [node.z for node in grid] == [1, 2, 3, 4]


def test_parse_map_trailing_space_adds_flat_node():
    grid = parse_map(["1 2 \n"])
    assert [node.z for node in grid] == [1, 2, 0]


def test_edges_connect_rows_and_columns():
    grid = parse_map(["0 1 2\n", "3 4 5\n"])
    edges = list(grid.edges())
    horizontal = [(a, b) for a, b in edges if a.y == b.y]
    vertical = [(a, b) for a, b in edges if a.x == b.x]
    assert len(horizontal) == 4
    assert len(vertical) == 3
    assert len(edges) == len(horizontal) + len(vertical)
    assert all(b.x == a.x + 1 for a, b in horizontal)
    assert all(b.y == a.y - 1 for a, b in vertical)


def test_edges_do_not_wrap_between_rows():
    grid = parse_map(["0\n", "1\n"])
    edges = list(grid.edges())
    assert edges == [(grid.nodes[1], grid.nodes[0])]


def test_grid_defaults_and_zoom():
    grid = Grid()
    assert (grid.tile_width, grid.tile_height) == (100, 50)
    grid.zoom(1)
    assert grid.tile_width == 101
    assert grid.tile_height == grid.tile_width // 2
    grid.zoom(-2)
    assert grid.tile_width == 99
    assert grid.tile_height == 49


def test_add_returns_linked_node():
    grid = Grid()
    above = grid.add(0, 0, 5, 1)
    below = grid.add(0, 1, 6, 2)
    assert below.under is above
    assert len(grid) == 2


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_bytes(b"0 0 0\n0 10,0x00FF00 0\n")
    grid = load_map(path)
    assert grid.width == 3
    assert grid.height == 2
    assert grid.nodes[4].z == 10
    assert grid.nodes[4].color == rgb_color(0, 255, 0)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "absent.fdf")