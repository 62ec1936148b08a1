"""Height maps: parsing ``.fdf`` files into a grid of connected nodes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterable, Iterator

from wirefdf.colors import hex_color, rgb_color

DEFAULT_COLOR = rgb_color(255, 255, 255)
DEFAULT_TILE_WIDTH = 100
DEFAULT_TILE_HEIGHT = 50

_INT_PREFIX = re.compile(r"[\f\n\r\t\v ]*([+-]?)([0-9]*)")
_DIGITS = frozenset("0123456789")


def parse_int(text: str) -> int:
    """Parse a leading integer, skipping whitespace; returns 0 if none."""
    sign, digits = _INT_PREFIX.match(text).groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


@dataclass(eq=False)
class Node:
    """A point of the map with its height and colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR
    under: Node | None = field(default=None, repr=False)


class Grid:
    """The nodes of a map in reading order, with the current tile size."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.width = 0
        self.height = 0
        self.tile_width = DEFAULT_TILE_WIDTH
        self.tile_height = DEFAULT_TILE_HEIGHT
        self._by_position: dict[tuple[int, int], Node] = {}

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, x: int, y: int, z: int, color: int) -> Node:
        """Append a node, linking it to the node directly above it."""
        node = Node(x, y, z, color, self._by_position.get((x, y - 1)))
        self._by_position.setdefault((x, y), node)
        self.nodes.append(node)
        return node

    def zoom(self, step: int) -> None:
        """Grow or shrink the tiles by ``step``, keeping a 2:1 ratio."""
        self.tile_width += step
        self.tile_height = int(self.tile_width / 2)

    def edges(self) -> Iterator[tuple[Node, Node]]:
        """Yield each node's right edge, then its edge to the row above."""
        followers = pairwise(self.nodes)
        for node in self.nodes:
            following = next(followers, (None, None))[1]
            if following is not None and following.y == node.y:
                yield node, following
            if node.under is not None:
                yield node, node.under


def _fill_row(grid: Grid, line: str) -> None:
    row = grid.height
    column = 0
    pos = 0
    end = len(line)
    while pos < end:
        while pos < end and line[pos] == " ":
            pos += 1
        if pos >= end:
            break
        z = parse_int(line[pos:])
        while pos < end and (line[pos] == "-" or line[pos] in _DIGITS):
            pos += 1
        color = DEFAULT_COLOR
        if line.startswith(",0x", pos):
            color = hex_color(line[pos + 3:])
            pos += 3
        grid.add(column, row, z, color)
        column += 1
        while pos < end and line[pos] != " ":
            pos += 1
    grid.width = column
    grid.height += 1


def parse_map(lines: Iterable[str]) -> Grid:
    """Build a grid from map lines, each optionally ending in a newline."""
    grid = Grid()
    for line in lines:
        _fill_row(grid, line)
    return grid


def _read_lines(path) -> Iterator[str]:
    with open(path, "rb") as handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="replace")


def load_map(path) -> Grid:
    """Read and parse the map file at ``path``; raises ``OSError`` on failure."""
    return parse_map(_read_lines(path))