"""Isometric projection of a grid and rendering it onto a canvas."""

from __future__ import annotations

from wirefdf.grid import Grid, Node
from wirefdf.raster import Canvas, draw_line

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 750


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    quotient = abs(value) // 2
    return -quotient if value < 0 else quotient


def project(grid: Grid, node: Node, width: int, height: int) -> tuple[int, int]:
    """Return the screen position of ``node`` on a ``width`` by ``height`` image."""
    offset_x = _half(width)
    offset_y = _half(height) - _half(grid.height * grid.tile_height)
    offset_y -= node.z * 2
    return (
        offset_x + _half((node.x - node.y) * grid.tile_width),
        offset_y + _half((node.x + node.y) * grid.tile_height),
    )


def _draw_edge(grid: Grid, canvas: Canvas, start: Node, end: Node) -> None:
    draw_line(
        canvas,
        project(grid, start, canvas.width, canvas.height),
        project(grid, end, canvas.width, canvas.height),
        start.color,
        end.color,
    )


def draw_node(grid: Grid, canvas: Canvas, node: Node) -> None:
    """Draw the edge to the node's right neighbour and to the node above it."""
    position = next(i for i, candidate in enumerate(grid.nodes) if candidate is node)
    following = grid.nodes[position + 1] if position + 1 < len(grid.nodes) else None
    if following is not None and following.y == node.y:
        _draw_edge(grid, canvas, node, following)
    if node.under is not None:
        _draw_edge(grid, canvas, node, node.under)


def render_map(grid: Grid, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> Canvas:
    """Draw every edge of ``grid`` onto a fresh canvas and return it."""
    canvas = Canvas(width, height)
    for start, end in grid.edges():
        _draw_edge(grid, canvas, start, end)
    return canvas