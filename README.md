# wirefdf

An isometric wireframe viewer for height-map files. Each point of the grid
is placed in isometric projection and raised by its height. It is then
joined by a line to the next point in its row and to the point at the same
column in the row before. Each line's colour shifts from the colour of one
end to the colour of the other.

## Installing

```
pip install .
```

This installs `pygame` as well, which provides the window.

## Map files

A map is plain text. Each line is one row of the grid. The whole numbers on
it are heights, separated by spaces, and a height may start with a sign. A
height may carry a colour, written as `,0x` followed by hexadecimal digits:

```
0 0 0 0
0 5 5,0xff0000 0
0 5 5 0
0 0 0 0
```

Points without a colour are drawn white (`0xffffff`).

## Viewing a map

```
wirefdf path/to/map.fdf
```

The window is 1000 × 750 pixels and is titled `fdf`. The map is drawn again
on every frame.

- Scroll the mouse wheel up to zoom in and down to zoom out. Each step
  changes the tile width by one pixel, and the tile height stays at half the
  width. Tiles start at 100 × 50.
- Press Escape or close the window to quit.

The command exits with status 1 in two cases: it is not given exactly one
path, or the map cannot be read or the window cannot be opened. Otherwise it
exits with status 0.

The viewer only zooms. It has no controls for rotating, panning or changing
the projection, and it cannot save the picture to a file.

## Using it from Python

```python
from wirefdf.grid import load_map
from wirefdf.render import render_map

grid = load_map("path/to/map.fdf")
canvas = render_map(grid, 1000, 750)
print(hex(canvas.get_pixel(500, 375)))
```

- `wirefdf.grid` reads maps with `load_map(path)` or
  `parse_map(lines)` and returns a `Grid` of `Node` points. A `Node` has
  `x`, `y`, `z`, `color` and `under`, the point above it in the previous
  row. A `Grid` keeps its `nodes` in reading order, along with `width`,
  `height`, `tile_width` and `tile_height`. `Grid.edges()` yields the pairs
  of joined points. `Grid.zoom(step)` changes the tile size. `Grid.add(x, y,
  z, color)` appends a point. `parse_int(text)` reads a leading integer and
  returns 0 if there is none.
- `wirefdf.raster` has `Canvas(width, height)`, a buffer of 32-bit pixels
  that starts black. It provides `put_pixel`, which ignores points outside
  the canvas, and `get_pixel`, which raises `IndexError` for them.
  `to_bytes()` returns the pixels as little-endian 32-bit values, row by
  row. `draw_line(canvas, start, end, color_from, color_to)` draws a
  colour-graded line from `start` up to `end`, but not including it.
- `wirefdf.colors` works with packed `0xRRGGBB` colours. `rgb_color` packs
  three channels into one colour, and `hex_color` parses leading hex digits.
  `lerp` and `lerp_color` blend two values or two colours by a weight from
  0 to 255.
- `wirefdf.render` has `project`, which gives a point's screen position, and
  `draw_node`, which draws one point's lines. `render_map` draws the whole
  grid onto a new canvas, which is 1000 × 750 by default.
- `wirefdf.app` holds the interactive `Viewer` and the `main` entry point.

## Running the tests

```
pip install ".[test]"
pytest
```