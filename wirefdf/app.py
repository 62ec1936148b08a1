"""The interactive viewer window and its command-line entry point."""

from __future__ import annotations

import sys

import pygame

from wirefdf.grid import load_map
from wirefdf.raster import Canvas
from wirefdf.render import WINDOW_HEIGHT, WINDOW_WIDTH, render_map

ZOOM_IN_BUTTON = 4
ZOOM_OUT_BUTTON = 5


def _to_rgb(canvas: Canvas) -> bytes:
    """Reorder the canvas's little-endian 0xRRGGBB pixels into packed RGB."""
    data = canvas.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


class Viewer:
    """A window that shows a map and zooms with the mouse wheel."""

    def __init__(self, path) -> None:
        self.grid = load_map(path)
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error:
            pygame.quit()
            raise
        pygame.display.set_caption("fdf")
        self.running = True

    def on_mouse(self, button: int) -> None:
        """Zoom in on wheel-up, out on wheel-down."""
        if button == ZOOM_OUT_BUTTON:
            self.grid.zoom(-1)
        if button == ZOOM_IN_BUTTON:
            self.grid.zoom(1)

    def on_key(self, key: int) -> None:
        """Stop the viewer when Escape is pressed."""
        if key == pygame.K_ESCAPE:
            self.running = False

    def frame(self) -> Canvas:
        """Render the map onto the window and return the rendered canvas."""
        width, height = self.screen.get_size()
        canvas = render_map(self.grid, width, height)
        image = pygame.image.frombuffer(_to_rgb(canvas), (width, height), "RGB")
        self.screen.blit(image, (0, 0))
        return canvas

    def _handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.on_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.on_mouse(event.button)

    def run(self) -> None:
        """Process events and redraw until the viewer is closed."""
        try:
            while self.running:
                for event in pygame.event.get():
                    self._handle(event)
                if not self.running:
                    break
                self.frame()
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Open a viewer on the single map path given; return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        viewer = Viewer(args[0])
    except (OSError, pygame.error):
        return 1
    viewer.run()
    return 0