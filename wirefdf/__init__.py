"""Isometric wireframe viewer for height-map grid files."""

__version__ = "0.1.0"
__all__ = ["__version__"]