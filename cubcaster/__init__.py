"""Textured grid raycaster that loads, checks and plays .cub scene files."""

__version__ = "0.1.0"