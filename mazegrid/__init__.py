"""Rectilinear maze grids: link graphs, path queries, generators and renderers."""

__all__ = [
    "ALGORITHMS",
    "Cell",
    "Grid",
    "GridDirection",
    "ImageRenderConfig",
    "Mask",
    "MazeGenerator",
    "MazeRecord",
    "Pixel",
    "TextRenderConfig",
    "binary_tree_maze",
    "get_algorithm",
    "hunt_and_kill",
    "recursive_backtracker",
    "render_image",
    "render_text",
    "sidewinder_maze",
]

from .matrix import Cell
from .grid import Grid, GridDirection
from .mask import Mask
from .algorithms import (
    ALGORITHMS,
    binary_tree_maze,
    get_algorithm,
    hunt_and_kill,
    recursive_backtracker,
    sidewinder_maze,
)
from .pixel import Pixel
from .text_renderer import TextRenderConfig, render_text
from .image_renderer import ImageRenderConfig, render_image
from .generator import MazeGenerator, MazeRecord
