"""Raster rendering of a grid with Pillow."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from .matrix import Cell
from .pixel import BLACK, WHITE, Pixel

if TYPE_CHECKING:
    from .grid import Grid

PathLike = Union[str, Path]
Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ImageRenderConfig:
    """Settings for :func:`render_image`.

    ``cell_size`` is the pitch between walls in pixels; walls are
    ``border_width`` pixels thick.  ``path_width`` defaults to a third of the
    cell size.
    """

    cell_size: int = 10
    border_width: int = 2
    wall_color: Pixel = BLACK
    background_color: Pixel = WHITE
    path_color: Pixel = Pixel(220, 0, 0)
    shade_color: Pixel = Pixel(0, 128, 0)
    path_width: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be a positive integer")
        if self.border_width < 1:
            raise ValueError("border_width must be a positive integer")
        if self.path_width is not None and self.path_width < 1:
            raise ValueError("path_width must be a positive integer")

    @property
    def resolved_path_width(self) -> int:
        return self.path_width if self.path_width is not None else max(2, self.cell_size // 3)


def image_size(grid: "Grid", config: ImageRenderConfig) -> Tuple[int, int]:
    width = grid.num_cols * config.cell_size + config.border_width
    height = grid.num_rows * config.cell_size + config.border_width
    return width, height


def cell_center(grid: "Grid", cell: Cell, config: ImageRenderConfig) -> Tuple[float, float]:
    """Return the pixel center of a cell."""
    i, j = grid.ij(cell)
    half = (config.cell_size + config.border_width) / 2.0
    return j * config.cell_size + half, i * config.cell_size + half


def _shade(base: Pixel, target: Pixel, intensity: float) -> Color:
    def mix(a: int, b: int) -> int:
        return int(round(a + (b - a) * intensity))

    return (
        mix(base.red, target.red),
        mix(base.green, target.green),
        mix(base.blue, target.blue),
        mix(base.alpha, target.alpha),
    )


def render_image(
    grid: "Grid",
    config: Optional[ImageRenderConfig] = None,
    *,
    path: Optional[Sequence[Cell]] = None,
    distances: Optional[Sequence[Optional[int]]] = None,
) -> Image.Image:
    """Render the grid as an RGBA image.

    ``distances`` (one entry per cell, as returned by ``Grid.distances``)
    tints each reached cell toward ``shade_color``, strongest at distance 0.
    ``path`` draws a line through the centers of the given cells.
    """

    config = config if config is not None else ImageRenderConfig()
    size, border = config.cell_size, config.border_width
    width, height = image_size(grid, config)

    image = Image.new("RGBA", (width, height), config.background_color.as_tuple())
    draw = ImageDraw.Draw(image)
    wall = config.wall_color.as_tuple()

    if distances is not None:
        if len(distances) != grid.num_cells:
            raise ValueError(f"expected {grid.num_cells} distances, got {len(distances)}")
        reached = [d for d in distances if d is not None]
        longest = max(reached) if reached else 0
        for cell, dist in enumerate(distances):
            if dist is None:
                continue
            intensity = 1.0 if longest == 0 else (longest - dist) / float(longest)
            x, y = grid.j(cell) * size, grid.i(cell) * size
            fill = _shade(config.background_color, config.shade_color, intensity)
            draw.rectangle((x, y, x + size + border - 1, y + size + border - 1), fill=fill)

    # Outer north and west borders; every cell draws its own east and south walls.
    draw.rectangle((0, 0, width - 1, border - 1), fill=wall)
    draw.rectangle((0, 0, border - 1, height - 1), fill=wall)

    for cell in range(grid.num_cells):
        i, j = grid.ij(cell)
        x, y = j * size, i * size
        if not grid.is_linked_east(cell):
            draw.rectangle((x + size, y, x + size + border - 1, y + size + border - 1), fill=wall)
        if not grid.is_linked_south(cell):
            draw.rectangle((x, y + size, x + size + border - 1, y + size + border - 1), fill=wall)

    # Wall intersections stay solid even where every adjoining wall is open.
    for i in range(grid.num_rows + 1):
        for j in range(grid.num_cols + 1):
            x, y = j * size, i * size
            draw.rectangle((x, y, x + border - 1, y + border - 1), fill=wall)

    if path:
        points = [cell_center(grid, cell, config) for cell in path]
        color = config.path_color.as_tuple()
        thickness = config.resolved_path_width
        if len(points) == 1:
            (cx, cy), radius = points[0], thickness / 2
            draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=color)
        else:
            draw.line(points, fill=color, width=thickness, joint="curve")

    return image


def save_image(image: Image.Image, path: PathLike) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    image.save(target)
    return target


__all__ = [
    "ImageRenderConfig",
    "cell_center",
    "image_size",
    "render_image",
    "save_image",
]
