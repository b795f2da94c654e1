"""Plain-text rendering of a grid, optionally with a label in each cell."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Sequence, Union

from .matrix import Cell

if TYPE_CHECKING:
    from .grid import Grid

CellLabels = Union[Callable[[Cell], Optional[Any]], Mapping, Sequence[Optional[Any]]]


@dataclass(frozen=True)
class TextRenderConfig:
    """Settings for :func:`render_text`.

    ``cell_width`` is the minimum width of a cell in monospace characters.
    With ``auto_width`` the width grows to fit the widest label plus
    ``margin`` spaces on each side.
    """

    cell_width: int = 3
    auto_width: bool = False
    margin: int = 0

    def __post_init__(self) -> None:
        if self.cell_width < 1:
            raise ValueError("cell_width must be a positive integer")
        if self.margin < 0:
            raise ValueError("margin must be a non-negative integer")


def _label_lookup(grid: "Grid", labels: Optional[CellLabels]) -> Callable[[Cell], Optional[Any]]:
    if labels is None:
        return lambda cell: None
    if callable(labels):
        return labels
    if isinstance(labels, Mapping):
        return labels.get
    if len(labels) != grid.num_cells:
        raise ValueError(f"expected {grid.num_cells} labels, got {len(labels)}")
    return lambda cell: labels[cell]


def render_text(
    grid: "Grid",
    config: Optional[TextRenderConfig] = None,
    labels: Optional[CellLabels] = None,
) -> str:
    """Render the grid as ASCII art.

    ``labels`` may be a function of the cell id, a mapping from cell id, or a
    sequence with one entry per cell; ``None`` leaves a cell blank.
    """

    config = config if config is not None else TextRenderConfig()
    lookup = _label_lookup(grid, labels)

    texts: Dict[Cell, str] = {}
    for cell in range(grid.num_cells):
        value = lookup(cell)
        if value is not None:
            texts[cell] = str(value)

    width = config.cell_width
    if config.auto_width and texts:
        widest = max(len(text) for text in texts.values())
        width = max(width, widest + 2 * config.margin)

    lines = ["+" + ("-" * width + "+") * grid.num_cols]
    for i in range(grid.num_rows):
        body = ["|"]
        floor = ["+"]
        for j in range(grid.num_cols):
            cell = grid.cell(i, j)
            body.append(f"{texts.get(cell, ''):^{width}}")
            body.append(" " if grid.is_linked_east(cell) else "|")
            floor.append((" " if grid.is_linked_south(cell) else "-") * width)
            floor.append("+")
        lines.append("".join(body))
        lines.append("".join(floor))

    return "\n".join(lines) + "\n"


__all__ = ["TextRenderConfig", "render_text"]
