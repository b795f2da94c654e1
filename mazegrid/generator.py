"""Batch maze builder and command-line entry point.

A :class:`MazeGenerator` carves mazes with one of the registered algorithms,
renders a plain image and a solution image (longest path drawn over a
distance shading) for each, and collects a JSON-serializable record per maze.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from PIL import Image

from .algorithms import ALGORITHMS, get_algorithm
from .grid import Grid
from .image_renderer import ImageRenderConfig, PathLike, render_image, save_image
from .pixel import BLACK, Pixel
from .text_renderer import TextRenderConfig, render_text

logger = logging.getLogger(__name__)


@dataclass
class MazeRecord:
    """Serializable metadata for a generated maze and its images."""

    id: str
    algorithm: str
    grid_size: Tuple[int, int]
    start: Tuple[int, int]
    goal: Tuple[int, int]
    path: List[int]
    dead_ends: int
    image: str
    solution_image_path: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def path_length(self) -> int:
        return max(0, len(self.path) - 1)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "algorithm": self.algorithm,
            "grid_size": [int(self.grid_size[0]), int(self.grid_size[1])],
            "start": [int(self.start[0]), int(self.start[1])],
            "goal": [int(self.goal[0]), int(self.goal[1])],
            "path": [int(cell) for cell in self.path],
            "path_length": self.path_length,
            "dead_ends": self.dead_ends,
            "image": self.image,
            "solution_image_path": self.solution_image_path,
        }
        for key, value in self.extra.items():
            if key not in payload:
                payload[key] = value
        return payload


class MazeGenerator:
    """Generate mazes and their rendered images into an output directory.

    Example usage:
        generator = MazeGenerator("out/mazes", rows=12, cols=20, seed=7)
        records = generator.generate_dataset(5, metadata_path="out/mazes/data.json")
    """

    DEFAULT_OUTPUT_DIR: PathLike = "data/mazes"
    DEFAULT_ROWS = 10
    DEFAULT_COLS = 10
    DEFAULT_ALGORITHM = "recursive-backtracker"
    DEFAULT_CELL_SIZE = 20
    DEFAULT_BORDER_WIDTH = 2

    def __init__(
        self,
        output_dir: Optional[PathLike] = None,
        *,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        algorithm: str = DEFAULT_ALGORITHM,
        cell_size: int = DEFAULT_CELL_SIZE,
        border_width: int = DEFAULT_BORDER_WIDTH,
        seed: Optional[int] = None,
        wall_color: Pixel = BLACK,
        path_color: Optional[Pixel] = None,
    ) -> None:
        if rows < 2 or cols < 2:
            raise ValueError(f"expected a grid of size at least 2x2, got {rows}x{cols}")
        self._algorithm = get_algorithm(algorithm)
        self.algorithm = algorithm
        self.rows = int(rows)
        self.cols = int(cols)

        render_kwargs: Dict[str, Any] = {
            "cell_size": cell_size,
            "border_width": border_width,
            "wall_color": wall_color,
        }
        if path_color is not None:
            render_kwargs["path_color"] = path_color
        self.render_config = ImageRenderConfig(**render_kwargs)

        self.seed = seed
        self._rng = random.Random(seed)

        resolved_output = output_dir if output_dir is not None else self.DEFAULT_OUTPUT_DIR
        self.output_dir = Path(resolved_output)
        self.puzzle_dir = self.output_dir / "puzzles"
        self.solution_dir = self.output_dir / "solutions"
        self.puzzle_dir.mkdir(parents=True, exist_ok=True)
        self.solution_dir.mkdir(parents=True, exist_ok=True)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def next_id(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def build_grid(self) -> Grid:
        """Return a new grid carved by the configured algorithm."""
        grid = Grid(self.rows, self.cols)
        self._algorithm(grid, self._rng)
        return grid

    def create_maze(self, *, maze_id: Optional[str] = None, grid: Optional[Grid] = None) -> MazeRecord:
        """Render and record a maze, carving a new grid unless one is given."""
        record_id = maze_id or self.next_id()
        if grid is None:
            grid = self.build_grid()
        path = grid.longest_path()
        start, goal = path[0], path[-1]
        dists = grid.distances(start)

        puzzle_image = render_image(grid, self.render_config)
        solution_image = render_image(grid, self.render_config, path=path, distances=dists)
        puzzle_path, solution_path = self.save_images(record_id, puzzle_image, solution_image)

        logger.debug("Created %s maze %s with a %d-step longest path", self.algorithm, record_id, len(path) - 1)
        return MazeRecord(
            id=record_id,
            algorithm=self.algorithm,
            grid_size=(self.rows, self.cols),
            start=grid.ij(start),
            goal=grid.ij(goal),
            path=path,
            dead_ends=len(grid.dead_ends()),
            image=self.relativize_path(puzzle_path),
            solution_image_path=self.relativize_path(solution_path),
            extra={
                "cell_size": self.render_config.cell_size,
                "border_width": self.render_config.border_width,
                "canvas_dimensions": list(puzzle_image.size),
            },
        )

    def save_images(
        self,
        record_id: str,
        puzzle_image: Image.Image,
        solution_image: Image.Image,
    ) -> Tuple[Path, Path]:
        puzzle_path = save_image(puzzle_image, self.puzzle_dir / f"{record_id}_puzzle.png")
        solution_path = save_image(solution_image, self.solution_dir / f"{record_id}_solution.png")
        return puzzle_path, solution_path

    def generate_dataset(
        self,
        count: int,
        *,
        metadata_path: Optional[PathLike] = None,
        append: bool = True,
    ) -> List[MazeRecord]:
        """Generate a batch of mazes and optionally persist their metadata."""
        records = [self.create_maze() for _ in range(count)]
        logger.debug("Generated %d mazes into %s", len(records), self.output_dir)
        if metadata_path is not None:
            self.write_metadata(records, metadata_path, append=append)
        return records

    def write_metadata(
        self,
        records: Iterable[MazeRecord],
        metadata_path: PathLike,
        *,
        append: bool = True,
    ) -> None:
        """Serialize maze records to JSON, appending if requested."""

        path = Path(metadata_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        existing: List[Dict[str, Any]] = []
        if append and path.exists():
            existing = json.loads(path.read_text(encoding="utf-8"))
        payload = [record.to_dict() for record in records]
        path.write_text(json.dumps(existing + payload, indent=2), encoding="utf-8")

    def relativize_path(self, path: Path) -> str:
        """Map an absolute path into the generator output directory when possible."""

        try:
            return path.relative_to(self.output_dir).as_posix()
        except ValueError:
            return path.as_posix()

    @staticmethod
    def describe(grid: Grid, path: List[int]) -> str:
        """Text rendering of a grid with step numbers along the given path."""
        steps = {cell: index for index, cell in enumerate(path)}
        config = TextRenderConfig(auto_width=True, margin=1)
        return f"Grid({grid.num_rows}x{grid.num_cols})\n{render_text(grid, config, steps)}"

    @classmethod
    def _parse_args(cls, argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description="Generate mazes and render them as images")
        parser.add_argument("count", type=int, help="Number of mazes to create")
        parser.add_argument("--output-dir", type=Path, default=None)
        parser.add_argument("--rows", type=int, default=cls.DEFAULT_ROWS)
        parser.add_argument("--cols", type=int, default=cls.DEFAULT_COLS)
        parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default=cls.DEFAULT_ALGORITHM)
        parser.add_argument("--cell-size", type=int, default=cls.DEFAULT_CELL_SIZE)
        parser.add_argument("--border-width", type=int, default=cls.DEFAULT_BORDER_WIDTH)
        parser.add_argument("--seed", type=int, default=None)
        parser.add_argument("--wall-color", type=Pixel.parse, default=BLACK, help="Wall color as #rrggbb or #rrggbb.aa")
        parser.add_argument("--path-color", type=Pixel.parse, default=None, help="Solution line color")
        parser.add_argument("--print", dest="print_text", action="store_true", help="Also print each maze as text")
        parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        args = parser.parse_args(argv)
        if args.count < 1:
            parser.error(f"count must be a positive integer, got {args.count}")
        return args

    @classmethod
    def main(cls, argv: Optional[List[str]] = None) -> None:
        args = cls._parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(asctime)s - %(levelname)s - %(message)s",
        )
        generator = cls(
            output_dir=args.output_dir,
            rows=args.rows,
            cols=args.cols,
            algorithm=args.algorithm,
            cell_size=args.cell_size,
            border_width=args.border_width,
            seed=args.seed,
            wall_color=args.wall_color,
            path_color=args.path_color,
        )

        logging.info(f"Generating {args.count} {args.algorithm} mazes ({args.rows}x{args.cols})...")
        records: List[MazeRecord] = []
        for _ in range(args.count):
            grid = generator.build_grid()
            if args.print_text:
                print(cls.describe(grid, grid.longest_path()))
            records.append(generator.create_maze(grid=grid))

        metadata_path = generator.output_dir / "data.json"
        generator.write_metadata(records, metadata_path)
        logging.info(f"Saved metadata for {len(records)} mazes to {metadata_path}")


def main(argv: Optional[List[str]] = None) -> None:
    MazeGenerator.main(argv)


__all__ = ["MazeGenerator", "MazeRecord", "main"]


if __name__ == "__main__":
    main()
