import json

import pytest
from PIL import Image

from mazegrid import MazeGenerator
from mazegrid.generator import main


def test_create_maze_outputs(tmp_path):
    output_root = tmp_path / "maze_out"
    generator = MazeGenerator(output_root, rows=5, cols=6, algorithm="sidewinder", seed=3)
    record = generator.create_maze(maze_id="unit-test")

    assert record.id == "unit-test"
    assert record.algorithm == "sidewinder"
    assert record.grid_size == (5, 6)
    assert record.path_length == len(record.path) - 1 > 0
    assert record.dead_ends >= 2
    assert 0 <= record.start[0] < 5 and 0 <= record.start[1] < 6
    assert 0 <= record.goal[0] < 5 and 0 <= record.goal[1] < 6

    puzzle_path = output_root / record.image
    solution_path = output_root / record.solution_image_path
    assert record.image == "puzzles/unit-test_puzzle.png"
    assert puzzle_path.exists()
    assert solution_path.exists()
    with Image.open(puzzle_path) as image:
        assert image.size == (6 * 20 + 2, 5 * 20 + 2)
    assert record.to_dict()["canvas_dimensions"] == [122, 102]


def test_given_grid_is_rendered_as_is(tmp_path):
    generator = MazeGenerator(tmp_path, rows=3, cols=3, seed=1)
    grid = generator.build_grid()
    expected = grid.longest_path()

    record = generator.create_maze(maze_id="given", grid=grid)

    assert record.path == expected
    assert record.start == grid.ij(expected[0])
    assert record.goal == grid.ij(expected[-1])


def test_seed_reproduces_dataset(tmp_path):
    first = MazeGenerator(tmp_path / "a", rows=6, cols=6, seed=99).generate_dataset(3)
    second = MazeGenerator(tmp_path / "b", rows=6, cols=6, seed=99).generate_dataset(3)

    assert [r.id for r in first] == [r.id for r in second]
    assert [r.path for r in first] == [r.path for r in second]
    assert len({r.id for r in first}) == 3


def test_generate_dataset_appends_metadata(tmp_path):
    generator = MazeGenerator(tmp_path, rows=4, cols=4, algorithm="hunt-and-kill", seed=5)
    metadata_path = tmp_path / "data.json"

    generator.generate_dataset(2, metadata_path=metadata_path)
    generator.generate_dataset(1, metadata_path=metadata_path)
    payload = json.loads(metadata_path.read_text(encoding="utf-8"))

    assert len(payload) == 3
    assert all(entry["algorithm"] == "hunt-and-kill" for entry in payload)
    assert all(entry["path_length"] == len(entry["path"]) - 1 for entry in payload)

    generator.generate_dataset(1, metadata_path=metadata_path, append=False)
    assert len(json.loads(metadata_path.read_text(encoding="utf-8"))) == 1


@pytest.mark.parametrize("rows, cols", [(1, 5), (5, 1), (0, 0)])
def test_grid_must_be_at_least_two_by_two(tmp_path, rows, cols):
    with pytest.raises(ValueError, match="expected a grid of size at least 2x2"):
        MazeGenerator(tmp_path, rows=rows, cols=cols)


def test_unknown_algorithm_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="unknown maze algorithm"):
        MazeGenerator(tmp_path, algorithm="kruskal")


def test_command_line_entry_point(tmp_path, capsys):
    output_root = tmp_path / "cli"
    main([
        "2",
        "--output-dir", str(output_root),
        "--rows", "4",
        "--cols", "5",
        "--algorithm", "binary-tree",
        "--seed", "1",
        "--wall-color", "#203040",
        "--print",
    ])

    payload = json.loads((output_root / "data.json").read_text(encoding="utf-8"))
    assert len(payload) == 2
    for entry in payload:
        assert entry["grid_size"] == [4, 5]
        assert (output_root / entry["image"]).exists()
        assert (output_root / entry["solution_image_path"]).exists()

    assert capsys.readouterr().out.count("Grid(4x5)") == 2


@pytest.mark.parametrize("count", ["0", "-3"])
def test_command_line_rejects_non_positive_count(tmp_path, capsys, count):
    output_root = tmp_path / "cli"

    with pytest.raises(SystemExit) as excinfo:
        main([count, "--output-dir", str(output_root)])

    assert excinfo.value.code == 2
    assert "count must be a positive integer" in capsys.readouterr().err
    assert not (output_root / "data.json").exists()
