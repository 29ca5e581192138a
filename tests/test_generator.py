"""Tests for procedural floor generation."""

import random

import pytest

from engine import generator
from engine.generator import carve_path, exit_position, generate, overlay_floor
from models.game_state import Grid, Tile
from tests.helpers.dungeon import SequenceRandom, reachable

SIZES = [(4, 4), (4, 9), (9, 4), (15, 20), (30, 40)]


class TestGenerateInvariants:
    """Properties every generated floor must have."""

    @pytest.mark.parametrize("rows,cols", SIZES)
    def test_entrance_and_exit(self, rows, cols):
        """Entrance is floor and exit is exit on every seed."""
        for seed in range(25):
            grid = generate(rows, cols, random.Random(seed))
            assert grid.get(1, 1) == Tile.FLOOR
            assert grid.get(cols - 2, rows - 2) == Tile.EXIT

    @pytest.mark.parametrize("rows,cols", SIZES)
    def test_border_is_wall(self, rows, cols):
        """The outer ring is always wall."""
        for seed in range(25):
            grid = generate(rows, cols, random.Random(seed))
            for x in range(cols):
                assert grid.get(x, 0) == Tile.WALL
                assert grid.get(x, rows - 1) == Tile.WALL
            for y in range(rows):
                assert grid.get(0, y) == Tile.WALL
                assert grid.get(cols - 1, y) == Tile.WALL

    @pytest.mark.parametrize("rows,cols", SIZES)
    def test_exit_reachable(self, rows, cols):
        """A cardinal path always joins entrance and exit."""
        for seed in range(25):
            grid = generate(rows, cols, random.Random(seed))
            assert reachable(grid, (1, 1), exit_position(rows, cols))

    def test_exactly_one_exit(self):
        """Only the bottom-right interior corner is an exit."""
        grid = generate(15, 20, random.Random(3))
        exits = [
            (x, y) for y in range(15) for x in range(20) if grid.get(x, y) == Tile.EXIT
        ]
        assert exits == [(18, 13)]

    def test_dimensions(self):
        """The grid has the requested rows and cols."""
        grid = generate(15, 20, random.Random(0))
        assert grid.rows == 15
        assert grid.cols == 20
        assert len(grid.tiles) == 15
        assert all(len(row) == 20 for row in grid.tiles)

    def test_seed_reproducible(self):
        """Same seed, same floor."""
        a = generate(15, 20, random.Random(99))
        b = generate(15, 20, random.Random(99))
        assert a == b

    def test_too_small_rejected(self):
        """Grids under 4x4 raise ValueError."""
        with pytest.raises(ValueError, match="at least"):
            generate(3, 10, random.Random(0))
        with pytest.raises(ValueError, match="at least"):
            generate(10, 3, random.Random(0))


class TestCarvePath:
    """Tests for the guaranteed walk."""

    def test_aligned_axis_draw_is_noop(self):
        """Drawing an axis that is already aligned wastes the draw."""
        grid = Grid.filled(4, 5)
        # Y (to row 2), Y again (aligned: no move), X, X
        rng = SequenceRandom([0.9, 0.9, 0.1, 0.1])
        draws = carve_path(grid, (1, 1), (3, 2), rng)
        assert draws == 4
        assert rng.calls == 4
        assert grid.floor_cells() == [(1, 1), (1, 2), (2, 2), (3, 2)]

    def test_start_equals_target(self):
        """A zero-length walk opens only the start."""
        grid = Grid.filled(4, 4)
        assert carve_path(grid, (1, 1), (1, 1), random.Random(0)) == 0
        assert grid.floor_cells() == [(1, 1)]

    def test_walk_is_monotonic(self):
        """Every carved cell lies inside the start/target bounding box."""
        grid = Grid.filled(15, 20)
        carve_path(grid, (1, 1), (18, 13), random.Random(5))
        cells = grid.floor_cells()
        assert all(1 <= x <= 18 and 1 <= y <= 13 for x, y in cells)
        # A monotone lattice path visits exactly dx + dy + 1 cells
        assert len(cells) == 17 + 12 + 1


class TestOverlay:
    """Tests for the random floor overlay."""

    def test_zero_density_adds_nothing(self):
        """Density 0 opens no cells."""
        grid = Grid.filled(6, 6)
        overlay_floor(grid, 0.0, random.Random(0))
        assert grid.floor_cells() == []

    def test_full_density_opens_interior_only(self):
        """Density 1 opens the interior and leaves the border."""
        grid = Grid.filled(6, 7)
        overlay_floor(grid, 1.0, random.Random(0))
        assert len(grid.floor_cells()) == 4 * 5
        assert grid.get(0, 0) == Tile.WALL

    def test_never_closes_floor(self):
        """The overlay only ever adds floor."""
        grid = Grid.filled(6, 6, Tile.FLOOR)
        overlay_floor(grid, 0.0, random.Random(0))
        assert len(grid.floor_cells()) == 36

    def test_zero_density_floor_is_just_the_walk(self, monkeypatch):
        """With the overlay off, only the walk is open."""
        monkeypatch.setattr(generator, "FLOOR_DENSITY", 0.0)
        grid = generate(10, 12, random.Random(4))
        # Walk cells plus the exit, which is no longer counted as floor
        assert len(grid.floor_cells()) + 1 == 9 + 7 + 1
