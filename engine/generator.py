"""Procedural floor generation: a guaranteed walk plus a random overlay."""

from __future__ import annotations

import logging
import random

from config import FLOOR_DENSITY, PLAYER_START, WALK_AXIS_X_CHANCE
from engine.dice import chance
from models.game_state import Grid, Tile

logger = logging.getLogger(__name__)

MIN_SIZE = 4


def exit_position(rows: int, cols: int) -> tuple[int, int]:
    """The exit always sits one cell in from the bottom-right corner."""
    return (cols - 2, rows - 2)


def carve_path(
    grid: Grid,
    start: tuple[int, int],
    target: tuple[int, int],
    rng: random.Random,
) -> int:
    """Carve a biased random walk from start to target, marking it floor.

    Each step draws an axis; the walk moves one cell toward the target along
    that axis. A draw for an axis that is already aligned moves nothing and
    the loop simply draws again.

    Args:
        grid: Grid to carve into (mutated in place).
        start: (x, y) the walk begins on.
        target: (x, y) the walk ends on.
        rng: Random source.

    Returns:
        Number of draws taken, including no-op draws.
    """
    x, y = start
    tx, ty = target
    grid.set(x, y, Tile.FLOOR)

    draws = 0
    while (x, y) != (tx, ty):
        draws += 1
        if chance(WALK_AXIS_X_CHANCE, rng):
            if x < tx:
                x += 1
            elif x > tx:
                x -= 1
        else:
            if y < ty:
                y += 1
            elif y > ty:
                y -= 1
        grid.set(x, y, Tile.FLOOR)

    return draws


def overlay_floor(grid: Grid, density: float, rng: random.Random) -> None:
    """Open interior cells at random. Never closes an open cell.

    The outer border ring is left untouched so it stays wall.
    """
    for y in range(1, grid.rows - 1):
        for x in range(1, grid.cols - 1):
            if chance(density, rng):
                grid.set(x, y, Tile.FLOOR)


def generate(rows: int, cols: int, rng: random.Random | None = None) -> Grid:
    """Build a new floor with a guaranteed entrance-to-exit path.

    Args:
        rows: Grid height (at least 4).
        cols: Grid width (at least 4).
        rng: Optional Random instance for seeded/testing generation.

    Returns:
        A Grid with the entrance at (1, 1) open and the exit at
        (cols - 2, rows - 2).

    Raises:
        ValueError: If the grid is too small to hold an interior path.
    """
    if rows < MIN_SIZE or cols < MIN_SIZE:
        raise ValueError(f"Grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {cols}x{rows}")

    rng = rng or random.Random()
    grid = Grid.filled(rows, cols, Tile.WALL)
    exit_pos = exit_position(rows, cols)

    draws = carve_path(grid, PLAYER_START, exit_pos, rng)
    overlay_floor(grid, FLOOR_DENSITY, rng)

    grid.set(*PLAYER_START, Tile.FLOOR)
    grid.set(*exit_pos, Tile.EXIT)

    logger.debug(
        "Generated %dx%d floor: walk took %d draws, %d open cells",
        cols, rows, draws, len(grid.floor_cells()) + 1,
    )
    return grid
