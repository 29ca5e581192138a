"""Grid geometry helpers: cardinal steps and passability."""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.actions import DIRECTION_DELTAS

if TYPE_CHECKING:
    from models.game_state import Grid

CARDINAL_DELTAS: tuple[tuple[int, int], ...] = tuple(DIRECTION_DELTAS.values())


def is_cardinal(dx: int, dy: int) -> bool:
    """Check that (dx, dy) is exactly one orthogonal step."""
    return (dx, dy) in CARDINAL_DELTAS


def offset(pos: tuple[int, int], dx: int, dy: int) -> tuple[int, int]:
    """Return pos shifted by (dx, dy)."""
    return (pos[0] + dx, pos[1] + dy)


def is_passable(grid: Grid, pos: tuple[int, int]) -> bool:
    """The player may stand on anything but wall (floor or exit)."""
    x, y = pos
    return grid.in_bounds(x, y) and not grid.is_wall(x, y)
