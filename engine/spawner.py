"""Enemy and item placement for a freshly generated floor."""

from __future__ import annotations

import logging
import random

from config import (
    ENEMY_BASE_COUNT,
    ENEMY_BASE_HP,
    ENEMY_HP_PER_FLOOR,
    GOLD_VALUE,
    ITEM_COUNT,
)
from engine.dice import random_cell
from models.entities import Enemy, Item, ItemKind
from models.game_state import Grid

logger = logging.getLogger(__name__)


def enemy_count(floor_number: int) -> int:
    """Enemies on a floor grow by one per level, without a cap."""
    return ENEMY_BASE_COUNT + floor_number


def enemy_hp(floor_number: int) -> int:
    return ENEMY_BASE_HP + ENEMY_HP_PER_FLOOR * floor_number


def _sample_floor_cell(
    grid: Grid,
    rng: random.Random,
    exclude: tuple[int, int] | None = None,
) -> tuple[int, int]:
    """Rejection-sample a plain floor cell, optionally skipping one position."""
    while True:
        x, y = random_cell(grid.rows, grid.cols, rng)
        if grid.is_floor(x, y) and (x, y) != exclude:
            return (x, y)


def spawn(
    grid: Grid,
    floor_number: int,
    player_pos: tuple[int, int],
    rng: random.Random | None = None,
) -> tuple[list[Enemy], list[Item]]:
    """Populate a floor with enemies and gold.

    Enemies never start on the player's cell. Items only need a floor cell,
    so they may share a cell with an enemy, another item, or the player.

    Args:
        grid: The generated floor.
        floor_number: Current depth, drives enemy count and HP.
        player_pos: Where the player stands when the floor starts.
        rng: Optional Random instance for seeded/testing placement.

    Returns:
        (enemies, items) in spawn order.

    Raises:
        ValueError: If the grid has no floor cell an entity could use.
    """
    rng = rng or random.Random()

    open_cells = grid.floor_cells()
    if not open_cells or open_cells == [player_pos]:
        raise ValueError("Grid has no floor cells available for spawning")

    hp = enemy_hp(floor_number)
    enemies = [
        Enemy(id=i, position=_sample_floor_cell(grid, rng, exclude=player_pos), hp=hp)
        for i in range(enemy_count(floor_number))
    ]

    items = [
        Item(id=i, position=_sample_floor_cell(grid, rng), kind=ItemKind.GOLD, value=GOLD_VALUE)
        for i in range(ITEM_COUNT)
    ]

    logger.debug(
        "Spawned floor %d: %d enemies at %d HP, %d items",
        floor_number, len(enemies), hp, len(items),
    )
    return enemies, items
