"""Server-controlled enemy wandering, run once after each player turn."""

from __future__ import annotations

import random

from config import ENEMY_MOVE_CHANCE
from engine.dice import chance, coin_flip, random_sign
from engine.grid import offset
from models.entities import Enemy
from models.game_state import GameState


def _random_step(rng: random.Random) -> tuple[int, int]:
    """Pick one orthogonal step: axis first, then sign."""
    if coin_flip(rng):
        return (random_sign(rng), 0)
    return (0, random_sign(rng))


def try_step(enemy: Enemy, game_state: GameState, rng: random.Random) -> bool:
    """Attempt one random step for an enemy.

    The step lands only on plain floor (never wall or exit) and never on the
    player. Other enemies do not block. A rejected step is not retried.

    Returns:
        True if the enemy moved.
    """
    dx, dy = _random_step(rng)
    dest = offset(enemy.position, dx, dy)
    if not game_state.grid.is_floor(*dest):
        return False
    if dest == game_state.player.position:
        return False
    enemy.position = dest
    return True


def move_enemies(game_state: GameState, rng: random.Random | None = None) -> list[int]:
    """Run one AI tick over every enemy in list order.

    Each enemy independently decides whether to wander this tick.

    Args:
        game_state: Current game state (mutated in place).
        rng: Optional Random instance for seeded/testing ticks.

    Returns:
        Ids of enemies that moved.
    """
    rng = rng or random.Random()
    moved = []
    for enemy in game_state.enemies:
        if chance(ENEMY_MOVE_CHANCE, rng) and try_step(enemy, game_state, rng):
            moved.append(enemy.id)
    return moved
