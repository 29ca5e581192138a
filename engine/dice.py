"""Random draws shared by generation, spawning, and enemy AI.

Every helper takes the ``random.Random`` to draw from, so a session seeded
once replays the same dungeon and the same enemy wandering.
"""

import random


def chance(probability: float, rng: random.Random | None = None) -> bool:
    """Return True with the given probability.

    Args:
        probability: Value in [0, 1].
        rng: Optional Random instance for seeded/testing draws.

    Returns:
        Whether the draw landed under ``probability``.
    """
    rng = rng or random.Random()
    return rng.random() < probability


def coin_flip(rng: random.Random | None = None) -> bool:
    """Fair 50/50 draw."""
    return chance(0.5, rng)


def random_sign(rng: random.Random | None = None) -> int:
    """Return +1 or -1 with equal probability."""
    return 1 if coin_flip(rng) else -1


def random_cell(rows: int, cols: int, rng: random.Random | None = None) -> tuple[int, int]:
    """Pick a uniformly random (x, y) anywhere on a rows x cols grid.

    Args:
        rows: Grid height.
        cols: Grid width.
        rng: Optional Random instance for seeded/testing draws.

    Returns:
        An (x, y) position, border cells included.
    """
    rng = rng or random.Random()
    x = rng.randrange(cols)
    y = rng.randrange(rows)
    return (x, y)
