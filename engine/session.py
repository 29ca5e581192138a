"""The single owner of a running game and its random source."""

from __future__ import annotations

import logging
import random

from config import COLS, ROWS
from engine.controls import direction_for_button, direction_for_key
from engine.turn import attempt_move, new_game
from models.actions import Direction, TurnResult
from models.game_state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one GameState and routes every input through the turn resolver.

    Nothing else mutates the state; each call resolves one full turn before
    returning, so inputs are processed strictly one at a time.
    """

    def __init__(self, state: GameState, rng: random.Random) -> None:
        self.state = state
        self.rng = rng

    @classmethod
    def new(
        cls,
        seed: int | None = None,
        rows: int = ROWS,
        cols: int = COLS,
        rng: random.Random | None = None,
    ) -> GameSession:
        """Start a session on floor 1.

        Args:
            seed: Seed for a fresh Random when no rng is given.
            rows: Grid height.
            cols: Grid width.
            rng: Random source to use as-is (takes precedence over seed).
        """
        rng = rng or random.Random(seed)
        state = new_game(rows, cols, rng)
        logger.info("New session: %dx%d grid, seed=%s", cols, rows, seed)
        return cls(state, rng)

    def attempt_move(self, dx: int, dy: int) -> TurnResult:
        _, result = attempt_move(self.state, dx, dy, self.rng)
        return result

    def move(self, direction: Direction) -> TurnResult:
        return self.attempt_move(*direction.delta)

    def press(self, key: str) -> TurnResult | None:
        """Resolve a key press. Unbound keys do nothing and return None."""
        direction = direction_for_key(key)
        if direction is None:
            return None
        return self.move(direction)

    def press_button(self, button_id: str) -> TurnResult | None:
        """Resolve an on-screen button. Unknown ids do nothing and return None."""
        direction = direction_for_button(button_id)
        if direction is None:
            return None
        return self.move(direction)
