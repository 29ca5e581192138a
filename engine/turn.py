"""Turn resolution: collision, combat, pickup, floor transition, enemy tick."""

from __future__ import annotations

import logging
import random

from config import (
    ATTACK_DAMAGE,
    COLS,
    KILL_REWARD,
    PLAYER_START,
    PLAYER_START_HP,
    ROWS,
)
from engine.ai import move_enemies
from engine.generator import generate
from engine.grid import is_cardinal, is_passable, offset
from engine.spawner import spawn
from models.actions import GameEvent, GameEventType, TurnOutcome, TurnResult
from models.entities import Enemy, Player
from models.game_state import GameState

logger = logging.getLogger(__name__)


def new_game(
    rows: int = ROWS,
    cols: int = COLS,
    rng: random.Random | None = None,
) -> GameState:
    """Create floor 1 with the player on the entrance.

    Args:
        rows: Grid height.
        cols: Grid width.
        rng: Optional Random instance for seeded/testing sessions.

    Returns:
        A fresh GameState ready for the first move.
    """
    rng = rng or random.Random()
    grid = generate(rows, cols, rng)
    player = Player(position=PLAYER_START, hp=PLAYER_START_HP, max_hp=PLAYER_START_HP)
    enemies, items = spawn(grid, 1, player.position, rng)
    return GameState(grid=grid, player=player, enemies=enemies, items=items, floor=1)


def descend(game_state: GameState, rng: random.Random | None = None) -> GameEvent:
    """Move the player down one floor.

    Regenerates the grid at the same size, puts the player back on the
    entrance and replaces every enemy and item. Gold and HP carry over.

    Args:
        game_state: Current game state (mutated in place).
        rng: Optional Random instance.

    Returns:
        The descend notification.
    """
    rng = rng or random.Random()
    game_state.floor += 1
    grid = game_state.grid
    game_state.grid = generate(grid.rows, grid.cols, rng)
    game_state.player.position = PLAYER_START
    game_state.enemies, game_state.items = spawn(
        game_state.grid, game_state.floor, game_state.player.position, rng
    )

    logger.info("Player descended to floor %d", game_state.floor)
    return GameEvent(
        type=GameEventType.DESCEND,
        message=f"Descending to floor {game_state.floor}...",
        details={"floor": game_state.floor},
    )


def remove_enemy(game_state: GameState, enemy_id: int) -> Enemy | None:
    """Remove an enemy by id, keeping the rest in spawn order."""
    for i, enemy in enumerate(game_state.enemies):
        if enemy.id == enemy_id:
            return game_state.enemies.pop(i)
    return None


def remove_item(game_state: GameState, item_id: int) -> None:
    for i, item in enumerate(game_state.items):
        if item.id == item_id:
            game_state.items.pop(i)
            return


def attack_enemy(game_state: GameState, enemy: Enemy) -> GameEvent:
    """Strike an enemy for fixed damage. Enemies never strike back.

    Args:
        game_state: Current game state (mutated in place).
        enemy: The enemy standing on the target cell.

    Returns:
        A defeat event if the enemy dropped to 0 HP or below, else a hit event.
    """
    enemy.hp -= ATTACK_DAMAGE

    if enemy.hp <= 0:
        remove_enemy(game_state, enemy.id)
        game_state.player.gold += KILL_REWARD
        return GameEvent(
            type=GameEventType.DEFEAT,
            message=f"Enemy defeated! +{KILL_REWARD} Gold",
            details={"enemy_id": enemy.id, "damage": ATTACK_DAMAGE, "gold": KILL_REWARD},
        )

    return GameEvent(
        type=GameEventType.HIT,
        message=f"Hit enemy! Enemy HP: {enemy.hp}",
        details={"enemy_id": enemy.id, "damage": ATTACK_DAMAGE, "hp_remaining": enemy.hp},
    )


def pick_up(game_state: GameState) -> GameEvent | None:
    """Collect the first item under the player, if any."""
    item = game_state.item_at(game_state.player.position)
    if item is None:
        return None

    game_state.player.gold += item.value
    remove_item(game_state, item.id)
    return GameEvent(
        type=GameEventType.PICKUP,
        message=f"Found {item.value} gold!",
        details={"item_id": item.id, "gold": item.value},
    )


def attempt_move(
    game_state: GameState,
    dx: int,
    dy: int,
    rng: random.Random | None = None,
) -> tuple[GameState, TurnResult]:
    """Resolve one player input as a single atomic turn.

    Walls block silently and consume nothing. Stepping into an enemy attacks
    it in place. Otherwise the player moves, picks up whatever lies there,
    and either descends (exit tile) or lets the enemies take their tick.

    Args:
        game_state: Current game state (mutated in place).
        dx: Horizontal step, -1, 0 or 1.
        dy: Vertical step, -1, 0 or 1.
        rng: Optional Random instance for seeded/testing turns.

    Returns:
        (updated_game_state, turn_result) tuple.

    Raises:
        ValueError: If (dx, dy) is not a single cardinal step.
    """
    if not is_cardinal(dx, dy):
        raise ValueError(f"Move ({dx}, {dy}) is not a cardinal step")

    rng = rng or random.Random()
    player = game_state.player
    target = offset(player.position, dx, dy)

    if not is_passable(game_state.grid, target):
        return game_state, _result(game_state, TurnOutcome.BLOCKED, [], [])

    events: list[GameEvent] = []
    enemy = game_state.enemy_at(target)
    if enemy is not None:
        events.append(attack_enemy(game_state, enemy))
        outcome = TurnOutcome.ATTACKED
    else:
        player.position = target
        outcome = TurnOutcome.MOVED

        pickup = pick_up(game_state)
        if pickup is not None:
            events.append(pickup)

        if game_state.grid.is_exit(*target):
            events.append(descend(game_state, rng))
            outcome = TurnOutcome.DESCENDED

    moved: list[int] = []
    if outcome != TurnOutcome.DESCENDED:
        moved = move_enemies(game_state, rng)

    game_state.turn += 1
    if events:
        game_state.message = events[-1].message

    logger.debug(
        "Turn %d: %s to %s, %d event(s), %d enemy step(s)",
        game_state.turn, outcome.value, player.position, len(events), len(moved),
    )
    return game_state, _result(game_state, outcome, events, moved)


def _result(
    game_state: GameState,
    outcome: TurnOutcome,
    events: list[GameEvent],
    moved: list[int],
) -> TurnResult:
    return TurnResult(
        outcome=outcome,
        events=events,
        message=game_state.message,
        floor=game_state.floor,
        turn=game_state.turn,
        player=game_state.player.model_copy(),
        enemies_moved=moved,
    )
