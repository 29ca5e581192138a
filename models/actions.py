"""Move request and turn result models for Gloomdeep."""

from enum import Enum

from pydantic import BaseModel

from models.entities import Player


class Direction(str, Enum):
    """The four logical directions an input can produce."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """The (dx, dy) grid step for this direction."""
        return DIRECTION_DELTAS[self]


DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class TurnOutcome(str, Enum):
    """How a move request was resolved."""
    BLOCKED = "blocked"             # Bumped a wall; nothing happened
    ATTACKED = "attacked"           # Struck an enemy in place
    MOVED = "moved"                 # Stepped onto the target cell
    DESCENDED = "descended"         # Reached the exit and a new floor was built


class GameEventType(str, Enum):
    """Notifications emitted while resolving a turn."""
    PICKUP = "pickup"
    HIT = "hit"
    DEFEAT = "defeat"
    DESCEND = "descend"


class GameEvent(BaseModel):
    """A single notification from a turn."""
    type: GameEventType
    message: str                    # Human-readable status line
    details: dict = {}              # Damage, gold, floor, etc.


class MoveRequest(BaseModel):
    """A request to move the player one step."""
    direction: Direction


class KeyRequest(BaseModel):
    """A raw key press forwarded by a client."""
    key: str


class ButtonRequest(BaseModel):
    """An on-screen direction button pressed by a pointer or touch client."""
    button: str                     # e.g. "btn-up"


class TurnResult(BaseModel):
    """The server's response after resolving one move request."""
    outcome: TurnOutcome
    events: list[GameEvent] = []
    message: str = ""               # Status line after this turn
    floor: int
    turn: int
    player: Player
    enemies_moved: list[int] = []   # Ids of enemies that stepped this turn
