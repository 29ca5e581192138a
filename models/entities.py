"""Player, enemy, and item models for Gloomdeep."""

from enum import Enum

from pydantic import BaseModel


class ItemKind(str, Enum):
    """Kinds of pickups that can lie on the floor."""
    GOLD = "gold"


class Player(BaseModel):
    """The single player-controlled character."""
    position: tuple[int, int]           # Grid position (x, y)
    hp: int = 100                       # Displayed only; nothing deals damage yet
    max_hp: int = 100
    gold: int = 0


class Enemy(BaseModel):
    """A wandering enemy on the current floor."""
    id: int                             # Spawn order within the floor
    position: tuple[int, int]
    hp: int


class Item(BaseModel):
    """A pickup waiting on a floor cell."""
    id: int
    position: tuple[int, int]
    kind: ItemKind = ItemKind.GOLD
    value: int
