"""Game state, grid, and tile models for Gloomdeep."""

from enum import Enum

from pydantic import BaseModel

from models.entities import Enemy, Item, Player


class Tile(str, Enum):
    """Possible states for a grid cell."""
    WALL = "wall"                   # Impassable
    FLOOR = "floor"                 # Walkable by the player and enemies
    EXIT = "exit"                   # Walkable by the player; leads down a floor


class Grid(BaseModel):
    """A fixed-size rectangular tile grid indexed as tiles[y][x]."""
    rows: int
    cols: int
    tiles: list[list[Tile]]

    @classmethod
    def filled(cls, rows: int, cols: int, tile: Tile = Tile.WALL) -> "Grid":
        """Create a grid with every cell set to the same tile."""
        return cls(rows=rows, cols=cols, tiles=[[tile] * cols for _ in range(rows)])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y). Anything off the grid reads as wall."""
        if not self.in_bounds(x, y):
            return Tile.WALL
        return self.tiles[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        if self.in_bounds(x, y):
            self.tiles[y][x] = tile

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) == Tile.WALL

    def is_floor(self, x: int, y: int) -> bool:
        """True only for plain floor; the exit tile does not count."""
        return self.get(x, y) == Tile.FLOOR

    def is_exit(self, x: int, y: int) -> bool:
        return self.get(x, y) == Tile.EXIT

    def floor_cells(self) -> list[tuple[int, int]]:
        """All plain floor positions as (x, y), scanned row by row."""
        return [
            (x, y)
            for y in range(self.rows)
            for x in range(self.cols)
            if self.tiles[y][x] == Tile.FLOOR
        ]


class GameState(BaseModel):
    """The full state of a running session."""
    grid: Grid
    player: Player
    enemies: list[Enemy] = []       # Insertion order is AI iteration order
    items: list[Item] = []
    floor: int = 1                  # Dungeon depth, starts at 1
    turn: int = 0                   # Resolved (non-blocked) turns so far
    message: str = ""               # Most recent log line only

    def enemy_at(self, position: tuple[int, int]) -> Enemy | None:
        for enemy in self.enemies:
            if enemy.position == position:
                return enemy
        return None

    def item_at(self, position: tuple[int, int]) -> Item | None:
        for item in self.items:
            if item.position == position:
                return item
        return None
