"""Draw-ready views of the game state for canvas, terminal, and HUD clients."""

from __future__ import annotations

from config import TILE_SIZE
from models.game_state import GameState, Tile

TILE_COLORS: dict[str, str] = {
    "wall": "#444",
    "floor": "#111",
    "player": "#00ff00",
    "enemy": "#ff4444",
    "gold": "#ffcc00",
    "exit": "#4444ff",
    "void": "#000",
}

TILE_GLYPHS: dict[Tile, str] = {
    Tile.WALL: "#",
    Tile.FLOOR: ".",
    Tile.EXIT: ">",
}
ITEM_GLYPH = "$"
ENEMY_GLYPH = "e"
PLAYER_GLYPH = "@"


def render_ascii(game_state: GameState) -> list[str]:
    """Render the floor as text, one string per row.

    Layers are drawn tiles first, then items, enemies, and the player on top.
    """
    grid = game_state.grid
    canvas = [[TILE_GLYPHS[tile] for tile in row] for row in grid.tiles]

    for item in game_state.items:
        x, y = item.position
        canvas[y][x] = ITEM_GLYPH
    for enemy in game_state.enemies:
        x, y = enemy.position
        canvas[y][x] = ENEMY_GLYPH
    x, y = game_state.player.position
    canvas[y][x] = PLAYER_GLYPH

    return ["".join(row) for row in canvas]


def hud(game_state: GameState) -> dict:
    """Status line values: HP, floor, gold, and the latest message."""
    return {
        "hp": game_state.player.hp,
        "floor": game_state.floor,
        "gold": game_state.player.gold,
        "message": game_state.message,
    }


def render_view(game_state: GameState) -> dict:
    """Build the payload a canvas client needs to draw one frame."""
    grid = game_state.grid
    return {
        "tile_size": TILE_SIZE,
        "width": grid.cols * TILE_SIZE,
        "height": grid.rows * TILE_SIZE,
        "colors": TILE_COLORS,
        "tiles": [[tile.value for tile in row] for row in grid.tiles],
        "items": [
            {"position": item.position, "kind": item.kind.value}
            for item in game_state.items
        ],
        "enemies": [
            {"id": enemy.id, "position": enemy.position, "hp": enemy.hp}
            for enemy in game_state.enemies
        ],
        "player": {"position": game_state.player.position},
        "hud": hud(game_state),
    }
