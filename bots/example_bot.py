"""Reference bot that plays Gloomdeep via the REST API.

Fetches a frame each turn and picks a direction with simple rules:
  - If an enemy is next to the player, attack it.
  - Otherwise step toward the exit if that cell is open.
  - Otherwise take any open step at random.

Usage:
    1. Start the server:  uvicorn main:app --reload
    2. Run this bot:      python bots/example_bot.py

Environment variables:
    GLOOMDEEP_URL : Server URL (default: http://127.0.0.1:8000)
"""

import os
import random
import time

import httpx

BASE_URL = os.environ.get("GLOOMDEEP_URL", "http://127.0.0.1:8000")

DELTAS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


def _open(view: dict, x: int, y: int) -> bool:
    """A cell the player may enter (floor or exit)."""
    tiles = view["tiles"]
    if y < 0 or y >= len(tiles) or x < 0 or x >= len(tiles[0]):
        return False
    return tiles[y][x] != "wall"


def _find_exit(view: dict) -> tuple[int, int] | None:
    for y, row in enumerate(view["tiles"]):
        for x, tile in enumerate(row):
            if tile == "exit":
                return (x, y)
    return None


def choose_direction(view: dict, rng: random.Random | None = None) -> str | None:
    """Pick the next move from a frame returned by GET /game/view.

    Returns:
        A direction name, or None if the player is boxed in.
    """
    rng = rng or random.Random()
    px, py = view["player"]["position"]

    enemy_cells = {tuple(e["position"]) for e in view["enemies"]}
    for name, (dx, dy) in DELTAS.items():
        if (px + dx, py + dy) in enemy_cells:
            return name

    exit_pos = _find_exit(view)
    if exit_pos is not None:
        ex, ey = exit_pos
        preferred = []
        if ex > px:
            preferred.append("right")
        elif ex < px:
            preferred.append("left")
        if ey > py:
            preferred.append("down")
        elif ey < py:
            preferred.append("up")
        for name in preferred:
            dx, dy = DELTAS[name]
            if _open(view, px + dx, py + dy):
                return name

    options = [
        name for name, (dx, dy) in DELTAS.items()
        if _open(view, px + dx, py + dy)
    ]
    if not options:
        return None
    return rng.choice(options)


def main() -> None:
    """Play until the target floor is reached or the turn budget runs out."""
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)
    target_floor = 3
    max_turns = 500

    for _ in range(max_turns):
        resp = client.get("/game/view")
        resp.raise_for_status()
        view = resp.json()

        status = view["hud"]
        if status["floor"] >= target_floor:
            print(f"\n*** Reached floor {status['floor']} with {status['gold']} gold ***")
            break

        direction = choose_direction(view)
        if direction is None:
            print("Boxed in, giving up")
            break

        resp = client.post("/game/move", json={"direction": direction})
        resp.raise_for_status()
        result = resp.json()
        print(
            f"Turn {result['turn']} | floor {result['floor']} | "
            f"{direction:<5} -> {result['outcome']}"
            + (f" | {result['message']}" if result["events"] else "")
        )

        time.sleep(0.05)  # Small delay for readability

    client.close()


if __name__ == "__main__":
    main()
