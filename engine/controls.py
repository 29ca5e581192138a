"""Key and on-screen button bindings to movement directions."""

from __future__ import annotations

from models.actions import Direction

KEY_BINDINGS: dict[str, Direction] = {
    "w": Direction.UP,
    "arrowup": Direction.UP,
    "s": Direction.DOWN,
    "arrowdown": Direction.DOWN,
    "a": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "d": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
}

BUTTON_BINDINGS: dict[str, Direction] = {
    "btn-up": Direction.UP,
    "btn-down": Direction.DOWN,
    "btn-left": Direction.LEFT,
    "btn-right": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Map a key name (as reported by a browser or terminal) to a direction.

    Matching is case-insensitive. Unbound keys return None.
    """
    return KEY_BINDINGS.get(key.strip().lower())


def direction_for_button(button_id: str) -> Direction | None:
    return BUTTON_BINDINGS.get(button_id)
