"""Tests for the game session, input bindings, and render views."""

import random

from engine.controls import direction_for_button, direction_for_key
from engine.render import hud, render_ascii, render_view
from engine.session import GameSession
from models.actions import Direction, TurnOutcome
from tests.helpers.dungeon import FixedRandom, make_game_state


class TestControls:
    """Tests for key and button bindings."""

    def test_wasd(self):
        """WASD map to the four directions."""
        assert direction_for_key("w") == Direction.UP
        assert direction_for_key("a") == Direction.LEFT
        assert direction_for_key("s") == Direction.DOWN
        assert direction_for_key("d") == Direction.RIGHT

    def test_arrow_keys_case_insensitive(self):
        """Key names match regardless of case."""
        assert direction_for_key("ArrowUp") == Direction.UP
        assert direction_for_key("ARROWDOWN") == Direction.DOWN
        assert direction_for_key("W") == Direction.UP

    def test_unbound_key(self):
        """Unbound keys map to nothing."""
        assert direction_for_key("x") is None
        assert direction_for_key("") is None

    def test_buttons(self):
        """On-screen button ids map like keys."""
        assert direction_for_button("btn-left") == Direction.LEFT
        assert direction_for_button("btn-jump") is None

    def test_direction_deltas(self):
        """Each direction carries its grid step."""
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)
        assert Direction.RIGHT.delta == (1, 0)


class TestGameSession:
    """Tests for GameSession."""

    def test_new_session(self):
        """A new session starts on floor 1 at the entrance."""
        session = GameSession.new(seed=3, rows=15, cols=20)
        assert session.state.floor == 1
        assert session.state.player.position == (1, 1)
        assert len(session.state.enemies) == 4

    def test_same_seed_same_game(self):
        """Same seed and same keys replay the same game."""
        a = GameSession.new(seed=21)
        b = GameSession.new(seed=21)
        assert a.state == b.state
        for key in "ddssddwwaass":
            a.press(key)
            b.press(key)
        assert a.state == b.state

    def test_rng_takes_precedence(self):
        """An explicit rng overrides the seed."""
        a = GameSession.new(seed=1, rng=random.Random(50))
        b = GameSession.new(seed=2, rng=random.Random(50))
        assert a.state == b.state

    def test_move_and_press(self):
        """move() and press() both resolve a turn."""
        session = GameSession(make_game_state(), FixedRandom(0.99))
        result = session.move(Direction.RIGHT)
        assert result.outcome == TurnOutcome.MOVED
        result = session.press("ArrowLeft")
        assert result.outcome == TurnOutcome.MOVED
        assert session.state.player.position == (1, 1)

    def test_press_unbound_key(self):
        """An unbound key returns None and changes nothing."""
        session = GameSession(make_game_state(), FixedRandom(0.99))
        before = session.state.model_dump()
        assert session.press("space") is None
        assert session.state.model_dump() == before

    def test_press_into_wall(self):
        """A key into a wall resolves as blocked."""
        session = GameSession(make_game_state(), FixedRandom(0.99))
        result = session.press("w")
        assert result.outcome == TurnOutcome.BLOCKED

    def test_press_button(self):
        """A known button id resolves a turn."""
        session = GameSession(make_game_state(), FixedRandom(0.99))
        result = session.press_button("btn-down")
        assert result.outcome == TurnOutcome.MOVED
        assert session.state.player.position == (1, 2)

    def test_press_unknown_button(self):
        """An unknown button id returns None and changes nothing."""
        session = GameSession(make_game_state(), FixedRandom(0.99))
        before = session.state.model_dump()
        assert session.press_button("btn-jump") is None
        assert session.state.model_dump() == before


class TestRender:
    """Tests for text and canvas views."""

    def test_ascii_layers(self):
        """Player draws over enemies, enemies over items, items over tiles."""
        gs = make_game_state(enemies=[(3, 1), (2, 2)], items=[(2, 2), (1, 1), (3, 3)])
        rows = render_ascii(gs)
        assert rows == [
            "######",
            "#@.e.#",
            "#.e..#",
            "#..$>#",
            "######",
        ]

    def test_hud(self):
        """The HUD reports HP, floor, gold and the last message."""
        gs = make_game_state()
        gs.player.gold = 40
        gs.floor = 3
        gs.message = "Found 10 gold!"
        assert hud(gs) == {"hp": 100, "floor": 3, "gold": 40, "message": "Found 10 gold!"}

    def test_view_payload(self):
        """The canvas payload carries size, colours, tiles and entities."""
        gs = make_game_state(enemies=[(3, 1)], items=[(2, 2)])
        view = render_view(gs)
        assert view["width"] == 6 * 32
        assert view["height"] == 5 * 32
        assert view["tiles"][0][0] == "wall"
        assert view["tiles"][3][4] == "exit"
        assert view["colors"]["enemy"] == "#ff4444"
        assert view["enemies"] == [{"id": 0, "position": (3, 1), "hp": 20}]
        assert view["items"] == [{"position": (2, 2), "kind": "gold"}]
        assert view["player"] == {"position": (1, 1)}
