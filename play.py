"""Play Gloomdeep in a terminal without running the server.

Type a key and press Enter each turn: w/a/s/d to move, q to quit.

Usage:
    python play.py
    python play.py --seed 7 --rows 15 --cols 20

Environment variables:
    GLOOMDEEP_SEED      : Default seed when --seed is not given
    GLOOMDEEP_LOG_LEVEL : Log level (default: INFO)
"""

import argparse
import sys

from config import COLS, LOG_LEVEL, ROWS, SEED
from engine.render import hud, render_ascii
from engine.session import GameSession
from models.game_state import GameState
from utils.logging import setup_logging

QUIT_KEYS = {"q", "quit", "exit"}


def draw(state: GameState) -> None:
    """Print the map followed by the status line."""
    for row in render_ascii(state):
        print(row)
    status = hud(state)
    print(f"HP: {status['hp']}  Floor: {status['floor']}  Gold: {status['gold']}")
    if status["message"]:
        print(status["message"])


def run(session: GameSession) -> None:
    """Read one key per line from stdin until EOF or a quit key."""
    draw(session.state)
    for line in sys.stdin:
        key = line.strip()
        if key.lower() in QUIT_KEYS:
            break
        if session.press(key) is None:
            print(f"Unknown key: {key!r} (use w/a/s/d, q to quit)")
            continue
        draw(session.state)


def main() -> None:
    """Parse arguments and start a local session."""
    parser = argparse.ArgumentParser(description="Play Gloomdeep in the terminal")
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed for a reproducible run")
    parser.add_argument("--rows", type=int, default=ROWS, help="Grid height in tiles")
    parser.add_argument("--cols", type=int, default=COLS, help="Grid width in tiles")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")

    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        session = GameSession.new(seed=args.seed, rows=args.rows, cols=args.cols)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    run(session)


if __name__ == "__main__":
    main()
