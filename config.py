"""Server-wide configuration constants for Gloomdeep."""

import os

ROWS = int(os.environ.get("GLOOMDEEP_ROWS", "15"))   # Grid height in tiles
COLS = int(os.environ.get("GLOOMDEEP_COLS", "20"))   # Grid width in tiles
TILE_SIZE = 32               # Pixels per tile for canvas clients

PLAYER_START = (1, 1)        # Entrance; the generator always leaves it open
PLAYER_START_HP = 100

# Generation
WALK_AXIS_X_CHANCE = 0.5     # Chance a carving step tries the X axis
FLOOR_DENSITY = 0.6          # Chance an interior cell is opened by the overlay

# Spawning
ENEMY_BASE_COUNT = 3         # Enemies per floor = base + floor number
ENEMY_BASE_HP = 20
ENEMY_HP_PER_FLOOR = 5
ITEM_COUNT = 5
GOLD_VALUE = 10

# Turn resolution
ATTACK_DAMAGE = 10
KILL_REWARD = 20             # Gold for defeating an enemy
ENEMY_MOVE_CHANCE = 0.3

_seed = os.environ.get("GLOOMDEEP_SEED")
SEED = int(_seed) if _seed else None   # Fixed seed for reproducible sessions
LOG_LEVEL = os.environ.get("GLOOMDEEP_LOG_LEVEL", "INFO")
