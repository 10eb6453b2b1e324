# Starline settings
# ===============================================================#
# Controls:
# Move: A/D | Fire: SPACE | Pause: ESC/P | Restart: R

import os
from pathlib import Path

#  EASY SETTINGS (Edit here)
FEATURES = {
    "DEBUG_RECTS": True,         # white outline around every sprite
    "LEGACY_KEY_GUARD": True,    # ignore every key outside "playing"
    "FREEZE_WHEN_PAUSED": False, # stop entity movement when not playing
    "CLAMP_HEALTH": True,        # keep health inside [0, MAX_HEALTH]
}

WIDTH, HEIGHT = 960, 720
FPS = 60
CANVAS_MARGIN = (1, 4)

MAX_HEALTH = 100
FIRE_COST = 5
PLAYER_LINE = 0.5
PLAYER_DRAG = 0.99
MOVE_SPEED = 1

LASER_SPEED = 10
LASER_RADIUS = 3
LASER_HALF_LENGTH = 10
LASER_CULL_Y = -10

STAR_COUNT = 100
STAR_SPEED = 1
STAR_MAX_RADIUS = 5
STAR_MARGIN = 5

ENEMY_PARK = (-100, -100)

BG_COLOR = (0, 0, 0x25)
WHITE = (255, 255, 255)
LASER_COLOR = (255, 0, 0)
HEALTH_COLORS = {
    "good": (0, 128, 0),
    "warn": (255, 255, 0),
    "low": (255, 0, 0),
    "dead": (0, 0, 0),
}

SPRITES = {
    "spaceship": ("spaceship.bmp", 0.3),
    "enemy1": ("enemy1.bmp", 0.1),
    "enemy2": ("enemy2.bmp", 0.3),
}
COLORKEY = (0, 0, 0)
LOAD_BUDGET = 1

ASSET_DIR = Path(os.environ.get("STARLINE_ASSETS", Path(__file__).resolve().parent.parent / "assets"))
LOG_LEVEL = os.environ.get("STARLINE_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("STARLINE_LOG_FILE") or None
