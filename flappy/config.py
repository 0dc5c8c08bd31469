"""
Tuning constants for the game.

Everything the simulation, renderer and persistence layer need to agree on
lives here so that a single edit changes the feel of the whole game.
"""

import os

# -----------------------------
# WORLD
# -----------------------------
WORLD_WIDTH, WORLD_HEIGHT = 480, 640  # window size
GROUND_Y = WORLD_HEIGHT - 32  # ground line; touching it ends the run

# -----------------------------
# FRAME DRIVER
# -----------------------------
FPS = 60
MAX_FRAME_DELTA = 0.06  # seconds; a stalled window never produces a bigger step

# -----------------------------
# PHYSICS
# -----------------------------
GRAVITY = 1400.0  # pixels per second^2
FLAP_IMPULSE = -420.0  # pixels per second (negative is up)
DIVE_IMPULSE = 520.0
DIVE_DAMPING = 0.6  # only this share of the dive impulse is applied
MAX_VELOCITY = 720.0  # symmetric clamp for rising and falling
CEILING_MARGIN = 16.0  # bird is held below this line without damage

# -----------------------------
# PLAYER
# -----------------------------
BIRD_X = 120
BIRD_WIDTH = 52
BIRD_HEIGHT = 36
BIRD_START_Y = WORLD_HEIGHT / 2

# -----------------------------
# OBSTACLES
# -----------------------------
WORLD_SPEED = 260.0  # pixels per second, constant for the whole run
SPAWN_INTERVAL = 1.8  # seconds between pipes
FIRST_SPAWN_PRELOAD = 0.6  # share of the interval already elapsed at start
PIPE_WIDTH = 64
PIPE_GAP = 120
GAP_MIN_Y = 80
GAP_MAX_Y = GROUND_Y - 80
PIPE_SPAWN_X = WORLD_WIDTH + PIPE_WIDTH
PIPE_RETIRE_X = -20  # pipe is dropped once its right edge is at or left of this

# -----------------------------
# ANIMATION
# -----------------------------
WING_FRAMES = 2
WING_PERIOD_RUNNING = 0.12
WING_PERIOD_IDLE = 0.24

# -----------------------------
# PERSISTENCE
# -----------------------------
HIGH_SCORE_KEY = "flappy-bird-high-score"
LEGACY_HIGH_SCORE_KEY = "flappy-dino-high-score"
HIGH_SCORE_FILE = os.environ.get("FLAPPY_HIGHSCORE_FILE", "flappy_highscore.json")
SCORE_DIGITS = 5

# -----------------------------
# LOGGING
# -----------------------------
LOG_LEVEL = os.environ.get("FLAPPY_LOG_LEVEL", "INFO")

# -----------------------------
# VISUALS
# -----------------------------
BACKGROUND = (26, 26, 26)
GROUND_LINE = (51, 51, 51)
GROUND_SHADOW = (41, 41, 41)
STAR_COLOR = (234, 234, 234)
STAR_COUNT = 18
PIPE_COLOR = (242, 242, 242)
PIPE_CAP_COLOR = (31, 31, 31)
PIPE_CAP_HEIGHT = 6
TEXT_COLOR = (240, 240, 240)
MUTED_TEXT = (157, 157, 157)
FAINT_TEXT = (102, 102, 102)
BIRD_COLORS = {
    "outline": (44, 36, 26),
    "body": (249, 214, 76),
    "belly": (251, 238, 162),
    "wing": (244, 182, 65),
    "eye": (27, 27, 27),
    "beak": (247, 157, 42),
    "highlight": (255, 255, 255),
}
WING_ANGLES = (-0.8, 0.45)  # radians, one per wing frame

# Share card
SHARE_CARD_SIZE = (360, 280)
SHARE_CARD_PREFIX = "flappy-bird"
