# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, log_debug appends a timestamped
# trace to logs/debug.txt. Disabled by default for normal play sessions.
LOG_ENABLED = bool(int(os.getenv("PANCAKE_CAT_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Central audio toggle so the game can run silently without touching the mixer.
AUDIO_ENABLED = bool(int(os.getenv("PANCAKE_CAT_AUDIO_ENABLED", "1")))

# Save file used by the host between sessions
SAVE_FILE_PATH = os.getenv("PANCAKE_CAT_SAVE_FILE", "saves/state.json")

# Play area (logical pixels, scaled up by the host window)
WIDTH = 256
HEIGHT = 144
WINDOW_SCALE = 4

# Frames per second
FPS = 60

# Cat
CAT_START_X = 128.0
CAT_START_Y = 112.0
CAT_RADIUS = 8.0
CAT_SPEED = 2.0

# Pancakes
SPAWN_ODDS = 64            # one spawn per SPAWN_ODDS draws on average
PANCAKE_MIN_VEL = 1
PANCAKE_VEL_RANGE = 3      # vel in [1, 3]
PANCAKE_MIN_RADIUS = 5
PANCAKE_RADIUS_RANGE = 10  # radius in [5, 15)

# "MUNCH!" bubble
MUNCH_WINDOW = 60
MUNCH_MIN_FRAME = 64

# frame / score are unsigned 32-bit counters
U32_MASK = 0xFFFFFFFF

SKINS = (
    "munch_cat",
    "munch_cat_white",
    "munch_cat_black",
)

SKIN_COLORS = {
    "munch_cat": (240, 160, 60),
    "munch_cat_white": (245, 245, 245),
    "munch_cat_black": (40, 40, 40),
}

# (text, (x, y, w, h))
SKIN_BUTTON = ("new cat", (200, 10, 40, 10))
MUTE_BUTTON = ("sound", (220, 130, 30, 10))

# Audio clip names
MUNCH_SOUND = "munch"
BACKGROUND_SOUND = "background"

# Settings dictionary, read by the host each frame
settings_data = {
    "FPS": FPS,
    "WINDOW_SCALE": WINDOW_SCALE,
    "MUSIC_VOLUME": 0.4,
    "SFX_VOLUME": 0.7,
}
