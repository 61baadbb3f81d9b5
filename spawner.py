# spawner.py

from config import (
    LOG_ENABLED, PANCAKE_MIN_RADIUS, PANCAKE_MIN_VEL,
    PANCAKE_RADIUS_RANGE, PANCAKE_VEL_RANGE, SPAWN_ODDS, WIDTH,
)
from logging_utils import log_debug
from state import Pancake


def make_pancake(random_uint):
    """Build a pancake at the top edge from three fresh random draws."""
    return Pancake(
        x=float(random_uint() % WIDTH),
        y=0.0,
        vel=float(random_uint() % PANCAKE_VEL_RANGE + PANCAKE_MIN_VEL),
        radius=float(random_uint() % PANCAKE_RADIUS_RANGE + PANCAKE_MIN_RADIUS),
    )


def maybe_spawn_pancake(pancakes, random_uint):
    """Append a new pancake with 1/SPAWN_ODDS chance; return it or None.

    There is no cap on live pancakes, they only go away by being caught or
    falling off screen.
    """
    if random_uint() % SPAWN_ODDS != 0:
        return None
    pancake = make_pancake(random_uint)
    pancakes.append(pancake)
    if LOG_ENABLED:
        log_debug(f"spawn {pancake} live={len(pancakes)}")
    return pancake
