"""Per-frame simulation step for the pancake catching game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from collision import overlaps
from config import (
    BACKGROUND_SOUND, CAT_SPEED, HEIGHT, LOG_ENABLED, MUNCH_MIN_FRAME,
    MUNCH_SOUND, MUNCH_WINDOW, SKINS, U32_MASK,
)
from logging_utils import log_debug
from spawner import maybe_spawn_pancake
from state import GameState, Pancake
from ui import handle_ui


@dataclass(frozen=True)
class Controls:
    left_pressed: bool = False
    right_pressed: bool = False


@dataclass(frozen=True)
class Pointer:
    x: int = 0
    y: int = 0
    left_just_pressed: bool = False


def actor_center(state: GameState) -> Tuple[float, float]:
    return (state.cat_x + state.cat_r, state.cat_y + state.cat_r)


def pancake_center(p: Pancake) -> Tuple[float, float]:
    return (p.x + p.radius, p.y + p.radius)


def off_screen(p: Pancake) -> bool:
    # measured from the top edge
    return p.y >= HEIGHT + p.radius * 2


def update_pancakes(
    state: GameState,
) -> Tuple[List[Pancake], List[Pancake], List[Pancake]]:
    """Move every pancake one frame and split them into kept, caught, escaped.

    Only advances positions; scoring is left to the caller.
    """
    center = actor_center(state)
    kept: List[Pancake] = []
    caught: List[Pancake] = []
    escaped: List[Pancake] = []
    for p in state.pancakes:
        p.y += p.vel
        if overlaps(center, state.cat_r, pancake_center(p), p.radius):
            caught.append(p)
        elif off_screen(p):
            escaped.append(p)
        else:
            kept.append(p)
    return kept, caught, escaped


def munch_visible(frame: int, last_munch_at: int) -> bool:
    """Whether the "MUNCH!" bubble shows on ``frame``."""
    return frame >= MUNCH_MIN_FRAME and max(0, frame - last_munch_at) <= MUNCH_WINDOW


def sync_background_audio(muted: bool, audio) -> None:
    """Start or pause the music loop to match ``muted``.

    Playback state is queried first so repeated calls never stack commands.
    """
    playing = audio.is_playing(BACKGROUND_SOUND)
    if not muted and not playing:
        audio.play(BACKGROUND_SOUND)
    elif muted and playing:
        audio.pause(BACKGROUND_SOUND)


def step(
    state: GameState,
    controls: Controls,
    pointer: Pointer,
    random_uint: Callable[[], int],
    audio,
    skins: Sequence[str] = SKINS,
) -> GameState:
    """Advance ``state`` by one frame in place and return it."""
    if controls.left_pressed:
        state.cat_x -= CAT_SPEED
    if controls.right_pressed:
        state.cat_x += CAT_SPEED

    maybe_spawn_pancake(state.pancakes, random_uint)

    kept, caught, escaped = update_pancakes(state)
    state.pancakes = kept
    for _ in caught:
        state.score = (state.score + 1) & U32_MASK
        state.last_munch_at = state.frame
        if not state.mute_toggle:
            audio.play(MUNCH_SOUND)
    if LOG_ENABLED and (caught or escaped):
        log_debug(
            f"step frame={state.frame} caught={len(caught)} escaped={len(escaped)} "
            f"score={state.score}"
        )

    # frame wraps like an unsigned 32-bit counter; munch_visible saturates
    state.frame = (state.frame + 1) & U32_MASK

    handle_ui(state, pointer, skins)
    sync_background_audio(state.mute_toggle, audio)
    return state
