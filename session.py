# session.py
from __future__ import annotations

import random
from typing import Callable, Optional, Sequence

from config import SKINS
from simulation import Controls, Pointer, step
from state import GameState, StateStore


def seeded_random_uint(seed: Optional[int] = None) -> Callable[[], int]:
    """Unsigned 32-bit draws from a private ``random.Random``."""
    rng = random.Random(seed)
    return lambda: rng.getrandbits(32)


class GameSession:
    """Owns one save slot and runs a load -> step -> save cycle per frame."""

    def __init__(self, store: StateStore, audio, random_uint=None, skins: Sequence[str] = SKINS):
        self.store = store
        self.audio = audio
        self.random_uint = random_uint or seeded_random_uint()
        self.skins = tuple(skins)
        self.store.skin_count = len(self.skins)

    def tick(self, controls: Controls, pointer: Pointer) -> GameState:
        state = self.store.load()
        step(state, controls, pointer, self.random_uint, self.audio, self.skins)
        self.store.save(state)
        return state
