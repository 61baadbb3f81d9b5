"""Persisted game state and the load/save boundary used by the host."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import (
    CAT_RADIUS, CAT_START_X, CAT_START_Y,
    LOG_ENABLED, MUTE_BUTTON, SKIN_BUTTON, SKINS, U32_MASK,
)
from logging_utils import log_debug
from ui import UIButton


@dataclass
class Pancake:
    """A falling pancake; ``x``/``y`` is the top-left of its bounding box."""

    x: float
    y: float
    vel: float
    radius: float


@dataclass
class GameState:
    frame: int = 0
    last_munch_at: int = 0
    cat_id: int = 0
    cat_x: float = CAT_START_X
    cat_y: float = CAT_START_Y
    cat_r: float = CAT_RADIUS
    pancakes: List[Pancake] = field(default_factory=list)
    score: int = 0
    skin_change_button: UIButton = field(default_factory=lambda: UIButton(*SKIN_BUTTON))
    mute_button: UIButton = field(default_factory=lambda: UIButton(*MUTE_BUTTON))
    mute_toggle: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "last_munch_at": self.last_munch_at,
            "cat_id": self.cat_id,
            "cat_x": self.cat_x,
            "cat_y": self.cat_y,
            "cat_r": self.cat_r,
            "pancakes": [
                {"x": p.x, "y": p.y, "vel": p.vel, "radius": p.radius}
                for p in self.pancakes
            ],
            "score": self.score,
            "skin_change_button": self.skin_change_button.to_dict(),
            "mute_button": self.mute_button.to_dict(),
            "mute_toggle": self.mute_toggle,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], skin_count: int = len(SKINS)) -> "GameState":
        """Rebuild a state from :meth:`to_dict` output.

        Missing keys fall back to the defaults of a new game and ``cat_id`` is
        clamped into the skin list, since a save may come from a build with a
        different number of skins.
        """
        fresh = cls()
        cat_id = int(data.get("cat_id", fresh.cat_id))
        if not 0 <= cat_id < skin_count:
            if LOG_ENABLED:
                log_debug(f"GameState.from_dict cat_id {cat_id} out of range, reset to 0")
            cat_id = 0
        skin_button = data.get("skin_change_button")
        mute_button = data.get("mute_button")
        return cls(
            frame=int(data.get("frame", fresh.frame)) & U32_MASK,
            last_munch_at=int(data.get("last_munch_at", fresh.last_munch_at)) & U32_MASK,
            cat_id=cat_id,
            cat_x=float(data.get("cat_x", fresh.cat_x)),
            cat_y=float(data.get("cat_y", fresh.cat_y)),
            cat_r=float(data.get("cat_r", fresh.cat_r)),
            pancakes=[
                Pancake(float(p["x"]), float(p["y"]), float(p["vel"]), float(p["radius"]))
                for p in data.get("pancakes", [])
            ],
            score=int(data.get("score", fresh.score)) & U32_MASK,
            skin_change_button=UIButton.from_dict(skin_button) if skin_button else fresh.skin_change_button,
            mute_button=UIButton.from_dict(mute_button) if mute_button else fresh.mute_button,
            mute_toggle=bool(data.get("mute_toggle", fresh.mute_toggle)),
        )


class StateStore:
    """In-memory save slot.

    ``load`` always hands out a fresh copy and ``save`` snapshots its argument,
    so nothing outside the current tick aliases the stored state.
    """

    def __init__(self, initial: Optional[GameState] = None, skin_count: int = len(SKINS)) -> None:
        self.skin_count = skin_count
        self._snapshot = (initial or GameState()).to_dict()

    def load(self) -> GameState:
        return GameState.from_dict(self._snapshot, self.skin_count)

    def save(self, state: GameState) -> None:
        self._snapshot = state.to_dict()

    def reset(self) -> None:
        self._snapshot = GameState().to_dict()


class JsonStateStore(StateStore):
    """State store that can be restored from and flushed to a JSON file."""

    def __init__(self, path, skin_count: int = len(SKINS)) -> None:
        super().__init__(skin_count=skin_count)
        self.path = Path(path)

    def restore(self) -> bool:
        """Load the save file into the slot; keeps a new game if it is unusable."""
        if not self.path.exists():
            log_debug(f"JsonStateStore.restore no save at {self.path}")
            return False
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            self._snapshot = GameState.from_dict(data, self.skin_count).to_dict()
        except (OSError, ValueError, TypeError, KeyError) as exc:
            log_debug(f"JsonStateStore.restore failed for {self.path}: {exc}")
            self.reset()
            return False
        log_debug(f"JsonStateStore.restore loaded {self.path}")
        return True

    def flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(self._snapshot, handle, indent=2)
        log_debug(f"JsonStateStore.flush wrote {self.path}")
