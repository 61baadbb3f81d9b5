# ui.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol, Sequence, Tuple

Rect = Tuple[int, int, int, int]  # x, y, width, height


class Clickable(Protocol):
    def hitbox_rect(self) -> Rect: ...

    def set_hovered(self, hovered: bool) -> None: ...


@dataclass
class UIButton:
    text: str
    hitbox: Rect
    hovered: bool = False

    def hitbox_rect(self) -> Rect:
        return self.hitbox

    def set_hovered(self, hovered: bool) -> None:
        self.hovered = hovered

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "hitbox": list(self.hitbox), "hovered": self.hovered}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UIButton":
        x, y, w, h = (int(v) for v in data["hitbox"])
        return cls(str(data["text"]), (x, y, w, h), bool(data.get("hovered", False)))


def point_in_rect(rect: Rect, mx: int, my: int) -> bool:
    # inclusive on all four edges, unlike pygame.Rect.collidepoint
    x, y, w, h = rect
    return x <= mx <= x + w and y <= my <= y + h


def apply_hover(control: Clickable, mx: int, my: int) -> bool:
    """Update ``control``'s hover flag from the pointer and return it."""
    hovered = point_in_rect(control.hitbox_rect(), mx, my)
    control.set_hovered(hovered)
    return hovered


def handle_ui(state, pointer, skins: Sequence[str]) -> None:
    """Run hover tests for both buttons and apply any click this frame."""
    if apply_hover(state.skin_change_button, pointer.x, pointer.y) and pointer.left_just_pressed:
        state.cat_id = (state.cat_id + 1) % len(skins)
    if apply_hover(state.mute_button, pointer.x, pointer.y) and pointer.left_just_pressed:
        state.mute_toggle = not state.mute_toggle
