# renderer.py
#
# Draw parameters are computed by the pure helpers below so they can be
# checked without a display; Renderer only forwards them to pygame.draw.
# Circles are (x, y, diameter, color) with (x, y) the top-left of the box.

import pygame

from config import HEIGHT, SKIN_COLORS, WIDTH
from simulation import munch_visible

SKY = (0, 255, 255)
NAVY = (0, 51, 102)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SHADOW = (0, 0, 0, 170)
PANCAKE_RIM = (244, 210, 156)
PANCAKE_BODY = (219, 164, 99)

TILE = 32
TILE_COLS = 9
TILE_ROWS = 5


def background_tiles(frame):
    """Top-left positions of the scrolling "yum" tiles for ``frame``."""
    f = frame // 2
    tiles = []
    for col in range(TILE_COLS):
        for row in range(TILE_ROWS):
            x = ((col * TILE + f) % (WIDTH + TILE)) - TILE
            y = ((row * TILE + f) % (HEIGHT + 16)) - 24
            tiles.append((x + 7, y + 7))
    return tiles


def button_colors(hovered):
    """(fill, text) colours for a button."""
    return (NAVY, WHITE) if hovered else (WHITE, NAVY)


def pancake_circles(p):
    return [
        (p.x, p.y + 1.0, p.radius + 2.0, SHADOW),
        (p.x, p.y, p.radius + 1.0, PANCAKE_RIM),
        (p.x, p.y, p.radius, PANCAKE_BODY),
    ]


def munch_bubble(cat_x, cat_y):
    """Rects, circles and label position of the speech bubble."""
    rects = [
        (cat_x + 32.0, cat_y, 30, 10, WHITE),
        (cat_x + 28.0, cat_y + 5.0, 10, 5, WHITE),
    ]
    circles = [
        (cat_x + 28.0, cat_y, 10, WHITE),
        (cat_x + 56.0, cat_y, 10, WHITE),
    ]
    return rects, circles, (cat_x + 33.0, cat_y + 3.0)


def cat_sprite_position(state):
    return (state.cat_x - state.cat_r, state.cat_y - 16.0)


def score_label(score):
    return f"Score: {score}"


def _circle(surf, circle):
    x, y, d, color = circle
    r = d / 2
    if len(color) == 4:
        size = int(d) + 2
        temp = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(temp, color, (size / 2, size / 2), r)
        surf.blit(temp, (x + r - size / 2, y + r - size / 2))
    else:
        pygame.draw.circle(surf, color, (x + r, y + r), r)


class Renderer:
    def __init__(self):
        self.small_font = pygame.font.SysFont("Arial", 8)
        self.font = pygame.font.SysFont("Arial", 10)
        self.large_font = pygame.font.SysFont("Arial", 14, bold=True)

    def draw(self, surf, state, skins):
        surf.fill(SKY)
        self._draw_background(surf, state.frame)
        self._draw_button(surf, state.skin_change_button)
        self._draw_cat(surf, state, skins[state.cat_id])
        self._draw_button(surf, state.mute_button)
        for p in state.pancakes:
            for circle in pancake_circles(p):
                _circle(surf, circle)
        if munch_visible(state.frame, state.last_munch_at):
            self._draw_munch(surf, state.cat_x, state.cat_y)
        label = self.large_font.render(score_label(state.score), True, WHITE)
        surf.blit(label, (10, 10))

    def _draw_background(self, surf, frame):
        for x, y in background_tiles(frame):
            _circle(surf, (x, y, 14, PANCAKE_RIM))
            _circle(surf, (x + 1, y + 1, 12, PANCAKE_BODY))

    def _draw_button(self, surf, button):
        fill, text_color = button_colors(button.hovered)
        x, y, w, h = button.hitbox
        pygame.draw.rect(surf, fill, (x, y, w, h))
        txt = self.font.render(button.text, True, text_color)
        surf.blit(txt, (x + 3, y))

    def _draw_cat(self, surf, state, skin):
        color = SKIN_COLORS.get(skin, SKIN_COLORS["munch_cat"])
        sx, sy = cat_sprite_position(state)
        cx, cy = sx + 16, sy + 16
        pygame.draw.polygon(surf, color, [(cx - 10, cy - 6), (cx - 6, cy - 16), (cx - 2, cy - 8)])
        pygame.draw.polygon(surf, color, [(cx + 2, cy - 8), (cx + 6, cy - 16), (cx + 10, cy - 6)])
        pygame.draw.circle(surf, color, (cx, cy), 11)
        pygame.draw.circle(surf, BLACK, (cx - 4, cy - 2), 1.5)
        pygame.draw.circle(surf, BLACK, (cx + 4, cy - 2), 1.5)

    def _draw_munch(self, surf, cat_x, cat_y):
        rects, circles, text_pos = munch_bubble(cat_x, cat_y)
        for x, y, w, h, color in rects:
            pygame.draw.rect(surf, color, (x, y, w, h))
        for circle in circles:
            _circle(surf, circle)
        surf.blit(self.small_font.render("MUNCH!", True, BLACK), text_pos)
