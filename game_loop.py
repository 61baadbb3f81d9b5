# game_loop.py
"""pygame host: window, input sampling, audio and the save file."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

import pygame

from config import AUDIO_ENABLED, HEIGHT, SAVE_FILE_PATH, SKINS, WIDTH, settings_data
from logging_utils import log_debug
from renderer import Renderer
from session import GameSession, seeded_random_uint
from simulation import Controls, Pointer
from sound_manager import SoundManager
from state import JsonStateStore


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pancake Cat")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pancake spawning")
    parser.add_argument("--save-file", default=SAVE_FILE_PATH, help="Where the game state is kept")
    parser.add_argument("--reset", action="store_true", help="Ignore the save file and start over")
    parser.add_argument("--scale", type=int, default=settings_data["WINDOW_SCALE"], help="Window scale factor")
    parser.add_argument("--disable-audio", action="store_true", help="Run without pygame audio output")
    return parser.parse_args(argv)


def adjust_mouse_to_viewport(pos, window_size, scale=1) -> Tuple[int, int]:
    """Map a window mouse position to play-area coordinates.

    The play area is centred in the window (letterboxed) and scaled by
    ``scale``; positions outside it are clamped to its edges.
    """
    win_w, win_h = window_size
    x_off = (win_w - WIDTH * scale) // 2
    y_off = (win_h - HEIGHT * scale) // 2
    x = (pos[0] - x_off) // scale
    y = (pos[1] - y_off) // scale
    return (max(0, min(x, WIDTH)), max(0, min(y, HEIGHT)))


def read_controls(keys) -> Controls:
    return Controls(
        left_pressed=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
        right_pressed=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
    )


def process_events(window_size, scale):
    """Drain the event queue; returns (running, pointer)."""
    running = True
    clicked = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True
    mx, my = adjust_mouse_to_viewport(pygame.mouse.get_pos(), window_size, scale)
    return running, Pointer(mx, my, clicked)


def render_game(renderer, state, screen, game_surface, scale):
    renderer.draw(game_surface, state, SKINS)
    screen.fill((0, 0, 0))
    scaled = pygame.transform.scale(game_surface, (WIDTH * scale, HEIGHT * scale))
    w, h = screen.get_size()
    screen.blit(scaled, ((w - WIDTH * scale) // 2, (h - HEIGHT * scale) // 2))
    pygame.display.flip()


def run_game(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    pygame.init()
    pygame.display.set_caption("Pancake Cat")
    scale = max(1, args.scale)
    screen = pygame.display.set_mode((WIDTH * scale, HEIGHT * scale), pygame.RESIZABLE)
    game_surface = pygame.Surface((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    store = JsonStateStore(args.save_file, len(SKINS))
    if not args.reset:
        store.restore()
    sound = SoundManager(enable_audio=AUDIO_ENABLED and not args.disable_audio)
    session = GameSession(store, sound, seeded_random_uint(args.seed), SKINS)
    renderer = Renderer()
    log_debug(f"run_game start save={args.save_file} seed={args.seed}")

    running = True
    try:
        while running:
            # Re-read FPS each frame
            clock.tick(settings_data["FPS"])
            running, pointer = process_events(screen.get_size(), scale)
            controls = read_controls(pygame.key.get_pressed())
            state = session.tick(controls, pointer)
            render_game(renderer, state, screen, game_surface, scale)
    finally:
        try:
            store.flush()
        except OSError as exc:
            log_debug(f"run_game could not write save: {exc}")
        sound.stop_all()
        pygame.quit()


if __name__ == "__main__":
    run_game()
