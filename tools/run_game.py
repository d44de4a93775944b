# tools/run_game.py
# Pygame front end for GameSession: keyboard input, tile drawing, status bar,
# game-over overlay, and the short pause before the next level replaces the old one.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

# Project imports
try:
    from trapmaze.config import DEFAULT_CONFIG
    from trapmaze.engine.state import GameSession
    from trapmaze.render.tileset import PLAYER_TILE, Tileset
    from trapmaze.rng import make_rng
    from trapmaze.ui.keymap import action_for_key
    from trapmaze.ui.status_bar import StatusBarState, render_overlay, render_status_bar
except ImportError as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

# pygame key codes → DOM-style key names used by the keymap
SPECIAL_KEYS = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_RETURN: "Enter",
    pygame.K_KP_ENTER: "Enter",
    pygame.K_ESCAPE: "Escape",
}


def key_name(event) -> Optional[str]:
    if event.key in SPECIAL_KEYS:
        return SPECIAL_KEYS[event.key]
    return event.unicode or None


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="trapmaze (pygame)")
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.width)
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.height)
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible levels")
    parser.add_argument("--tile", type=int, default=24, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = DEFAULT_CONFIG.with_size(args.width, args.height)
    session = GameSession(config, rng=make_rng(args.seed))
    session.start_level()

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    w_px, h_px = config.width * args.tile, config.height * args.tile
    screen = pygame.display.set_mode((w_px, h_px + args.tile))
    pygame.display.set_caption("trapmaze")
    clock = pygame.time.Clock()
    tileset = Tileset(args.tile)

    advance_at: Optional[int] = None
    running = True

    def draw() -> None:
        screen.fill((0, 0, 0))
        for (x, y), t in session.grid.cells():
            screen.blit(tileset.get(t), (x * args.tile, y * args.tile))
        px, py = session.player.pos
        screen.blit(tileset.get(PLAYER_TILE), (px * args.tile, py * args.tile))
        state = StatusBarState.from_session(session)
        render_status_bar(screen, (0, h_px), w_px, args.tile, state)
        if state.overlay:
            render_overlay(screen, state.overlay)
        pygame.display.flip()

    # ---------- Main loop ----------
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q and event.mod & pygame.KMOD_CTRL:
                    running = False
                    continue
                name = key_name(event)
                action = action_for_key(name) if name else None
                if action is not None:
                    session.apply_action(action)

        # Level complete: keep the finished level on screen briefly, then swap.
        if session.pending_advance:
            now = pygame.time.get_ticks()
            if advance_at is None:
                advance_at = now + config.level_advance_delay_ms
            elif now >= advance_at:
                advance_at = None
                session.next_level()

        draw()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
