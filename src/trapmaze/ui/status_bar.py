from dataclasses import dataclass
from typing import Optional

from .hud import level_label, overlay_message


@dataclass
class StatusBarState:
    level: int = 1
    message: str = ""
    overlay: Optional[str] = None

    @classmethod
    def from_session(cls, session) -> "StatusBarState":
        return cls(level=session.level_number, message=session.status, overlay=overlay_message(session))


def render_status_bar(screen, origin_xy: tuple[int, int], width: int, tile: int, state: StatusBarState) -> None:
    """
    Draw a 1-tile-high bar: level counter on the left, status message after it.
    Does not touch the grid.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, tile))
    font = pygame.font.SysFont(None, max(10, tile * 3 // 4))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (tile - img.get_height()) // 2))
        return x + img.get_width() + tile

    x = tile // 2
    x = label(x, level_label(state.level), (255, 220, 0))
    if state.message:
        label(x, state.message)


def render_overlay(screen, text: str) -> None:
    """Dark red full-screen overlay with a centered message and restart hint."""
    import pygame
    w, h = screen.get_size()
    veil = pygame.Surface((w, h), pygame.SRCALPHA)
    veil.fill((80, 0, 0, 204))
    screen.blit(veil, (0, 0))
    font = pygame.font.SysFont(None, max(18, h // 12))
    small = pygame.font.SysFont(None, max(14, h // 20))
    msg = font.render(text, True, (255, 255, 255))
    hint = small.render("Press Enter to restart", True, (220, 220, 220))
    screen.blit(msg, msg.get_rect(center=(w // 2, h // 2 - msg.get_height())))
    screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + hint.get_height())))
