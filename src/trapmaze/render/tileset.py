# src/trapmaze/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import FLOOR, GOAL, HAZARD, PLAYER_GLYPH, WALL, glyph_for

ASSET_DIR = os.path.join("assets", "images")
PLAYER_TILE = -1  # sprite key for the player; not a grid tile

def _path_candidates(tile_id: int) -> Tuple[str, ...]:
    name = "player" if tile_id == PLAYER_TILE else str(tile_id)
    return (
        os.path.join(ASSET_DIR, f"{name}.png"),
        os.path.join(ASSET_DIR, f"tile_{name}.png"),
    )

def fallback_color(tile_id: int) -> Tuple[int, int, int, int]:
    if tile_id == PLAYER_TILE: return ( 80, 200, 120, 255)
    if tile_id == WALL:        return ( 80,  80,  80, 255)
    if tile_id == GOAL:        return (255, 220,   0, 255)
    if tile_id == HAZARD:      return (200,  40,  40, 255)
    if tile_id == FLOOR:       return ( 30,  30,  30, 255)
    return (220, 220, 220, 255)

def _glyph(tile_id: int) -> str:
    return PLAYER_GLYPH if tile_id == PLAYER_TILE else glyph_for(tile_id)

class Tileset:
    """
    Tiny cached loader:
      - Accepts 2.png, tile_2.png, player.png
      - Looks in assets/images/
      - Falls back to a colored square with the tile's glyph
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size))

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        for p in _path_candidates(tile_id):
            if os.path.exists(p):
                img = pygame.image.load(p).convert_alpha()
                if img.get_size() != (self.tile_size, self.tile_size):
                    img = pygame.transform.scale(img, (self.tile_size, self.tile_size))
                return img
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fallback_color(tile_id))
        txt = self.font.render(_glyph(tile_id), True, (0, 0, 0) if tile_id == GOAL else (230, 230, 230))
        r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
        img.blit(txt, r)
        return img
