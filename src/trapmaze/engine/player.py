# src/trapmaze/engine/player.py
# Player position plus the step/jump validity rules. No tile effects here;
# landing consequences live in collisions.py.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..grid import Grid
from ..tiles import is_passable

XY = Tuple[int, int]

DIRS = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
    "up_left": (-1, -1),
    "up_right": (1, -1),
    "down_left": (-1, 1),
    "down_right": (1, 1),
}

BLOCK_OUT_OF_BOUNDS = "out_of_bounds"
BLOCK_WALL = "wall"


@dataclass
class Player:
    spawn_xy: XY
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        self.x, self.y = self.spawn_xy

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

    def place(self, xy: XY) -> None:
        self.x, self.y = xy


def check_step(grid: Grid, x: int, y: int) -> Optional[str]:
    """Return why (x, y) cannot be entered, or None if it can."""
    if not grid.in_bounds(x, y):
        return BLOCK_OUT_OF_BOUNDS
    if not is_passable(grid.get(x, y)):
        return BLOCK_WALL
    return None


def plan_jump(grid: Grid, x: int, y: int, dx: int, dy: int, steps: int) -> Tuple[Optional[str], XY]:
    """
    Walk ``steps`` cells from (x, y) by (dx, dy), checking every cell on the way.
    Returns (block_reason, landing). On a block the landing is the origin:
    a jump either completes or does not move at all.
    """
    cx, cy = x, y
    for _ in range(steps):
        nx, ny = cx + dx, cy + dy
        block = check_step(grid, nx, ny)
        if block is not None:
            return block, (x, y)
        cx, cy = nx, ny
    return None, (cx, cy)
