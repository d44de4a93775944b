# src/trapmaze/mapgen/carve.py
# Randomized depth-first maze carve on the odd-coordinate lattice.
# Cells sit two apart; the cell between two lattice cells is the connector.

from dataclasses import dataclass
from typing import List, Tuple

from ..grid import Grid
from ..tiles import FLOOR, WALL

XY = Tuple[int, int]

# Two-step moves: up, down, left, right. Shuffled per stack visit.
CARVE_DIRS = ((0, -2), (0, 2), (-2, 0), (2, 0))


@dataclass
class CarvedMaze:
    grid: Grid
    floor_tiles: List[XY]
    start: XY


def in_carve_bounds(grid: Grid, x: int, y: int) -> bool:
    # Strict interior: the outer rim always stays wall.
    return 0 < x < grid.width - 1 and 0 < y < grid.height - 1


def pick_start(width: int, height: int, rng) -> XY:
    x = rng.below((width - 1) // 2) * 2 + 1
    y = rng.below((height - 1) // 2) * 2 + 1
    return (x, y)


def carve_maze(width: int, height: int, rng) -> CarvedMaze:
    """
    Carve a spanning tree of floor into a fresh all-wall grid.

    Every carved cell, lattice cells and connectors alike, is recorded in
    ``floor_tiles`` in carve order (lattice cell first, then its connector).
    The returned ``start`` is the first lattice cell and is where the player
    begins. Requires width >= 3 and height >= 3.
    """
    grid = Grid.filled(width, height, WALL)
    visited = [[False] * width for _ in range(height)]

    sx, sy = pick_start(width, height, rng)
    grid.set(sx, sy, FLOOR)
    visited[sy][sx] = True
    stack: List[XY] = [(sx, sy)]
    floor_tiles: List[XY] = [(sx, sy)]

    while stack:
        cx, cy = stack[-1]
        dirs = list(CARVE_DIRS)
        rng.shuffle(dirs)

        chosen = None
        for dx, dy in dirs:
            nx, ny = cx + dx, cy + dy
            if in_carve_bounds(grid, nx, ny) and not visited[ny][nx]:
                chosen = (nx, ny, cx + dx // 2, cy + dy // 2)
                break

        if chosen is None:
            stack.pop()  # backtrack
            continue

        nx, ny, wx, wy = chosen
        grid.set(wx, wy, FLOOR)
        grid.set(nx, ny, FLOOR)
        visited[ny][nx] = True
        stack.append((nx, ny))
        floor_tiles.append((nx, ny))
        floor_tiles.append((wx, wy))

    return CarvedMaze(grid=grid, floor_tiles=floor_tiles, start=(sx, sy))
