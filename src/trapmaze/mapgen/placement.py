# src/trapmaze/mapgen/placement.py
import logging
from typing import List, Tuple

from ..grid import Grid
from ..tiles import FLOOR, GOAL, HAZARD, WALL
from .reachability import is_reachable

XY = Tuple[int, int]

logger = logging.getLogger(__name__)

GOAL_DISTANCE_DIVISOR = 1.5
HAZARD_DENSITY = 20  # one hazard per this many floor tiles, at most
BASE_HAZARDS = 4


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def goal_min_distance(grid: Grid) -> float:
    return min(grid.width, grid.height) / GOAL_DISTANCE_DIVISOR


def fallback_goal_corner(grid: Grid) -> XY:
    return (grid.width - 2, grid.height - 2)


def place_goal(grid: Grid, candidates: List[XY], start: XY, rng) -> XY:
    """
    Shuffle ``candidates`` in place and mark the goal on ``grid``.

    Preference order:
      1) first candidate farther than min(W, H) / 1.5 (Manhattan) from start
      2) first candidate that is not the start
      3) the corner (W-2, H-2), carved to floor if it is a wall
      4) the start itself; the tile is left as is
    """
    rng.shuffle(candidates)
    threshold = goal_min_distance(grid)

    for tile in candidates:
        if tile != start and manhattan(tile, start) > threshold:
            grid.set(*tile, GOAL)
            return tile

    for tile in candidates:
        if tile != start:
            logger.debug("no candidate beyond distance %.2f; goal at %s", threshold, tile)
            grid.set(*tile, GOAL)
            return tile

    corner = fallback_goal_corner(grid)
    if grid.in_bounds(*corner):
        logger.debug("no floor candidates; goal at corner %s", corner)
        if grid.get(*corner) == WALL:
            grid.set(*corner, FLOOR)
        grid.set(*corner, GOAL)
        return corner

    logger.warning("failed to place goal on a %dx%d grid; using start %s", grid.width, grid.height, start)
    return start


def hazard_target(floor_count: int, level: int) -> int:
    return min(floor_count // HAZARD_DENSITY, BASE_HAZARDS + level)


def place_hazards(
    grid: Grid,
    candidates: List[XY],
    start: XY,
    goal: XY,
    target: int,
    rng,
) -> List[XY]:
    """
    Shuffle ``candidates`` in place and mark up to ``target`` hazards.

    Each candidate is tried as a wall first; it is kept as a hazard only if
    the goal is still reachable from the start with that wall in place.
    Rejected candidates stay floor. Returns the hazards in placement order.
    """
    hazards: List[XY] = []
    rng.shuffle(candidates)

    for tile in candidates:
        if len(hazards) >= target:
            break
        if tile == start or tile == goal:
            continue

        original = grid.get(*tile)
        grid.set(*tile, WALL)
        path_exists = is_reachable(grid, start, goal)
        grid.set(*tile, original)

        if path_exists:
            grid.set(*tile, HAZARD)
            hazards.append(tile)

    logger.debug("placed %d hazards out of desired %d", len(hazards), target)
    return hazards
