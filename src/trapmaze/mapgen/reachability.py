# src/trapmaze/mapgen/reachability.py
# Breadth-first reachability over the tile grid. Only walls block.

from collections import deque
from typing import Set, Tuple

from ..grid import Grid
from ..tiles import is_passable

XY = Tuple[int, int]

# up, down, left, right
NEIGHBORS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def is_reachable(grid: Grid, start: XY, end: XY) -> bool:
    """
    True iff a chain of 4-adjacent non-wall cells joins start to end.
    Goal and hazard tiles count as open. Either endpoint outside the grid
    gives False; start == end is trivially reachable. The grid is not modified.
    """
    if not grid.in_bounds(*start) or not grid.in_bounds(*end):
        return False
    if start == end:
        return True

    queue = deque([start])
    visited: Set[XY] = {start}
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBORS:
            nxt = (x + dx, y + dy)
            if nxt in visited or not grid.in_bounds(*nxt):
                continue
            if not is_passable(grid.get(*nxt)):
                continue
            if nxt == end:
                return True
            visited.add(nxt)
            queue.append(nxt)
    return False
