# src/trapmaze/engine/collisions.py
# Landing effects for the player (no pygame).

from __future__ import annotations

from typing import Dict, List, Tuple

from ..grid import Grid
from ..tiles import FLOOR, GOAL, HAZARD

XY = Tuple[int, int]


def on_enter_player(grid: Grid, x: int, y: int, hazards: List[XY]) -> Dict[str, bool]:
    """
    Apply the effect of the player landing on (x, y).

    A hazard is consumed on contact: its tile reverts to floor and it is
    dropped from ``hazards``. The goal tile is never mutated.
    """
    events = {"goal_reached": False, "hazard_triggered": False}
    tile = grid.get(x, y)

    if tile == GOAL:
        events["goal_reached"] = True
        return events

    if tile == HAZARD:
        grid.set(x, y, FLOOR)
        if (x, y) in hazards:
            hazards.remove((x, y))
        events["hazard_triggered"] = True

    return events
