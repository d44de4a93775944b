# src/trapmaze/engine/state.py
# GameSession: one level at a time, explicit result values instead of redraw hooks.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import Grid
from ..mapgen.generator import Level, generate_level
from ..rng import make_rng
from .collisions import on_enter_player
from .player import BLOCK_OUT_OF_BOUNDS, Player, check_step, plan_jump

XY = Tuple[int, int]

logger = logging.getLogger(__name__)

MSG_OUT_OF_BOUNDS = "Out of bounds!"
MSG_WALL = "Bump! Wall."
MSG_JUMP_OUT_OF_BOUNDS = "Jump out of bounds!"
MSG_JUMP_WALL = "Jump blocked by a wall!"


def msg_level_start(level: int) -> str:
    return f"Level {level} Start!"


def msg_level_complete(level: int) -> str:
    return f"Level {level} Complete!"


def msg_game_over(level: int) -> str:
    return f"Stepped on a hazard! Game Over (Lvl {level})!"


class MoveOutcome(Enum):
    MOVED = "moved"
    GOAL_REACHED = "goal_reached"
    HAZARD_TRIGGERED = "hazard_triggered"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED = "blocked"
    IGNORED = "ignored"  # session not accepting moves


@dataclass(frozen=True)
class Action:
    kind: str  # "move" | "jump" | "restart"
    dx: int = 0
    dy: int = 0


@dataclass
class MoveResult:
    outcome: MoveOutcome
    position: XY
    status: str

    @property
    def moved(self) -> bool:
        return self.outcome in (MoveOutcome.MOVED, MoveOutcome.GOAL_REACHED, MoveOutcome.HAZARD_TRIGGERED)


@dataclass
class LevelStarted:
    level: Level
    status: str


class GameSession:
    """
    Owns the current level and the player. Not thread-safe; one session per game.

    Typical loop::

        session = GameSession()
        session.start_level()
        result = session.move(1, 0)
        if session.pending_advance:
            # presentation decides how long to show the completed level
            session.next_level()
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, rng=None) -> None:
        self.config = config.validate()
        self.rng = rng if rng is not None else make_rng()
        self.level_number = config.first_level
        self.level: Optional[Level] = None
        self.player = Player(spawn_xy=(0, 0))
        self.active = False
        self.pending_advance = False
        self.game_over = False
        self.status = ""

    # ---- Level views ----
    @property
    def grid(self) -> Grid:
        return self._require_level().grid

    @property
    def goal(self) -> XY:
        return self._require_level().goal

    @property
    def hazards(self) -> List[XY]:
        return self._require_level().hazards

    def _require_level(self) -> Level:
        if self.level is None:
            raise RuntimeError("no level started; call start_level() first")
        return self.level

    # ---- Lifecycle ----
    def start_level(self) -> LevelStarted:
        level = generate_level(self.level_number, self.config.width, self.config.height, self.rng)
        self.level = level
        self.player = Player(spawn_xy=level.player_start)
        self.active = True
        self.pending_advance = False
        self.game_over = False
        self.status = msg_level_start(self.level_number)
        logger.info(
            "level %d start: goal %s, %d/%d hazards",
            self.level_number, level.goal, len(level.hazards), level.hazard_target,
        )
        return LevelStarted(level=level, status=self.status)

    def next_level(self) -> LevelStarted:
        if not self.pending_advance:
            raise RuntimeError("no completed level to advance from")
        return self.start_level()

    def restart(self) -> LevelStarted:
        self.level_number = self.config.first_level
        return self.start_level()

    # ---- Player actions ----
    def move(self, dx: int, dy: int) -> MoveResult:
        if not self.active:
            return self._ignored()
        tx, ty = self.player.x + dx, self.player.y + dy
        block = check_step(self.grid, tx, ty)
        if block is not None:
            self.status = MSG_OUT_OF_BOUNDS if block == BLOCK_OUT_OF_BOUNDS else MSG_WALL
            outcome = MoveOutcome.OUT_OF_BOUNDS if block == BLOCK_OUT_OF_BOUNDS else MoveOutcome.BLOCKED
            return MoveResult(outcome, self.player.pos, self.status)
        self.player.place((tx, ty))
        return self._land()

    def jump(self, dx: int, dy: int, steps: Optional[int] = None) -> MoveResult:
        if not self.active:
            return self._ignored()
        if steps is None:
            steps = self.config.jump_distance
        block, landing = plan_jump(self.grid, self.player.x, self.player.y, dx, dy, steps)
        if block is not None:
            self.status = MSG_JUMP_OUT_OF_BOUNDS if block == BLOCK_OUT_OF_BOUNDS else MSG_JUMP_WALL
            outcome = MoveOutcome.OUT_OF_BOUNDS if block == BLOCK_OUT_OF_BOUNDS else MoveOutcome.BLOCKED
            return MoveResult(outcome, self.player.pos, self.status)
        self.player.place(landing)
        return self._land()

    def apply_action(self, action: Action):
        if action.kind == "move":
            return self.move(action.dx, action.dy)
        if action.kind == "jump":
            return self.jump(action.dx, action.dy)
        if action.kind == "restart":
            # Restart keys only act on the game-over screen.
            if not self.game_over:
                return self._ignored()
            return self.restart()
        raise ValueError(f"unknown action kind {action.kind!r}")

    # ---- Helpers ----
    def _ignored(self) -> MoveResult:
        return MoveResult(MoveOutcome.IGNORED, self.player.pos, self.status)

    def _land(self) -> MoveResult:
        x, y = self.player.pos
        ev = on_enter_player(self.grid, x, y, self.hazards)

        if ev["goal_reached"]:
            self.status = msg_level_complete(self.level_number)
            logger.info("level %d complete", self.level_number)
            self.level_number += 1
            self.active = False
            self.pending_advance = True
            return MoveResult(MoveOutcome.GOAL_REACHED, self.player.pos, self.status)

        if ev["hazard_triggered"]:
            self.status = msg_game_over(self.level_number)
            logger.info("hazard at %s on level %d", self.player.pos, self.level_number)
            self.active = False
            self.game_over = True
            return MoveResult(MoveOutcome.HAZARD_TRIGGERED, self.player.pos, self.status)

        self.status = ""
        return MoveResult(MoveOutcome.MOVED, self.player.pos, self.status)
