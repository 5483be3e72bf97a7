from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .grid import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, Position, spawn_position
from .pieces import ActivePiece, PieceCatalogue
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Command(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    ROTATE = 4
    PAUSE = 5
    RESET = 6


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    tick_interval_ms: int = 1000


class TetrisGame:
    """Game state and the commands that advance it.

    Every public command runs to completion before returning. Blocked moves,
    commands issued while paused or after game over, and the game-over
    spawn itself are ordinary outcomes: nothing here raises.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.catalogue = PieceCatalogue(random.Random(self.config.random_seed))
        self.grid = GameGrid(BOARD_WIDTH, BOARD_HEIGHT)
        self.active_piece: Optional[ActivePiece] = None
        self.position = Position(0, 0)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.game_over = False
        self.paused = False
        self.reset()

    # -- state machine -------------------------------------------------

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def _accepts_moves(self) -> bool:
        return self.active_piece is not None and not self.game_over and not self.paused

    def reset(self) -> None:
        self.grid.reset()
        self.active_piece = None
        self.position = Position(0, 0)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.game_over = False
        self.paused = False

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused

    # -- spawning ------------------------------------------------------

    def _spawn_piece(self) -> None:
        piece = self.catalogue.random_piece()
        position = spawn_position(self.grid.width)
        if self.grid.collides(piece.shape, position):
            self.game_over = True
            self.active_piece = None
            logger.info("Game over: %s blocked at spawn, final score %d", piece.kind.name, self.score)
            return
        self.active_piece = piece
        self.position = position
        logger.debug("Spawned %s at (%d, %d)", piece.kind.name, position.x, position.y)

    def ensure_piece(self) -> None:
        if self.active_piece is None and not self.game_over:
            self._spawn_piece()

    # -- commands ------------------------------------------------------

    def move_horizontal(self, direction: int) -> None:
        if not self._accepts_moves() or direction not in (-1, 1):
            return
        candidate = self.position.shifted(dx=direction)
        if not self.grid.collides(self.active_piece.shape, candidate):
            self.position = candidate

    def move_left(self) -> None:
        self.move_horizontal(-1)

    def move_right(self) -> None:
        self.move_horizontal(1)

    def rotate(self) -> None:
        if not self._accepts_moves():
            return
        rotated = self.active_piece.rotated()
        if not self.grid.collides(rotated.shape, self.position):
            self.active_piece = rotated

    def tick(self) -> None:
        if self.game_over or self.paused:
            return
        if self.active_piece is None:
            # First tick after a reset installs the first piece
            self._spawn_piece()
            return
        candidate = self.position.shifted(dy=1)
        if not self.grid.collides(self.active_piece.shape, candidate):
            self.position = candidate
            return
        self._lock_piece()
        self._spawn_piece()

    def _lock_piece(self) -> int:
        assert self.active_piece is not None
        piece = self.active_piece
        self.grid.lock(piece.shape, self.position, piece.color)
        self.pieces_locked += 1
        logger.debug("Locked %s at (%d, %d)", piece.kind.name, self.position.x, self.position.y)
        lines = self.grid.clear_full_lines()
        if lines:
            self.lines_cleared_total += lines
            self.score += self.rules.score_for_lines(lines)
            logger.info("Cleared %d line(s), score %d", lines, self.score)
        self.active_piece = None
        return lines

    def execute(self, command: Command) -> None:
        if command == Command.LEFT:
            self.move_left()
        elif command == Command.RIGHT:
            self.move_right()
        elif command == Command.DOWN:
            self.tick()
        elif command == Command.ROTATE:
            self.rotate()
        elif command == Command.PAUSE:
            self.toggle_pause()
        elif command == Command.RESET:
            self.reset()
        elif command == Command.NONE:
            pass

    # -- queries -------------------------------------------------------

    def get_renderable_board(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid
        state = self.grid.clone_state()
        if self.active_piece is not None:
            for r, c in np.argwhere(self.active_piece.shape != 0):
                x = self.position.x + int(c)
                y = self.position.y + int(r)
                if self.grid.is_inside(x, y):
                    state[y, x] = self.active_piece.color
        return state

    def get_score(self) -> int:
        return self.score

    def is_game_over(self) -> bool:
        return self.game_over

    def is_paused(self) -> bool:
        return self.paused
