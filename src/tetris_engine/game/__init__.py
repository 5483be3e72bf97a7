"""Game module for the falling-block engine.

Exports the core game engine and supporting classes:
- GameGrid: Board representation, collision and line clearing
- PieceCatalogue: The seven fixed templates and random selection
- ScoringRules: Flat per-line scoring
- TetrisGame: Game state and commands
- CommandQueue / GravityClock: Single-consumer command stream for hosts
"""

from .grid import BOARD_HEIGHT, BOARD_WIDTH, GameGrid, Position, spawn_position
from .pieces import TEMPLATES, ActivePiece, PieceCatalogue, PieceTemplate, TetrominoType, rotate_clockwise
from .rules import ScoringRules
from .core import Command, GameConfig, GameStatus, TetrisGame
from .commands import CommandQueue, GravityClock

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "GameGrid",
    "Position",
    "spawn_position",
    "TEMPLATES",
    "ActivePiece",
    "PieceCatalogue",
    "PieceTemplate",
    "TetrominoType",
    "rotate_clockwise",
    "ScoringRules",
    "Command",
    "GameConfig",
    "GameStatus",
    "TetrisGame",
    "CommandQueue",
    "GravityClock",
]
