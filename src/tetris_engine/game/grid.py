from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .pieces import Shape, occupied_cells


BOARD_WIDTH = 10
BOARD_HEIGHT = 20


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def shifted(self, dx: int = 0, dy: int = 0) -> "Position":
        return Position(self.x + dx, self.y + dy)


def spawn_position(width: int = BOARD_WIDTH) -> Position:
    return Position(width // 2 - 1, 0)


class GameGrid:
    """Fixed-size board of settled cells.

    The grid uses 0 for empty cells and positive integers for filled cells.
    The integer is the color tag of the piece that locked there. Row 0 is
    the top of the board.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, shape: Shape, position: Position) -> bool:
        """True if any occupied cell of ``shape`` at ``position`` is blocked.

        Cells above the top edge (y < 0) are checked against the side walls
        only, so pieces may hang partly above row 0.
        """
        for r, c in occupied_cells(shape):
            x = position.x + c
            y = position.y + r
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != 0:
                return True
        return False

    def lock(self, shape: Shape, position: Position, color: int) -> int:
        """Write ``color`` into the board under ``shape``; return cells written.

        Cells above row 0 are dropped.
        """
        written = 0
        for r, c in occupied_cells(shape):
            x = position.x + c
            y = position.y + r
            if y < 0:
                continue
            self.grid[y, x] = color
            written += 1
        return written

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != 0, axis=1))[0]

    def clear_full_lines(self) -> int:
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove all complete rows at once and pad the top back to full height
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=self.grid.dtype)
        self.grid = np.vstack((new_rows, kept))
        return num

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
