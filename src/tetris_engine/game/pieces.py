from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.int8)
    shape.setflags(write=False)
    return shape


def rotate_clockwise(shape: Shape) -> Shape:
    """Transpose then reverse each row; always returns a new writable array."""
    return shape.T[:, ::-1].copy()


def occupied_cells(shape: Shape) -> List[Tuple[int, int]]:
    """(row, col) of every occupied cell, top-to-bottom, left-to-right."""
    return [(int(r), int(c)) for r, c in np.argwhere(shape != 0)]


@dataclass(frozen=True)
class PieceTemplate:
    kind: TetrominoType
    shape: Shape
    color: int


@dataclass
class ActivePiece:
    kind: TetrominoType
    shape: Shape
    color: int

    @classmethod
    def from_template(cls, template: PieceTemplate) -> "ActivePiece":
        return cls(kind=template.kind, shape=template.shape.copy(), color=template.color)

    def rotated(self) -> "ActivePiece":
        return ActivePiece(kind=self.kind, shape=rotate_clockwise(self.shape), color=self.color)


# Color tags are the kind values; the renderer owns the palette.
TEMPLATES: Dict[TetrominoType, PieceTemplate] = {
    TetrominoType.I: PieceTemplate(TetrominoType.I, _frozen([[1, 1, 1, 1]]), int(TetrominoType.I)),
    TetrominoType.J: PieceTemplate(TetrominoType.J, _frozen([[1, 0, 0], [1, 1, 1]]), int(TetrominoType.J)),
    TetrominoType.L: PieceTemplate(TetrominoType.L, _frozen([[0, 0, 1], [1, 1, 1]]), int(TetrominoType.L)),
    TetrominoType.O: PieceTemplate(TetrominoType.O, _frozen([[1, 1], [1, 1]]), int(TetrominoType.O)),
    TetrominoType.S: PieceTemplate(TetrominoType.S, _frozen([[0, 1, 1], [1, 1, 0]]), int(TetrominoType.S)),
    TetrominoType.T: PieceTemplate(TetrominoType.T, _frozen([[0, 1, 0], [1, 1, 1]]), int(TetrominoType.T)),
    TetrominoType.Z: PieceTemplate(TetrominoType.Z, _frozen([[1, 1, 0], [0, 1, 1]]), int(TetrominoType.Z)),
}


class PieceCatalogue:
    """Source of live pieces.

    Every piece handed out is an independent copy of its template, so
    rotating it in place can never reach back into ``TEMPLATES``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def create(self, kind: TetrominoType) -> ActivePiece:
        return ActivePiece.from_template(TEMPLATES[kind])

    def random_piece(self) -> ActivePiece:
        kind = self.rng.choice(list(TetrominoType))
        return self.create(kind)
