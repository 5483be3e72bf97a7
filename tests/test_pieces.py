import random

import numpy as np
import pytest

from tetris_engine.game import TEMPLATES, PieceCatalogue, TetrominoType, rotate_clockwise


EXPECTED_SHAPES = {
    TetrominoType.I: [[1, 1, 1, 1]],
    TetrominoType.J: [[1, 0, 0], [1, 1, 1]],
    TetrominoType.L: [[0, 0, 1], [1, 1, 1]],
    TetrominoType.O: [[1, 1], [1, 1]],
    TetrominoType.S: [[0, 1, 1], [1, 1, 0]],
    TetrominoType.T: [[0, 1, 0], [1, 1, 1]],
    TetrominoType.Z: [[1, 1, 0], [0, 1, 1]],
}


def test_catalogue_has_the_seven_reference_shapes():
    assert set(TEMPLATES) == set(TetrominoType)
    for kind, rows in EXPECTED_SHAPES.items():
        assert np.array_equal(TEMPLATES[kind].shape, np.array(rows))


def test_every_template_has_four_cells_and_a_distinct_color():
    colors = {t.color for t in TEMPLATES.values()}
    assert len(colors) == 7
    assert 0 not in colors
    for template in TEMPLATES.values():
        assert int(np.count_nonzero(template.shape)) == 4


def test_templates_are_read_only():
    with pytest.raises(ValueError):
        TEMPLATES[TetrominoType.T].shape[0, 0] = 1


def test_created_piece_is_an_independent_copy():
    catalogue = PieceCatalogue(random.Random(1))
    piece = catalogue.create(TetrominoType.S)
    piece.shape[0, 0] = 1
    assert TEMPLATES[TetrominoType.S].shape[0, 0] == 0
    assert piece.color == TEMPLATES[TetrominoType.S].color


def test_random_piece_covers_all_kinds():
    catalogue = PieceCatalogue(random.Random(123))
    seen = {catalogue.random_piece().kind for _ in range(500)}
    assert seen == set(TetrominoType)


def test_random_piece_is_reproducible_with_seed():
    a = PieceCatalogue(random.Random(7))
    b = PieceCatalogue(random.Random(7))
    assert [a.random_piece().kind for _ in range(20)] == [b.random_piece().kind for _ in range(20)]


def test_rotate_clockwise_transposes_then_reverses_rows():
    t = TEMPLATES[TetrominoType.T].shape
    assert np.array_equal(rotate_clockwise(t), np.array([[1, 0], [1, 1], [1, 0]]))
    j = TEMPLATES[TetrominoType.J].shape
    assert np.array_equal(rotate_clockwise(j), np.array([[1, 1], [1, 0], [1, 0]]))


def test_rotate_clockwise_returns_writable_copy():
    template = TEMPLATES[TetrominoType.I].shape
    rotated = rotate_clockwise(template)
    assert rotated.shape == (4, 1)
    rotated[0, 0] = 0
    assert template[0, 0] == 1


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_restore_shape(kind):
    shape = TEMPLATES[kind].shape
    rotated = shape
    for _ in range(4):
        rotated = rotate_clockwise(rotated)
    assert np.array_equal(rotated, shape)
