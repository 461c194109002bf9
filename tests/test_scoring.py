import numpy as np
import pytest
from src.main.texture import (
    NEIGHBOR_OFFSETS, score_pixel, score_cell, interior,
    OutOfBoundsError, InvalidCellSizeError, InvalidParametersError, LBPEngine,
)


def test_constant_cells_score_zero():
    for size in range(3, 21):
        cell = np.full((size, size), 77, dtype=np.uint8)
        scores = score_cell(cell)
        assert scores.shape == (size, size)
        assert not scores.any()


def test_reference_minimum_scores_255():
    cell = np.array([[1, 2, 3],
                     [8, 0, 4],
                     [7, 6, 5]], dtype=np.uint8)
    assert score_pixel(cell, 1, 1) == 255
    assert score_cell(cell)[1, 1] == 255


def test_canonical_order_fixture():
    cell = np.array([[9, 1, 9],
                     [1, 5, 1],
                     [1, 1, 1]], dtype=np.uint8)
    # top-left is bit 0, top-right is bit 2
    assert score_pixel(cell, 1, 1) == 5
    left_only = np.array([[0, 0, 0],
                          [9, 5, 0],
                          [0, 0, 0]], dtype=np.uint8)
    assert score_pixel(left_only, 1, 1) == 128


def test_permuted_offsets_change_score():
    cell = np.array([[9, 1, 9],
                     [1, 5, 1],
                     [1, 1, 1]], dtype=np.uint8)
    reversed_offsets = tuple(reversed(NEIGHBOR_OFFSETS))
    assert score_pixel(cell, 1, 1, reversed_offsets) == 160
    assert score_pixel(cell, 1, 1, reversed_offsets) != score_pixel(cell, 1, 1)


def test_ties_do_not_set_bits():
    cell = np.array([[5, 5, 5],
                     [5, 5, 6],
                     [5, 5, 5]], dtype=np.uint8)
    assert score_pixel(cell, 1, 1) == 8


@pytest.mark.parametrize("r,c", [(0, 1), (1, 0), (4, 2), (2, 4), (-1, 2)])
def test_score_pixel_out_of_bounds(r, c):
    cell = np.zeros((5, 5), dtype=np.uint8)
    with pytest.raises(OutOfBoundsError):
        score_pixel(cell, r, c)


def test_score_cell_rejects_bad_shapes():
    with pytest.raises(InvalidCellSizeError):
        score_cell(np.zeros((5, 6), dtype=np.uint8))
    with pytest.raises(InvalidCellSizeError):
        score_cell(np.zeros((21, 21), dtype=np.uint8))


def test_cell_matches_pixel_scores_and_border_stays_zero():
    rng = np.random.default_rng(7)
    cell = rng.integers(0, 256, size=(12, 12), dtype=np.uint8)
    scores = score_cell(cell)
    for r in range(1, 11):
        for c in range(1, 11):
            assert scores[r, c] == score_pixel(cell, r, c)
    assert not scores[0, :].any() and not scores[-1, :].any()
    assert not scores[:, 0].any() and not scores[:, -1].any()
    assert interior(scores).shape == (10, 10)


@pytest.mark.parametrize("offsets", [
    ((-2, 0),) + NEIGHBOR_OFFSETS[1:],
    NEIGHBOR_OFFSETS[:7],
    NEIGHBOR_OFFSETS + ((0, 0),),
    NEIGHBOR_OFFSETS[:7] + ((-1, -1),),
    ((0, 0),) + NEIGHBOR_OFFSETS[1:],
])
def test_bad_offset_tables_rejected(offsets):
    cell = np.zeros((5, 5), dtype=np.uint8)
    with pytest.raises(InvalidParametersError):
        score_cell(cell, offsets)
    with pytest.raises(InvalidParametersError):
        score_pixel(cell, 2, 2, offsets)
    with pytest.raises(InvalidParametersError):
        LBPEngine(offsets=offsets)


def test_engine_uses_custom_offsets():
    rng = np.random.default_rng(4)
    image = rng.integers(0, 256, size=(9, 9), dtype=np.uint8)
    reversed_offsets = tuple(reversed(NEIGHBOR_OFFSETS))
    result = LBPEngine(offsets=reversed_offsets).run(image, 9)
    assert np.array_equal(result.score_image, score_cell(image, reversed_offsets))
