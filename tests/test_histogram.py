import numpy as np
import pytest
from src.main.texture import (
    HISTOGRAM_BINS, compute_histogram, accumulate_histograms, normalize_histogram,
    InvalidParametersError,
)


def test_bin_edges():
    hist = compute_histogram(np.array([[0, 9, 10, 19], [250, 255, 100, 109]], dtype=np.uint8))
    assert hist.shape == (HISTOGRAM_BINS,)
    assert hist[0] == 2
    assert hist[1] == 2
    assert hist[10] == 2
    assert hist[25] == 2
    assert hist.sum() == 8


def test_sum_equals_count():
    rng = np.random.default_rng(3)
    grid = rng.integers(0, 256, size=(37, 23), dtype=np.uint8)
    assert compute_histogram(grid).sum() == grid.size


def test_empty_grid():
    assert compute_histogram(np.zeros((0, 4), dtype=np.uint8)).sum() == 0


def test_out_of_range_values_rejected():
    with pytest.raises(InvalidParametersError):
        compute_histogram(np.array([[-1, 3]], dtype=np.int16))
    with pytest.raises(InvalidParametersError):
        compute_histogram(np.array([[260]], dtype=np.int16))
    with pytest.raises(InvalidParametersError):
        compute_histogram(np.array([[0.5]]))


def test_accumulate_and_normalize():
    a = compute_histogram(np.zeros((2, 2), dtype=np.uint8))
    b = compute_histogram(np.full((2, 2), 255, dtype=np.uint8))
    total = accumulate_histograms([a, b])
    assert total[0] == 4 and total[25] == 4
    pct = normalize_histogram(total, 8)
    assert pct[0] == 50.0 and pct[25] == 50.0
    with pytest.raises(InvalidParametersError):
        normalize_histogram(total, 0)
