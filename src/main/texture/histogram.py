"""Fixed-bin histograms shared by LBP score images and raw intensity images."""
from __future__ import annotations
from typing import Iterable
import numpy as np

from .errors import InvalidParametersError

__all__ = ["HISTOGRAM_BINS", "BIN_WIDTH", "compute_histogram", "accumulate_histograms", "normalize_histogram"]

HISTOGRAM_BINS = 26
BIN_WIDTH = 10


def compute_histogram(values: np.ndarray) -> np.ndarray:
    """Count every element of ``values`` into 26 bins of width 10 (covers 0..259)."""
    arr = np.asarray(values)
    hist = np.zeros(HISTOGRAM_BINS, dtype=np.int64)
    if arr.size == 0:
        return hist
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidParametersError(f"Histogram input must be integer valued, got {arr.dtype}")
    lo, hi = int(arr.min()), int(arr.max())
    if lo < 0 or hi >= HISTOGRAM_BINS * BIN_WIDTH:
        raise InvalidParametersError(f"Histogram values must lie in [0, {HISTOGRAM_BINS * BIN_WIDTH - 1}], got [{lo}, {hi}]")
    bins = arr.ravel().astype(np.int64) // BIN_WIDTH
    hist += np.bincount(bins, minlength=HISTOGRAM_BINS)
    return hist


def accumulate_histograms(histograms: Iterable[np.ndarray]) -> np.ndarray:
    """Element-wise sum in iteration order."""
    total = np.zeros(HISTOGRAM_BINS, dtype=np.int64)
    for h in histograms:
        total += h
    return total


def normalize_histogram(histogram: np.ndarray, total: int) -> np.ndarray:
    """Express each bin as a percentage of ``total``."""
    if total <= 0:
        raise InvalidParametersError(f"Cannot normalize histogram over {total} values")
    return np.asarray(histogram, dtype=np.float64) * 100.0 / total
