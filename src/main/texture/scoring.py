"""Local Binary Pattern (LBP) scoring for single pixels and square cells.

A pixel's code is built by walking its 8 neighbours in the fixed order of
``NEIGHBOR_OFFSETS``; neighbour ``n`` contributes ``2**n`` when it is strictly
brighter than the reference pixel. Equal values never set a bit.
"""
from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .errors import InvalidCellSizeError, OutOfBoundsError
from .neighbors import MAX_CELL_SIZE, NEIGHBOR_OFFSETS, validate_offsets

__all__ = ["score_pixel", "score_cell", "interior"]


def score_pixel(cell: np.ndarray, r: int, c: int,
                offsets: Sequence[Tuple[int, int]] = NEIGHBOR_OFFSETS) -> int:
    """Return the 8-bit LBP code of ``cell[r, c]``."""
    table = validate_offsets(offsets)
    rows, cols = cell.shape[:2]
    if r < 1 or r > rows - 2 or c < 1 or c > cols - 2:
        raise OutOfBoundsError(f"Reference pixel ({r}, {c}) is out of bounds for a {rows}x{cols} cell")
    value = int(cell[r, c])
    score = 0
    for n, (dr, dc) in enumerate(table):
        if value < int(cell[r + dr, c + dc]):
            score |= 1 << n
    return score


def score_cell(cell: np.ndarray,
               offsets: Sequence[Tuple[int, int]] = NEIGHBOR_OFFSETS) -> np.ndarray:
    """Score every interior pixel of a square cell.

    The returned matrix has the cell's shape. Its 1-pixel border is left at 0;
    that value is a sentinel, not a code, so callers should read scores
    through ``interior``.
    """
    table = validate_offsets(offsets)
    if cell.ndim != 2:
        raise InvalidCellSizeError(f"Cell must be 2D, got shape {cell.shape}")
    size = cell.shape[0]
    if size != cell.shape[1] or size > MAX_CELL_SIZE:
        raise InvalidCellSizeError(f"Wrong cell size: {cell.shape[0]}x{cell.shape[1]} (square, <= {MAX_CELL_SIZE})")
    scores = np.zeros((size, size), dtype=np.uint8)
    if size < 3:
        return scores
    center = cell[1:size - 1, 1:size - 1]
    codes = np.zeros_like(center, dtype=np.uint8)
    for n, (dr, dc) in enumerate(table):
        shifted = cell[1 + dr:size - 1 + dr, 1 + dc:size - 1 + dc]
        codes |= ((center < shifted).astype(np.uint8) << n).astype(np.uint8)
    scores[1:size - 1, 1:size - 1] = codes
    return scores


def interior(scores: np.ndarray) -> np.ndarray:
    """View of the scored pixels, i.e. the matrix without its 1-pixel border."""
    return scores[1:-1, 1:-1]
