"""Tile-based LBP engine.

Splits an image into non-overlapping ``cell_size`` squares, scores each cell,
writes the codes into a full-size score image and sums the per-cell
histograms. Rows and columns past the last full tile are not scored and stay
at 0 in the score image.
"""
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple
import logging
import numpy as np
from tqdm import tqdm

from .errors import InvalidCellSizeError, InvalidParametersError
from .histogram import compute_histogram, accumulate_histograms
from .neighbors import NEIGHBOR_OFFSETS, MAX_CELL_SIZE, MIN_CELL_SIZE, CellRegion, cell_counts, iter_cell_regions, validate_offsets
from .scoring import score_cell, interior

__all__ = ["LBPResult", "LBPEngine", "run_lbp"]

logger = logging.getLogger(__name__)


@dataclass
class LBPResult:
    score_image: np.ndarray
    histogram: np.ndarray
    cell_size: int
    cell_count_r: int
    cell_count_c: int

    @property
    def scored_pixels(self) -> int:
        return self.cell_count_r * self.cell_count_c * (self.cell_size - 2) ** 2


class LBPEngine:
    def __init__(
        self,
        workers: int = 1,
        progress_bar: bool = False,
        offsets: Sequence[Tuple[int, int]] = NEIGHBOR_OFFSETS,
    ) -> None:
        """
        workers: tiles scored concurrently when > 1; reduction stays row-major.
        progress_bar: show a tqdm bar over tiles.
        offsets: neighbour traversal order used for every pixel.
        """
        if workers < 1:
            raise InvalidParametersError(f"workers must be >= 1, got {workers}")
        self.workers = workers
        self.progress_bar = progress_bar
        self.offsets = validate_offsets(offsets)

    def _score_region(self, image: np.ndarray, region: CellRegion) -> Tuple[CellRegion, np.ndarray, np.ndarray]:
        scores = score_cell(image[region.slices], self.offsets)
        return region, scores, compute_histogram(interior(scores))

    def _scored_tiles(self, image: np.ndarray, regions: List[CellRegion]) -> Iterable[Tuple[CellRegion, np.ndarray, np.ndarray]]:
        if self.workers == 1:
            return (self._score_region(image, r) for r in regions)
        # Executor.map yields in submission order
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(lambda r: self._score_region(image, r), regions))

    def run(self, image: np.ndarray, cell_size: int) -> LBPResult:
        image = _validate_inputs(image, cell_size)
        rows, cols = image.shape
        count_r, count_c = cell_counts(image.shape, cell_size)
        if rows % cell_size or cols % cell_size:
            logger.debug("LBP truncating %d trailing rows and %d trailing cols", rows % cell_size, cols % cell_size)
        logger.debug("LBP on %dx%d image: %dx%d cells of size %d", rows, cols, count_r, count_c, cell_size)

        score_image = np.zeros((rows, cols), dtype=np.uint8)
        cell_hists: List[np.ndarray] = []
        regions = list(iter_cell_regions(image.shape, cell_size))
        tiles = tqdm(self._scored_tiles(image, regions), total=len(regions),
                     disable=not self.progress_bar, desc="LBP cells")
        for region, scores, cell_hist in tiles:
            score_image[region.slices] = scores
            cell_hists.append(cell_hist)
        return LBPResult(
            score_image=score_image,
            histogram=accumulate_histograms(cell_hists),
            cell_size=cell_size,
            cell_count_r=count_r,
            cell_count_c=count_c,
        )


def _validate_inputs(image: np.ndarray, cell_size: int) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise InvalidParametersError(f"Expected a single-channel 2D image, got shape {arr.shape}")
    if isinstance(cell_size, bool) or not isinstance(cell_size, (int, np.integer)):
        raise InvalidParametersError(f"cell_size must be an integer, got {cell_size!r}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidParametersError("Image has no rows or columns")
    if cell_size < MIN_CELL_SIZE:
        raise InvalidParametersError(f"cell_size must be >= {MIN_CELL_SIZE}, got {cell_size}")
    if cell_size > MAX_CELL_SIZE:
        raise InvalidCellSizeError(f"cell_size must be <= {MAX_CELL_SIZE}, got {cell_size}")
    return arr


def run_lbp(image: np.ndarray, cell_size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(score_image, histogram)`` for ``image`` tiled by ``cell_size``."""
    result = LBPEngine().run(image, cell_size)
    return result.score_image, result.histogram
