from .errors import LBPError, OutOfBoundsError, InvalidCellSizeError, InvalidParametersError
from .neighbors import NEIGHBOR_OFFSETS, MAX_CELL_SIZE, MIN_CELL_SIZE, CellRegion, iter_cell_regions, validate_offsets
from .scoring import score_pixel, score_cell, interior
from .histogram import HISTOGRAM_BINS, BIN_WIDTH, compute_histogram, accumulate_histograms, normalize_histogram
from .engine import LBPEngine, LBPResult, run_lbp
__all__ = [
    "LBPError",
    "OutOfBoundsError",
    "InvalidCellSizeError",
    "InvalidParametersError",
    "NEIGHBOR_OFFSETS",
    "MAX_CELL_SIZE",
    "MIN_CELL_SIZE",
    "CellRegion",
    "iter_cell_regions",
    "validate_offsets",
    "score_pixel",
    "score_cell",
    "interior",
    "HISTOGRAM_BINS",
    "BIN_WIDTH",
    "compute_histogram",
    "accumulate_histograms",
    "normalize_histogram",
    "LBPEngine",
    "LBPResult",
    "run_lbp",
]
