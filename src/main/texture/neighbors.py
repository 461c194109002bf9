"""Neighbour traversal table and cell tiling helpers."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .errors import InvalidParametersError

__all__ = ["NEIGHBOR_OFFSETS", "MAX_CELL_SIZE", "MIN_CELL_SIZE", "CellRegion", "cell_counts", "iter_cell_regions", "validate_offsets"]

# Clockwise from the top-left neighbour. Bit n of a code always maps to entry n.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, 1),
    (1, 1), (1, 0), (1, -1),
    (0, -1),
)

MAX_CELL_SIZE = 20
MIN_CELL_SIZE = 3


def validate_offsets(offsets: Sequence[Tuple[int, int]]) -> Tuple[Tuple[int, int], ...]:
    """Check a traversal table: 8 distinct unit-ring neighbours, centre excluded."""
    try:
        table = tuple((int(dr), int(dc)) for dr, dc in offsets)
    except (TypeError, ValueError):
        raise InvalidParametersError(f"Offsets must be (row, col) integer pairs, got {offsets!r}")
    if len(table) != len(NEIGHBOR_OFFSETS) or len(set(table)) != len(table):
        raise InvalidParametersError(f"Offsets must hold 8 distinct pairs, got {table!r}")
    for dr, dc in table:
        if dr not in (-1, 0, 1) or dc not in (-1, 0, 1) or (dr, dc) == (0, 0):
            raise InvalidParametersError(f"Offset ({dr}, {dc}) is not an 8-neighbour")
    return table


@dataclass(frozen=True)
class CellRegion:
    """Index range of one tile inside a larger image (end bounds exclusive)."""
    cell_row: int
    cell_col: int
    row_start: int
    row_end: int
    col_start: int
    col_end: int

    @property
    def slices(self) -> Tuple[slice, slice]:
        return slice(self.row_start, self.row_end), slice(self.col_start, self.col_end)


def cell_counts(shape: Tuple[int, ...], cell_size: int) -> Tuple[int, int]:
    rows, cols = shape[:2]
    return rows // cell_size, cols // cell_size


def iter_cell_regions(shape: Tuple[int, ...], cell_size: int) -> Iterator[CellRegion]:
    """Yield full tiles in row-major order; partial tiles at the edges are skipped."""
    count_r, count_c = cell_counts(shape, cell_size)
    for c_r in range(count_r):
        for c_c in range(count_c):
            yield CellRegion(
                cell_row=c_r,
                cell_col=c_c,
                row_start=c_r * cell_size,
                row_end=(c_r + 1) * cell_size,
                col_start=c_c * cell_size,
                col_end=(c_c + 1) * cell_size,
            )
