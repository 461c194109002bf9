"""Error types raised by the LBP texture engine."""
from __future__ import annotations

__all__ = ["LBPError", "OutOfBoundsError", "InvalidCellSizeError", "InvalidParametersError"]


class LBPError(ValueError):
    pass


class OutOfBoundsError(LBPError):
    """Reference pixel has no complete 8-neighbourhood inside its cell."""


class InvalidCellSizeError(LBPError):
    """Cell is not square or is larger than MAX_CELL_SIZE."""


class InvalidParametersError(LBPError):
    """Engine or histogram input does not satisfy its preconditions."""
