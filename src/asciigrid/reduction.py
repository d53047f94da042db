from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from loguru import logger

from asciigrid.dimensions import TargetGrid
from asciigrid.engine import Strategy
from asciigrid.model import WHITE, Cell


def penalty(red, alpha):
    """Brightness of a pixel seen against black: red minus its transparency, floored at 0.

    Works on plain ints and on numpy arrays alike.
    """
    return np.maximum(0, np.asarray(red, dtype=np.int32) - (255 - np.asarray(alpha, dtype=np.int32)))


def scale_factors(source_width: int, source_height: int, grid: TargetGrid) -> tuple[int, int]:
    """Source pixels per cell along x and y."""
    scale_x = max(1, math.ceil(source_width / grid.width))
    scale_y = max(1, math.ceil(source_height / grid.height))
    return scale_x, scale_y


def window_bounds(
    row: int, col: int, scale_x: int, scale_y: int, source_width: int, source_height: int
) -> tuple[int, int, int, int]:
    """(y0, y1, x0, x1) of the source window behind one cell, clipped to the source.

    Ceil scaling can push the last windows past the edge (10px over 6 cells);
    their start is pulled back onto the final source row or column.
    """
    y0 = min(row * scale_y, source_height - 1)
    x0 = min(col * scale_x, source_width - 1)
    return y0, min(y0 + scale_y, source_height), x0, min(x0 + scale_x, source_width)


def window_edges(count: int, scale: int, source_len: int) -> tuple[np.ndarray, np.ndarray]:
    """Start and end offsets along one axis for all ``count`` cells, same clipping as window_bounds."""
    starts = np.minimum(np.arange(count) * scale, source_len - 1)
    return starts, np.minimum(starts + scale, source_len)


@dataclass(frozen=True)
class Window:
    """A rectangular block of RGBA samples that becomes one cell."""

    samples: np.ndarray  # (h, w, 4) uint8

    def __post_init__(self):
        if self.samples.shape[0] == 0 or self.samples.shape[1] == 0:
            raise ValueError("Window must contain at least one sample")

    @property
    def count(self) -> int:
        return self.samples.shape[0] * self.samples.shape[1]

    def penalties(self) -> np.ndarray:
        return penalty(self.samples[:, :, 0], self.samples[:, :, 3])

    def luminance(self) -> int:
        """Truncated mean of the per-pixel penalties."""
        return int(self.penalties().sum()) // self.count

    def colour(self) -> tuple[int, int, int]:
        """Per-channel RGB mean, rounded half to even."""
        totals = self.samples[:, :, :3].reshape(-1, 3).sum(axis=0, dtype=np.int64)
        r, g, b = (round(int(total) / self.count) for total in totals)
        return r, g, b

    def reduce(self, grayscale: bool = False) -> Cell:
        return Cell(self.luminance(), WHITE if grayscale else self.colour())


def reduce_grid(
    pixels: np.ndarray,
    grid: TargetGrid,
    strategy: Strategy,
    grayscale: bool = False,
) -> list[list[Cell]]:
    """Average each source window down to one cell, a target row per task.

    Each row is summed column-wise over its slab of source rows, so a row costs
    a handful of numpy passes rather than one per cell.
    """
    source_height, source_width = pixels.shape[:2]
    if source_height == 0 or source_width == 0:
        raise ValueError("Input grid must not be empty")
    scale_x, scale_y = scale_factors(source_width, source_height, grid)
    logger.debug("Reducing {}x{} -> {}x{} (scale {}x{})", source_width, source_height, grid.width, grid.height, scale_x, scale_y)

    col_starts, col_ends = window_edges(grid.width, scale_x, source_width)
    row_starts, row_ends = window_edges(grid.height, scale_y, source_height)
    col_widths = col_ends - col_starts

    def reduce_row(row: int) -> list[Cell]:
        slab = pixels[row_starts[row] : row_ends[row]]
        columns = np.empty((source_width, 4), dtype=np.int64)
        columns[:, 0] = penalty(slab[:, :, 0], slab[:, :, 3]).sum(axis=0)
        columns[:, 1:] = slab[:, :, :3].sum(axis=0, dtype=np.int64)
        # prefix sums, since clamped windows at the right edge may overlap
        prefix = np.zeros((source_width + 1, 4), dtype=np.int64)
        np.cumsum(columns, axis=0, out=prefix[1:])
        totals = prefix[col_ends] - prefix[col_starts]
        counts = (row_ends[row] - row_starts[row]) * col_widths

        luminances = (totals[:, 0] // counts).tolist()
        if grayscale:
            return [Cell(luminance, WHITE) for luminance in luminances]
        colours = np.rint(totals[:, 1:] / counts[:, None]).astype(np.int64).tolist()
        return [Cell(luminance, tuple(colour)) for luminance, colour in zip(luminances, colours)]

    return strategy.map(reduce_row, range(grid.height))
