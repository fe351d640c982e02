"""Placement of compiled cells onto resolved track sizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Sequence

import numpy as np

from ..core.cell import CompiledTemplate, GridCell
from ..core.track import TrackSize
from .solver import resolve


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in logical pixels, origin at the top left."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


def _span_extent(sizes: Sequence[float], start: int, span: int) -> tuple[float, float]:
    """Return the (offset, extent) of `span` tracks starting at `start`.

    Tracks past the end of `sizes` contribute nothing.
    """
    edges = np.concatenate(([0.0], np.cumsum(sizes, dtype=np.float64)))
    last = len(sizes)
    begin = min(start, last)
    end = min(start + span, last)
    return float(edges[begin]), float(edges[end] - edges[begin])


def place_cell(
    cell: GridCell,
    column_sizes: Sequence[float],
    row_sizes: Sequence[float],
) -> Rect:
    """Compute the rectangle covered by one cell."""
    left, width = _span_extent(column_sizes, cell.column, cell.column_span)
    top, height = _span_extent(row_sizes, cell.row, cell.row_span)
    return Rect(left=left, top=top, width=width, height=height)


def place_cells(
    compiled: CompiledTemplate,
    column_sizes: Sequence[float],
    row_sizes: Sequence[float],
    names: Collection[str] | None = None,
) -> dict[str, Rect]:
    """Compute the rectangle of every region in a compiled template.

    A cell's offset is the sum of the tracks before it, its extent the sum
    of the tracks it spans.

    Args:
        compiled: The compiled template
        column_sizes: Resolved width of every column
        row_sizes: Resolved height of every row
        names: Regions that have content to place. Regions not listed are
            skipped, as are names the template does not define. None places
            every region.

    Returns:
        Mapping of region name to its rectangle
    """
    return {
        cell.name: place_cell(cell, column_sizes, row_sizes)
        for cell in sorted(compiled.cells, key=lambda c: (c.row, c.column))
        if names is None or cell.name in names
    }


def layout_template(
    compiled: CompiledTemplate,
    column_specs: Sequence[TrackSize],
    row_specs: Sequence[TrackSize],
    width: float,
    height: float,
    names: Collection[str] | None = None,
) -> dict[str, Rect]:
    """Resolve both axes of a compiled template and place its regions."""
    column_sizes = resolve(column_specs, width, compiled.num_columns)
    row_sizes = resolve(row_specs, height, compiled.num_rows)
    return place_cells(compiled, column_sizes, row_sizes, names)
