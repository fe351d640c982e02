"""Template compiler: ASCII-art row strings to named rectangular cells."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..config import PLACEHOLDER
from ..core.cell import CompiledTemplate, GridCell
from ..core.errors import (
    EmptyTemplateError,
    InconsistentColumnCountError,
    NonRectangularRegionError,
)

logger = logging.getLogger(__name__)


def tokenize(rows: Sequence[str]) -> list[list[str]]:
    """Split each row on runs of whitespace, dropping empty tokens."""
    return [row.split() for row in rows]


def compile_template(rows: Sequence[str]) -> CompiledTemplate:
    """Compile template rows into a validated set of named cells.

    Each row lists one token per column. Equal tokens denote the same region,
    which must fill an axis-aligned rectangle. The token "." marks an
    unoccupied position.

    Example:
        >>> compile_template(["header header", "side main"]).cell("header")
        GridCell(name='header', row=0, column=0, row_span=1, column_span=2)

    Args:
        rows: Template rows, top to bottom

    Returns:
        CompiledTemplate with one GridCell per distinct region name

    Raises:
        EmptyTemplateError: If the first row has no named region
        InconsistentColumnCountError: If a row's token count differs from the first row's
        NonRectangularRegionError: If a region's positions do not form a filled rectangle
    """
    if len(rows) == 0:
        return CompiledTemplate()

    parsed = tokenize(rows)
    first = parsed[0]

    if not first or all(token == PLACEHOLDER for token in first):
        raise EmptyTemplateError()

    num_columns = len(first)
    for r, tokens in enumerate(parsed):
        if len(tokens) != num_columns:
            raise InconsistentColumnCountError(r, len(tokens), num_columns)

    grid = np.array(parsed, dtype=str)
    cells = frozenset(_extract_cells(parsed, grid))

    logger.debug(
        "Compiled %dx%d template with %d regions",
        grid.shape[0], num_columns, len(cells),
    )
    return CompiledTemplate(
        num_rows=grid.shape[0],
        num_columns=num_columns,
        cells=cells,
    )


def _extract_cells(parsed: list[list[str]], grid: NDArray[np.str_]) -> list[GridCell]:
    """Validate every region of a token grid and build its cell."""
    # Region name -> occupied (row, column) positions, in order of first appearance
    region_points: dict[str, list[tuple[int, int]]] = {}
    for r, tokens in enumerate(parsed):
        for c, token in enumerate(tokens):
            if token != PLACEHOLDER:
                region_points.setdefault(token, []).append((r, c))

    cells = []
    for name, points in region_points.items():
        coords = np.array(points)
        min_row, min_col = coords.min(axis=0)
        max_row, max_col = coords.max(axis=0)

        block = grid[min_row:max_row + 1, min_col:max_col + 1]
        mismatches = np.argwhere(block != name)
        if len(mismatches) > 0:
            # argwhere is row-major, so this is the first offending position
            dr, dc = mismatches[0]
            r, c = int(min_row + dr), int(min_col + dc)
            raise NonRectangularRegionError(name, r, c, parsed[r][c])

        if block.size != len(points):
            raise NonRectangularRegionError(
                name,
                detail=(
                    f"Calculated area ({block.size}) does not match "
                    f"actual cells found ({len(points)})."
                ),
            )

        cells.append(GridCell(
            name=name,
            row=int(min_row),
            column=int(min_col),
            row_span=int(max_row - min_row + 1),
            column_span=int(max_col - min_col + 1),
        ))

    return cells


class TemplateCompiler:
    """Compiles templates, memoizing results by their rows.

    Compilation is a pure function of the rows, so cached results can be
    shared freely. Failures are not cached.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[str, ...], CompiledTemplate] = {}

    def compile(self, rows: Sequence[str]) -> CompiledTemplate:
        """Compile template rows, see compile_template()."""
        key = tuple(rows)
        compiled = self._cache.get(key)
        if compiled is None:
            compiled = compile_template(key)
            self._cache[key] = compiled
        return compiled

    def clear_cache(self) -> None:
        """Clear the compiled template cache."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
