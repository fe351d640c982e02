"""Value types produced by the template compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class GridCell:
    """A named rectangular block of grid positions.

    Attributes:
        name: Region name, unique within a compiled template
        row: Zero-based index of the top row
        column: Zero-based index of the leftmost column
        row_span: Number of rows covered (>= 1)
        column_span: Number of columns covered (>= 1)
    """

    name: str
    row: int
    column: int
    row_span: int = 1
    column_span: int = 1

    @property
    def last_row(self) -> int:
        return self.row + self.row_span - 1

    @property
    def last_column(self) -> int:
        return self.column + self.column_span - 1

    def iter_positions(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, column) position the cell occupies."""
        for r in range(self.row, self.row + self.row_span):
            for c in range(self.column, self.column + self.column_span):
                yield r, c


@dataclass(frozen=True)
class CompiledTemplate:
    """Validated structure of a grid template.

    Cells are stored as a frozenset: their order carries no meaning.
    """

    num_rows: int = 0
    num_columns: int = 0
    cells: frozenset[GridCell] = field(default_factory=frozenset)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(cell.name for cell in self.cells)

    @property
    def is_empty(self) -> bool:
        return self.num_rows == 0

    def cell(self, name: str) -> GridCell:
        """Look up the cell for a region name.

        Raises:
            KeyError: If the template has no region with that name
        """
        for cell in self.cells:
            if cell.name == name:
                return cell
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(cell.name == name for cell in self.cells)

    def __len__(self) -> int:
        return len(self.cells)
