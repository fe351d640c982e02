"""Errors raised while compiling grid templates."""


class TemplateError(ValueError):
    """Base class for malformed grid templates."""


class EmptyTemplateError(TemplateError):
    """Raised when the first row defines no named region."""

    def __init__(self) -> None:
        super().__init__(
            "Template rows must contain at least one non-empty region name."
        )


class InconsistentColumnCountError(TemplateError):
    """Raised when a row's token count differs from the first row's.

    Attributes:
        row: Index of the offending row
        actual: Number of tokens found in that row
        expected: Number of tokens in the first row
    """

    def __init__(self, row: int, actual: int, expected: int) -> None:
        self.row = row
        self.actual = actual
        self.expected = expected
        super().__init__(
            "All rows in the template must have the same number of columns. "
            f"Row {row} has {actual} columns, expected {expected}."
        )


class NonRectangularRegionError(TemplateError):
    """Raised when a named region does not fill an axis-aligned rectangle.

    Attributes:
        name: The region whose cells are malformed
        row, column: First coordinate inside the region's bounding box that
            does not carry the region's name (None for the area check)
        found: Token found at that coordinate
    """

    def __init__(
        self,
        name: str,
        row: int | None = None,
        column: int | None = None,
        found: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.name = name
        self.row = row
        self.column = column
        self.found = found
        message = f'Invalid template: cells for "{name}" must form a contiguous rectangular block.'
        if row is not None:
            message += (
                f' Discrepancy at row {row}, column {column}.'
                f' Found "{found}", expected "{name}".'
            )
        elif detail:
            message += f" {detail}"
        super().__init__(message)
