"""Validation utilities for floorroute."""
from typing import Any

from ..exceptions import ValidationError, OutOfBoundsError, GridError


def validate_grid_dimensions(columns: Any, rows: Any) -> None:
    """Validate floor extents.

    Args:
        columns: Number of columns
        rows: Number of rows

    Raises:
        GridError: If either extent is not a positive integer
    """
    for name, value in (("columns", columns), ("rows", rows)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise GridError(f"{name} must be an integer, got {type(value)}",
                            grid_bounds=(columns, rows))
        if value <= 0:
            raise GridError(f"{name} must be positive, got {value}",
                            grid_bounds=(columns, rows))


def validate_location(column: Any, row: Any, columns: int = None, rows: int = None) -> None:
    """Validate a cell coordinate.

    Args:
        column: Column index
        row: Row index
        columns: Optional column extent
        rows: Optional row extent

    Raises:
        ValidationError: If either index is not an integer
        OutOfBoundsError: If the coordinate lies outside the given extents
    """
    if isinstance(column, bool) or not isinstance(column, int):
        raise ValidationError(f"Column must be integer, got {type(column)}", field="column", value=column)

    if isinstance(row, bool) or not isinstance(row, int):
        raise ValidationError(f"Row must be integer, got {type(row)}", field="row", value=row)

    if columns is not None and not 0 <= column < columns:
        raise OutOfBoundsError(
            f"Column {column} out of bounds [0, {columns - 1}]",
            location=(column, row)
        )

    if rows is not None and not 0 <= row < rows:
        raise OutOfBoundsError(
            f"Row {row} out of bounds [0, {rows - 1}]",
            location=(column, row)
        )

