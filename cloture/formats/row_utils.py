"""
Cloture - Cell Row Utilities

Utilities for parsing and formatting grid rows stored in grid files.
"""

from typing import List, Sequence, Union

RowData = Union[str, Sequence[int]]


def parse_cell_row(row_data: RowData) -> List[int]:
    """
    Parse a stored row to a list of cell values.

    Args:
        row_data: Space-separated digits ("0 1 1 0"), unspaced digits
            ("0110") or an already parsed list of ints

    Returns:
        List of integer values

    Raises:
        ValueError: If a string row holds something other than digits

    Example:
        >>> parse_cell_row("0 1 1 0")
        [0, 1, 1, 0]
        >>> parse_cell_row("0110")
        [0, 1, 1, 0]
    """
    if not isinstance(row_data, str):
        return list(row_data)

    tokens = row_data.split()
    if len(tokens) == 1:
        tokens = list(tokens[0])
    return [int(token) for token in tokens]


def format_cell_row(row: Sequence[int]) -> str:
    """
    Format a row as a space-separated string.

    Example:
        >>> format_cell_row([0, 1, 1, 0])
        '0 1 1 0'
    """
    return " ".join(str(value) for value in row)


def parse_cell_rows(rows: Sequence[RowData]) -> List[List[int]]:
    """Parse multiple stored rows."""
    return [parse_cell_row(row) for row in rows]
