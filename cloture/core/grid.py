"""
Cloture - Grid Model

Immutable rectangular grid of occupied/empty cells. The grid is the only
input of the analysis and is validated once when it is built.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .constants import EMPTY, OCCUPIED
from .layers import FrozenLayer, Layer, copy_layer, neighbor_value


@dataclass
class GridProblem:
    """A single problem found while validating grid rows."""

    row: int
    message: str
    col: Optional[int] = None

    def __str__(self) -> str:
        if self.col is None:
            return f"Row {self.row}: {self.message}"
        return f"Row {self.row}, Col {self.col}: {self.message}"


class InvalidGridError(ValueError):
    """Raised when grid rows are empty, ragged or hold values other than 0/1."""

    def __init__(self, problems: list[GridProblem]):
        self.problems = problems
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.problems:
            return "Grid is empty: at least one row and one column are required"

        lines = [f"Grid is invalid ({len(self.problems)} problem(s)):"]
        for problem in self.problems[:10]:
            lines.append(f"  {problem}")
        if len(self.problems) > 10:
            lines.append(f"  ... and {len(self.problems) - 10} more")
        return "\n".join(lines)


@dataclass(frozen=True)
class Grid:
    """Rectangular matrix of cells indexed as rows[y][x]."""

    rows: FrozenLayer

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Grid":
        """
        Build a validated grid from rows of 0/1 values.

        Args:
            rows: Sequence of rows, each a sequence of 0 (empty) or 1 (occupied)

        Returns:
            Grid holding an immutable copy of the rows

        Raises:
            InvalidGridError: If the grid is empty, ragged or holds other values
        """
        if isinstance(rows, Grid):
            return rows

        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidGridError([])

        width = len(rows[0])
        problems: list[GridProblem] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                problems.append(
                    GridProblem(y, f"expected {width} columns, found {len(row)}")
                )
                continue
            for x, value in enumerate(row):
                # bool is an int subclass; True/False are not cell values
                if isinstance(value, bool) or value not in (EMPTY, OCCUPIED):
                    problems.append(GridProblem(y, f"invalid cell value {value!r}", x))

        if problems:
            raise InvalidGridError(problems)

        return cls(tuple(tuple(int(value) for value in row) for row in rows))

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def __getitem__(self, y: int) -> tuple[int, ...]:
        return self.rows[y]

    def __len__(self) -> int:
        return len(self.rows)

    def is_occupied(self, x: int, y: int) -> bool:
        return self.rows[y][x] == OCCUPIED

    def neighbor_is_occupied(self, x: int, y: int, direction: str) -> bool:
        """Whether the neighbor in a direction exists and is occupied."""
        return neighbor_value(self.rows, x, y, direction) == OCCUPIED

    def to_layer(self) -> Layer:
        """Mutable copy of the cells (occupied -> 1, empty -> 0)."""
        return copy_layer(self.rows)
