"""
Cloture - Grid Data Model

Manages a grid file: its rows and optional name. Handles loading from and
saving to JSON files.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from . import grid_json, row_utils
from ..core.grid import Grid

PathLike = Union[str, Path]


class GridData:
    """Manages the rows and metadata of a grid file."""

    def __init__(self, rows: Optional[List[List[int]]] = None, name: str = ""):
        self.rows: List[List[int]] = rows if rows is not None else []
        self.name = name
        self.filepath: Optional[str] = None

    @classmethod
    def from_file(cls, path: PathLike) -> "GridData":
        grid_data = cls()
        grid_data.load(path)
        return grid_data

    def load(self, path: PathLike):
        """
        Load grid data from a JSON file.

        Raises:
            ValueError: If the file has no rows or its declared width or
                height does not match the rows
        """
        with open(path, "r") as f:
            data = json.load(f)

        if "rows" not in data:
            raise ValueError(f"Grid file has no 'rows': {path}")

        self.rows = row_utils.parse_cell_rows(data["rows"])

        height = data.get("height")
        if height is not None and height != len(self.rows):
            raise ValueError(
                f"Grid file declares height {height} but has {len(self.rows)} rows: {path}"
            )
        width = data.get("width")
        if width is not None and self.rows and width != len(self.rows[0]):
            raise ValueError(
                f"Grid file declares width {width} but rows have {len(self.rows[0])} cells: {path}"
            )

        self.name = data.get("name", Path(path).stem)
        self.filepath = str(path)

    def save(self, path: Optional[PathLike] = None, rows_as_strings: bool = False):
        """
        Save grid data to a JSON file.

        Args:
            path: Destination; defaults to the file the data was loaded from
            rows_as_strings: Store rows as "0 1 1 0" strings instead of arrays
        """
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        with open(path, "w") as f:
            grid_json.dump_grid(f, self.name, self.rows, rows_as_strings)

        self.filepath = str(path)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def grid(self) -> Grid:
        """
        Validated grid built from the rows.

        Raises:
            InvalidGridError: If the rows do not form a valid grid
        """
        return Grid.from_rows(self.rows)
