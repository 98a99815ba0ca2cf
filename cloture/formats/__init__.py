"""
Grid file formats.

Loading and saving of grid JSON files.
"""

from .grid_data import GridData
from .row_utils import format_cell_row, parse_cell_row, parse_cell_rows

__all__ = ["GridData", "format_cell_row", "parse_cell_row", "parse_cell_rows"]
