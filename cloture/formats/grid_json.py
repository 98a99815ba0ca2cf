"""
Cloture - Grid JSON Writer

Writes grid documents with the header fields first and one grid row per
line, so a stored grid reads like the grid itself:

    {
      "name": "square",
      "width": 3,
      "height": 2,
      "rows": [
        "0 1 0",
        "1 1 1"
      ]
    }
"""

import json
from typing import Sequence, TextIO

from . import row_utils


def format_row_entry(row: Sequence[int], as_string: bool = False) -> str:
    """
    Format one grid row as a JSON value.

    Args:
        row: Cell values of the row
        as_string: Write the row as a "0 1 1 0" string instead of an array

    Returns:
        JSON text for the row, always on a single line.
    """
    if as_string:
        return json.dumps(row_utils.format_cell_row(row))
    return "[" + ", ".join(str(int(value)) for value in row) + "]"


def dumps_grid(
    name: str,
    rows: Sequence[Sequence[int]],
    rows_as_strings: bool = False,
    indent: int = 2,
) -> str:
    """
    Serialize a grid document to JSON text.

    Width and height are taken from the rows.

    Returns:
        The document, ending with a newline.
    """
    pad = " " * indent
    header = {
        "name": name,
        "width": len(rows[0]) if rows else 0,
        "height": len(rows),
    }

    lines = ["{"]
    for key, value in header.items():
        lines.append(f"{pad}{json.dumps(key)}: {json.dumps(value)},")

    if rows:
        entries = [pad * 2 + format_row_entry(row, rows_as_strings) for row in rows]
        lines.append(f'{pad}"rows": [')
        lines.append(",\n".join(entries))
        lines.append(f"{pad}]")
    else:
        lines.append(f'{pad}"rows": []')

    lines.append("}")
    return "\n".join(lines) + "\n"


def dump_grid(
    fp: TextIO,
    name: str,
    rows: Sequence[Sequence[int]],
    rows_as_strings: bool = False,
):
    """Write a grid document to a text stream."""
    fp.write(dumps_grid(name, rows, rows_as_strings))
