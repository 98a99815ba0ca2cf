#!/usr/bin/env python3
"""
Cloture - Grid Visualizer

Renders grid files as PNG images: the fence analysis, or a single layer.
"""

import argparse
import logging
import sys
from pathlib import Path

from cloture.core.constants import CELL_SIZE
from cloture.core.edge_map import LAYER_NAMES, EdgeMap
from cloture.formats.grid_data import GridData
from cloture.rendering.pil_renderer import (
    render_edge_map_to_image,
    render_layer_to_image,
)


def render_grid(
    grid_path: str,
    output_path: str,
    layer: str | None = None,
    cell_size: int = CELL_SIZE,
):
    """Render a single grid file to PNG."""
    grid_data = GridData.from_file(grid_path)
    edge_map = EdgeMap(grid_data.grid)

    if layer is None:
        img = render_edge_map_to_image(edge_map, cell_size)
    else:
        img = render_layer_to_image(edge_map.layers()[layer], cell_size)

    img.save(output_path)
    print(f"Saved: {output_path} ({img.width}x{img.height})")


def render_directory(
    grid_dir: str,
    output_dir: str,
    layer: str | None = None,
    cell_size: int = CELL_SIZE,
) -> int:
    """
    Render every grid file in a directory.

    Returns:
        Number of files that could not be rendered.
    """
    grid_path = Path(grid_dir)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    grid_files = sorted(grid_path.glob("*.json"))

    if not grid_files:
        print(f"No grid files found in {grid_dir}")
        return 0

    print(f"Rendering {len(grid_files)} grids from {grid_dir}...")

    failures = 0
    for grid_file in grid_files:
        suffix = f"_{layer}" if layer else ""
        out_file = output_path / f"{grid_file.stem}{suffix}.png"
        try:
            render_grid(str(grid_file), str(out_file), layer, cell_size)
        except ValueError as e:
            print(f"Warning: Skipped {grid_file.name}: {e}")
            failures += 1

    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render grid files and their fence analysis as PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render a single grid:
    python tools/visualize.py grids/square.json
    python tools/visualize.py grids/square.json square.png

  Render a single layer:
    python tools/visualize.py grids/square.json --layer zones

  Render a directory:
    python tools/visualize.py grids/ renders/
""",
    )
    parser.add_argument("input", help="Grid JSON file or directory of grid files")
    parser.add_argument(
        "output",
        nargs="?",
        help="Output PNG file or directory (default: next to the input)",
    )
    parser.add_argument(
        "-l", "--layer", choices=LAYER_NAMES, help="Render one layer instead of the analysis"
    )
    parser.add_argument(
        "-s", "--cell-size", type=int, default=CELL_SIZE, help="Pixels per cell"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log analysis details"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)

    if input_path.is_dir():
        output = args.output or str(input_path / "renders")
        failures = render_directory(str(input_path), output, args.layer, args.cell_size)
        return 1 if failures else 0

    if args.output:
        output = args.output
    else:
        suffix = f"_{args.layer}" if args.layer else ""
        output = str(input_path.with_name(f"{input_path.stem}{suffix}.png"))

    try:
        render_grid(str(input_path), output, args.layer, args.cell_size)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
