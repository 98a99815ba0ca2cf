#!/usr/bin/env python3
"""
Cloture - Fence Calculator

Computes the fence needed to enclose the shape in a grid file and
optionally prints the intermediate layers.
"""

import argparse
import logging
import sys

from cloture.core.edge_map import LAYER_NAMES, EdgeMap
from cloture.formats.grid_data import GridData
from cloture.rendering.text_renderer import display_layer


def analyze_grid_file(grid_path: str, show: list[str] | None = None) -> EdgeMap:
    """Analyze a grid file and print its fence report."""
    grid_data = GridData.from_file(grid_path)
    edge_map = EdgeMap(grid_data.grid)

    print(f"{grid_data.name}: {edge_map.width}x{edge_map.height}")
    print(f"  Zones:     {edge_map.zone_count} ({len(edge_map.inner_zones)} enclosed)")
    print(f"  Fences:    {edge_map.fence_count}")
    print(f"  Perimeter: {edge_map.fence_perimeter:.1f}")

    layers = edge_map.layers()
    for name in show or []:
        print(f"\n{name}:")
        display_layer(layers[name])

    return edge_map


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute the fence perimeter of the shape in a grid file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python tools/fence.py grids/square.json
  python tools/fence.py grids/square.json --show zones filled_map
  python tools/fence.py grids/square.json --show all -v
""",
    )
    parser.add_argument("grid", help="Grid JSON file")
    parser.add_argument(
        "--show",
        nargs="+",
        choices=LAYER_NAMES + ("all",),
        default=[],
        help="Layers to print after the report",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log analysis details"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    show = list(LAYER_NAMES) if "all" in args.show else args.show

    try:
        analyze_grid_file(args.grid, show)
    except (OSError, ValueError) as e:
        # InvalidGridError and StructuralValidityError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
