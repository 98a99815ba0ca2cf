#!/usr/bin/env python3
"""
Cloture - Grid Set Analyzer

Computes fence statistics across directories of grid files.
Usage: python analyze.py <directory_of_json_files> [additional_directories...]
Examples:
    python analyze.py grids/
    python analyze.py grids/farms/ grids/parks/
"""

import sys
from pathlib import Path

import numpy as np

from cloture.core.edge_map import EdgeMap
from cloture.formats.grid_data import GridData


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "mean": float(np.mean(arr)),
        "count": len(values),
    }


def collect_results(directories):
    """
    Analyze every grid file in the given directories.

    Returns:
        Tuple of (results, failures): results is a list of
        (filename, EdgeMap); failures a list of (filename, error message).
    """
    results = []
    failures = []

    for directory in directories:
        for filepath in sorted(Path(directory).glob("*.json")):
            try:
                grid_data = GridData.from_file(filepath)
                results.append((filepath.name, EdgeMap(grid_data.grid)))
            except ValueError as e:
                failures.append((filepath.name, str(e)))

    return results, failures


def print_stats(title, stats, precision=1):
    print(f"\n{title} (n={stats['count']}):")
    for key in ("min", "25th", "50th", "75th", "max", "mean"):
        label = f"{key.capitalize() if key[0].isalpha() else key}:"
        print(f"  {label:<6}{stats[key]:.{precision}f}")


def analyze_grids(directories):
    """Analyze all grid files in the given directory or directories."""
    if isinstance(directories, str):
        directories = [directories]

    results, failures = collect_results(directories)

    if not results and not failures:
        print(f"No grid files found in {', '.join(directories)}")
        return 1

    print(
        f"Analyzing {len(directories)} director{'y' if len(directories) == 1 else 'ies'}: {', '.join(directories)}"
    )
    print(f"Found {len(results) + len(failures)} grid files\n")

    if results:
        print("=" * 60)
        print("FENCE STATISTICS")
        print("=" * 60)
        print_stats("Fence perimeter", percentile_stats([m.fence_perimeter for _, m in results]))
        print_stats("Fence segments", percentile_stats([m.fence_count for _, m in results]), 0)

        print("\n" + "=" * 60)
        print("ZONE STATISTICS")
        print("=" * 60)
        print_stats("Zones per grid", percentile_stats([m.zone_count for _, m in results]), 0)
        lakes = [(name, len(m.inner_zones)) for name, m in results if m.inner_zones]
        if lakes:
            print(f"\nGrids with enclosed lakes ({len(lakes)} found):")
            for name, count in lakes:
                print(f"  {name}: {count} lake(s)")
        else:
            print("\nNo grid has an enclosed lake.")

    print("\n" + "=" * 60)
    print("INVALID GRIDS")
    print("=" * 60)
    if failures:
        for name, message in failures:
            first_line = message.splitlines()[0]
            print(f"  {name}: {first_line}")
    else:
        print("\nAll grids are valid.")

    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(
            "Usage: python analyze.py <directory_of_json_files> [additional_directories...]"
        )
        return 1

    return analyze_grids(argv)


if __name__ == "__main__":
    sys.exit(main())
