"""Shared pytest fixtures for grid analysis tests."""

from pathlib import Path

import pytest

from cloture.core.grid import Grid
from cloture.formats.grid_data import GridData

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the hand-crafted grid files."""
    return FIXTURES_DIR


@pytest.fixture
def load_rows():
    """Load the rows of a fixture grid by name."""

    def _load(name: str) -> list[list[int]]:
        return GridData.from_file(FIXTURES_DIR / f"{name}.json").rows

    return _load


@pytest.fixture
def load_grid(load_rows):
    """Load a fixture grid by name as a validated Grid."""

    def _load(name: str) -> Grid:
        return Grid.from_rows(load_rows(name))

    return _load


@pytest.fixture
def square_grid(load_grid):
    """3x3 solid block centered in a 5x5 grid."""
    return load_grid("square")


@pytest.fixture
def ring_grid(load_grid):
    """3x3 grid: occupied ring around one empty cell."""
    return load_grid("ring")


@pytest.fixture
def lake_grid(load_grid):
    """3x3 ring with an empty center, centered in a 5x5 grid."""
    return load_grid("lake")


@pytest.fixture
def pond_grid(load_grid):
    """5x5 block with a one-cell hole in its middle, in a 7x7 grid."""
    return load_grid("pond")


@pytest.fixture
def full_grid(load_grid):
    """4x3 grid with every cell occupied."""
    return load_grid("full")


@pytest.fixture
def l_shape_grid(load_grid):
    """One-cell-wide L shape in a 6x6 grid."""
    return load_grid("l_shape")


@pytest.fixture
def wall_grid(load_grid):
    """3x2 grid split by a vertical wall into two outer zones."""
    return load_grid("wall")


@pytest.fixture
def u_shape_rows(load_rows):
    """U shape opening onto the top border (structurally invalid)."""
    return load_rows("u_shape")
