# tests/conftest.py
import os
import sys

import pytest

# Ensure project root (where gridpath/ lives) is on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from gridpath.core.grid import Grid, make_grid


@pytest.fixture
def open_5x5() -> Grid:
    return make_grid(5, 5, (0, 0), (4, 4))


@pytest.fixture
def board() -> Grid:
    """The default 30x74 board with its standard start/end."""
    return make_grid(30, 74, (15, 25), (15, 51))
