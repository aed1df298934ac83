"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# Mines at opposite corners of a 3x3 board:
#   * 1 0
#   1 2 1
#   0 1 *
CANONICAL_MINES = [(0, 0), (2, 2)]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 10x10 board with 15 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def canonical_board() -> Board:
    """Create the 3x3 board with mines at (0, 0) and (2, 2)."""
    board = Board(BoardConfig(3), rng=random.Random(0))
    return board.regenerate(mine_positions=CANONICAL_MINES)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, population_constant=0), rng=random.Random(0))


@pytest.fixture
def single_mine_board() -> Board:
    """Create a 5x5 board with one mine in the top-left corner."""
    board = Board(BoardConfig(5), rng=random.Random(0))
    return board.regenerate(mine_positions=[(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(2, 3)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create the default board configuration."""
    return BoardConfig()
