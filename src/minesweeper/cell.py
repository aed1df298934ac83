"""
Cell module for Minesweeper game.

Holds the pure game state of one grid position: its coordinates,
whether it is a mine, its neighbouring mine count and whether it has
been revealed. Rendering lives elsewhere.
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import NamedTuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


HIDDEN_VALUE = -1
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index, fixed for the lifetime of the cell.
        col: Column index, fixed for the lifetime of the cell.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden or revealed).
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = field(default=CellState.HIDDEN)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was newly revealed, False if already revealed.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def clear(self) -> None:
        """Return the cell to a covered, mine-free state."""
        self.is_mine = False
        self.adjacent_mines = 0
        self.state = CellState.HIDDEN

    @property
    def position(self) -> tuple:
        """(row, col) of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def to_observation(self) -> int:
        """
        Convert cell to its observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines

    def view(self) -> "CellView":
        """Read-only snapshot of this cell."""
        return CellView(self.is_revealed, self.is_mine, self.adjacent_mines)


class CellView(NamedTuple):
    """Snapshot of a cell handed to presentation code."""

    revealed: bool
    is_mine: bool
    adjacent_mines: int
