"""
Board module for Minesweeper game.

Implements the game board with mine placement, neighbour counts,
cascading reveal and win/loss detection.
"""
import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView


# ============================================================================
# Constants
# ============================================================================

DEFAULT_GRID_SIZE = 10

# Mines per game are grid_size * this constant
POPULATION_CONSTANT = 1.5


class RevealOutcome(Enum):
    """Result of activating a cell."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Errors
# ============================================================================

class InvalidConfigurationError(ValueError):
    """Board settings that cannot produce a playable layout."""


class OutOfBoundsError(IndexError):
    """Coordinates outside the board."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        grid_size: Side length of the square grid.
        population_constant: Mines per unit of side length.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    population_constant: float = POPULATION_CONSTANT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.grid_size < 1:
            raise InvalidConfigurationError("Grid size must be positive")
        if not math.isfinite(self.population_constant):
            raise InvalidConfigurationError(
                "Population constant must be finite"
            )
        if self.population_constant < 0:
            raise InvalidConfigurationError(
                "Population constant cannot be negative"
            )
        total_cells = self.grid_size * self.grid_size
        if self.mine_count >= total_cells:
            raise InvalidConfigurationError(
                f"Too many mines ({self.mine_count} for {total_cells} cells)"
            )

    @property
    def mine_count(self) -> int:
        """Number of mines placed by random generation."""
        return math.floor(self.population_constant * self.grid_size)

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and every state transition on it. A fresh
    random layout is generated on construction; pass a seeded ``rng``
    for reproducible layouts.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _outcome: RevealOutcome = RevealOutcome.CONTINUE
    _mine_count: int = 0

    def __post_init__(self) -> None:
        """Build the grid and lay out the first round."""
        self.regenerate()

    # ========================================================================
    # Grid Generation (Low-level)
    # ========================================================================

    def regenerate(
        self,
        config: Optional[BoardConfig] = None,
        mine_positions: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> "Board":
        """
        Start a new round with a fresh mine layout.

        Args:
            config: Replacement configuration; keeps the current one if
                omitted.
            mine_positions: Explicit (row, col) mine layout. When omitted,
                mines are sampled at random.

        Returns:
            This board, for chaining.
        """
        config = config or self.config
        if mine_positions is None:
            positions = self._sample_mine_positions(config)
        else:
            positions = self._validate_mine_positions(mine_positions, config)
        self.config = config

        if len(self._grid) != self.config.grid_size:
            self._init_grid()
        else:
            for cell in self._iter_cells():
                cell.clear()

        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._mine_count = len(positions)

        self._calculate_adjacent_mines()
        self._outcome = RevealOutcome.CONTINUE
        return self

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        size = self.config.grid_size
        self._grid = [
            [Cell(row, col) for col in range(size)]
            for row in range(size)
        ]

    def _sample_mine_positions(
        self, config: BoardConfig
    ) -> List[Tuple[int, int]]:
        """Pick distinct random positions by linear index."""
        size = config.grid_size
        indices = self.rng.sample(range(size * size), config.mine_count)
        return [divmod(index, size) for index in indices]

    @staticmethod
    def _validate_mine_positions(
        mine_positions: Iterable[Tuple[int, int]], config: BoardConfig
    ) -> List[Tuple[int, int]]:
        """Check an injected layout fits the board."""
        size = config.grid_size
        positions = [(int(row), int(col)) for row, col in mine_positions]
        for row, col in positions:
            if not (0 <= row < size and 0 <= col < size):
                raise InvalidConfigurationError(
                    f"Mine position ({row}, {col}) is off the board"
                )
        if len(set(positions)) != len(positions):
            raise InvalidConfigurationError("Duplicate mine positions")
        if len(positions) >= config.total_cells:
            raise InvalidConfigurationError(
                f"Too many mines ({len(positions)} for "
                f"{config.total_cells} cells)"
            )
        return positions

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for cell in self._iter_cells():
            if not cell.is_mine:
                cell.adjacent_mines = sum(
                    1 for neighbour in self.neighbours_of(cell)
                    if neighbour.is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors, in row-major
            offset order.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def neighbours_of(self, cell: Cell) -> List[Cell]:
        """Return the up-to-8 cells surrounding ``cell``."""
        self._check_owned(cell)
        return [
            self._grid[row][col]
            for row, col in self._get_neighbors(cell.row, cell.col)
        ]

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        size = self.config.grid_size
        return 0 <= row < size and 0 <= col < size

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) is outside a "
                f"{self.config.grid_size}x{self.config.grid_size} board"
            )

    def _check_owned(self, cell: Cell) -> None:
        """Reject cells that are not part of the current grid."""
        self._check_position(cell.row, cell.col)
        if self._grid[cell.row][cell.col] is not cell:
            raise OutOfBoundsError(
                f"Cell ({cell.row}, {cell.col}) does not belong to this board"
            )

    def _iter_cells(self) -> Iterator[Cell]:
        for cell_row in self._grid:
            yield from cell_row

    def _key(self, row: int, col: int) -> int:
        return row * self.config.grid_size + col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def activate_cell(self, row: int, col: int) -> RevealOutcome:
        """
        Activate the cell at the given position.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome of the move.

        Raises:
            OutOfBoundsError: If the position is not on the board.
        """
        self._check_position(row, col)
        return self.reveal(self._grid[row][col])

    def reveal(self, cell: Cell) -> RevealOutcome:
        """
        Reveal a cell and handle consequences.

        A mine ends the round as lost and only the mine itself is
        revealed. A zero cell cascades. Revealed cells and finished
        rounds are left untouched.

        Raises:
            OutOfBoundsError: If ``cell`` is not part of the current grid.
        """
        self._check_owned(cell)
        if self._outcome != RevealOutcome.CONTINUE:
            return self._outcome
        if cell.is_revealed:
            return RevealOutcome.CONTINUE

        if cell.is_mine:
            cell.reveal()
            self._outcome = RevealOutcome.LOST
            return self._outcome

        if cell.adjacent_mines == 0:
            self._cascade(cell)
        else:
            cell.reveal()

        if self._check_win_condition():
            self._outcome = RevealOutcome.WON
        return self._outcome

    def _cascade(self, start: Cell) -> None:
        """Flood-reveal the zero region around ``start`` and its border."""
        size = self.config.grid_size
        to_clear = {self._key(start.row, start.col)}
        while to_clear:
            row, col = divmod(to_clear.pop(), size)
            self._grid[row][col].reveal()

            for neighbour_row, neighbour_col in self._get_neighbors(row, col):
                neighbour = self._grid[neighbour_row][neighbour_col]
                if (
                    neighbour.adjacent_mines == 0
                    and not neighbour.is_mine
                    and neighbour.is_hidden
                ):
                    to_clear.add(self._key(neighbour_row, neighbour_col))
                else:
                    neighbour.reveal()

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return all(
            cell.is_revealed for cell in self._iter_cells() if not cell.is_mine
        )

    def disclose(self) -> None:
        """Reveal every covered cell, mines included."""
        for cell in self._iter_cells():
            cell.reveal()

    def reset(self) -> None:
        """Reset board to a fresh random layout for a new round."""
        self.regenerate()

    def give_up(self) -> np.ndarray:
        """
        Abandon the current round.

        Returns:
            The fully disclosed observation of the abandoned board, taken
            before a new layout is generated.
        """
        self.disclose()
        disclosed = self.get_observation()
        self.regenerate()
        return disclosed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def mine_count(self) -> int:
        """Number of mines in the current layout."""
        return self._mine_count

    @property
    def outcome(self) -> RevealOutcome:
        """Get current round outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._outcome == RevealOutcome.CONTINUE

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._outcome == RevealOutcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._outcome == RevealOutcome.LOST

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cell_state(self, row: int, col: int) -> CellView:
        """
        Read-only view of one cell for rendering.

        Raises:
            OutOfBoundsError: If the position is not on the board.
        """
        self._check_position(row, col)
        return self._grid[row][col].view()

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of every mine, in row-major order."""
        return [cell.position for cell in self._iter_cells() if cell.is_mine]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        size = self.config.grid_size
        obs = np.zeros((size, size), dtype=np.int8)
        for cell in self._iter_cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of covered cells.

        Returns:
            List of (row, col) positions that can still be revealed.
        """
        return [cell.position for cell in self._iter_cells() if cell.is_hidden]
