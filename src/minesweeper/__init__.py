"""
Minesweeper game module.

Provides the board engine, its cell model and the text and Gymnasium
front-ends built on top of it.
"""
from .cell import Cell, CellState, CellView
from .board import (
    Board,
    BoardConfig,
    RevealOutcome,
    InvalidConfigurationError,
    OutOfBoundsError,
    DEFAULT_GRID_SIZE,
    POPULATION_CONSTANT,
)
from .console import ConsoleSession, render_observation
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "RevealOutcome",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "DEFAULT_GRID_SIZE",
    "POPULATION_CONSTANT",
    "ConsoleSession",
    "render_observation",
    "MinesweeperEnv",
]
