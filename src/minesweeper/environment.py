"""
Gymnasium environment wrapper for Minesweeper.

Lets programmatic players drive the board through the standard
reset/step interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, RevealOutcome
from .cell import HIDDEN_VALUE, MINE_VALUE
from .console import render_observation


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size grid_size ** 2.
        Action i corresponds to cell at (i // grid_size, i % grid_size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action off the board or on an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10, 15 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        size = self.config.grid_size
        self.observation_space = spaces.Box(
            low=HIDDEN_VALUE,
            high=MINE_VALUE,
            shape=(size, size),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(size * size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seed for the board's mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board.rng.seed(seed)
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * grid_size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.grid_size)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Activate a cell and score the result."""
        cell = self.board.get_cell(row, col)

        # Invalid action (off the board or already revealed)
        if cell is None or cell.is_revealed:
            return -0.1

        outcome = self.board.activate_cell(row, col)

        if outcome == RevealOutcome.WON:
            return 10.0
        if outcome == RevealOutcome.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        hidden = len(self.board.get_valid_actions())
        total_safe = self.config.total_cells - self.board.mine_count
        return {
            "steps": self._steps,
            "revealed": self.config.total_cells - hidden,
            "total_safe": total_safe,
            "game_state": self.board.outcome.name,
            "valid_actions": hidden,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_observation(self.board.get_observation())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = covered cell.
        """
        return (self.board.get_observation() == HIDDEN_VALUE).flatten()
