"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, grid_size: int) -> None:
        """
        Initialize the agent.

        Args:
            grid_size: Side length of the square board.
        """
        self.grid_size = grid_size
        self.total_cells = grid_size * grid_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * grid_size + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.grid_size)

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.grid_size + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        # Hidden cells (value -1) are valid actions
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for new episode."""

    def play_episode(
        self,
        env,
        seed: Optional[int] = None,
        on_step: Optional[Callable[[int, Dict[str, Any]], None]] = None,
    ) -> Dict[str, Any]:
        """
        Play one game in ``env`` until it terminates.

        Args:
            env: A ``MinesweeperEnv`` (or compatible gymnasium env).
            seed: Seed passed to ``env.reset``.
            on_step: Called with (action, info) after every move.

        Returns:
            The final info dict of the episode.
        """
        self.reset()
        observation, info = env.reset(seed=seed)
        done = False
        while not done:
            action = self.select_action(observation, env.get_action_mask())
            observation, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            if on_step is not None:
                on_step(action, info)
        return info
