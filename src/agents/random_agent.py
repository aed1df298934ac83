"""
Random agent for Minesweeper.

Baseline player that activates covered cells at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """Agent that picks a covered cell uniformly at random."""

    def __init__(self, grid_size: int = 10, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            grid_size: Side length of the square board.
            seed: Random seed for reproducibility.
        """
        super().__init__(grid_size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing covered; any index is a harmless no-op
            return 0

        return int(self.rng.choice(valid_indices))
