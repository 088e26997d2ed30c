"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Iterable, Optional

import numpy as np

from minefield.environment import ActionType

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    Only steps by default; flag toggles never end a game, so an agent that
    may flag can wander for a long time without a step limit.
    """

    def __init__(
        self,
        board_rows: int = 9,
        board_cols: int = 9,
        seed: Optional[int] = None,
        action_types: Iterable[ActionType] = (ActionType.STEP,),
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
            seed: Random seed for reproducibility.
            action_types: Move kinds the agent may pick.
        """
        super().__init__(board_rows, board_cols)
        self.rng = np.random.default_rng(seed)
        self.action_types = tuple(action_types)

        self._allowed = np.zeros(len(ActionType) * self.total_cells, dtype=bool)
        for action_type in self.action_types:
            start = int(action_type) * self.total_cells
            self._allowed[start:start + self.total_cells] = True

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
            Random action index among valid actions of the allowed types.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions & self._allowed)[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will have no effect)
            return 0

        return int(self.rng.choice(valid_indices))
