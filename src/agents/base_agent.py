"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield.environment import ActionType


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose a move
    from the current observation. Actions follow the MinesweeperEnv layout:
    one block of rows * cols actions per ActionType.
    """

    def __init__(self, board_rows: int, board_cols: int) -> None:
        """
        Initialize the agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
        """
        self.board_rows = board_rows
        self.board_cols = board_cols
        self.total_cells = board_rows * board_cols

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
            Flat action index.
        """

    def action_to_position(self, action: int) -> Tuple[ActionType, int, int]:
        """Convert flat action index to (type, row, col)."""
        kind, index = divmod(int(action), self.total_cells)
        row, col = divmod(index, self.board_cols)
        return ActionType(kind), row, col

    def position_to_action(
        self, row: int, col: int, action_type: ActionType = ActionType.STEP
    ) -> int:
        """Convert (row, col) and move type to flat action index."""
        return int(action_type) * self.total_cells + row * self.board_cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get a mask of step actions from the observation alone.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over the full action space; only covered cells
            (value -1) are marked, in the STEP block.
        """
        mask = np.zeros(len(ActionType) * self.total_cells, dtype=bool)
        mask[: self.total_cells] = observation.flatten() == -1
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
