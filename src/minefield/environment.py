"""
Gymnasium environment wrapper for Minesweeper.

Lets programmatic players drive a Board through a standard interface.
"""
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .render import render_board, status_line


# ============================================================================
# Constants
# ============================================================================

class ActionType(IntEnum):
    """Move kinds, in the order they are laid out in the action space."""

    STEP = 0
    FLAG = 1
    CHORD = 2


WIN_REWARD = 10.0
LOSS_REWARD = -10.0
OPEN_REWARD = 1.0
FLAG_REWARD = 0.0
NO_EFFECT_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = covered cell
        - -2 = flagged cell
        - 0-8 = visible cell with adjacent mine count
        - 9 = visible mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        Action i is move ActionType(i // cells) on cell i % cells,
        a cell index being row * cols + col.

    Rewards:
        - +1 for a step or chord that opens cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for placing or removing a flag
        - -0.1 for an action with no effect
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        max_steps: Optional[int] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
            max_steps: Truncate episodes after this many actions.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode
        self.max_steps = max_steps

        self.num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ActionType) * self.num_cells)

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
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board.seed(seed)
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see the class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action_type, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._apply(action_type, row, col)

        observation = self.board.get_observation()
        terminated = self.board.is_game_over
        truncated = (
            not terminated
            and self.max_steps is not None
            and self._steps >= self.max_steps
        )

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[ActionType, int, int]:
        """Convert flat action index to (type, row, col)."""
        kind, index = divmod(int(action), self.num_cells)
        row, col = divmod(index, self.config.cols)
        return ActionType(kind), row, col

    def encode_action(self, action_type: ActionType, row: int, col: int) -> int:
        """Convert (type, row, col) to flat action index."""
        return int(action_type) * self.num_cells + row * self.config.cols + col

    def _apply(self, action_type: ActionType, row: int, col: int) -> float:
        """
        Play a move on the board and score it.

        Args:
            action_type: Which board operation to call.
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if action_type == ActionType.FLAG:
            changed = self.board.place_or_remove_flag_on_cell(row, col)
            return FLAG_REWARD if changed else NO_EFFECT_REWARD

        if action_type == ActionType.STEP:
            opened = self.board.step_on_cell(row, col)
        else:
            opened = self.board.chord_cell(row, col)

        if self.board.is_player_dead and opened:
            return LOSS_REWARD
        if self.board.is_game_won and opened:
            return WIN_REWARD
        if opened:
            return OPEN_REWARD
        return NO_EFFECT_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.opened_count,
            "total_safe": self.config.safe_cells,
            "flags_left": self.board.num_flags,
            "game_state": self.board.game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board and status as text."""
        return render_board(self.board) + "\n" + status_line(self.board)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        can_place_flag = self.board.num_flags > 0

        for cell in self.board.cells():
            index = cell.row * self.config.cols + cell.col
            if cell.is_hidden:
                mask[ActionType.STEP * self.num_cells + index] = True
            if not cell.is_visible and (cell.is_flagged or can_place_flag):
                mask[ActionType.FLAG * self.num_cells + index] = True
            if self._can_chord(cell.row, cell.col):
                mask[ActionType.CHORD * self.num_cells + index] = True

        return mask

    def _can_chord(self, row: int, col: int) -> bool:
        """Check if chording this cell would open anything."""
        cell = self.board.get_cell(row, col)
        if not cell.is_visible or cell.adjacent_flag_count != cell.adjacent_mine_count:
            return False
        return any(
            self.board.get_cell(r, c).is_hidden
            for r, c in self.board.neighbors(row, col)
        )
