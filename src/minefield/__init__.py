"""
Minesweeper game module.

Provides the rules engine (board and cell state), text rendering and a
Gymnasium environment for programmatic players.
"""
from .cell import Cell, CellState, CellView
from .board import (
    Board,
    BoardConfig,
    GameState,
    MinesweeperError,
    InvalidConfiguration,
    OutOfBounds,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
)
from .environment import ActionType, MinesweeperEnv
from .render import render_board, status_line, format_elapsed

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "GameState",
    "MinesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "ActionType",
    "MinesweeperEnv",
    "render_board",
    "status_line",
    "format_elapsed",
]
