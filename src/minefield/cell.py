"""
Cell module for Minesweeper game.

Represents individual cells on the game board. A cell only stores its
own state; every game rule lives in the board, which is the only caller
of the mutators below.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Protocol


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Read-only View
# ============================================================================

class CellView(Protocol):
    """What a presentation layer may read from a cell."""

    @property
    def row(self) -> int: ...

    @property
    def col(self) -> int: ...

    @property
    def is_mine(self) -> bool: ...

    @property
    def is_visible(self) -> bool: ...

    @property
    def is_flagged(self) -> bool: ...

    @property
    def adjacent_mine_count(self) -> int: ...

    @property
    def adjacent_flag_count(self) -> int: ...

    @property
    def is_hidden(self) -> bool: ...

    @property
    def neighbors_display(self) -> str: ...


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row of this cell, fixed at creation.
        col: Column of this cell, fixed at creation.
        is_mine: Whether this cell contains a mine.
        is_visible: Whether this cell has been uncovered.
        is_flagged: Whether a flag sits on this cell.
        adjacent_mine_count: Mines in neighboring cells (0-8), never
            counting this cell's own mine.
        adjacent_flag_count: Flags on neighboring cells (0-8).
    """

    row: int
    col: int
    is_mine: bool = False
    is_visible: bool = False
    is_flagged: bool = False
    adjacent_mine_count: int = 0
    adjacent_flag_count: int = 0

    def reveal(self) -> bool:
        """
        Make this cell visible.

        Returns:
            True if the cell was covered before this call.
        """
        if self.is_visible:
            return False
        self.is_visible = True
        return True

    def mark_mine(self) -> None:
        """Put a mine in this cell. There is no way to take it back."""
        self.is_mine = True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is visible.
        """
        if self.is_visible:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def increment_adjacent_mine_count(self) -> None:
        self.adjacent_mine_count += 1

    def increment_adjacent_flag_count(self) -> None:
        self.adjacent_flag_count += 1

    def decrement_adjacent_flag_count(self) -> None:
        self.adjacent_flag_count -= 1

    @property
    def state(self) -> CellState:
        """Visual state; a flag is drawn even over a disclosed mine."""
        if self.is_flagged:
            return CellState.FLAGGED
        if self.is_visible:
            return CellState.REVEALED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is covered and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def neighbors_display(self) -> str:
        """Number to draw on an opened cell, empty for zero cells and mines."""
        if self.is_mine or self.adjacent_mine_count == 0:
            return ""
        return str(self.adjacent_mine_count)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Visible cell with adjacent mine count
            9: Visible mine (game over state)
        """
        if self.is_flagged:
            return -2
        if not self.is_visible:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mine_count
