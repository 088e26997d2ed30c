"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, flood reveal,
chording, flag bookkeeping, and win/loss detection.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellView

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

# Free cells needed before the whole 3x3 block around the first click
# can be kept clear of mines.
SAFE_ZONE_CELLS = 9


# ============================================================================
# Exceptions
# ============================================================================

class MinesweeperError(Exception):
    """Base class for errors raised by the game model."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot form a game."""


class OutOfBounds(MinesweeperError, IndexError):
    """Cell coordinates outside the current grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Invalid cell coordinates ({row}, {col}).")
        self.row = row
        self.col = col


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows <= 0 or self.cols <= 0 or self.num_mines <= 0:
            raise InvalidConfiguration(
                "Dimensions and number of mines must be positive."
            )
        if self.num_mines >= self.rows * self.cols:
            raise InvalidConfiguration(
                f"Too many mines for {self.rows} rows and {self.cols} cols."
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Cells that must be opened to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(13, 15, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and every counter derived from it. Mines are
    laid on the first step of each game, around the stepped-on cell.
    Callers read cells through ``get_cell`` and change them only through
    the board's operations.
    """

    config: Optional[BoardConfig] = None
    seed_value: Optional[int] = field(default=None, repr=False)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _rng: random.Random = field(default_factory=random.Random, repr=False)
    _game_started: bool = False
    _mines_generated: bool = False
    _opened_count: int = 0
    _flags_placed: int = 0
    _game_over: bool = False
    _player_dead: bool = False
    _game_won: bool = False
    _start_time: Optional[float] = None

    def __post_init__(self) -> None:
        """Seed the generator and start a game if a config was given."""
        if self.seed_value is not None:
            self.seed(self.seed_value)
        if self.config is not None:
            self.new_game_from_config(self.config)

    def seed(self, value: Optional[int]) -> None:
        """Reseed mine placement for reproducible layouts."""
        self._rng.seed(value)

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    def new_game(self, rows: int, cols: int, mines: int) -> None:
        """
        Start a new game, discarding the current grid.

        Mines are not placed until the first ``step_on_cell``.

        Raises:
            InvalidConfiguration: If a value is not positive or there are
                at least as many mines as cells.
        """
        self.new_game_from_config(BoardConfig(rows, cols, mines))

    def new_game_from_config(self, config: BoardConfig) -> None:
        """Start a new game with a validated configuration."""
        self.config = config
        self._init_grid()
        self._game_started = True
        self._mines_generated = False
        self._opened_count = 0
        self._flags_placed = 0
        self._game_over = False
        self._player_dead = False
        self._game_won = False
        self._start_time = None
        logger.debug(
            "New game: %dx%d with %d mines",
            config.rows, config.cols, config.num_mines,
        )

    def reset(self) -> None:
        """Start a new game with the current dimensions."""
        if self.config is None:
            raise InvalidConfiguration("No game to reset.")
        self.new_game_from_config(self.config)

    def _init_grid(self) -> None:
        """Create a grid of covered, unflagged, mine-free cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.num_cols)]
            for row in range(self.num_rows)
        ]

    # ========================================================================
    # Mine Generation (Low-level)
    # ========================================================================

    def _generate_mines(self, first_row: int, first_col: int) -> None:
        """
        Lay mines anywhere except the restricted zone around the first click.

        The zone is the clicked cell and its neighbors when enough free
        cells remain for it; otherwise just the clicked cell.
        """
        restricted = self._restricted_zone(first_row, first_col)
        logger.debug(
            "Generating %d mines around (%d, %d), %d cells restricted",
            self.num_mines, first_row, first_col, len(restricted),
        )

        mines: Set[Position] = set()
        while len(mines) < self.num_mines:
            row = self._rng.randrange(self.num_rows)
            col = self._rng.randrange(self.num_cols)
            if (row, col) in mines or (row, col) in restricted:
                continue
            mines.add((row, col))

        self._lay_mines(mines)

    def _restricted_zone(self, row: int, col: int) -> Set[Position]:
        """Cells that must stay mine-free on the first click."""
        if self.config.safe_cells >= SAFE_ZONE_CELLS:
            return {(row, col), *self.neighbors(row, col)}
        return {(row, col)}

    def _lay_mines(self, positions: Iterable[Position]) -> None:
        """Mark mines, update neighbor counts and start the clock."""
        for row, col in positions:
            self._grid[row][col].mark_mine()
            for neighbor_row, neighbor_col in self.neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].increment_adjacent_mine_count()
        self._start_time = self.clock()
        self._mines_generated = True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for neighbors inside the grid.
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

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def _validate_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBounds(row, col)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def step_on_cell(self, row: int, col: int) -> int:
        """
        Step on the cell at the given position.

        The first step of a game lays the mines. Flagged and visible cells
        are left alone. A mine kills the player and discloses every mine;
        a zero cell opens its whole connected zero region and that
        region's numbered border.

        Returns:
            Number of cells opened by this call.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        if not self._mines_generated:
            self._generate_mines(row, col)
        return self._open_from(row, col)

    def _open_from(self, row: int, col: int) -> int:
        """Open a cell and flood through zero cells with an explicit stack."""
        opened = 0
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_flagged or not cell.reveal():
                continue

            opened += 1
            self._opened_count += 1

            if cell.is_mine:
                self._explode(cell)
            elif cell.adjacent_mine_count == 0:
                pending.extend(self.neighbors(current_row, current_col))

        self._check_win_condition()
        return opened

    def _explode(self, cell: Cell) -> None:
        """Kill the player and disclose every mine."""
        self._player_dead = True
        self._game_over = True
        for row in self._grid:
            for other in row:
                if other.is_mine:
                    other.reveal()
        logger.debug("Stepped on mine at (%d, %d)", cell.row, cell.col)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are open and the player lives."""
        if self._player_dead or self._game_won:
            return
        if self._opened_count == self.config.safe_cells:
            self._game_over = True
            self._game_won = True
            logger.debug("Game won after %d seconds", self.elapsed_seconds)

    def chord_cell(self, row: int, col: int) -> int:
        """
        Chord action: step on every neighbor if the flag count matches.

        Flags are not checked against the real mines, so a misplaced flag
        can get the player killed here.

        Returns:
            Number of cells opened by this call.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        cell = self._grid[row][col]
        if cell.adjacent_flag_count != cell.adjacent_mine_count:
            return 0

        opened = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            opened += self._open_from(neighbor_row, neighbor_col)
        return opened

    def place_or_remove_flag_on_cell(self, row: int, col: int) -> bool:
        """
        Toggle a flag, keeping neighbor flag counts in step.

        A new flag is refused once as many flags as mines are placed.

        Returns:
            True if a flag was placed or removed.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        cell = self._grid[row][col]
        if cell.is_visible:
            return False

        if cell.is_flagged:
            cell.toggle_flag()
            self._flags_placed -= 1
            for neighbor_row, neighbor_col in self.neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].decrement_adjacent_flag_count()
            return True

        if self.num_flags <= 0:
            return False

        cell.toggle_flag()
        self._flags_placed += 1
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            self._grid[neighbor_row][neighbor_col].increment_adjacent_flag_count()
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def num_rows(self) -> int:
        return self.config.rows if self.config else 0

    @property
    def num_cols(self) -> int:
        return self.config.cols if self.config else 0

    @property
    def num_mines(self) -> int:
        return self.config.num_mines if self.config else 0

    @property
    def num_flags(self) -> int:
        """Flags left to place (mines minus flags placed)."""
        return self.num_mines - self._flags_placed

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the mines were laid, 0 before that."""
        if self._start_time is None:
            return 0
        return int(self.clock() - self._start_time)

    @property
    def mines_generated(self) -> bool:
        return self._mines_generated

    @property
    def opened_count(self) -> int:
        """Cells opened by stepping, including a detonated mine."""
        return self._opened_count

    @property
    def is_game_started(self) -> bool:
        """True once any game has been started, finished or not."""
        return self._game_started

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def is_player_dead(self) -> bool:
        return self._player_dead

    @property
    def is_game_won(self) -> bool:
        return self._game_won

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if not self._game_started:
            return GameState.NOT_STARTED
        if self._player_dead:
            return GameState.LOST
        if self._game_won:
            return GameState.WON
        return GameState.PLAYING

    def get_cell(self, row: int, col: int) -> CellView:
        """
        Get a read-only view of the cell at a position.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._validate_position(row, col)
        return self._grid[row][col]

    def cells(self) -> Iterator[CellView]:
        """Iterate over every cell in row-major order."""
        for row in self._grid:
            yield from row

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = covered
                -2 = flagged
                0-8 = visible with adjacent count
                9 = visible mine
        """
        obs = np.zeros((self.num_rows, self.num_cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that stepping on would open.

        Returns:
            List of (row, col) positions that are covered and unflagged.
        """
        return [
            (cell.row, cell.col) for cell in self.cells() if cell.is_hidden
        ]
