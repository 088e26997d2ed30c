"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, MinesweeperEnv


class FakeClock:
    """Manually advanced clock for elapsed-time tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a clock that only moves when told to."""
    return FakeClock()


@pytest.fixture
def default_board(clock: FakeClock) -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10), seed_value=1234, clock=clock)


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 3, 1), seed_value=7)


@pytest.fixture
def unstarted_board() -> Board:
    """Create a board on which no game was ever started."""
    return Board()


@pytest.fixture
def make_board(clock: FakeClock) -> Callable[..., Board]:
    """
    Build a board with mines at fixed positions.

    The mines are laid the way the first step would lay them, so the
    following step_on_cell does not generate new ones.
    """
    def factory(
        rows: int, cols: int, mines_at: Iterable[Tuple[int, int]]
    ) -> Board:
        mines_at = list(mines_at)
        board = Board(clock=clock)
        board.new_game(rows, cols, len(mines_at))
        board._lay_mines(mines_at)
        return board

    return factory


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a covered cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell(1, 1)
    cell.mark_mine()
    return cell


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a beginner environment."""
    return MinesweeperEnv(config=BoardConfig(9, 9, 10))


@pytest.fixture
def tiny_env() -> MinesweeperEnv:
    """Create a 1x2 environment with one mine."""
    return MinesweeperEnv(config=BoardConfig(1, 2, 1))
