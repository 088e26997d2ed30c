"""
Unit tests for Cell class.

Tests cell state, the mutators the board calls, and display helpers.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_covered_unflagged_and_safe(self) -> None:
        """New cell should be covered, unflagged and mine-free."""
        cell = Cell(2, 3)
        assert cell.is_mine is False
        assert cell.is_visible is False
        assert cell.is_flagged is False
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_cell_keeps_its_coordinates(self) -> None:
        """Cell should remember where it sits."""
        cell = Cell(2, 3)
        assert (cell.row, cell.col) == (2, 3)

    def test_default_counts_are_zero(self) -> None:
        """New cell should have no adjacent mines or flags."""
        cell = Cell(0, 0)
        assert cell.adjacent_mine_count == 0
        assert cell.adjacent_flag_count == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_covered_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a covered cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_visible is True
        assert hidden_cell.state == CellState.REVEALED

    def test_reveal_is_idempotent(self, hidden_cell: Cell) -> None:
        """Revealing twice leaves the cell visible and reports no change."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_visible is True

    def test_reveal_ignores_flag(self, mine_cell: Cell) -> None:
        """The cell itself does not guard flags; the board does."""
        mine_cell.toggle_flag()
        assert mine_cell.reveal() is True
        assert mine_cell.is_visible is True
        assert mine_cell.state == CellState.FLAGGED


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_covered_cell(self, hidden_cell: Cell) -> None:
        """Flagging a covered cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_flagged is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_covered(self, hidden_cell: Cell) -> None:
        """Toggling twice restores the cell."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell == Cell(0, 0)

    def test_flag_visible_cell_is_noop(self, hidden_cell: Cell) -> None:
        """Cannot flag a visible cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# Counter Tests
# ============================================================================

class TestCellCounters:
    """Test mine marking and neighbor counters."""

    def test_mark_mine(self, hidden_cell: Cell) -> None:
        """Marking sets the mine and marking again keeps it."""
        hidden_cell.mark_mine()
        hidden_cell.mark_mine()
        assert hidden_cell.is_mine is True

    def test_adjacent_mine_count_increments(self, hidden_cell: Cell) -> None:
        """Each increment adds one adjacent mine."""
        for _ in range(3):
            hidden_cell.increment_adjacent_mine_count()
        assert hidden_cell.adjacent_mine_count == 3

    def test_adjacent_flag_count_moves_both_ways(self, hidden_cell: Cell) -> None:
        """Flag count goes up and down with neighboring flags."""
        hidden_cell.increment_adjacent_flag_count()
        hidden_cell.increment_adjacent_flag_count()
        hidden_cell.decrement_adjacent_flag_count()
        assert hidden_cell.adjacent_flag_count == 1


# ============================================================================
# Display and Observation Tests
# ============================================================================

class TestCellDisplay:
    """Test the text and observation values of a cell."""

    def test_zero_cell_displays_nothing(self, hidden_cell: Cell) -> None:
        """A zero cell shows an empty string."""
        assert hidden_cell.neighbors_display == ""

    def test_mine_displays_nothing(self, mine_cell: Cell) -> None:
        """A mine shows no number even with mined neighbors."""
        mine_cell.increment_adjacent_mine_count()
        assert mine_cell.neighbors_display == ""

    @pytest.mark.parametrize("count", range(1, 9))
    def test_numbered_cell_displays_count(self, count: int) -> None:
        """A numbered cell shows its count."""
        cell = Cell(0, 0, adjacent_mine_count=count)
        assert cell.neighbors_display == str(count)

    def test_covered_cell_observation(self, hidden_cell: Cell) -> None:
        """Covered cell should return -1."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation(self, hidden_cell: Cell) -> None:
        """Flagged cell should return -2."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_visible_count_observation(self) -> None:
        """Visible cell returns its adjacent mine count."""
        cell = Cell(0, 0, adjacent_mine_count=4)
        cell.reveal()
        assert cell.to_observation() == 4

    def test_visible_mine_observation(self, mine_cell: Cell) -> None:
        """Visible mine should return 9."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
