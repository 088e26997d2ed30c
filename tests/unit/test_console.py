"""
Unit tests for the terminal game session.
"""
import pytest
from minefield import BoardConfig, EXPERT
from minefield.console import (
    ConsoleGame,
    HELP_TEXT,
    LOSS_MESSAGE,
    QuitGame,
    WIN_MESSAGE,
    run,
)


@pytest.fixture
def game(make_board) -> ConsoleGame:
    """A 3x3 session with a mine in the top-left corner."""
    return ConsoleGame(board=make_board(3, 3, [(0, 0)]), config=BoardConfig(3, 3, 1))


# ============================================================================
# Command Tests
# ============================================================================

class TestCommands:
    """Test command parsing and dispatch."""

    def test_default_session_starts_beginner_game(self) -> None:
        """A fresh session has a game ready."""
        session = ConsoleGame()
        assert session.board.is_game_started is True
        assert session.board.num_rows == 9

    def test_blank_line_redraws(self, game: ConsoleGame) -> None:
        """Empty input shows the screen."""
        assert game.handle("   ") == game.screen()

    def test_quit(self, game: ConsoleGame) -> None:
        """Quit leaves the session."""
        with pytest.raises(QuitGame):
            game.handle("q")

    def test_help(self, game: ConsoleGame) -> None:
        """Help lists the commands."""
        assert game.handle("h") == HELP_TEXT

    def test_unknown_command(self, game: ConsoleGame) -> None:
        """Unknown commands are reported with the help."""
        assert game.handle("jump 1 1").startswith("Unknown command 'jump'")

    def test_step(self, game: ConsoleGame) -> None:
        """Step opens the cell."""
        game.handle("s 1 1")
        assert game.board.get_cell(1, 1).is_visible is True

    def test_flag(self, game: ConsoleGame) -> None:
        """Flag toggles the flag."""
        game.handle("f 0 0")
        assert game.board.get_cell(0, 0).is_flagged is True

    def test_open_chords_visible_cell(self, game: ConsoleGame) -> None:
        """Opening a visible cell chords it."""
        game.handle("o 1 1")
        game.handle("f 0 0")
        output = game.handle("o 1 1")

        assert game.board.is_game_won is True
        assert output.endswith(WIN_MESSAGE)

    def test_loss_message(self, game: ConsoleGame) -> None:
        """Stepping on a mine prints the loss message."""
        assert game.handle("s 0 0").endswith(LOSS_MESSAGE)

    def test_moves_refused_after_game_over(self, game: ConsoleGame) -> None:
        """Moves need a new game once the game is over."""
        game.handle("s 0 0")
        assert game.handle("s 2 2") == "The game is over. Type n for a new game."
        assert game.board.get_cell(2, 2).is_visible is False

    @pytest.mark.parametrize("line, message", [
        ("s 3 3", "Invalid cell coordinates (3, 3)."),
        ("s a b", "Row and column must be whole numbers."),
        ("s 1", "Expected a row and a column."),
    ])
    def test_bad_positions_are_reported(
        self, game: ConsoleGame, line: str, message: str
    ) -> None:
        """Input errors become messages, not crashes."""
        assert game.handle(line) == message


# ============================================================================
# New Game Tests
# ============================================================================

class TestNewGame:
    """Test starting new games from the console."""

    def test_new_game_same_size(self, game: ConsoleGame) -> None:
        """Plain n reuses the current size."""
        game.handle("s 1 1")
        game.handle("n")
        assert game.board.num_rows == 3
        assert game.board.mines_generated is False

    def test_new_game_with_difficulty(self, game: ConsoleGame) -> None:
        """A level name switches the size."""
        game.handle("n Expert")
        assert game.config is EXPERT
        assert (game.board.num_rows, game.board.num_cols) == (16, 30)

    def test_unknown_difficulty(self, game: ConsoleGame) -> None:
        """Unknown level keeps the current game."""
        assert game.handle("n huge") == "Unknown difficulty 'huge'."
        assert game.board.num_rows == 3


# ============================================================================
# Loop Tests
# ============================================================================

class TestRun:
    """Test the read-print loop."""

    def test_run_until_quit(self, game: ConsoleGame, capsys) -> None:
        """Each command's output is printed until quit."""
        lines = iter(["s 1 1", "f 0 0", "o 1 1", "q", "s 2 2"])
        run(game, reader=lambda prompt: next(lines))

        assert WIN_MESSAGE in capsys.readouterr().out
        assert next(lines) == "s 2 2"

    def test_run_until_end_of_input(self, game: ConsoleGame) -> None:
        """End of input ends the loop."""
        def reader(prompt: str) -> str:
            raise EOFError

        run(game, reader=reader)
        assert game.board.opened_count == 0
