"""
Terminal game session for Minesweeper.

Translates typed commands into board operations and produces the text to
show after each one. Reading input and printing is left to the caller.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .board import Board, BoardConfig, DIFFICULTIES, MinesweeperError
from .render import render_board, status_line

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

WIN_MESSAGE = "Congratulations! You won the game!"
LOSS_MESSAGE = "Boom! You just stepped on a mine! You're dead!"

HELP_TEXT = """Commands:
  o ROW COL   open: step on a covered cell, chord a visible one
  s ROW COL   step on a cell
  c ROW COL   chord a visible cell
  f ROW COL   place or remove a flag
  n [LEVEL]   new game (beginner, intermediate, expert)
  h           show this help
  q           quit"""


class QuitGame(Exception):
    """Raised when the player asks to leave."""


# ============================================================================
# Console Session
# ============================================================================

@dataclass
class ConsoleGame:
    """
    One player's terminal session.

    Attributes:
        board: Board being played.
        config: Dimensions used for the next new game.
        debug: Show the contents of covered cells.
        color: Colour mine counts with ANSI escapes.
    """

    board: Board = field(default_factory=Board)
    config: BoardConfig = field(default_factory=BoardConfig)
    debug: bool = False
    color: bool = False

    def __post_init__(self) -> None:
        if not self.board.is_game_started:
            self.board.new_game_from_config(self.config)

    def handle(self, line: str) -> str:
        """
        Run one command and return the text to show.

        Raises:
            QuitGame: On the quit command.
        """
        words = line.split()
        if not words:
            return self.screen()

        command, args = words[0].lower(), words[1:]
        if command in ("q", "quit"):
            raise QuitGame()
        if command in ("h", "help", "?"):
            return HELP_TEXT
        if command in ("n", "new"):
            return self._new_game(args)

        moves = {
            "o": self.open_cell,
            "s": self.board.step_on_cell,
            "c": self.board.chord_cell,
            "f": self.board.place_or_remove_flag_on_cell,
        }
        if command not in moves:
            return f"Unknown command {command!r}.\n{HELP_TEXT}"
        if self.board.is_game_over:
            return "The game is over. Type n for a new game."

        try:
            row, col = self._parse_position(args)
            moves[command](row, col)
        except (ValueError, MinesweeperError) as error:
            return str(error)
        return self.screen()

    def open_cell(self, row: int, col: int) -> None:
        """Step on a covered cell, chord a visible one."""
        if self.board.get_cell(row, col).is_visible:
            self.board.chord_cell(row, col)
        else:
            self.board.step_on_cell(row, col)

    def screen(self) -> str:
        """Board, status line and the outcome message if the game ended."""
        lines = [
            render_board(self.board, debug=self.debug, color=self.color),
            status_line(self.board),
        ]
        if self.board.is_player_dead:
            lines.append(LOSS_MESSAGE)
        elif self.board.is_game_won:
            lines.append(WIN_MESSAGE)
        return "\n".join(lines)

    def _new_game(self, args: List[str]) -> str:
        if args:
            level = args[0].lower()
            if level not in DIFFICULTIES:
                return f"Unknown difficulty {level!r}."
            self.config = DIFFICULTIES[level]
        self.board.new_game_from_config(self.config)
        logger.info(
            "New %dx%d game with %d mines",
            self.config.rows, self.config.cols, self.config.num_mines,
        )
        return self.screen()

    @staticmethod
    def _parse_position(args: List[str]) -> Tuple[int, int]:
        if len(args) != 2:
            raise ValueError("Expected a row and a column.")
        try:
            return int(args[0]), int(args[1])
        except ValueError:
            raise ValueError("Row and column must be whole numbers.") from None


def run(
    game: ConsoleGame,
    prompt: str = "> ",
    reader: Optional[Callable[[str], str]] = None,
) -> None:
    """Read commands until quit or end of input, printing each result."""
    read = reader or input
    print(game.screen())
    while True:
        try:
            line = read(prompt)
        except EOFError:
            break
        try:
            print(game.handle(line))
        except QuitGame:
            break
