"""
Text rendering for Minesweeper boards.

Turns the board's read-only cell views into terminal text. Nothing here
changes game state.
"""
from typing import Dict, List

from .board import Board
from .cell import CellView


# ============================================================================
# Constants
# ============================================================================

COVERED = "."
FLAG = "F"
WRONG_FLAG = "X"
MINE = "*"
EMPTY = " "

RESET = "\033[0m"

# ANSI colours for the adjacent mine counts
NUMBER_COLORS: Dict[int, str] = {
    1: "\033[94m",   # blue
    2: "\033[32m",   # green
    3: "\033[91m",   # red
    4: "\033[35m",   # purple
    5: "\033[31m",   # dark red
    6: "\033[96m",   # cyan
    7: "\033[30m",   # black
    8: "\033[90m",   # gray
}


# ============================================================================
# Cell Rendering
# ============================================================================

def cell_symbol(cell: CellView, game_over: bool = False, debug: bool = False) -> str:
    """
    Get the character drawn for a single cell.

    Args:
        cell: Cell to draw.
        game_over: Whether the game has ended; flags on safe cells are
            then drawn as wrong.
        debug: Draw covered cells as if they were open.

    Returns:
        One-character string.
    """
    if cell.is_flagged:
        if game_over and not cell.is_mine:
            return WRONG_FLAG
        return FLAG
    if not debug and not cell.is_visible:
        return COVERED
    if cell.is_mine:
        return MINE
    return cell.neighbors_display or EMPTY


def colorize(symbol: str) -> str:
    """Wrap a digit in its ANSI colour."""
    if symbol.isdigit():
        return f"{NUMBER_COLORS[int(symbol)]}{symbol}{RESET}"
    return symbol


# ============================================================================
# Board Rendering
# ============================================================================

def render_board(board: Board, debug: bool = False, color: bool = False) -> str:
    """
    Render the board as text with row and column headers.

    Args:
        board: Board to draw.
        debug: Show the contents of covered cells.
        color: Colour the mine counts with ANSI escapes.

    Returns:
        Multi-line string, empty if no game has been started.
    """
    if not board.is_game_started:
        return ""

    width = len(str(max(board.num_rows, board.num_cols) - 1))
    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(board.num_cols)
    )
    lines: List[str] = [header]

    padding = " " * (width - 1)
    for row in range(board.num_rows):
        symbols = []
        for col in range(board.num_cols):
            symbol = cell_symbol(board.get_cell(row, col), board.is_game_over, debug)
            if color:
                symbol = colorize(symbol)
            symbols.append(padding + symbol)
        lines.append(str(row).rjust(width) + " " + " ".join(symbols))

    return "\n".join(lines)


def format_elapsed(seconds: int) -> str:
    """Format seconds as m:ss."""
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}:{seconds:02d}"


def status_line(board: Board) -> str:
    """Time, flags left and outcome in one line."""
    if board.is_player_dead:
        outcome = "dead"
    elif board.is_game_won:
        outcome = "won"
    else:
        outcome = "playing"
    return (
        f"Time {format_elapsed(board.elapsed_seconds)} | "
        f"Flags {board.num_flags} | {outcome}"
    )
