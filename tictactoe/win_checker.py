"""
Win checker for Modern Tic Tac Toe.
Checks if a side has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .game_state import Board, Mark, NUM_CELLS


WinPattern = Tuple[int, int, int]

# All possible winning lines, in the order they are checked.
# When one move completes two lines, the first one here is reported.
WIN_PATTERNS: Tuple[WinPattern, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class OutcomeStatus(Enum):
    """Status of a round."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    mark and pattern are only set when status is WON.
    """
    status: OutcomeStatus
    mark: Optional[Mark] = None
    pattern: Optional[WinPattern] = None

    @classmethod
    def ongoing(cls) -> "Outcome":
        return cls(OutcomeStatus.ONGOING)

    @classmethod
    def won(cls, mark: Mark, pattern: WinPattern) -> "Outcome":
        return cls(OutcomeStatus.WON, mark, pattern)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_over(self) -> bool:
        """True for WON and DRAW."""
        return self.status != OutcomeStatus.ONGOING


def _check_line(board: Board, line: WinPattern) -> Optional[Mark]:
    """
    Check if a single line has a winner.

    Args:
        board: The game board.
        line: Three cell indices to check.

    Returns:
        The winning Mark if all 3 cells hold it, None otherwise.
    """
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate(board: Board) -> Outcome:
    """
    Evaluate a board.

    Does not modify the board.

    Args:
        board: 9 cells in row-major order.

    Returns:
        Won for the first completed line in WIN_PATTERNS order,
        Draw if the board is full with no line, Ongoing otherwise.

    Raises:
        ValueError: If the board does not have exactly 9 cells.
    """
    if len(board) != NUM_CELLS:
        raise ValueError(f"Board must have {NUM_CELLS} cells, got {len(board)}")

    for line in WIN_PATTERNS:
        winner = _check_line(board, line)
        if winner is not None:
            return Outcome.won(winner, line)

    if all(cell is not None for cell in board):
        return Outcome.draw()

    return Outcome.ongoing()

