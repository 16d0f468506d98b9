"""
Game state management for Modern Tic Tac Toe.
Tracks the board, whose turn it is, the running score and the play mode.
"""

from enum import Enum
from typing import Optional, List, Dict
from dataclasses import dataclass, field


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """The two sides. An empty cell is None."""
    FIRST = "X"
    SECOND = "O"

    def opposite(self) -> "Mark":
        """Get the opposite side."""
        return Mark.SECOND if self == Mark.FIRST else Mark.FIRST


class Mode(Enum):
    """Play mode."""
    TWO_PLAYER = "pvp"
    VS_COMPUTER = "pve"


# A board is 9 cells in row-major order, None means empty
Board = List[Optional[Mark]]


def new_board() -> Board:
    """Create an empty board."""
    return [None] * NUM_CELLS


def empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        List of cell indices (0-8) in ascending order.
    """
    return [i for i, cell in enumerate(board) if cell is None]


def format_board(board: Board) -> str:
    """
    Render the board as text.

    Empty cells show their 1-based number so a console player knows
    what to type.
    """
    lines = ["┌───┬───┬───┐"]
    for row in range(BOARD_SIZE):
        row_str = "│"
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            mark = board[index]
            symbol = mark.value if mark is not None else str(index + 1)
            row_str += f" {symbol} │"
        lines.append(row_str)
        if row < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")
    lines.append("└───┴───┴───┘")
    return "\n".join(lines)


def _zero_scores() -> Dict[Mark, int]:
    return {Mark.FIRST: 0, Mark.SECOND: 0}


@dataclass
class Session:
    """
    The complete state of one running game.

    Tracks:
    - The 3x3 board
    - Whose turn it is (turn_is_first is True when X is due)
    - Whether the current round is over
    - The running score per side
    - The play mode

    Every mutation of the board goes through rules.apply_move().
    """

    board: Board = field(default_factory=new_board)

    # O moves first by convention
    turn_is_first: bool = False

    game_over: bool = False

    scores: Dict[Mark, int] = field(default_factory=_zero_scores)

    mode: Mode = Mode.TWO_PLAYER

    # Side that opens every round
    first_to_move: Mark = Mark.SECOND

    def __post_init__(self):
        if len(self.board) != NUM_CELLS:
            raise ValueError(f"Board must have {NUM_CELLS} cells, got {len(self.board)}")

    @classmethod
    def start(cls, mode: Mode = Mode.TWO_PLAYER, first_to_move: Mark = Mark.SECOND) -> "Session":
        """Create a session with an empty board and first_to_move due."""
        return cls(
            turn_is_first=first_to_move == Mark.FIRST,
            mode=mode,
            first_to_move=first_to_move,
        )

    @property
    def current_mark(self) -> Mark:
        """The side whose turn it is."""
        return Mark.FIRST if self.turn_is_first else Mark.SECOND

    def new_round(self, keep_scores: bool = True):
        """
        Start a fresh round.

        Args:
            keep_scores: If False, both scores go back to zero.
        """
        self.board = new_board()
        self.turn_is_first = self.first_to_move == Mark.FIRST
        self.game_over = False
        if not keep_scores:
            self.scores = _zero_scores()

    def board_snapshot(self) -> Board:
        """Copy of the board, safe to hand to readers."""
        return list(self.board)

    def scores_snapshot(self) -> Dict[Mark, int]:
        """Copy of the scores, safe to hand to readers."""
        return dict(self.scores)

    def copy(self) -> "Session":
        """Create a deep copy of the session."""
        return Session(
            board=self.board_snapshot(),
            turn_is_first=self.turn_is_first,
            game_over=self.game_over,
            scores=self.scores_snapshot(),
            mode=self.mode,
            first_to_move=self.first_to_move,
        )
